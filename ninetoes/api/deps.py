"""
Dependency injection for API endpoints.
"""
import random
from typing import Generator

from ninetoes.core.config import settings
from ninetoes.core.database import SessionLocal

_rng = random.Random(settings.AI_SEED)


def get_db() -> Generator:
    """
    Database dependency that ensures proper session cleanup.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_rng() -> random.Random:
    """
    Random source for AI decisions, seeded from AI_SEED when set.
    """
    return _rng
