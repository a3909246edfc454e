import json
import os
import random
import tempfile
from pathlib import Path

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ninetoes.api.deps import get_db, get_rng
from ninetoes.core.database import Base, SQLITE_CONNECT_ARGS
from ninetoes.models import stored_value  # noqa: F401
from ninetoes.schemas.game import GameState, Player
from ninetoes.services.board import local_result
from main import app

FIXTURES = Path(__file__).parent / "fixtures"


class FixedRandom(random.Random):
    """
    Random source with pinned draws.

    random() returns the given values in order, repeating the last one;
    choice() always takes the first item.
    """

    def __init__(self, *values: float):
        super().__init__(0)
        self.values = list(values) or [0.0]
        self.calls = 0

    def random(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value

    def choice(self, seq):
        return seq[0]


def build_state(marks=None, local=None, **fields) -> GameState:
    """
    Build a state from {(board, cell): "X"|"O"} marks.

    Local results are derived from the marks unless given explicitly.
    """
    boards = [[None] * 9 for _ in range(9)]
    for (b, c), p in (marks or {}).items():
        boards[b][c] = Player(p)
    if local is None:
        local = [local_result(cells) for cells in boards]
    return GameState(boards=boards, local=local, **fields)


def load_fixture(name: str) -> dict:
    with open(FIXTURES / f"{name}.json") as f:
        return json.load(f)


@pytest.fixture
def fixture_data():
    return load_fixture


@pytest.fixture
def make_state():
    return build_state


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture(scope="session")
def test_db():
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    engine = create_engine(f"sqlite:///{db_path}", connect_args=SQLITE_CONNECT_ARGS)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    yield TestingSessionLocal
    engine.dispose()
    os.close(db_fd)
    os.unlink(db_path)

@pytest.fixture
def db_session(test_db):
    session = test_db()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

@pytest.fixture
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rng] = lambda: FixedRandom(0.0)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
