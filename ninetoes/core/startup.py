"""
Startup and shutdown of the statistics database.
"""
import logging
from sqlalchemy import func, inspect

from ninetoes.core.database import engine, Base, SessionLocal
from ninetoes.models.stored_value import StoredValue

logger = logging.getLogger(__name__)


def initialize_database() -> None:
    """Create the stored_values table if needed and report what it holds."""
    try:
        Base.metadata.create_all(bind=engine)
        if not inspect(engine).has_table(StoredValue.__tablename__):
            raise RuntimeError(f"Table {StoredValue.__tablename__} was not created")

        with SessionLocal() as db:
            keys = db.query(func.count(StoredValue.key)).scalar()
        logger.info(
            f"Statistics database ready at {engine.url.render_as_string(hide_password=True)} "
            f"({keys} stored keys)"
        )

    except Exception as e:
        logger.error(f"Failed to initialize statistics database: {e}")
        raise


def shutdown_database() -> None:
    try:
        engine.dispose()
        logger.info("Statistics database connections closed")
    except Exception as e:
        logger.error(f"Error closing statistics database: {e}")
