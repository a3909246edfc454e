from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from ninetoes.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# Stats writes come from the endpoint thread pool; SQLite waits on its write lock.
SQLITE_CONNECT_ARGS = {"check_same_thread": False, "timeout": 15}


def engine_options(url: str) -> dict:
    if make_url(url).get_backend_name() == "sqlite":
        return {"connect_args": SQLITE_CONNECT_ARGS}
    return {"pool_pre_ping": True}


engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    echo=settings.DEBUG,
    **engine_options(SQLALCHEMY_DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
