"""
NineToes: Ultimate Tic-Tac-Toe rules, doubling cube and computer opponent over HTTP.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ninetoes.api.router import include_routers
from ninetoes.core.config import settings
from ninetoes.core.exception_handlers import register_exception_handlers
from ninetoes.core.startup import initialize_database, shutdown_database

VERSION = "1.0.0"

logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the statistics database for the lifetime of the app."""
    seed = "unseeded" if settings.AI_SEED is None else f"seed {settings.AI_SEED}"
    logger.info(
        f"Starting NineToes {VERSION}: {settings.DEFAULT_VARIANT} rules, "
        f"{settings.DEFAULT_DIFFICULTY} AI ({seed})"
    )
    initialize_database()

    yield

    logger.info("Stopping NineToes")
    shutdown_database()


app = FastAPI(
    title="NineToes",
    description="""
    Rules engine and computer opponent for Ultimate Tic-Tac-Toe with a doubling cube.

    The server keeps no games. Every request carries the full game state and
    every state-changing endpoint returns the next one. Finished games can be
    tallied under a statistics key.
    """,
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

register_exception_handlers(app)
include_routers(app)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True
    )
