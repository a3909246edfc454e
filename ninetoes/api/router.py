"""
Router registration for the NineToes API.
"""
from fastapi import FastAPI

from ninetoes.api import ai, games, stats


def include_routers(app: FastAPI) -> None:
    """Include all API routers with the FastAPI application."""
    app.include_router(games.router, prefix="/api/v1", tags=["games"])
    app.include_router(ai.router, prefix="/api/v1", tags=["ai"])
    app.include_router(stats.router, prefix="/api/v1", tags=["stats"])
