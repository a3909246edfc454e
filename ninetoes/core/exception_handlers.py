"""
Exception handlers for the NineToes API.
"""
import logging
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ninetoes.core.config import settings
from ninetoes.core.exceptions import (
    GameException, IllegalMove, InvalidPosition, GameEnded, DoublePending,
    WrongBoard, BoardDecided, CellOccupied, GameNotFinished, StatsNotFound
)

logger = logging.getLogger(__name__)

ILLEGAL_MOVE_CODES = {
    InvalidPosition: "INVALID_POSITION",
    GameEnded: "GAME_ENDED",
    DoublePending: "DOUBLE_PENDING",
    WrongBoard: "WRONG_BOARD",
    BoardDecided: "BOARD_DECIDED",
    CellOccupied: "CELL_OCCUPIED",
}


def create_error_response(status_code: int, detail: str, error_code: str, request: Request) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "error_code": error_code,
            "request_id": getattr(request.state, 'request_id', None)
        }
    )


async def illegal_move_handler(request: Request, exc: IllegalMove) -> JSONResponse:
    """Handle moves rejected by the rules, naming the broken rule."""
    error_code = ILLEGAL_MOVE_CODES.get(type(exc), "ILLEGAL_MOVE")
    return create_error_response(400, str(exc), error_code, request)


async def game_not_finished_handler(request: Request, exc: GameNotFinished) -> JSONResponse:
    """Handle attempts to record unfinished games."""
    return create_error_response(400, str(exc), "GAME_NOT_FINISHED", request)


async def stats_not_found_handler(request: Request, exc: StatsNotFound) -> JSONResponse:
    """Handle missing statistics records."""
    return create_error_response(404, str(exc), "STATS_NOT_FOUND", request)


async def game_exception_handler(request: Request, exc: GameException) -> JSONResponse:
    """Handle generic game exceptions."""
    return create_error_response(400, str(exc), "GAME_ERROR", request)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation errors with better formatting."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(x) for x in error["loc"][1:]),
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "errors": errors,
            "error_code": "VALIDATION_ERROR",
            "request_id": getattr(request.state, 'request_id', None)
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle generic HTTP exceptions."""
    return create_error_response(exc.status_code, exc.detail, f"HTTP_{exc.status_code}", request)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}", exc_info=True)

    # Don't expose internal errors in production
    if settings.DEBUG:
        detail = str(exc)
    else:
        detail = "An unexpected error occurred"

    return create_error_response(500, detail, "INTERNAL_ERROR", request)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(IllegalMove, illegal_move_handler)
    app.add_exception_handler(GameNotFinished, game_not_finished_handler)
    app.add_exception_handler(StatsNotFound, stats_not_found_handler)
    app.add_exception_handler(GameException, game_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
