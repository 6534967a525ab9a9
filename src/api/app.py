"""FastAPI application: routes, error mapping and startup."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import get_settings
from src.core.exceptions import (
    ConcurrencyConflictError,
    GameError,
    GameFinishedError,
    GameNotFoundError,
    InvalidMoveError,
    InvalidRequestError,
)
from src.core.logging_config import get_logger, setup_logging
from src.db.database import init_db

logger = get_logger("api")

# Anything not listed (GameStateError, ...) is a server error
ERROR_STATUS_CODES: dict[type[GameError], int] = {
    GameNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidMoveError: status.HTTP_400_BAD_REQUEST,
    GameFinishedError: status.HTTP_400_BAD_REQUEST,
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    ConcurrencyConflictError: status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    setup_logging(get_settings().log_level)
    init_db()
    yield


app = FastAPI(
    title="Tic-tac-toe API",
    description="Turn-based games with optimistic concurrency control",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(router)


@app.exception_handler(GameError)
async def handle_game_error(_: Request, exc: GameError) -> JSONResponse:
    status_code = ERROR_STATUS_CODES.get(
        type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    if status_code >= 500:
        logger.error("Unhandled game error: %s", exc)
    return JSONResponse(
        status_code=status_code, content={"error": exc.kind, "message": str(exc)}
    )
