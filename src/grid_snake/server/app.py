"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from grid_snake.config import GameSettings
from grid_snake.server.models import ErrorResponse
from grid_snake.server.routes import router
from grid_snake.server.session import GameSession
from grid_snake.server.websocket import ws_router

logger = logging.getLogger(__name__)


async def _value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422, content=ErrorResponse(detail=str(exc)).model_dump(),
    )


def create_app(settings: GameSettings | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session = GameSession(settings)
        yield
        app.state.session.close()

    app = FastAPI(
        title="Grid Snake API", version="0.1.0", lifespan=_lifespan,
        responses={422: {"model": ErrorResponse}},
    )
    app.add_exception_handler(ValueError, _value_error_handler)
    app.include_router(router)
    app.include_router(ws_router)
    return app
