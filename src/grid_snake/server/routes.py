"""REST API route handlers for game control."""

from __future__ import annotations

from fastapi import APIRouter, Request

from grid_snake.difficulty import DIFFICULTY_PROFILES
from grid_snake.server.models import (
    DifficultyInfo,
    DifficultyRequest,
    DirectionRequest,
    DirectionResponse,
    GameStateResponse,
)
from grid_snake.server.session import GameSession

router = APIRouter(tags=["game"])


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


def _state(session: GameSession) -> GameStateResponse:
    return GameStateResponse.from_snapshot(session.engine.snapshot())


@router.get("/game")
async def get_game(request: Request) -> GameStateResponse:
    """Get the current game snapshot."""
    return _state(_get_session(request))


@router.post("/game/direction", status_code=202)
async def queue_direction(
    body: DirectionRequest, request: Request,
) -> DirectionResponse:
    """Queue a direction intent for the next ticks."""
    accepted = _get_session(request).engine.queue_direction(body.direction)
    return DirectionResponse(accepted=accepted)


@router.post("/game/pause")
async def pause(request: Request) -> GameStateResponse:
    session = _get_session(request)
    session.engine.pause()
    return _state(session)


@router.post("/game/resume")
async def resume(request: Request) -> GameStateResponse:
    session = _get_session(request)
    session.engine.resume()
    return _state(session)


@router.post("/game/toggle")
async def toggle(request: Request) -> GameStateResponse:
    session = _get_session(request)
    session.engine.toggle_pause()
    return _state(session)


@router.post("/game/restart")
async def restart(request: Request) -> GameStateResponse:
    """Start a fresh, paused game with the current difficulty."""
    session = _get_session(request)
    session.engine.restart()
    return _state(session)


@router.put("/game/difficulty")
async def set_difficulty(
    body: DifficultyRequest, request: Request,
) -> GameStateResponse:
    """Select a difficulty; this restarts the game."""
    session = _get_session(request)
    session.engine.set_difficulty(body.difficulty)
    return _state(session)


@router.get("/difficulties")
async def list_difficulties() -> list[DifficultyInfo]:
    """List the available difficulty presets."""
    return [
        DifficultyInfo(difficulty=d, **profile.to_dict())
        for d, profile in DIFFICULTY_PROFILES.items()
    ]
