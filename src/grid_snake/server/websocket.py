"""WebSocket handler streaming snapshots and accepting player intents."""

from __future__ import annotations

import asyncio
import json
import logging

import anyio
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from grid_snake.direction import Direction
from grid_snake.engine import GameSnapshot
from grid_snake.server.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()

_ACTIONS = {
    "pause": lambda engine: engine.pause(),
    "resume": lambda engine: engine.resume(),
    "toggle": lambda engine: engine.toggle_pause(),
    "restart": lambda engine: engine.restart(),
}


def _get_session(ws: WebSocket) -> GameSession:
    return ws.app.state.session


def _handle_message(session: GameSession, raw: str) -> None:
    """Apply one client message; malformed input is ignored."""
    try:
        msg = json.loads(raw)
    except json.JSONDecodeError:
        return
    if not isinstance(msg, dict):
        return

    direction_str = msg.get("direction")
    if isinstance(direction_str, str):
        try:
            direction = Direction.from_name(direction_str)
        except ValueError:
            return
        session.engine.queue_direction(direction)
        return

    action = msg.get("action")
    if isinstance(action, str) and action.lower() in _ACTIONS:
        _ACTIONS[action.lower()](session.engine)


async def _sender(
    websocket: WebSocket, queue: asyncio.Queue[GameSnapshot],
) -> None:
    """Forward queued snapshots to the client until cancelled."""
    try:
        while True:
            snapshot = await queue.get()
            await websocket.send_text(
                json.dumps(snapshot.to_dict(), separators=(",", ":")),
            )
    except Exception:
        logger.warning("Stopped streaming snapshots to a closed client.")


@ws_router.websocket("/game/ws")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send intents, receive a snapshot after each change."""
    session = _get_session(websocket)
    await websocket.accept()
    queue = session.subscribe()
    logger.info("Client connected (%d subscribers).", session.subscriber_count)

    async with anyio.create_task_group() as tg:
        tg.start_soon(_sender, websocket, queue)
        try:
            while True:
                raw = await websocket.receive_text()
                _handle_message(session, raw)
        except WebSocketDisconnect:
            logger.info("Client disconnected.")
        finally:
            # Runs before the task group awaits the sender.
            session.unsubscribe(queue)
            tg.cancel_scope.cancel()
