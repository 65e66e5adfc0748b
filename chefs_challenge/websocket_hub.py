from __future__ import annotations

import asyncio
import weakref

from fastapi import WebSocket

from chefs_challenge.api.models import SessionState
from chefs_challenge.session import SessionController


class SessionWebSocketHub:
    """In-process WebSocket fan-out of session snapshots.

    Contract:
      - register a socket via `connect(websocket)`.
      - `bind(controller)` subscribes once per controller; every mutation is then
        pushed to all sockets as `{"type": "session_updated", "session": {...}}`.

    Payloads should be JSON-serializable dicts.
    """

    def __init__(self) -> None:
        self._conns: set[WebSocket] = set()
        self._lock = asyncio.Lock()
        self._bound: weakref.WeakSet[SessionController] = weakref.WeakSet()
        self._pending: set[asyncio.Task[None]] = set()

    def bind(self, controller: SessionController) -> None:
        if controller in self._bound:
            return
        self._bound.add(controller)
        controller.subscribe(self._on_session_changed)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._conns.add(websocket)

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self._conns.discard(websocket)

    async def broadcast(self, payload: dict[str, object]) -> None:
        async with self._lock:
            conns = list(self._conns)

        if not conns:
            return

        dead: list[WebSocket] = []
        for ws in conns:
            try:
                await ws.send_json(payload)
            except Exception:
                dead.append(ws)

        if dead:
            async with self._lock:
                for ws in dead:
                    self._conns.discard(ws)

    def _on_session_changed(self, snapshot: SessionState) -> None:
        if not self._conns:
            return
        payload = {"type": "session_updated", "session": snapshot.model_dump(mode="json")}
        task = asyncio.get_running_loop().create_task(self.broadcast(payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


hub = SessionWebSocketHub()
