"""Channel boundary for socket responses.

A channel is anything with an `emit(topic, payload)` method. The
response object treats it as an opaque, fire-and-forget send primitive.

WebSocketChannel adapts a Starlette WebSocket to that interface by
framing each emit as one JSON text message:

    {"event": "/orders/5", "data": {"status": 201, "headers": {}, "body": {...}}}
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from starlette.websockets import WebSocket, WebSocketState

logger = logging.getLogger(__name__)


@runtime_checkable
class Channel(Protocol):
    """Protocol for the transport a response is emitted on.

    emit() must not block; delivery is not acknowledged.
    """

    def emit(self, topic: str, payload: Any) -> None:
        """Publish a payload on a topic."""
        ...


@dataclass
class ChannelConfig:
    """WebSocket channel framing configuration."""

    event_field: str = "event"
    data_field: str = "data"

    @classmethod
    def from_env(cls) -> ChannelConfig:
        """Load config from SOCKET_ROUTER_* environment variables."""
        return cls(
            event_field=os.environ.get("SOCKET_ROUTER_EVENT_FIELD", cls.event_field),
            data_field=os.environ.get("SOCKET_ROUTER_DATA_FIELD", cls.data_field),
        )


class WebSocketChannel:
    """Channel over a server-side Starlette WebSocket.

    emit() schedules the send on the running event loop and returns
    immediately. Sends are serialized so frames from concurrent replies
    never interleave. Failed sends are logged, never raised to the
    emitter.
    """

    def __init__(self, websocket: WebSocket, config: ChannelConfig | None = None):
        self._websocket = websocket
        self.config = config or ChannelConfig()
        self._send_lock = asyncio.Lock()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def is_connected(self) -> bool:
        """Check if the WebSocket is connected."""
        return self._websocket.client_state == WebSocketState.CONNECTED

    def frame(self, topic: str, payload: Any) -> str:
        """Serialize one emit to a JSON text frame."""
        return json.dumps({self.config.event_field: topic, self.config.data_field: payload})

    def emit(self, topic: str, payload: Any) -> None:
        """Queue a frame for sending. Must be called from the event loop."""
        if not self.is_connected:
            logger.warning(f"Dropping emit on {topic}: WebSocket is not connected")
            return

        task = asyncio.get_running_loop().create_task(self._send(topic, self.frame(topic, payload)))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _send(self, topic: str, text: str) -> None:
        try:
            async with self._send_lock:
                if not self.is_connected:
                    logger.warning(f"Dropping emit on {topic}: WebSocket closed before send")
                    return
                await self._websocket.send_text(text)
        except Exception as e:
            logger.exception(f"WebSocket send error on {topic}: {e}")

    async def drain(self) -> None:
        """Wait until every queued frame has been sent (or dropped)."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
