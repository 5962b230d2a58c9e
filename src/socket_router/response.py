"""Socket response - one-shot reply object for a channel request.

Gives handler code a familiar response surface (status, headers, send)
while the reply is delivered as a single emit on a messaging channel.
The emit topic is the request path without its query string.

Usage:
    response = SocketResponse(channel, "/orders/5?expand=items")
    response.status(201).send({"id": 5})
    # channel.emit("/orders/5", {"status": 201, "headers": {}, "body": {"id": 5}})
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .channel import Channel
from .message import ReplyMessage
from .signal import FinishListener, FinishSignal

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for an omitted body argument."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def routing_key_for(path: str | None) -> str:
    """Strip the query string from a request path ("/" when empty)."""
    path = path or "/"
    return path.partition("?")[0]


class SocketResponse:
    """Reply to one channel request.

    Pending until the first send(), Sent afterwards. A second send() is
    logged and ignored: nothing is emitted and finish is not fired again.

    Completion can be observed with on_finish(); listeners must be
    registered before the handler sends.
    """

    def __init__(self, channel: Channel, path: str | None = "/"):
        # Borrowed; only emit() is ever called on it
        self.channel = channel
        self.headers: dict[str, Any] = {}
        self.status_code = 200
        self._routing_key = routing_key_for(path)
        self._sent = False
        self._finish = FinishSignal()

    def __repr__(self) -> str:
        state = "sent" if self._sent else "pending"
        return f"<SocketResponse {self._routing_key!r} {self.status_code} {state}>"

    @property
    def routing_key(self) -> str:
        """Topic the reply is emitted on."""
        return self._routing_key

    @property
    def sent(self) -> bool:
        """Whether the reply has been emitted."""
        return self._sent

    def set(self, name: str, value: Any) -> None:
        """Set a header, replacing any previous value."""
        self.headers[name] = value

    header = set

    def status(self, code: int) -> SocketResponse:
        """Set the status code. Returns self for chaining."""
        self.status_code = code
        return self

    def on_finish(self, listener: FinishListener) -> Callable[[], None]:
        """Register a listener called once the reply has been emitted.

        Returns:
            Unsubscribe function
        """
        return self._finish.connect(listener)

    def send(self, body: Any = UNSET) -> SocketResponse:
        """Emit the reply on the channel.

        Args:
            body: Reply body, forwarded as is. Omit it to send no body at
                all; None, 0, False and "" are sent as bodies.

        Returns:
            self
        """
        if self._sent:
            logger.warning(
                f"send: response for {self._routing_key} has already been sent "
                "and will not be sent again"
            )
            return self

        # Snapshot headers; status and headers are trusted as given
        fields: dict[str, Any] = {"status": self.status_code, "headers": dict(self.headers)}
        if body is not UNSET:
            fields["body"] = body
        message = ReplyMessage.model_construct(**fields)

        self.channel.emit(self._routing_key, message.to_payload())
        # Flag before notifying so a listener calling send() again is a no-op
        self._sent = True
        logger.debug(f"Emitted {self.status_code} reply on {self._routing_key}")

        self._finish.fire()
        return self

    json = send
