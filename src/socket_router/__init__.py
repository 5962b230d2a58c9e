"""Socket router replies.

Response objects for request handlers that answer over a persistent
messaging channel instead of an HTTP socket:
- SocketResponse: one-shot reply (status, headers, body) emitted once
- Channel: the emit(topic, payload) interface a reply is sent on
- WebSocketChannel: Channel over a Starlette WebSocket
"""

from .channel import Channel, ChannelConfig, WebSocketChannel
from .message import ReplyMessage
from .response import UNSET, SocketResponse, routing_key_for
from .signal import FinishListener, FinishSignal

__all__ = [
    # Reply object
    "SocketResponse",
    "UNSET",
    "routing_key_for",
    # Wire message
    "ReplyMessage",
    # Completion signal
    "FinishSignal",
    "FinishListener",
    # Channel boundary
    "Channel",
    "ChannelConfig",
    "WebSocketChannel",
]
