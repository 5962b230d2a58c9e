"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.websockets import WebSocketState


@pytest.fixture
def channel():
    """Channel double recording emit() calls."""
    mock_channel = MagicMock()
    mock_channel.emit = MagicMock()
    return mock_channel


@pytest.fixture
def websocket():
    """Connected Starlette WebSocket double."""
    mock_ws = MagicMock()
    mock_ws.client_state = WebSocketState.CONNECTED
    mock_ws.send_text = AsyncMock()
    return mock_ws
