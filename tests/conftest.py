import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from dbus_fast import MessageType


@pytest.fixture
def make_reply():
    """Factory for reply messages as returned by MessageBus.call."""
    def _make(body=None, error_name=None):
        reply = MagicMock()
        reply.message_type = MessageType.ERROR if error_name else MessageType.METHOD_RETURN
        reply.error_name = error_name
        reply.body = body if body is not None else []
        return reply
    return _make


@pytest.fixture
def mock_bus():
    """Patch MessageBus in the connection module and return the connected bus mock."""
    bus = MagicMock()
    bus.call = AsyncMock()
    with patch("dbusctl.connection.MessageBus") as mock_bus_cls:
        mock_bus_cls.return_value.connect = AsyncMock(return_value=bus)
        bus.bus_cls = mock_bus_cls
        yield bus
