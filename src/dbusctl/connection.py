"""Connection handling for D-Bus method calls."""

import logging
from typing import Any, List, Optional

from dbus_fast import BusType, Message, MessageType
from dbus_fast.aio import MessageBus

from .const import (
    ERRORS_ACCESS_DENIED,
    ERRORS_INVALID_ARGS,
    ERRORS_NOT_FOUND,
    ERRORS_SERVICE_UNKNOWN,
    ERRORS_TIMEOUT,
)
from .exceptions import (
    DbusAccessDeniedError,
    DbusCallError,
    DbusConnectionError,
    DbusCtlError,
    DbusInvalidArgsError,
    DbusMethodError,
    DbusNotFoundError,
    DbusServiceUnknownError,
    DbusTimeoutError,
)
from .models import CallArguments

_LOGGER = logging.getLogger(__name__)


def _raise_for_reply(reply: Message) -> None:
    """
    Raises a specific DbusMethodError if the reply is an error message.

    The error text is the first body value when the callee supplied one.
    """
    if reply.message_type != MessageType.ERROR:
        return

    error_name = reply.error_name
    error_message = error_name
    if reply.body and isinstance(reply.body[0], str):
        error_message = reply.body[0]

    _LOGGER.debug("Error reply %s: %s", error_name, error_message)

    if error_name in ERRORS_SERVICE_UNKNOWN:
        raise DbusServiceUnknownError(f"Service unknown: {error_message}", error_name)

    if error_name in ERRORS_NOT_FOUND:
        raise DbusNotFoundError(f"Not found: {error_message}", error_name)

    if error_name in ERRORS_ACCESS_DENIED:
        raise DbusAccessDeniedError(f"Access denied: {error_message}", error_name)

    if error_name in ERRORS_INVALID_ARGS:
        raise DbusInvalidArgsError(f"Invalid arguments: {error_message}", error_name)

    if error_name in ERRORS_TIMEOUT:
        raise DbusTimeoutError(f"No reply: {error_message}", error_name)

    # Application specific error names
    raise DbusMethodError(f"{error_name}: {error_message}", error_name)


class BusConnector:
    """Performs a single method call on the session or system bus."""

    def __init__(self, system: bool = False, address: Optional[str] = None):
        self.system = system
        self.address = address

    @property
    def bus_name(self) -> str:
        if self.address:
            return self.address
        return "system" if self.system else "session"

    async def connect(self) -> MessageBus:
        bus_type = BusType.SYSTEM if self.system else BusType.SESSION
        try:
            _LOGGER.debug("Connecting to %s bus", self.bus_name)
            return await MessageBus(bus_address=self.address, bus_type=bus_type).connect()
        except Exception as e:
            raise DbusConnectionError(f"Could not connect to {self.bus_name} bus: {e}") from e

    async def call(
        self,
        service: str,
        object_path: str,
        interface: str,
        method: str,
        arguments: Optional[CallArguments] = None,
    ) -> List[Any]:
        """
        Call a method and return the reply body.

        The connection is opened for this call only and always closed again.
        """
        arguments = arguments or CallArguments()
        bus = await self.connect()
        try:
            message = Message(
                destination=service,
                path=object_path,
                interface=interface,
                member=method,
                signature=arguments.signature,
                body=arguments.body,
            )
            _LOGGER.debug(
                "Calling %s %s %s.%s (%s)",
                service, object_path, interface, method, arguments.signature or "no arguments",
            )
            reply = await bus.call(message)
            if reply is None:
                raise DbusCallError(f"No reply received for {interface}.{method}")

            _raise_for_reply(reply)
            return reply.body

        except DbusCtlError:
            raise
        except Exception as e:
            # Invalid names, marshalling failures, dropped connections
            raise DbusCallError(f"Call to {interface}.{method} failed: {e}") from e
        finally:
            bus.disconnect()
