"""D-Bus method call utility with typed command-line arguments."""

__version__ = "0.1.0"

from .connection import BusConnector
from .exceptions import (
    ArgumentError,
    ArityMismatchError,
    DbusAccessDeniedError,
    DbusCallError,
    DbusConnectionError,
    DbusCtlError,
    DbusInvalidArgsError,
    DbusMethodError,
    DbusNotFoundError,
    DbusServiceUnknownError,
    DbusTimeoutError,
    InvalidBooleanError,
    InvalidNumberError,
    MalformedTokenError,
    OutOfRangeError,
    UnknownTypeError,
    UnsupportedKeyTypeError,
    UnterminatedQuoteError,
)
from .models import ArgKind, ArgType, CallArguments, TypedValue, TypeTag
from .parsers import parse_argument, parse_call_arguments

__all__ = [
    "ArgKind",
    "ArgType",
    "ArgumentError",
    "ArityMismatchError",
    "BusConnector",
    "CallArguments",
    "DbusAccessDeniedError",
    "DbusCallError",
    "DbusConnectionError",
    "DbusCtlError",
    "DbusInvalidArgsError",
    "DbusMethodError",
    "DbusNotFoundError",
    "DbusServiceUnknownError",
    "DbusTimeoutError",
    "InvalidBooleanError",
    "InvalidNumberError",
    "MalformedTokenError",
    "OutOfRangeError",
    "TypedValue",
    "TypeTag",
    "UnknownTypeError",
    "UnsupportedKeyTypeError",
    "UnterminatedQuoteError",
    "parse_argument",
    "parse_call_arguments",
]
