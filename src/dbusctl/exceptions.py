"""Exceptions for the D-Bus call utility."""
from typing import Optional


class DbusCtlError(Exception):
    """Base class for all dbusctl errors."""
    def __init__(self, message: str, error_name: str = None):
        super().__init__(message)
        self.error_name = error_name


class ArgumentError(DbusCtlError):
    """A positional call argument could not be parsed.

    Raised before any bus activity. ``argument`` is the raw CLI token and is
    filled in by the argument assembler when the failure happens deeper down
    (e.g. inside a container payload), ``value`` is the offending part of it.
    """
    def __init__(self, message: str, value: Optional[str] = None, argument: Optional[str] = None):
        super().__init__(message)
        self.value = value
        self.argument = argument


class UnknownTypeError(ArgumentError):
    """Unrecognized type keyword."""
    pass


class UnsupportedKeyTypeError(ArgumentError):
    """Dictionary key type other than string."""
    pass


class MalformedTokenError(ArgumentError):
    """Missing colon, missing segments or ambiguous quoting."""
    pass


class InvalidNumberError(ArgumentError):
    """Numeric literal could not be parsed."""
    pass


class OutOfRangeError(ArgumentError):
    """Integer does not fit the declared type."""
    def __init__(self, message: str, value: Optional[str] = None, argument: Optional[str] = None,
                 bounds: Optional[tuple] = None):
        super().__init__(message, value, argument)
        self.bounds = bounds


class InvalidBooleanError(ArgumentError):
    """Boolean literal other than 'true' or 'false'."""
    pass


class UnterminatedQuoteError(ArgumentError):
    """Double quote opened inside a payload but never closed."""
    pass


class ArityMismatchError(ArgumentError):
    """Dictionary payload with an unpaired trailing key."""
    pass


class DbusConnectionError(DbusCtlError):
    """Bus connection issues (no bus, bad address, auth failure)."""
    pass


class DbusCallError(DbusCtlError):
    """The method call could not be built or sent."""
    pass


class DbusMethodError(DbusCtlError):
    """The remote side answered with an error reply."""
    pass


class DbusServiceUnknownError(DbusMethodError):
    """Destination name is not owned by anyone."""
    pass


class DbusNotFoundError(DbusMethodError):
    """Unknown object, interface or method."""
    pass


class DbusAccessDeniedError(DbusMethodError):
    """Call rejected by bus policy."""
    pass


class DbusInvalidArgsError(DbusMethodError):
    """Callee rejected the argument types or values."""
    pass


class DbusTimeoutError(DbusMethodError):
    """No reply within the bus timeout."""
    pass
