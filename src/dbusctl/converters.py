"""Scalar value conversion for typed call arguments.

Every scalar type has one converter turning the raw string from the command
line into the Python value sent over the bus. Numeric types are range checked
against their D-Bus width; strings, object paths and signatures pass through
untouched and are left for the bus to validate.
"""

import math
import re
from typing import Callable, Dict

from .const import INTEGER_BOUNDS
from .exceptions import InvalidBooleanError, InvalidNumberError, OutOfRangeError
from .models import Scalar, TypeTag

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_TYPE_NAMES = {
    TypeTag.INT16: "int16",
    TypeTag.UINT16: "uint16",
    TypeTag.INT32: "int32",
    TypeTag.UINT32: "uint32",
    TypeTag.INT64: "int64",
    TypeTag.UINT64: "uint64",
    TypeTag.BYTE: "byte",
}


def convert_scalar(tag: TypeTag, raw: str) -> Scalar:
    """Convert a raw string to a value of the given scalar type.

    Args:
        tag: Scalar type of the value.
        raw: String as typed by the user.

    Returns:
        int, float, bool or str depending on the type.

    Raises:
        InvalidNumberError: Malformed integer or floating point literal.
        OutOfRangeError: Integer outside the bounds of the type.
        InvalidBooleanError: Boolean other than 'true'/'false'.
    """
    converter = _CONVERTERS[tag]
    return converter(tag, raw)


def _convert_integer(tag: TypeTag, raw: str) -> int:
    type_name = _TYPE_NAMES[tag]
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidNumberError(f"Invalid {type_name} '{raw}': not a base-10 integer", raw)

    value = int(raw)
    low, high = INTEGER_BOUNDS[tag.signature]
    if value < low or value > high:
        raise OutOfRangeError(
            f"Invalid {type_name} '{raw}': out of range ({low}..{high})",
            raw,
            bounds=(low, high),
        )
    return value


def _convert_double(tag: TypeTag, raw: str) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise InvalidNumberError(f"Invalid double '{raw}': not a floating point number", raw)
    value = float(raw)
    if math.isinf(value) and raw.lstrip("+-").lower() not in ("inf", "infinity"):
        # e.g. 1e400
        raise InvalidNumberError(f"Invalid double '{raw}': exceeds double precision range", raw)
    return value


def _convert_boolean(tag: TypeTag, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise InvalidBooleanError(f"Invalid boolean '{raw}': expected 'true' or 'false'", raw)


def _convert_verbatim(tag: TypeTag, raw: str) -> str:
    return raw


_CONVERTERS: Dict[TypeTag, Callable[[TypeTag, str], Scalar]] = {
    TypeTag.STRING: _convert_verbatim,
    TypeTag.OBJECT_PATH: _convert_verbatim,
    TypeTag.SIGNATURE: _convert_verbatim,
    TypeTag.INT16: _convert_integer,
    TypeTag.UINT16: _convert_integer,
    TypeTag.INT32: _convert_integer,
    TypeTag.UINT32: _convert_integer,
    TypeTag.INT64: _convert_integer,
    TypeTag.UINT64: _convert_integer,
    TypeTag.BYTE: _convert_integer,
    TypeTag.DOUBLE: _convert_double,
    TypeTag.BOOLEAN: _convert_boolean,
}
