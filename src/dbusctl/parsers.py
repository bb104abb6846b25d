"""Parsers for typed CLI call arguments.

Each positional argument declares its own type:

    int32:42
    array:string:opt1,opt2,opt3
    dict:string:int32:"one",1,"two",2

All arguments are parsed before the bus is touched; the first failing
argument aborts the whole call.
"""

import logging
from typing import Iterable, List, Tuple

from .const import KEYWORD_ARRAY, KEYWORD_DICT, TYPE_SEPARATOR
from .converters import convert_scalar
from .exceptions import ArgumentError, ArityMismatchError, MalformedTokenError
from .models import ArgKind, CallArguments, Scalar, TypedValue, TypeTag
from .tokenizer import split_payload
from .type_tags import resolve_arg_type, sub_type_count

_LOGGER = logging.getLogger(__name__)

_CONTAINER_FORMATS = {
    KEYWORD_ARRAY: "array:<element_type>:<comma_separated_values>",
    KEYWORD_DICT: "dict:<key_type>:<value_type>:<comma_separated_pairs>",
}


def build_array(element_tag: TypeTag, payload: str) -> Tuple[Scalar, ...]:
    """Convert a comma separated payload into a tuple of element values."""
    return tuple(convert_scalar(element_tag, token) for token in split_payload(payload))


def build_dict(key_tag: TypeTag, value_tag: TypeTag, payload: str) -> Tuple[Tuple[str, Scalar], ...]:
    """Convert an alternating key,value,... payload into ordered pairs.

    Duplicate keys are kept as separate pairs.
    """
    tokens = split_payload(payload)
    if len(tokens) % 2 != 0:
        raise ArityMismatchError(
            f"Invalid dictionary payload '{payload}': expected an even number of "
            f"key/value tokens, got {len(tokens)}",
            payload,
        )

    pairs = []
    for i in range(0, len(tokens), 2):
        key = convert_scalar(key_tag, tokens[i])
        value = convert_scalar(value_tag, tokens[i + 1])
        pairs.append((key, value))
    return tuple(pairs)


def parse_argument(raw: str) -> TypedValue:
    """Parse a single 'type:value' argument.

    Raises:
        ArgumentError: Any parse failure; ``argument`` is set to ``raw``.
    """
    try:
        return _parse_argument(raw)
    except ArgumentError as e:
        if e.argument is None:
            e.argument = raw
        raise


def _parse_argument(raw: str) -> TypedValue:
    if TYPE_SEPARATOR not in raw:
        raise MalformedTokenError(
            f"Invalid argument '{raw}': expected format: <type>:<value>", raw
        )

    keyword, remainder = raw.split(TYPE_SEPARATOR, 1)
    count = sub_type_count(keyword)

    if count == 0:
        arg_type = resolve_arg_type(keyword)
        return TypedValue(arg_type, convert_scalar(arg_type.tag, remainder))

    segments = remainder.split(TYPE_SEPARATOR, count)
    if len(segments) != count + 1:
        raise MalformedTokenError(
            f"Invalid {keyword} type '{remainder}': expected format: {_CONTAINER_FORMATS[keyword]}",
            raw,
        )
    *sub_types, payload = segments
    arg_type = resolve_arg_type(keyword, sub_types)

    if arg_type.kind is ArgKind.ARRAY:
        return TypedValue(arg_type, build_array(arg_type.tag, payload))
    return TypedValue(arg_type, build_dict(arg_type.key_tag, arg_type.tag, payload))


def parse_call_arguments(raw_args: Iterable[str]) -> CallArguments:
    """Parse the positional CLI arguments of a method call.

    Args:
        raw_args: Arguments as given on the command line (may be empty).

    Returns:
        CallArguments in input order.

    Raises:
        ArgumentError: On the first argument that fails to parse.
    """
    values: List[TypedValue] = [parse_argument(raw) for raw in raw_args or ()]
    call_args = CallArguments(tuple(values))
    _LOGGER.debug("Parsed %s argument(s), signature '%s'", len(call_args), call_args.signature)
    return call_args
