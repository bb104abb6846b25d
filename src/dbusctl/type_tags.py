"""Resolution of type keywords to argument types."""

from typing import Sequence

from .const import KEYWORD_ARRAY, KEYWORD_DICT
from .exceptions import MalformedTokenError, UnknownTypeError, UnsupportedKeyTypeError
from .models import ArgType, TypeTag

SCALAR_KEYWORDS = {
    "string": TypeTag.STRING,
    "int16": TypeTag.INT16,
    "uint16": TypeTag.UINT16,
    "int32": TypeTag.INT32,
    "uint32": TypeTag.UINT32,
    "int64": TypeTag.INT64,
    "uint64": TypeTag.UINT64,
    "byte": TypeTag.BYTE,
    "double": TypeTag.DOUBLE,
    "boolean": TypeTag.BOOLEAN,
    "bool": TypeTag.BOOLEAN,
    "objpath": TypeTag.OBJECT_PATH,
    "signature": TypeTag.SIGNATURE,
}

# Number of sub-type segments following a container keyword.
CONTAINER_ARITY = {
    KEYWORD_ARRAY: 1,
    KEYWORD_DICT: 2,
}


def resolve_scalar_tag(keyword: str) -> TypeTag:
    """Resolve a scalar type keyword (case-sensitive).

    Raises:
        UnknownTypeError: If the keyword is unknown or names a container.
    """
    tag = SCALAR_KEYWORDS.get(keyword)
    if tag is not None:
        return tag
    if keyword in CONTAINER_ARITY:
        raise UnknownTypeError(
            f"Nested container type '{keyword}' is not supported; "
            "array elements and dict values must be scalar types",
            keyword,
        )
    raise UnknownTypeError(f"Unknown type '{keyword}'", keyword)


def sub_type_count(keyword: str) -> int:
    """Return how many sub-type segments the keyword requires (0, 1 or 2)."""
    if keyword in CONTAINER_ARITY:
        return CONTAINER_ARITY[keyword]
    resolve_scalar_tag(keyword)
    return 0


def resolve_arg_type(keyword: str, sub_types: Sequence[str] = ()) -> ArgType:
    """Resolve a keyword plus its sub-type segments to an ArgType.

    Args:
        keyword: Leading type keyword, e.g. 'int32', 'array' or 'dict'.
        sub_types: Sub-type keywords, one for 'array', key and value for 'dict'.

    Raises:
        UnknownTypeError: Unknown keyword or nested container.
        UnsupportedKeyTypeError: Dict key type other than string.
        MalformedTokenError: Wrong number of sub-type segments.
    """
    expected = sub_type_count(keyword)
    if len(sub_types) != expected:
        raise MalformedTokenError(
            f"Type '{keyword}' expects {expected} sub-type(s), got {len(sub_types)}",
            keyword,
        )

    if keyword == KEYWORD_ARRAY:
        return ArgType.array(resolve_scalar_tag(sub_types[0]))

    if keyword == KEYWORD_DICT:
        key_keyword, value_keyword = sub_types
        key_tag = resolve_scalar_tag(key_keyword)
        if key_tag is not TypeTag.STRING:
            raise UnsupportedKeyTypeError(
                f"Unsupported dictionary key type '{key_keyword}': only 'string' keys are supported",
                key_keyword,
            )
        return ArgType.dict(key_tag, resolve_scalar_tag(value_keyword))

    return ArgType.scalar(resolve_scalar_tag(keyword))
