"""Data models for typed D-Bus call arguments."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

Scalar = Union[str, int, float, bool]


class TypeTag(Enum):
    """Scalar D-Bus types, valued by their signature code."""

    STRING = "s"
    INT16 = "n"
    UINT16 = "q"
    INT32 = "i"
    UINT32 = "u"
    INT64 = "x"
    UINT64 = "t"
    BYTE = "y"
    DOUBLE = "d"
    BOOLEAN = "b"
    OBJECT_PATH = "o"
    SIGNATURE = "g"

    @property
    def signature(self) -> str:
        return self.value


class ArgKind(Enum):
    SCALAR = "scalar"
    ARRAY = "array"
    DICT = "dict"


@dataclass(frozen=True)
class ArgType:
    """Resolved type of one call argument.

    ``tag`` is the scalar type, the array element type or the dict value type.
    ``key_tag`` is only set for dicts and is always ``TypeTag.STRING``.
    """

    kind: ArgKind
    tag: TypeTag
    key_tag: Optional[TypeTag] = None

    @classmethod
    def scalar(cls, tag: TypeTag) -> "ArgType":
        return cls(ArgKind.SCALAR, tag)

    @classmethod
    def array(cls, tag: TypeTag) -> "ArgType":
        return cls(ArgKind.ARRAY, tag)

    @classmethod
    def dict(cls, key_tag: TypeTag, tag: TypeTag) -> "ArgType":
        return cls(ArgKind.DICT, tag, key_tag)

    @property
    def signature(self) -> str:
        """D-Bus signature, e.g. 'i', 'ai' or 'a{si}'."""
        if self.kind is ArgKind.ARRAY:
            return f"a{self.tag.signature}"
        if self.kind is ArgKind.DICT:
            return f"a{{{self.key_tag.signature}{self.tag.signature}}}"
        return self.tag.signature


@dataclass(frozen=True)
class TypedValue:
    """One converted call argument.

    ``value`` is a scalar for scalar types, a tuple of scalars for arrays and
    a tuple of ``(key, value)`` pairs for dicts, in input order.
    """

    arg_type: ArgType
    value: Union[Scalar, Tuple[Scalar, ...], Tuple[Tuple[str, Scalar], ...]]

    @property
    def signature(self) -> str:
        return self.arg_type.signature

    def to_body(self) -> Any:
        """Return the value in the shape the D-Bus marshaller expects."""
        kind = self.arg_type.kind
        if kind is ArgKind.ARRAY:
            if self.arg_type.tag is TypeTag.BYTE:
                return bytes(self.value)
            return list(self.value)
        if kind is ArgKind.DICT:
            # The marshaller takes a mapping; a repeated key keeps its last value.
            return dict(self.value)
        return self.value


@dataclass(frozen=True)
class CallArguments:
    """Ordered, fully typed arguments of one method call."""

    values: Tuple[TypedValue, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, index: int) -> TypedValue:
        return self.values[index]

    @property
    def signature(self) -> str:
        """Concatenated signature of all arguments ('' for no arguments)."""
        return "".join(v.signature for v in self.values)

    @property
    def body(self) -> List[Any]:
        return [v.to_body() for v in self.values]
