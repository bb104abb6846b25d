"""Unit tests for call argument parsing."""
import shlex

import pytest

from dbusctl.exceptions import (
    ArgumentError,
    ArityMismatchError,
    InvalidBooleanError,
    InvalidNumberError,
    MalformedTokenError,
    OutOfRangeError,
    UnknownTypeError,
    UnsupportedKeyTypeError,
    UnterminatedQuoteError,
)
from dbusctl.models import ArgKind, ArgType, TypedValue, TypeTag
from dbusctl.parsers import build_array, build_dict, parse_argument, parse_call_arguments


def test_parse_scalar():
    value = parse_argument("int32:42")
    assert value == TypedValue(ArgType.scalar(TypeTag.INT32), 42)


def test_scalar_keeps_colons_and_commas():
    """Scalar remainder is the whole value, not split further."""
    assert parse_argument("string:a:b:c").value == "a:b:c"
    assert parse_argument("string:x,y").value == "x,y"
    assert parse_argument("string:").value == ""


def test_bool_synonyms():
    assert parse_argument("boolean:true").value is True
    assert parse_argument("bool:false").value is False


def test_boolean_wrong_case():
    with pytest.raises(InvalidBooleanError):
        parse_argument("boolean:True")


def test_object_path_and_signature():
    assert parse_argument("objpath:/org/freedesktop/DBus").value == "/org/freedesktop/DBus"
    value = parse_argument("signature:a{sv}")
    assert value.value == "a{sv}"
    assert value.signature == "g"


def test_parse_array():
    value = parse_argument("array:int32:1,2,3,4")
    assert value.arg_type.kind is ArgKind.ARRAY
    assert value.arg_type.tag is TypeTag.INT32
    assert value.value == (1, 2, 3, 4)


def test_array_payload_with_colons():
    assert parse_argument("array:string:a:b,c").value == ("a:b", "c")


def test_empty_array():
    value = parse_argument("array:int32:")
    assert value.value == ()
    assert value.signature == "ai"


def test_array_quoted_strings():
    assert parse_argument('array:string:"a,b",c').value == ("a,b", "c")


def test_array_fails_fast():
    with pytest.raises(OutOfRangeError) as exc_info:
        parse_argument("array:byte:1,256,abc")
    assert exc_info.value.value == "256"


def test_parse_dict():
    value = parse_argument('dict:string:int32:"one",1,"two",2')
    assert value.arg_type == ArgType.dict(TypeTag.STRING, TypeTag.INT32)
    assert value.value == (("one", 1), ("two", 2))
    assert value.signature == "a{si}"


def test_dict_string_string():
    value = parse_argument('dict:string:string:"name","John","city","NYC"')
    assert value.value == (("name", "John"), ("city", "NYC"))


def test_dict_preserves_duplicate_keys():
    value = parse_argument("dict:string:int32:a,1,a,2")
    assert value.value == (("a", 1), ("a", 2))


def test_empty_dict():
    assert parse_argument("dict:string:string:").value == ()


def test_dict_odd_token_count():
    with pytest.raises(ArityMismatchError, match="even number"):
        parse_argument('dict:string:int32:"one",1,"two"')


def test_dict_unsupported_key_type():
    with pytest.raises(UnsupportedKeyTypeError):
        parse_argument("dict:int32:string:1,a")


def test_dict_unknown_key_type():
    with pytest.raises(UnknownTypeError):
        parse_argument("dict:float:int32:1.0,1")


def test_dict_value_conversion_error():
    with pytest.raises(InvalidNumberError):
        parse_argument("dict:string:uint16:a,1,b,x")


def test_unterminated_quote():
    with pytest.raises(UnterminatedQuoteError):
        parse_argument('array:string:"abc,def')


def test_nested_array_rejected():
    with pytest.raises(UnknownTypeError, match="not supported"):
        parse_argument("array:array:int32:1")


@pytest.mark.parametrize("raw", ["int32", "array:int32", "dict:string:int32", ""])
def test_malformed_tokens(raw):
    with pytest.raises(MalformedTokenError):
        parse_argument(raw)


def test_unknown_type():
    with pytest.raises(UnknownTypeError, match="Unknown type 'float'"):
        parse_argument("float:1.0")


def test_error_carries_raw_argument():
    with pytest.raises(ArgumentError) as exc_info:
        parse_argument("array:int32:1,x,3")
    assert exc_info.value.argument == "array:int32:1,x,3"
    assert exc_info.value.value == "x"


def test_build_array_and_dict():
    assert build_array(TypeTag.DOUBLE, "1.5,2") == (1.5, 2.0)
    assert build_dict(TypeTag.STRING, TypeTag.BOOLEAN, "x,true,y,false") == (("x", True), ("y", False))


def test_parse_call_arguments_order():
    """Arguments as the shell delivers them keep their order and types."""
    raw = shlex.split('string:"config" array:string:opt1,opt2,opt3 int32:42')
    call_args = parse_call_arguments(raw)

    assert len(call_args) == 3
    assert call_args[0] == TypedValue(ArgType.scalar(TypeTag.STRING), "config")
    assert call_args[1] == TypedValue(ArgType.array(TypeTag.STRING), ("opt1", "opt2", "opt3"))
    assert call_args[2] == TypedValue(ArgType.scalar(TypeTag.INT32), 42)
    assert call_args.signature == "sasi"


def test_parse_call_arguments_empty():
    assert len(parse_call_arguments([])) == 0
    assert len(parse_call_arguments(None)) == 0
    assert parse_call_arguments([]).signature == ""


def test_first_error_wins():
    with pytest.raises(ArgumentError) as exc_info:
        parse_call_arguments(["int32:1", "byte:-1", "bogus:1"])
    assert isinstance(exc_info.value, OutOfRangeError)
    assert exc_info.value.argument == "byte:-1"
