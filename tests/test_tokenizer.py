"""Unit tests for payload tokenizing."""
import pytest

from dbusctl.exceptions import MalformedTokenError, UnterminatedQuoteError
from dbusctl.tokenizer import split_payload


def test_simple_split():
    assert split_payload("a,b,c") == ["a", "b", "c"]


def test_quoted_comma_is_literal():
    assert split_payload('"a,b",c') == ["a,b", "c"]


def test_empty_payload():
    assert split_payload("") == []


def test_single_token():
    assert split_payload("only") == ["only"]


def test_quotes_are_optional():
    assert split_payload('"one",1,two,"2"') == ["one", "1", "two", "2"]


def test_unquoted_whitespace_stripped():
    assert split_payload(" 1, 2 ,3 ") == ["1", "2", "3"]


def test_quoted_whitespace_kept():
    assert split_payload('" padded ", x') == [" padded ", "x"]


def test_whitespace_around_quoted_token():
    assert split_payload(' "a,b" , c') == ["a,b", "c"]


def test_empty_tokens():
    assert split_payload("a,,b") == ["a", "", "b"]
    assert split_payload("a,") == ["a", ""]
    assert split_payload('""') == [""]


def test_colons_are_plain_content():
    assert split_payload("a:b,c:d") == ["a:b", "c:d"]


def test_custom_separator():
    assert split_payload('a;"b;c"', separator=";") == ["a", "b;c"]


def test_unterminated_quote():
    with pytest.raises(UnterminatedQuoteError, match="Unterminated quote"):
        split_payload('"abc,def')


def test_unterminated_quote_in_later_token():
    with pytest.raises(UnterminatedQuoteError):
        split_payload('ok,"broken')


def test_text_after_closing_quote():
    with pytest.raises(MalformedTokenError, match="after closing quote"):
        split_payload('"abc"def,x')


def test_quote_inside_bareword():
    with pytest.raises(MalformedTokenError, match="Ambiguous quote"):
        split_payload('ab"c,d')
