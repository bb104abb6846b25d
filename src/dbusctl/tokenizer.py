"""Splitting of container payloads into raw tokens."""

from typing import List

from .const import QUOTE_CHAR, VALUE_SEPARATOR
from .exceptions import MalformedTokenError, UnterminatedQuoteError


def split_payload(payload: str, separator: str = VALUE_SEPARATOR) -> List[str]:
    """Split a payload into tokens, honoring double-quoted segments.

    Tokens are separated by ``separator``. A token wrapped in double quotes
    loses its quotes and may contain the separator literally. Unquoted tokens
    are stripped of surrounding whitespace, quoted ones are kept verbatim.

    Examples:
        'a,b,c'      -> ['a', 'b', 'c']
        '"a,b",c'    -> ['a,b', 'c']
        ''           -> []

    Raises:
        UnterminatedQuoteError: A quote is opened and never closed.
        MalformedTokenError: A quote inside a bare token, or text between a
            closing quote and the next separator.
    """
    tokens: List[str] = []
    if payload == "":
        return tokens

    pos = 0
    length = len(payload)
    while True:
        # Skip leading whitespace of the token
        start = pos
        while pos < length and payload[pos].isspace() and payload[pos] != separator:
            pos += 1

        if pos < length and payload[pos] == QUOTE_CHAR:
            close = payload.find(QUOTE_CHAR, pos + 1)
            if close == -1:
                raise UnterminatedQuoteError(
                    f"Unterminated quote in '{payload[pos:]}'", payload[pos:]
                )
            tokens.append(payload[pos + 1:close])
            pos = close + 1

            # Only whitespace may follow the closing quote
            while pos < length and payload[pos] != separator:
                if not payload[pos].isspace():
                    end = payload.find(separator, pos)
                    trailing = payload[start:] if end == -1 else payload[start:end]
                    raise MalformedTokenError(
                        f"Unexpected characters after closing quote in '{trailing}'", trailing
                    )
                pos += 1
        else:
            end = payload.find(separator, pos)
            if end == -1:
                end = length
            token = payload[start:end].strip()
            if QUOTE_CHAR in token:
                raise MalformedTokenError(
                    f"Ambiguous quote inside unquoted value '{token}'; "
                    "quote the whole value instead",
                    token,
                )
            tokens.append(token)
            pos = end

        if pos >= length:
            return tokens
        # Step over the separator; a trailing separator yields an empty last token
        pos += 1
        if pos == length:
            tokens.append("")
            return tokens
