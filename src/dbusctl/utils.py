"""Utility functions for the D-Bus call utility."""

import json
from typing import Any, List, Optional

from dbus_fast import Variant


def to_json_value(value: Any) -> Any:
    """Convert a reply value from the bus into plain JSON types.

    Variants are unwrapped, byte strings become lists of integers, structs
    (tuples) become lists.
    """
    if isinstance(value, Variant):
        return to_json_value(value.value)
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


def format_reply(body: List[Any]) -> Optional[str]:
    """Format a reply body for display.

    A single reply value is printed on its own, several values as a JSON
    list. Returns None for an empty reply.
    """
    if not body:
        return None
    if len(body) == 1:
        return json.dumps(to_json_value(body[0]))
    return json.dumps(to_json_value(body))
