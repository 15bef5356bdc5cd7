"""Turn context values into output text."""

from __future__ import annotations

import json
from collections.abc import Mapping

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "/": "&#x2F;",
}
_HTML_TABLE = str.maketrans(_HTML_ESCAPES)


def is_array(value) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value) -> bool:
    return isinstance(value, Mapping)


def dump(value) -> str:
    """Compact JSON text for an array or object."""
    if is_object(value) and not isinstance(value, dict):
        value = dict(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def stringify(value) -> str:
    """Display text for a resolved context value."""
    if value is None:
        return "null"
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    if is_array(value) or is_object(value):
        return dump(value)
    return str(value)


def escape_html(text: str) -> str:
    return text.translate(_HTML_TABLE)
