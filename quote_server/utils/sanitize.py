"""Shared input sanitization utilities used by the request pipeline."""

from __future__ import annotations

import re
from typing import Any, MutableMapping, MutableSequence

# Characters stripped from client-supplied strings: < > " ' &
DENYLIST_RE = re.compile(r"[<>\"'&]")


def sanitize(value: Any) -> str:
    """Strip denylisted characters from a string.

    Non-string input yields an empty string rather than an error.
    """
    if not isinstance(value, str):
        return ""
    return DENYLIST_RE.sub("", value)


def sanitize_fields(fields: MutableMapping[str, Any]) -> None:
    """Sanitize every top-level string value of a mapping in place.

    Nested containers are left untouched: only direct string values are cleaned.
    """
    for key, value in fields.items():
        if isinstance(value, str):
            fields[key] = sanitize(value)


def sanitize_items(items: MutableSequence[Any]) -> None:
    """Sanitize every top-level string element of a list in place."""
    for index, value in enumerate(items):
        if isinstance(value, str):
            items[index] = sanitize(value)
