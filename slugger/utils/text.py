"""Text utilities for slugger."""

from __future__ import annotations

import re
import string
from functools import lru_cache
from typing import Any

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def to_text(value: Any) -> str:
    """Coerce an arbitrary value to the text the pipeline works on.

    Args:
        value: Any value. None means "no input".

    Returns:
        The textual form of ``value``; empty for None.

    Examples:
        >>> to_text(None)
        ''
        >>> to_text(True)
        'true'
        >>> to_text(42)
        '42'
        >>> to_text(b"caf\\xc3\\xa9")
        'café'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def is_ascii_alnum(char: str) -> bool:
    """Return True for ASCII letters and digits only."""
    return char in _ASCII_ALNUM


@lru_cache(maxsize=64)
def separator_run_pattern(separator: str) -> re.Pattern[str]:
    """Compile a pattern matching runs of any character of ``separator``.

    Each character is escaped, so separators such as ``"."`` or ``"-]"`` are
    treated literally. The separator must not be empty.
    """
    chars = "".join(re.escape(char) for char in dict.fromkeys(separator))
    return re.compile(f"[{chars}]+")
