"""Default character replacement table.

Entries are grouped for display; the flattened table keeps group order and is
the order in which replacements are applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

_GROUPS: dict[str, dict[str, str]] = {
    "currency": {
        "€": "euro",
        "£": "pound",
        "¥": "yen",
        "$": "dollar",
        "¢": "cent",
    },
    "math": {
        "±": "plus-minus",
        "×": "times",
        "÷": "divide",
        "∞": "infinity",
    },
    "symbols": {
        "&": "and",
        "@": "at",
        "#": "hash",
        "%": "percent",
        "+": "plus",
        "=": "equals",
    },
    "quotes": {
        '"': "",
        "'": "",
        "`": "",
        "‘": "",
        "’": "",
        "“": "",
        "”": "",
        "…": "",
    },
    "punctuation": {
        "!": "",
        "?": "",
        "*": "",
        "(": "",
        ")": "",
        "^": "",
    },
    "latin": {
        "à": "a",
        "á": "a",
        "â": "a",
        "ã": "a",
        "ä": "a",
        "å": "a",
        "æ": "ae",
        "ç": "c",
        "è": "e",
        "é": "e",
        "ê": "e",
        "ë": "e",
        "ì": "i",
        "í": "i",
        "î": "i",
        "ï": "i",
        "ñ": "n",
        "ò": "o",
        "ó": "o",
        "ô": "o",
        "õ": "o",
        "ö": "o",
        "ø": "o",
        "œ": "oe",
        "ù": "u",
        "ú": "u",
        "û": "u",
        "ü": "u",
        "ý": "y",
        "ÿ": "y",
    },
    "latin_upper": {
        "À": "A",
        "Á": "A",
        "Â": "A",
        "Ã": "A",
        "Ä": "A",
        "Å": "A",
        "Æ": "AE",
        "Ç": "C",
        "È": "E",
        "É": "E",
        "Ê": "E",
        "Ë": "E",
        "Ì": "I",
        "Í": "I",
        "Î": "I",
        "Ï": "I",
        "Ñ": "N",
        "Ò": "O",
        "Ó": "O",
        "Ô": "O",
        "Õ": "O",
        "Ö": "O",
        "Ø": "O",
        "Œ": "OE",
        "Ù": "U",
        "Ú": "U",
        "Û": "U",
        "Ü": "U",
        "Ý": "Y",
        "Ÿ": "Y",
    },
    "german": {
        "ß": "ss",
    },
    "slavic": {
        "č": "c",
        "Č": "C",
        "š": "s",
        "Š": "S",
        "ž": "z",
        "Ž": "Z",
    },
    "turkish": {
        "ı": "i",
        "İ": "I",
        "ğ": "g",
        "Ğ": "G",
        "ş": "s",
        "Ş": "S",
    },
}

REPLACEMENT_GROUPS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {name: MappingProxyType(entries) for name, entries in _GROUPS.items()}
)

DEFAULT_REPLACEMENTS: Mapping[str, str] = MappingProxyType(
    {key: value for entries in _GROUPS.values() for key, value in entries.items()}
)


def merge_replacements(overrides: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Return the effective replacement table for a call.

    Caller entries overwrite defaults in place, so an overridden key keeps its
    default position. Keys not in the default table are appended in the
    caller's order.

    Args:
        overrides: Caller supplied replacements, may be empty or None.

    Returns:
        Read-only mapping. The default table itself when there is nothing to merge.

    Examples:
        >>> merge_replacements({"$": "usd"})["$"]
        'usd'
        >>> list(merge_replacements({"a": "b"}))[-1]
        'a'
    """
    if not overrides:
        return DEFAULT_REPLACEMENTS
    return MappingProxyType({**DEFAULT_REPLACEMENTS, **overrides})


def apply_replacements(text: str, table: Mapping[str, str]) -> str:
    """Replace every occurrence of each key, one sweep per key in table order.

    Text produced by one key's replacement is visible to the keys that come
    after it, never to the same key again.
    """
    for key, value in table.items():
        if key in text:
            text = text.replace(key, value)
    return text
