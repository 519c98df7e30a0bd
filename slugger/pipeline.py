"""Slug generation pipeline.

The steps run in a fixed order: replacement, case folding, character
filtering, strict collapse, trim, and length cap. ``slugify`` is pure and
never raises for any input value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from slugger.options import SlugOptions, resolve_options
from slugger.replacements import apply_replacements, merge_replacements
from slugger.utils.text import is_ascii_alnum, separator_run_pattern, to_text


def slugify(
    value: Any,
    options: SlugOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Convert a value into a URL-safe slug.

    Args:
        value: Text or any other value; None yields an empty slug.
        options: A SlugOptions record or a mapping of option fields.
        **overrides: Individual option fields applied over ``options``.

    Returns:
        The slug, possibly empty.

    Examples:
        >>> slugify("Hello World")
        'hello-world'
        >>> slugify("Café & Restaurant")
        'cafe-and-restaurant'
        >>> slugify("Price: $29.99")
        'price-dollar29-99'
        >>> slugify("Hello World", separator="_", lowercase=False)
        'Hello_World'
        >>> slugify("This is a very long string", max_length=10)
        'this-is-a'
    """
    text = to_text(value)
    if not text:
        return ""

    opts = resolve_options(options, **overrides)
    if opts.max_length == 0:
        return ""

    separator = opts.separator

    text = apply_replacements(text, merge_replacements(opts.replacements))

    if opts.lowercase:
        text = text.lower()

    text = "".join(char if is_ascii_alnum(char) else separator for char in text)

    if separator:
        if opts.strict:
            text = separator_run_pattern(separator).sub(lambda _: separator, text)
        if opts.trim:
            text = text.strip(separator)

    if opts.max_length is not None and opts.max_length > 0:
        text = text[: opts.max_length]
        if opts.trim and separator:
            text = text.rstrip(separator)

    return text
