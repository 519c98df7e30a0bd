"""Helpers for slugging collections and building URLs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from slugger.options import SlugOptions, resolve_options
from slugger.pipeline import slugify

logger = logging.getLogger(__name__)

T = TypeVar("T")


def slugify_many(
    items: Iterable[T],
    key: Callable[[T], Any] | None = None,
    options: SlugOptions | Mapping[str, Any] | None = None,
) -> list[tuple[T, str]]:
    """Slugify each item, returning ``(item, slug)`` pairs in input order.

    Args:
        items: Items to process.
        key: Extracts the text to slugify from an item. Defaults to the item itself.
        options: Options shared by every call.

    Returns:
        List of pairs.
    """
    opts = resolve_options(options)
    pairs = [(item, slugify(key(item) if key else item, opts)) for item in items]
    logger.debug("Slugified %d items", len(pairs))
    return pairs


class UrlBuilder:
    """Build URLs whose last segments are slugs under a fixed base URL."""

    def __init__(
        self,
        base_url: str,
        options: SlugOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self.options = resolve_options(options)

    def url(self, path: Any, **overrides: Any) -> str:
        """Return ``<base>/<slug of path>``.

        Overrides of None are ignored, so a builder cap cannot be cleared with
        ``max_length=None``; pass a negative ``max_length`` to disable it.
        """
        return f"{self.base_url}/{slugify(path, self.options, **overrides)}"

    def product_url(
        self,
        name: Any,
        category: Any,
        item_id: int | str,
        name_max_length: int = 40,
    ) -> str:
        """Return ``<base>/<category slug>/<name slug>-<item_id>``."""
        category_slug = slugify(category, self.options)
        name_slug = slugify(name, self.options, max_length=name_max_length)
        return f"{self.base_url}/{category_slug}/{name_slug}-{item_id}"
