"""slugger: turn titles and other values into URL-safe slugs."""

from slugger.batch import UrlBuilder, slugify_many
from slugger.options import DEFAULT_OPTIONS, SlugOptions, resolve_options
from slugger.replacements import DEFAULT_REPLACEMENTS, REPLACEMENT_GROUPS, merge_replacements
from slugger.pipeline import slugify

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_REPLACEMENTS",
    "REPLACEMENT_GROUPS",
    "SlugOptions",
    "UrlBuilder",
    "__version__",
    "merge_replacements",
    "resolve_options",
    "slugify",
    "slugify_many",
]
