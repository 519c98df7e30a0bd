"""Options record for slug generation."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class SlugOptions(BaseModel):
    """Immutable settings for one slugify call.

    Every field is optional and defaults to the standard slug behaviour:
    hyphen separated, lowercase, trimmed, collapsed and uncapped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    separator: str = Field(default="-", description="String inserted for disqualified characters")
    lowercase: bool = Field(default=True, description="Lowercase after replacements")
    trim: bool = Field(default=True, description="Strip leading and trailing separator runs")
    strict: bool = Field(default=True, description="Collapse runs of separator characters")
    replacements: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Entries merged over the default table",
    )
    max_length: int | None = Field(
        default=None,
        alias="maxLength",
        description="Cap on output length; 0 yields an empty slug, negative means no cap",
    )

    @field_validator("replacements", mode="after")
    @classmethod
    def _freeze_replacements(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # Copy so later writes to the caller's dict do not leak in.
        return MappingProxyType(dict(value))

    @field_serializer("replacements")
    def _dump_replacements(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def merge(self, **overrides: Any) -> SlugOptions:
        """Return a copy with the given fields replaced, skipping None values."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return SlugOptions.model_validate({**self.model_dump(), **updates})


DEFAULT_OPTIONS = SlugOptions()


def resolve_options(
    options: SlugOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> SlugOptions:
    """Build a SlugOptions from None, an existing record, or a plain mapping.

    Keyword overrides are applied on top; ``maxLength`` and ``max_length`` are
    both accepted.
    """
    if options is None:
        resolved = DEFAULT_OPTIONS
    elif isinstance(options, SlugOptions):
        resolved = options
    else:
        resolved = SlugOptions.model_validate(dict(options))

    if "maxLength" in overrides:
        overrides.setdefault("max_length", overrides.pop("maxLength"))
    return resolved.merge(**overrides) if overrides else resolved
