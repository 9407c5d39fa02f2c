"""Locale filter options accepted by the matcher entry points."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["ZodiacMatcherOptions", "OptionsLike", "coerce_options"]


class ZodiacMatcherOptions(BaseModel):
    """Include/exclude locale filter for alias lookups and text scans.

    Locale entries are generally BCP-47 tags (``"en"``, ``"zh-CN"``,
    ``"fil"``). ``symbols`` is the built-in glyph pseudo-locale. Exclusions
    are always applied after inclusions. Unknown keys are rejected.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    include_locales: Optional[List[str]] = Field(default=None, alias="includeLocales")
    exclude_locales: Optional[List[str]] = Field(default=None, alias="excludeLocales")

    @field_validator("include_locales", "exclude_locales", mode="before")
    @classmethod
    def _coerce_locale_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        if isinstance(value, (set, frozenset, tuple)):
            return sorted(value) if isinstance(value, (set, frozenset)) else list(value)
        return value


OptionsLike = ZodiacMatcherOptions | Mapping[str, Any] | None


def coerce_options(options: OptionsLike) -> ZodiacMatcherOptions | None:
    """Return ``options`` as a validated :class:`ZodiacMatcherOptions`."""

    if options is None or isinstance(options, ZodiacMatcherOptions):
        return options
    return ZodiacMatcherOptions.model_validate(dict(options))
