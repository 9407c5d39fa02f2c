"""Locale tag canonicalization and alias table filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import FrozenSet, TypeVar

from babel.core import get_global, parse_locale

from .config import ZodiacMatcherOptions

__all__ = [
    "SYMBOLS_LOCALE",
    "ALL_LOCALES_KEY",
    "canonicalize_locale",
    "base_language",
    "normalize_locale_list",
    "build_filter_key",
    "select_locale_data",
]

LOG = logging.getLogger(__name__)

SYMBOLS_LOCALE = "symbols"
ALL_LOCALES_KEY = "__all__"

_V = TypeVar("_V")


def _replace_language_alias(
    language: str, territory: str | None, script: str | None
) -> tuple[str, str | None, str | None]:
    # CLDR replacements may carry subtags of their own ("sh" -> "sr_Latn");
    # subtags written by the caller take precedence.
    replacement = get_global("language_aliases").get(language)
    if not replacement:
        return language, territory, script
    alias_language, alias_territory, alias_script = parse_locale(replacement.split()[0])[:3]
    return alias_language, territory or alias_territory, script or alias_script


@lru_cache(maxsize=1024)
def canonicalize_locale(tag: str) -> str:
    """Return the lowercase canonical key for ``tag``.

    Legacy language codes are replaced through the CLDR alias table
    (``"tl"`` becomes ``"fil"``, ``"iw"`` becomes ``"he"``). No script or
    territory is added that the tag did not carry, so ``"zh-TW"`` stays
    ``"zh-tw"``. ``symbols`` is passed through untouched. Tags Babel cannot
    parse are kept as opaque lowercase keys so free-form filters never raise.
    """

    trimmed = (tag or "").strip()
    if not trimmed:
        return ""
    if trimmed.lower() == SYMBOLS_LOCALE:
        return SYMBOLS_LOCALE
    try:
        language, territory, script, variant = parse_locale(trimmed, sep="-")[:4]
        language, territory, script = _replace_language_alias(language, territory, script)
    except ValueError as exc:
        LOG.debug("Treating locale %r as an opaque key: %s", trimmed, exc)
        return trimmed.lower()
    return "-".join(part for part in (language, script, territory, variant) if part).lower()


def base_language(tag: str) -> str:
    """Return the primary language subtag of the canonical form of ``tag``."""

    canonical = canonicalize_locale(tag)
    if not canonical:
        return ""
    return canonical.split("-", 1)[0].lower()


def normalize_locale_list(tags: Iterable[str] | None) -> FrozenSet[str]:
    """Expand ``tags`` into the set of their canonical and base-language keys."""

    keys: set[str] = set()
    for tag in tags or ():
        canonical = canonicalize_locale(tag)
        if canonical:
            keys.add(canonical)
        base = base_language(tag)
        if base:
            keys.add(base)
    return frozenset(keys)


def _filter_sets(options: ZodiacMatcherOptions | None) -> tuple[FrozenSet[str], FrozenSet[str]]:
    if options is None:
        return frozenset(), frozenset()
    return (
        normalize_locale_list(options.include_locales),
        normalize_locale_list(options.exclude_locales),
    )


def build_filter_key(options: ZodiacMatcherOptions | None) -> str:
    """Return an order-independent cache key describing ``options``."""

    include, exclude = _filter_sets(options)
    if not include and not exclude:
        return ALL_LOCALES_KEY
    return f"inc:{','.join(sorted(include))}|exc:{','.join(sorted(exclude))}"


def _locale_forms(key: str) -> FrozenSet[str]:
    return frozenset(form for form in (canonicalize_locale(key), base_language(key)) if form)


def select_locale_data(
    table: Mapping[str, _V],
    options: ZodiacMatcherOptions | None,
) -> dict[str, _V]:
    """Return the subset of ``table`` selected by ``options``.

    Inclusion runs first (every key when no inclusion is given), exclusion
    then narrows the result. Keys are compared through both their canonical
    and base-language forms.
    """

    include, exclude = _filter_sets(options)
    chosen: dict[str, _V] = {}
    for key, value in table.items():
        forms = _locale_forms(key)
        if include and not (forms & include):
            continue
        if forms & exclude:
            continue
        chosen[key] = value
    return chosen
