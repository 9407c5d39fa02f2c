"""Reverse alias index and combined search pattern builders."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .cache import IndexCache
from .config import ZodiacMatcherOptions
from .data import AliasTable, alias_table
from .locales import build_filter_key, select_locale_data
from .normalization import normalize_name
from .signs import ZODIAC_SIGNS, ZodiacSign

__all__ = [
    "ReverseIndex",
    "build_reverse_index",
    "build_search_pattern",
    "get_reverse_index",
    "get_search_pattern",
    "REVERSE_INDEX_CACHE",
    "SEARCH_PATTERN_CACHE",
]

LOG = logging.getLogger(__name__)

ReverseIndex = Mapping[str, ZodiacSign]

# Matches nothing; used when a filter leaves no aliases.
_EMPTY_PATTERN = r"(?!x)x"

REVERSE_INDEX_CACHE: IndexCache[str, ReverseIndex] = IndexCache("reverse-index")
SEARCH_PATTERN_CACHE: IndexCache[str, re.Pattern[str]] = IndexCache("search-pattern")


def _iter_aliases(locale_data: AliasTable) -> Iterator[tuple[ZodiacSign, str]]:
    # Sorted locales and calendar-ordered signs keep collision winners stable.
    for locale in sorted(locale_data):
        signs = locale_data[locale]
        for sign in ZODIAC_SIGNS:
            for alias in signs.get(sign, ()):
                yield sign, alias


def build_reverse_index(locale_data: AliasTable) -> ReverseIndex:
    """Map every normalized alias in ``locale_data`` to its sign.

    When two aliases normalize identically the one visited last wins.
    """

    index: dict[str, ZodiacSign] = {}
    for sign, alias in _iter_aliases(locale_data):
        key = normalize_name(alias)
        if key:
            index[key] = sign
    return MappingProxyType(index)


def build_search_pattern(locale_data: AliasTable) -> re.Pattern[str]:
    """Compile a case-insensitive alternation of every alias surface form.

    Raw (trimmed) and normalized forms are both included so accent-free input
    still matches. Longer terms come first so multi-word aliases are not
    shadowed by their own prefixes.
    """

    terms: set[str] = set()
    for _sign, alias in _iter_aliases(locale_data):
        if not alias:
            continue
        for term in (alias.strip(), normalize_name(alias)):
            if term:
                terms.add(term)
    ordered = sorted(terms, key=lambda term: (-len(term), term))
    source = "|".join(re.escape(term) for term in ordered) or _EMPTY_PATTERN
    return re.compile(source, re.IGNORECASE)


def get_reverse_index(options: ZodiacMatcherOptions | None = None) -> ReverseIndex:
    """Return the cached reverse index for ``options``."""

    key = build_filter_key(options)

    def _build() -> ReverseIndex:
        index = build_reverse_index(select_locale_data(alias_table(), options))
        LOG.debug("Built reverse index %s with %d aliases", key, len(index))
        return index

    return REVERSE_INDEX_CACHE.get_or_build(key, _build)


def get_search_pattern(options: ZodiacMatcherOptions | None = None) -> re.Pattern[str]:
    """Return the cached search pattern for ``options``."""

    key = build_filter_key(options)

    def _build() -> re.Pattern[str]:
        pattern = build_search_pattern(select_locale_data(alias_table(), options))
        LOG.debug("Compiled search pattern %s (%d chars)", key, len(pattern.pattern))
        return pattern

    return SEARCH_PATTERN_CACHE.get_or_build(key, _build)
