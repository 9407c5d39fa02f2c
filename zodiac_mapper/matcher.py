"""Exact alias lookup and in-text zodiac detection."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from .config import OptionsLike, ZodiacMatcherOptions, coerce_options
from .data import aggregate_aliases, alias_table
from .index import get_reverse_index, get_search_pattern
from .locales import base_language, canonicalize_locale
from .normalization import normalize_name
from .signs import ZodiacSign, coerce_sign

__all__ = [
    "ZodiacMatch",
    "ZodiacMatcher",
    "create_zodiac_matcher",
    "find_all_zodiac_in_text",
    "find_first_zodiac_in_text",
    "find_zodiac_matches",
    "get_all_aliases",
    "get_supported_locales",
    "get_zodiac_names",
    "get_zodiac_sign",
]

_LATIN_ONLY = re.compile(r"[A-Za-z\u00c0-\u00ff]+")
_WORD_CHAR = re.compile(r"[A-Za-z0-9_\u00c0-\u00ff]")


@dataclass(frozen=True, slots=True)
class ZodiacMatch:
    """A zodiac mention located in a text buffer."""

    sign: ZodiacSign
    match: str
    index: int


def _lookup(name: str, options: ZodiacMatcherOptions | None) -> Optional[ZodiacSign]:
    if not name:
        return None
    return get_reverse_index(options).get(normalize_name(name))


def get_zodiac_sign(name: str, options: OptionsLike = None) -> Optional[ZodiacSign]:
    """Return the sign named by ``name`` (case and accent insensitive).

    ``"Aries"``, ``"Bélier"`` and ``"白羊座"`` all resolve to
    :attr:`ZodiacSign.ARIES`. Unknown names return ``None``.
    """

    return _lookup(name, coerce_options(options))


def _is_partial_word(text: str, start: int, end: int) -> bool:
    before = text[start - 1] if start > 0 else " "
    after = text[end] if end < len(text) else " "
    return bool(_WORD_CHAR.match(before) or _WORD_CHAR.match(after))


def _scan(text: str, options: ZodiacMatcherOptions | None, limit: Optional[int]) -> List[ZodiacMatch]:
    if not text:
        return []
    results: List[ZodiacMatch] = []
    for candidate in get_search_pattern(options).finditer(text):
        matched = candidate.group(0)
        start, end = candidate.span()
        # Latin words need real boundaries ("Leo" must not fire inside "Leopard").
        if _LATIN_ONLY.fullmatch(matched) and _is_partial_word(text, start, end):
            continue
        sign = _lookup(matched, options)
        if sign is None:
            continue
        results.append(ZodiacMatch(sign=sign, match=matched, index=start))
        if limit is not None and len(results) >= limit:
            break
    return results


def find_zodiac_matches(
    text: str,
    options: OptionsLike = None,
    limit: Optional[int] = None,
) -> List[ZodiacMatch]:
    """Return zodiac mentions in ``text`` ordered by offset.

    ``limit`` stops the scan once that many matches have been accepted.
    """

    if limit is not None and limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return _scan(text, coerce_options(options), limit)


def find_first_zodiac_in_text(text: str, options: OptionsLike = None) -> Optional[ZodiacMatch]:
    """Return the first zodiac mention in ``text`` or ``None``."""

    matches = _scan(text, coerce_options(options), 1)
    return matches[0] if matches else None


def find_all_zodiac_in_text(text: str, options: OptionsLike = None) -> List[ZodiacMatch]:
    """Return every zodiac mention in ``text``."""

    return _scan(text, coerce_options(options), None)


class ZodiacMatcher:
    """Matcher bound to a fixed locale filter.

    Options are validated once at construction and reused for every call.
    """

    __slots__ = ("options",)

    def __init__(self, options: OptionsLike = None) -> None:
        self.options = coerce_options(options)

    def get_zodiac_sign(self, name: str) -> Optional[ZodiacSign]:
        return _lookup(name, self.options)

    def find_first_zodiac_in_text(self, text: str) -> Optional[ZodiacMatch]:
        matches = _scan(text, self.options, 1)
        return matches[0] if matches else None

    def find_all_zodiac_in_text(self, text: str) -> List[ZodiacMatch]:
        return _scan(text, self.options, None)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"ZodiacMatcher(options={self.options!r})"


def create_zodiac_matcher(options: OptionsLike = None) -> ZodiacMatcher:
    """Return a :class:`ZodiacMatcher` bound to ``options``."""

    return ZodiacMatcher(options)


def get_supported_locales() -> List[str]:
    """Return every locale key in the alias table, sorted (includes ``symbols``)."""

    return sorted(alias_table())


def get_zodiac_names(sign: ZodiacSign | str, locale: str) -> List[str]:
    """Return the aliases for ``sign`` in ``locale``.

    The canonical locale key is tried before its base language, so
    ``"zh-CN"`` falls back to the ``zh`` data. Unknown combinations yield an
    empty list.
    """

    resolved = coerce_sign(sign)
    if resolved is None:
        return []
    table = alias_table()
    for candidate in (canonicalize_locale(locale), base_language(locale)):
        aliases = table.get(candidate, {}).get(resolved)
        if aliases is not None:
            return list(aliases)
    return []


def get_all_aliases(sign: ZodiacSign | str) -> List[str]:
    """Return every alias of ``sign`` across all locales."""

    resolved = coerce_sign(sign)
    if resolved is None:
        return []
    return list(aggregate_aliases()[resolved])
