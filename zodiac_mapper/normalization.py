"""Case and accent folding for alias keys."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["normalize_name"]

# Combining Diacritical Marks block only; other scripts keep their marks.
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize_name(value: str | None) -> str:
    """Normalize ``value`` for zodiac alias matching.

    Lowercases, decomposes (NFD), drops combining diacritics and trims
    surrounding whitespace, so ``"Bélier"`` and ``"belier"`` share a key.
    """

    if not value:
        return ""
    decomposed = unicodedata.normalize("NFD", value.lower())
    return _COMBINING_MARKS.sub("", decomposed).strip()
