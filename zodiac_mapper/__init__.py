"""Multilingual zodiac sign matching and tropical date lookup.

Map free-form names (``"Bélier"``, ``"白羊座"``, ``"♈"``) and calendar dates
to :class:`ZodiacSign` values, and locate zodiac mentions inside text.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

from .config import ZodiacMatcherOptions
from .dates import (
    InvalidDateError,
    InvalidDateFormatError,
    MonthDay,
    ZodiacDateError,
    ZodiacDateRange,
    get_zodiac_date_range,
    get_zodiac_sign_from_date,
)
from .matcher import (
    ZodiacMatch,
    ZodiacMatcher,
    create_zodiac_matcher,
    find_all_zodiac_in_text,
    find_first_zodiac_in_text,
    find_zodiac_matches,
    get_all_aliases,
    get_supported_locales,
    get_zodiac_names,
    get_zodiac_sign,
)
from .normalization import normalize_name
from .signs import ZODIAC_SIGNS, ZodiacSign

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = _get_version("zodiac-mapper")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ZODIAC_SIGNS",
    "ZodiacSign",
    "ZodiacMatch",
    "ZodiacMatcher",
    "ZodiacMatcherOptions",
    "MonthDay",
    "ZodiacDateRange",
    "ZodiacDateError",
    "InvalidDateError",
    "InvalidDateFormatError",
    "create_zodiac_matcher",
    "find_all_zodiac_in_text",
    "find_first_zodiac_in_text",
    "find_zodiac_matches",
    "get_all_aliases",
    "get_supported_locales",
    "get_zodiac_date_range",
    "get_zodiac_names",
    "get_zodiac_sign",
    "get_zodiac_sign_from_date",
    "normalize_name",
]
