"""Tropical (Western) zodiac date ranges and date-to-sign lookup."""

from __future__ import annotations

import calendar
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime
from types import MappingProxyType
from typing import Any, Final, Union

from .signs import ZODIAC_SIGNS, ZodiacSign

__all__ = [
    "MonthDay",
    "ZodiacDateRange",
    "ZODIAC_DATE_RANGES",
    "ZodiacDateError",
    "InvalidDateError",
    "InvalidDateFormatError",
    "DateLike",
    "get_zodiac_date_range",
    "get_zodiac_sign_from_date",
    "parse_month_day",
]

# Any leap year works; only used to admit Feb 29.
_LEAP_YEAR = 2000

_YMD_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
_MD_PATTERN = re.compile(r"^([0-9]{1,2})-([0-9]{2})$")


class ZodiacDateError(ValueError):
    """Base class for rejected date inputs."""


class InvalidDateFormatError(ZodiacDateError):
    """Raised when a date input cannot be parsed into a month/day pair."""


class InvalidDateError(ZodiacDateError):
    """Raised when a month/day pair is not a real calendar day."""


@dataclass(frozen=True, slots=True)
class MonthDay:
    """Calendar month (1-12) and day (1-31) without a year."""

    month: int
    day: int

    @property
    def key(self) -> int:
        return self.month * 100 + self.day


@dataclass(frozen=True, slots=True)
class ZodiacDateRange:
    """Inclusive month/day span of a sign.

    ``crosses_year`` marks the range that wraps from December into January.
    """

    start: MonthDay
    end: MonthDay
    crosses_year: bool

    def contains(self, month: int, day: int) -> bool:
        key = month * 100 + day
        if not self.crosses_year:
            return self.start.key <= key <= self.end.key
        return key >= self.start.key or key <= self.end.key


def _range(start: tuple[int, int], end: tuple[int, int], crosses_year: bool = False) -> ZodiacDateRange:
    return ZodiacDateRange(MonthDay(*start), MonthDay(*end), crosses_year)


ZODIAC_DATE_RANGES: Final[Mapping[ZodiacSign, ZodiacDateRange]] = MappingProxyType({
    ZodiacSign.ARIES: _range((3, 21), (4, 19)),
    ZodiacSign.TAURUS: _range((4, 20), (5, 20)),
    ZodiacSign.GEMINI: _range((5, 21), (6, 21)),
    ZodiacSign.CANCER: _range((6, 22), (7, 22)),
    ZodiacSign.LEO: _range((7, 23), (8, 22)),
    ZodiacSign.VIRGO: _range((8, 23), (9, 22)),
    ZodiacSign.LIBRA: _range((9, 23), (10, 23)),
    ZodiacSign.SCORPIO: _range((10, 24), (11, 21)),
    ZodiacSign.SAGITTARIUS: _range((11, 22), (12, 21)),
    ZodiacSign.CAPRICORN: _range((12, 22), (1, 19), crosses_year=True),
    ZodiacSign.AQUARIUS: _range((1, 20), (2, 18)),
    ZodiacSign.PISCES: _range((2, 19), (3, 20)),
})

DateLike = Union[datetime, date, MonthDay, Mapping[str, Any], tuple[int, int], str]


def parse_month_day(value: str) -> MonthDay:
    """Parse ``YYYY-MM-DD`` or ``MM-DD`` into a :class:`MonthDay`.

    The year, when present, is ignored. No timezone is involved.
    """

    text = value.strip()
    if not text:
        raise InvalidDateFormatError("Invalid date string: empty")
    ymd = _YMD_PATTERN.match(text)
    if ymd:
        return MonthDay(int(ymd.group(2)), int(ymd.group(3)))
    md = _MD_PATTERN.match(text)
    if md:
        return MonthDay(int(md.group(1)), int(md.group(2)))
    raise InvalidDateFormatError(
        f'Invalid date string: "{value}". Expected "YYYY-MM-DD" or "MM-DD".'
    )


def _resolve_month_day(value: DateLike) -> tuple[Any, Any]:
    if isinstance(value, str):
        parsed = parse_month_day(value)
        return parsed.month, parsed.day
    if isinstance(value, datetime):
        moment = value.astimezone(UTC) if value.tzinfo is not None else value
        return moment.month, moment.day
    if isinstance(value, (date, MonthDay)):
        return value.month, value.day
    if isinstance(value, Mapping):
        if "month" not in value or "day" not in value:
            raise InvalidDateFormatError("Month/day mapping requires 'month' and 'day' keys")
        return value["month"], value["day"]
    if isinstance(value, tuple) and len(value) == 2:
        return value[0], value[1]
    raise InvalidDateFormatError(f"Unsupported date input: {value!r}")


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _validate_month_day(month: Any, day: Any) -> tuple[int, int]:
    month_number = _as_int(month)
    if month_number is None or not 1 <= month_number <= 12:
        raise InvalidDateError(f"Invalid month: {month}. Expected 1-12.")
    day_number = _as_int(day)
    if day_number is None or not 1 <= day_number <= 31:
        raise InvalidDateError(f"Invalid day: {day}. Expected 1-31.")
    if day_number > calendar.monthrange(_LEAP_YEAR, month_number)[1]:
        raise InvalidDateError(f"Invalid calendar date: {month_number}/{day_number}.")
    return month_number, day_number


def get_zodiac_date_range(sign: ZodiacSign) -> ZodiacDateRange:
    """Return the inclusive tropical date range for ``sign``."""

    return ZODIAC_DATE_RANGES[ZodiacSign(sign)]


def get_zodiac_sign_from_date(value: DateLike) -> ZodiacSign:
    """Return the tropical zodiac sign for a calendar date.

    Accepts a ``datetime`` (month/day taken in UTC), a ``date``, a
    :class:`MonthDay`, a ``{"month": m, "day": d}`` mapping, a ``(month, day)``
    tuple, or a ``"YYYY-MM-DD"`` / ``"MM-DD"`` string. Integral floats such as
    ``21.0`` are accepted as month or day numbers.

    Raises
    ------
    InvalidDateFormatError
        When the input cannot be read as a month/day pair.
    InvalidDateError
        When the month/day pair is not a day of a leap year.
    """

    month, day = _validate_month_day(*_resolve_month_day(value))
    for sign in ZODIAC_SIGNS:
        if ZODIAC_DATE_RANGES[sign].contains(month, day):
            return sign
    raise RuntimeError(f"No zodiac date range covers {month}/{day}; the range table is inconsistent.")
