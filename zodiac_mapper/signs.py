"""Closed zodiac sign vocabulary shared by the matcher and date helpers."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

__all__ = ["ZodiacSign", "ZODIAC_SIGNS", "coerce_sign"]


class ZodiacSign(StrEnum):
    """The twelve tropical zodiac signs in calendar order."""

    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"

    @property
    def position(self) -> int:
        """Zero-based position in the zodiac cycle (Aries = 0)."""

        return ZODIAC_SIGNS.index(self)


ZODIAC_SIGNS: Final[tuple[ZodiacSign, ...]] = tuple(ZodiacSign)


def coerce_sign(value: ZodiacSign | str) -> ZodiacSign | None:
    """Return the :class:`ZodiacSign` for ``value`` or ``None`` when unknown."""

    if isinstance(value, ZodiacSign):
        return value
    try:
        return ZodiacSign(str(value).strip().lower())
    except ValueError:
        return None
