"""Loader for the bundled multilingual zodiac alias table.

The table ships as ``aliases.yaml`` beside this module. Deployments may point
``ZODIAC_MAPPER_ALIASES`` at a replacement file with the same schema; the
active table is read once per process and treated as immutable afterwards.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from ..signs import ZODIAC_SIGNS, ZodiacSign

__all__ = [
    "ALIASES_ENV_VAR",
    "BUNDLED_ALIASES_PATH",
    "AliasTable",
    "AliasTableError",
    "alias_table",
    "aggregate_aliases",
    "load_alias_table",
    "parse_alias_document",
]

LOG = logging.getLogger(__name__)

ALIASES_ENV_VAR = "ZODIAC_MAPPER_ALIASES"
BUNDLED_ALIASES_PATH = Path(__file__).resolve().parent / "aliases.yaml"

AliasTable = Mapping[str, Mapping[ZodiacSign, tuple[str, ...]]]


class AliasTableError(ValueError):
    """Raised when an alias document does not match the expected schema."""


def _parse_sign_block(locale: str, block: Any) -> Mapping[ZodiacSign, tuple[str, ...]]:
    if not isinstance(block, Mapping):
        raise AliasTableError(f"Locale {locale!r} must map signs to alias lists")
    signs: dict[ZodiacSign, tuple[str, ...]] = {}
    for raw_sign, aliases in block.items():
        try:
            sign = ZodiacSign(str(raw_sign).strip().lower())
        except ValueError as exc:
            raise AliasTableError(f"Unknown sign {raw_sign!r} in locale {locale!r}") from exc
        if isinstance(aliases, str) or not isinstance(aliases, (list, tuple)):
            raise AliasTableError(f"Aliases for {locale}.{sign} must be a list of strings")
        if not all(isinstance(alias, str) for alias in aliases):
            raise AliasTableError(f"Aliases for {locale}.{sign} must be a list of strings")
        signs[sign] = tuple(aliases)
    return MappingProxyType(signs)


def parse_alias_document(payload: Any) -> AliasTable:
    """Validate a decoded alias document and freeze it into an :data:`AliasTable`."""

    if not isinstance(payload, Mapping):
        raise AliasTableError("Alias document must be a mapping of locale keys")
    table: dict[str, Mapping[ZodiacSign, tuple[str, ...]]] = {}
    for raw_locale, block in payload.items():
        locale = str(raw_locale).strip().lower()
        if not locale:
            raise AliasTableError("Alias document contains an empty locale key")
        table[locale] = _parse_sign_block(locale, block)
    return MappingProxyType(table)


@lru_cache(maxsize=8)
def load_alias_table(path: Path | str | None = None) -> AliasTable:
    """Load and validate the alias table stored at ``path``.

    ``None`` selects the bundled ``aliases.yaml``.
    """

    source = Path(path) if path is not None else BUNDLED_ALIASES_PATH
    with source.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)
    table = parse_alias_document(payload)
    LOG.debug("Loaded %d alias locales from %s", len(table), source)
    return table


@lru_cache(maxsize=1)
def alias_table() -> AliasTable:
    """Return the process-wide alias table (environment override or bundled)."""

    override = os.environ.get(ALIASES_ENV_VAR)
    return load_alias_table(Path(override).expanduser() if override else None)


def aggregate_aliases(table: AliasTable | None = None) -> Mapping[ZodiacSign, tuple[str, ...]]:
    """Return every alias per sign across all locales of ``table``.

    Locales are visited in sorted key order; repeated aliases keep their
    first position.
    """

    source = alias_table() if table is None else table
    merged: dict[ZodiacSign, dict[str, None]] = {sign: {} for sign in ZODIAC_SIGNS}
    for locale in sorted(source):
        for sign, aliases in source[locale].items():
            for alias in aliases:
                merged[sign].setdefault(alias, None)
    return MappingProxyType({sign: tuple(aliases) for sign, aliases in merged.items()})
