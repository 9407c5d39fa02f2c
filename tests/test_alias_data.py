from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from types import MappingProxyType

import pytest

from zodiac_mapper.data import (
    ALIASES_ENV_VAR,
    BUNDLED_ALIASES_PATH,
    AliasTableError,
    aggregate_aliases,
    alias_table,
    load_alias_table,
    parse_alias_document,
)
from zodiac_mapper.normalization import normalize_name
from zodiac_mapper.signs import ZODIAC_SIGNS, ZodiacSign

CUSTOM_DOCUMENT = """\
"EN":
  aries: ["Ram"]
"xx":
  leo: ["Big Cat", "Ram"]
"""


@pytest.fixture()
def custom_aliases(tmp_path: Path) -> Path:
    path = tmp_path / "aliases.yaml"
    path.write_text(CUSTOM_DOCUMENT, encoding="utf-8")
    return path


def test_bundled_table_shape() -> None:
    table = load_alias_table()
    assert BUNDLED_ALIASES_PATH.is_file()
    assert {"en", "de", "fr", "ja", "pt", "symbols", "zh"} <= set(table)
    assert isinstance(table, MappingProxyType)
    for locale, signs in table.items():
        assert locale == locale.lower()
        for aliases in signs.values():
            assert isinstance(aliases, tuple)
            assert all(isinstance(alias, str) and alias.strip() for alias in aliases)


def test_bundled_table_covers_every_sign_in_core_locales() -> None:
    table = load_alias_table()
    for locale in ("en", "es", "fr", "de", "it", "pt", "ru", "ja", "zh", "ko", "symbols"):
        assert set(table[locale]) == set(ZODIAC_SIGNS), locale


def test_symbols_are_single_glyphs() -> None:
    symbols = load_alias_table()["symbols"]
    assert [symbols[sign] for sign in ZODIAC_SIGNS] == [(glyph,) for glyph in "♈♉♊♋♌♍♎♏♐♑♒♓"]


def test_no_normalized_alias_names_two_signs() -> None:
    owners: dict[str, set[ZodiacSign]] = defaultdict(set)
    for signs in load_alias_table().values():
        for sign, aliases in signs.items():
            for alias in aliases:
                owners[normalize_name(alias)].add(sign)
    clashes = {alias: found for alias, found in owners.items() if len(found) > 1}
    assert clashes == {}


def test_alias_table_defaults_to_bundled() -> None:
    assert dict(alias_table()) == dict(load_alias_table())


def test_load_custom_file(custom_aliases: Path) -> None:
    table = load_alias_table(custom_aliases)
    assert set(table) == {"en", "xx"}
    assert table["xx"][ZodiacSign.LEO] == ("Big Cat", "Ram")


def test_environment_override(monkeypatch: pytest.MonkeyPatch, custom_aliases: Path) -> None:
    monkeypatch.setenv(ALIASES_ENV_VAR, str(custom_aliases))
    alias_table.cache_clear()
    try:
        assert set(alias_table()) == {"en", "xx"}
    finally:
        monkeypatch.delenv(ALIASES_ENV_VAR)
        alias_table.cache_clear()
    assert "symbols" in alias_table()


def test_aggregate_aliases_deduplicates_in_locale_order(custom_aliases: Path) -> None:
    merged = aggregate_aliases(load_alias_table(custom_aliases))
    assert merged[ZodiacSign.ARIES] == ("Ram",)
    assert merged[ZodiacSign.LEO] == ("Big Cat", "Ram")
    assert merged[ZodiacSign.VIRGO] == ()


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        (["en"], "mapping of locale keys"),
        ({"": {"aries": ["Aries"]}}, "empty locale key"),
        ({"en": ["Aries"]}, "must map signs"),
        ({"en": {"ophiuchus": ["Snake"]}}, "Unknown sign"),
        ({"en": {"aries": "Aries"}}, "list of strings"),
        ({"en": {"aries": ["Aries", 3]}}, "list of strings"),
    ],
)
def test_parse_alias_document_rejects_bad_shapes(payload: object, message: str) -> None:
    with pytest.raises(AliasTableError, match=message):
        parse_alias_document(payload)


def test_parse_alias_document_normalizes_keys() -> None:
    table = parse_alias_document({" FR ": {"Aries": ["Bélier"]}})
    assert table == {"fr": {ZodiacSign.ARIES: ("Bélier",)}}
