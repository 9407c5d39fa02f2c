from __future__ import annotations

from types import MappingProxyType

import pytest

from zodiac_mapper.config import ZodiacMatcherOptions
from zodiac_mapper.locales import (
    ALL_LOCALES_KEY,
    SYMBOLS_LOCALE,
    base_language,
    build_filter_key,
    canonicalize_locale,
    normalize_locale_list,
    select_locale_data,
)

TABLE = MappingProxyType(
    {
        "en": "english",
        "fil": "filipino",
        "ja": "japanese",
        "symbols": "glyphs",
        "zh": "chinese",
    }
)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("en", "en"),
        ("EN", "en"),
        ("  ja  ", "ja"),
        ("SYMBOLS", SYMBOLS_LOCALE),
        ("", ""),
        ("   ", ""),
    ],
)
def test_canonicalize_locale(tag: str, expected: str) -> None:
    assert canonicalize_locale(tag) == expected


def test_unparseable_tags_are_kept_lowercase() -> None:
    assert canonicalize_locale("Not A Tag!") == "not a tag!"
    assert canonicalize_locale("xx-YY") == "xx-yy"


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("tl", "fil"),
        ("iw", "he"),
        ("TL-ph", "fil-ph"),
        ("zh-TW", "zh-tw"),
        ("zh-Hant-TW", "zh-hant-tw"),
        ("en-US", "en-us"),
        ("und", "und"),
    ],
)
def test_canonicalize_replaces_aliases_without_adding_subtags(tag: str, expected: str) -> None:
    assert canonicalize_locale(tag) == expected


def test_undetermined_language_selects_nothing() -> None:
    options = ZodiacMatcherOptions(include_locales=["und"])
    assert select_locale_data(TABLE, options) == {}


@pytest.mark.parametrize(
    ("tag", "expected"),
    [("zh-CN", "zh"), ("zh-TW", "zh"), ("pt-BR", "pt"), ("tl", "fil"), ("", "")],
)
def test_base_language(tag: str, expected: str) -> None:
    assert base_language(tag) == expected


def test_normalize_locale_list_expands_base_language() -> None:
    keys = normalize_locale_list(["zh-CN", "ja"])
    assert {"zh", "ja"} <= keys
    assert normalize_locale_list(None) == frozenset()
    assert normalize_locale_list(["", "  "]) == frozenset()


def test_filter_key_defaults_to_all() -> None:
    assert build_filter_key(None) == ALL_LOCALES_KEY
    assert build_filter_key(ZodiacMatcherOptions()) == ALL_LOCALES_KEY
    assert build_filter_key(ZodiacMatcherOptions(include_locales=[])) == ALL_LOCALES_KEY


def test_filter_key_is_order_independent() -> None:
    left = ZodiacMatcherOptions(include_locales=["ja", "en", "ja"])
    right = ZodiacMatcherOptions(include_locales=["EN", "ja"])
    assert build_filter_key(left) == build_filter_key(right) == "inc:en,ja|exc:"
    assert build_filter_key(ZodiacMatcherOptions(exclude_locales=["ja"])) == "inc:|exc:ja"


def test_select_all_when_unfiltered() -> None:
    assert select_locale_data(TABLE, None) == dict(TABLE)


def test_select_include_matches_base_language() -> None:
    options = ZodiacMatcherOptions(include_locales=["zh-TW"])
    assert select_locale_data(TABLE, options) == {"zh": "chinese"}


def test_select_include_legacy_tag() -> None:
    options = ZodiacMatcherOptions(include_locales=["tl"])
    assert list(select_locale_data(TABLE, options)) == ["fil"]


def test_select_exclude_runs_after_include() -> None:
    options = ZodiacMatcherOptions(include_locales=["en", "ja"], exclude_locales=["en"])
    assert select_locale_data(TABLE, options) == {"ja": "japanese"}
    both = ZodiacMatcherOptions(include_locales=["en"], exclude_locales=["en"])
    assert select_locale_data(TABLE, both) == {}


def test_select_exclude_symbols() -> None:
    options = ZodiacMatcherOptions(exclude_locales=["symbols"])
    assert SYMBOLS_LOCALE not in select_locale_data(TABLE, options)
    assert len(select_locale_data(TABLE, options)) == len(TABLE) - 1
