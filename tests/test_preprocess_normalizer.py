"""Tests for text normalization."""

from __future__ import annotations

import logging

import pytest

from nlu_utils.preprocess.normalizer import (
    compose_pair,
    is_combining_mark,
    normalize,
    remove_diacritics,
)


def test_remove_diacritics_examples() -> None:
    assert remove_diacritics("") == ""
    assert remove_diacritics("çéaÀ") == "ceaA"
    assert remove_diacritics("Ångström") == "Angstrom"


def test_per_character_marks() -> None:
    assert remove_diacritics("ç") == "c"
    assert remove_diacritics("ë") == "e"
    # ANGSTROM SIGN decomposes to A + COMBINING RING ABOVE
    assert remove_diacritics("\u212b") == "A"


def test_hangul_is_recomposed() -> None:
    assert remove_diacritics("안") == "안"
    assert remove_diacritics("안녕") == "안녕"


def test_standalone_marks_are_dropped() -> None:
    assert remove_diacritics("\u0301") == ""
    assert remove_diacritics("e\u0301") == "e"
    assert remove_diacritics("a\u0300\u0301b") == "ab"


def test_dropped_character_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="nlu_utils"):
        remove_diacritics("x\u0301")
    assert any("U+0301" in rec.getMessage() for rec in caplog.records)


def test_is_combining_mark() -> None:
    assert is_combining_mark("\u0301")
    assert is_combining_mark("\u0903")
    assert is_combining_mark("\u20dd")
    assert not is_combining_mark("a")
    assert not is_combining_mark("'")


def test_compose_pair() -> None:
    assert compose_pair("e", "\u0301") == "é"
    assert compose_pair("\u1100", "\u1161") == "가"
    assert compose_pair("a", "b") is None


def test_normalize() -> None:
    assert normalize("  HelöÀ ") == "heloa"
    assert normalize("ÉCOLE") == "ecole"
    assert normalize("") == ""
    assert normalize(" \t\n ") == ""


def test_normalize_trims_whitespace_exposed_by_dropped_marks() -> None:
    assert normalize("\u0301 Ab") == "ab"
    assert normalize("Ab \u0301") == "ab"


def test_normalize_trims_unicode_white_space_only() -> None:
    assert normalize("\u3000Ab\u00a0\u2029") == "ab"
    assert normalize("\x85Ab\t") == "ab"
    # information separators are not White_Space
    assert normalize("\x1fAb\x1c") == "\x1fab\x1c"
    assert normalize(" \x1e ") == "\x1e"


@pytest.mark.parametrize(
    "text",
    [
        "  HelöÀ ",
        "\u0301 Ab",
        "İstanbul",
        "Straße",
        "ǅemal",
        "ΑΣ",
        "a\u0300\u0301b",
        "안녕",
        "\x1f Ab \x1c",
    ],
)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once
