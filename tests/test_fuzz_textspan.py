"""Randomized invariants for byte/char offset conversion.

Texts are drawn from a seeded :class:`random.Random` over an alphabet mixing
one to four byte UTF-8 characters, so every run exercises the same inputs.
"""

from __future__ import annotations

import random

import pytest

from nlu_utils.utils.textspan import (
    byte_index_of_char,
    char_index_of_byte,
    convert_range_to_byte,
    convert_range_to_char,
    substring,
)

_ALPHABET = ["a", "Z", " ", "é", "ß", "Ω", "안", "€", "\U0001f600", "\U00010348"]


def _texts(seed: int, count: int = 40) -> list[str]:
    rng = random.Random(seed)
    return ["".join(rng.choice(_ALPHABET) for _ in range(rng.randint(0, 12))) for _ in range(count)]


def _boundaries(text: str) -> list[int]:
    encoded = text.encode("utf-8")
    starts = [i for i in range(len(encoded)) if encoded[i] & 0xC0 != 0x80]
    return starts + [len(encoded)]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_byte_index_matches_encoding(seed: int) -> None:
    for text in _texts(seed):
        offsets = [byte_index_of_char(text, i) for i in range(len(text) + 1)]
        assert offsets == _boundaries(text)
        assert offsets == sorted(set(offsets))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_round_trips(seed: int) -> None:
    for text in _texts(seed):
        boundaries = set(_boundaries(text))
        for i in range(len(text) + 1):
            assert char_index_of_byte(text, byte_index_of_char(text, i)) == i
        total = len(text.encode("utf-8"))
        for b in range(total + 3):
            back = byte_index_of_char(text, char_index_of_byte(text, b))
            if b in boundaries:
                assert back == b
            elif b < total:
                assert back > b
            else:
                assert back == total


@pytest.mark.parametrize("seed", [4, 5])
def test_ranges_and_substrings(seed: int) -> None:
    rng = random.Random(seed)
    for text in _texts(seed):
        a = rng.randint(0, len(text))
        b = rng.randint(a, len(text))
        assert substring(text, (a, b)) == "".join(list(text)[a:][: b - a])
        byte_range = convert_range_to_byte(text, (a, b))
        assert convert_range_to_char(text, byte_range) == (a, b)
        start, end = byte_range
        assert text.encode("utf-8")[start:end].decode("utf-8") == substring(text, (a, b))
