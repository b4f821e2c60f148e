"""Coarse casing shape of a string.

:func:`get_shape` maps a string to one of four tags:

- ``"xxx"`` -> lowercase
- ``"XXX"`` -> uppercase
- ``"Xxx"`` -> title case
- ``"xX"`` -> mixed case

Rules are evaluated in that order and the first match wins.  Characters
without case (digits, punctuation, most non-Latin scripts) are ignored by the
lowercase rule, so ``""`` and ``"123"`` are ``"xxx"``.  The uppercase and
title case rules look at every character.
"""

from __future__ import annotations

from typing import Final, Literal

Shape = Literal["xxx", "XXX", "Xxx", "xX"]

LOWER_SHAPE: Final = "xxx"
UPPER_SHAPE: Final = "XXX"
TITLE_SHAPE: Final = "Xxx"
MIXED_SHAPE: Final = "xX"


def _is_cased(char: str) -> bool:
    return char.islower() or char.isupper() or char.istitle()


def is_title_case(text: str) -> bool:
    """Return ``True`` if ``text`` is one uppercase character then lowercase ones.

    Unlike :meth:`str.istitle` this treats the string as a single word: any
    later character that is not lowercase, including digits and punctuation,
    fails the test.
    """

    first = True
    for char in text:
        if first:
            if not char.isupper():
                return False
            first = False
        elif not char.islower():
            return False
    return not first


def get_shape(text: str) -> Shape:
    """Return the casing shape tag of ``text``."""

    if all(char.islower() for char in text if _is_cased(char)):
        return LOWER_SHAPE
    if all(char.isupper() for char in text):
        return UPPER_SHAPE
    if is_title_case(text):
        return TITLE_SHAPE
    return MIXED_SHAPE


__all__ = [
    "Shape",
    "LOWER_SHAPE",
    "UPPER_SHAPE",
    "TITLE_SHAPE",
    "MIXED_SHAPE",
    "get_shape",
    "is_title_case",
]
