"""Conversion between byte offsets and character offsets.

Matchers often work on the UTF-8 encoding of a text and report positions as
byte offsets, while user-facing spans are expressed in characters (code
points).  The helpers in this module translate between the two addressing
spaces.  They are pure and total: out of range indices are clamped instead of
raising.

Ranges are half-open intervals ``(start, end)`` where ``start`` is inclusive
and ``end`` is exclusive.  Converting a range converts each endpoint
independently, so the length of the result in the other space is not a simple
function of the input length.

Conversion contract
-------------------
``byte_index_of_char`` is exact: it returns the byte offset at which the
character starts.  ``char_index_of_byte`` is a ceiling: a byte offset that
falls inside a multi-byte character is rounded forward to the next character.

>>> char_index_of_byte("hé!", 2)
2
>>> byte_index_of_char("hé!", 2)
3
"""

from __future__ import annotations

from typing import Literal


def utf8_length(char: str) -> int:
    """Return the number of bytes ``char`` occupies in UTF-8.

    Lone surrogates count as three bytes, as with the ``surrogatepass`` error
    handler.
    """

    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def char_index_of_byte(text: str, byte_index: int) -> int:
    """Return the first char index whose character starts at or after ``byte_index``.

    Offsets beyond the encoded length map to ``len(text)``.
    """

    consumed = 0
    for char_index, char in enumerate(text):
        if byte_index <= consumed:
            return char_index
        consumed += utf8_length(char)
    return len(text)


def byte_index_of_char(text: str, char_index: int) -> int:
    """Return the byte offset at which character ``char_index`` starts.

    Indices at or past the end clamp to the encoded length of ``text``.
    """

    result = 0
    for current, char in enumerate(text):
        if current >= char_index:
            return result
        result += utf8_length(char)
    return result


def convert_range_to_char(text: str, byte_range: tuple[int, int]) -> tuple[int, int]:
    """Convert a byte range of ``text`` to a char range."""

    start, end = byte_range
    return char_index_of_byte(text, start), char_index_of_byte(text, end)


def convert_range_to_byte(text: str, char_range: tuple[int, int]) -> tuple[int, int]:
    """Convert a char range of ``text`` to a byte range."""

    start, end = char_range
    return byte_index_of_char(text, start), byte_index_of_char(text, end)


def convert_range(
    text: str, span: tuple[int, int], to: Literal["char", "byte"]
) -> tuple[int, int]:
    """Convert ``span`` of ``text`` into the ``to`` addressing space.

    ``to="char"`` reads ``span`` as a byte range, ``to="byte"`` as a char range.
    """

    if to == "char":
        return convert_range_to_char(text, span)
    if to == "byte":
        return convert_range_to_byte(text, span)
    raise ValueError(f"unknown addressing space {to!r}")


def substring(text: str, char_range: tuple[int, int]) -> str:
    """Return the characters of ``text`` inside ``char_range``.

    An ``end`` past the text takes everything up to the end; callers needing
    strict bounds must check them first.  Inverted ranges yield ``""``.
    """

    start, end = char_range
    start = max(start, 0)
    if end <= start:
        return ""
    return text[start:end]


def prefix_until_char_index(text: str, index: int) -> str:
    """Return the first ``index`` characters of ``text``."""

    return substring(text, (0, index))


def suffix_from_char_index(text: str, index: int) -> str:
    """Return ``text`` from character ``index`` onwards."""

    return substring(text, (index, len(text)))


__all__ = [
    "utf8_length",
    "char_index_of_byte",
    "byte_index_of_char",
    "convert_range_to_char",
    "convert_range_to_byte",
    "convert_range",
    "substring",
    "prefix_until_char_index",
    "suffix_from_char_index",
]
