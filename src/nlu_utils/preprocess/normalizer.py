"""Deterministic text normalization for matching.

The :func:`normalize` function canonicalizes raw user text so that it can be
compared against normalized vocabulary entries.  It performs no I/O and takes
no locale parameter.

Rules
-----
The following transforms are applied in order:

1. **Trim** – leading and trailing Unicode ``White_Space`` characters are
   removed (see :data:`WHITE_SPACE`).
2. **Diacritic removal** – see :func:`remove_diacritics`.
3. **Case folding** – locale-independent Unicode lowercase.

Dropping an orphan mark can expose whitespace at the edges (``"\\u0301 a"``)
and lowercasing may emit combining marks, so one more diacritic pass and trim
settle the result.  This keeps ``normalize(normalize(t)) == normalize(t)``.

Diacritic removal
-----------------
Each input character is handled independently:

* decompose it canonically (NFD);
* drop every code point whose general category is a Mark (``Mn``, ``Mc``,
  ``Me``);
* recompose the remaining code points pairwise from left to right.

A character contributes **nothing** to the output when no code point survives
the filter (a standalone combining mark) or when any pairwise composition
fails.  This lossy behaviour is deliberate and kept for compatibility with
existing normalized vocabularies; it can silently shorten the output for rare
inputs.

Example
-------

>>> normalize("  HelöÀ ")
'heloa'
>>> remove_diacritics("çéaÀ")
'ceaA'
"""

from __future__ import annotations

import unicodedata
from typing import Final

from nlu_utils.utils.logging import get_logger

logger = get_logger(__name__)

# Characters with the Unicode White_Space property. Unlike str.isspace() this
# excludes the U+001C..U+001F information separators.
WHITE_SPACE: Final = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_combining_mark(char: str) -> bool:
    """Return ``True`` if ``char`` belongs to a Mark general category."""

    return unicodedata.category(char).startswith("M")


def compose_pair(first: str, second: str) -> str | None:
    """Canonically compose two code points into one.

    Returns ``None`` when Unicode defines no primary composite for the pair.
    """

    composed = unicodedata.normalize("NFC", first + second)
    if len(composed) == 1:
        return composed
    return None


def _strip_marks(char: str) -> str | None:
    """Return ``char`` without its combining marks, or ``None`` to drop it."""

    bases: list[str] = [
        c for c in unicodedata.normalize("NFD", char) if not is_combining_mark(c)
    ]
    if not bases:
        return None
    acc: str | None = bases[0]
    for c in bases[1:]:
        acc = compose_pair(acc, c)
        if acc is None:
            return None
    return acc


def remove_diacritics(text: str) -> str:
    """Remove accents and other combining marks from ``text``.

    See the module documentation for the per-character algorithm and the
    dropping policy.
    """

    out: list[str] = []
    for char in text:
        stripped = _strip_marks(char)
        if stripped is None:
            logger.debug("dropped U+%04X during diacritic removal", ord(char))
            continue
        out.append(stripped)
    return "".join(out)


def normalize(text: str) -> str:
    """Trim, remove diacritics and lowercase ``text``."""

    folded = remove_diacritics(text.strip(WHITE_SPACE)).lower()
    return remove_diacritics(folded).strip(WHITE_SPACE)


__all__ = [
    "WHITE_SPACE",
    "compose_pair",
    "is_combining_mark",
    "normalize",
    "remove_diacritics",
]
