"""Supported language tags and their static character tables.

Languages form a closed set.  Tags are parsed case-insensitively and rendered
back in their canonical lowercase form:

>>> Language.parse("PT_BR")
<Language.PT_BR: 'pt_br'>
>>> str(Language.FR)
'fr'

Every language currently shares the same ASCII punctuation table and uses a
single space as its default word separator.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from nlu_utils.utils.errors import UnknownLanguageError

PUNCTUATION: Final = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
SPACE: Final = " "


class Language(Enum):
    """Enumeration of supported languages."""

    DE = "de"
    EN = "en"
    ES = "es"
    FR = "fr"
    IT = "it"
    JA = "ja"
    KO = "ko"
    PT_PT = "pt_pt"
    PT_BR = "pt_br"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def all(cls) -> list[Language]:
        """Return every supported language in declaration order."""

        return list(cls)

    @classmethod
    def parse(cls, tag: str) -> Language:
        """Return the language for ``tag``, ignoring case.

        Raises :class:`UnknownLanguageError` for tags outside the supported set.
        """

        try:
            return cls(tag.lower())
        except ValueError:
            raise UnknownLanguageError(tag) from None

    from_str = parse

    @property
    def punctuation(self) -> str:
        return PUNCTUATION

    @property
    def default_separator(self) -> str:
        return SPACE


__all__ = ["Language", "PUNCTUATION", "SPACE"]
