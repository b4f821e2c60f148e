"""Text normalization utilities for language-understanding matching.

The package exposes pure helpers to normalize text (trim, strip diacritics,
lowercase), classify the casing shape of a string, hash strings to stable
32-bit feature ids and convert positions between UTF-8 byte offsets and
character offsets.  The command line interface lives in :mod:`nlu_utils.cli`.
"""

from .features import get_shape, hash_str_to_i32
from .language import Language
from .preprocess import normalize, remove_diacritics
from .utils.errors import UnknownLanguageError
from .utils.textspan import (
    byte_index_of_char,
    char_index_of_byte,
    convert_range,
    convert_range_to_byte,
    convert_range_to_char,
    prefix_until_char_index,
    substring,
    suffix_from_char_index,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Language",
    "UnknownLanguageError",
    "byte_index_of_char",
    "char_index_of_byte",
    "convert_range",
    "convert_range_to_byte",
    "convert_range_to_char",
    "get_shape",
    "hash_str_to_i32",
    "normalize",
    "prefix_until_char_index",
    "remove_diacritics",
    "substring",
    "suffix_from_char_index",
]
