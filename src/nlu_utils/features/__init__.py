"""Per-string features: casing shape and stable hash ids."""

from .hashing import FNV_DEFAULT_KEY, fnv1a_64, hash_str_to_i32
from .shape import (
    LOWER_SHAPE,
    MIXED_SHAPE,
    TITLE_SHAPE,
    UPPER_SHAPE,
    Shape,
    get_shape,
    is_title_case,
)

__all__ = [
    "FNV_DEFAULT_KEY",
    "fnv1a_64",
    "hash_str_to_i32",
    "LOWER_SHAPE",
    "MIXED_SHAPE",
    "TITLE_SHAPE",
    "UPPER_SHAPE",
    "Shape",
    "get_shape",
    "is_title_case",
]
