"""Text preprocessing applied before matching."""

from .normalizer import normalize, remove_diacritics

__all__ = ["normalize", "remove_diacritics"]
