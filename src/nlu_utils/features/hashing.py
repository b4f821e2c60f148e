"""Stable 32-bit hashing of strings for feature ids.

The hash is 64-bit FNV-1a over the UTF-8 bytes of the text, truncated to its
low 32 bits and read as a signed integer.  It is deterministic across calls,
processes and machines, which Python's builtin :func:`hash` is not.  It is not
a cryptographic hash; collisions are acceptable for feature buckets.
"""

from __future__ import annotations

from typing import Final

FNV_DEFAULT_KEY: Final = 0xCBF29CE484222325
FNV_PRIME: Final = 0x100000001B3
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF


def fnv1a_64(data: bytes, key: int = FNV_DEFAULT_KEY) -> int:
    """Return the unsigned 64-bit FNV-1a hash of ``data`` seeded with ``key``."""

    h = key & _MASK_64
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & _MASK_64
    return h


def hash_str_to_i32(text: str) -> int:
    """Hash ``text`` to a signed 32-bit integer."""

    low = fnv1a_64(text.encode("utf-8", errors="surrogatepass")) & 0xFFFFFFFF
    if low >= 0x80000000:
        low -= 0x100000000
    return low


__all__ = ["FNV_DEFAULT_KEY", "FNV_PRIME", "fnv1a_64", "hash_str_to_i32"]
