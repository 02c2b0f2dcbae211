"""Hash combining and bit-mixing hashes for low-entropy integers."""

from __future__ import annotations

import operator
import struct
from typing import Any

_MASK_32 = (1 << 32) - 1
_MASK_64 = (1 << 64) - 1

# The golden ratio as a fixed-point fraction of 2**32 and 2**64.
_GOLDEN_RATIO_32 = 0x9E3779B9
_GOLDEN_RATIO_64 = 0x9E3779B97F4A7C16

_SIZE_BITS = 32 if struct.calcsize("P") * 8 == 32 else 64


def _element_hash(value: Any, mask: int) -> int:
    """Integers hash to themselves (wrapped to width); other values use ``hash``."""
    if isinstance(value, int):
        return operator.index(value) & mask
    return hash(value) & mask


def _require_values(values: tuple[Any, ...]) -> None:
    if not values:
        raise TypeError("at least one value to combine is required")


def hash_combine_32(seed: int, *args: Any) -> int:
    """Fold the hashes of ``args`` into a 32-bit ``seed``, left to right."""
    _require_values(args)
    seed = operator.index(seed) & _MASK_32
    for value in args:
        mixed = (
            _element_hash(value, _MASK_32) + _GOLDEN_RATIO_32 + (seed << 6) + (seed >> 2)
        ) & _MASK_32
        seed ^= mixed
    return seed


def hash_combine_64(seed: int, *args: Any) -> int:
    """Fold the hashes of ``args`` into a 64-bit ``seed``, left to right."""
    _require_values(args)
    seed = operator.index(seed) & _MASK_64
    for value in args:
        mixed = (
            _element_hash(value, _MASK_64) + _GOLDEN_RATIO_64 + (seed << 12) + (seed >> 4)
        ) & _MASK_64
        seed ^= mixed
    return seed


def hash_combine(seed: int, *args: Any) -> int:
    """Combine hashes at the platform's native word size."""
    if _SIZE_BITS == 32:
        return hash_combine_32(seed, *args)
    return hash_combine_64(seed, *args)


def _rotate_right_64(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (64 - bits))) & _MASK_64


def _rotate_right_32(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & _MASK_32


def integer_hash_64(value: int) -> int:
    """Mix the bits of a 64-bit integer (rrxmrrxmsx_0)."""
    value = operator.index(value) & _MASK_64
    value ^= _rotate_right_64(value, 25) ^ _rotate_right_64(value, 50)
    value = (value * 0xA24BAED4963EE407) & _MASK_64
    value ^= _rotate_right_64(value, 24) ^ _rotate_right_64(value, 49)
    value = (value * 0x9FB21C651E98DF25) & _MASK_64
    return value ^ (value >> 28)


def integer_hash_32(value: int) -> int:
    """Mix the bits of a 32-bit integer, in the manner of :func:`integer_hash_64`."""
    value = operator.index(value) & _MASK_32
    value ^= _rotate_right_32(value, 12) ^ _rotate_right_32(value, 24)
    value = (value * 0x963EE407) & _MASK_32
    value ^= _rotate_right_32(value, 11) ^ _rotate_right_32(value, 23)
    value = (value * 0x1E98DF25) & _MASK_32
    return value ^ (value >> 14)


def integer_hash(value: int) -> int:
    """Hash an integer with little entropy, such as a counter.

    Uses the platform's native word size; negative values wrap as unsigned.
    """
    if not isinstance(value, int):
        raise TypeError(f"integer_hash() requires an integer, got {type(value).__name__}")
    if _SIZE_BITS == 32:
        return integer_hash_32(value)
    return integer_hash_64(value)