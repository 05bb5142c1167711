"""Hash functions and comparators for keys of the generic containers."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF

HASH_MIN_SHIFT = 3
UNUSED_HASH_VALUE = 0
DELETED_HASH_VALUE = 1
MIN_HASH_VALUE = 2

# Largest prime below each power of two, indexed by the shift.
PRIME_MOD = (
    1, 2, 3, 7, 13, 31, 61, 127, 251, 509, 1021, 2039, 4093, 8191, 16381,
    32749, 65521, 131071, 262139, 524287, 1048573, 2097143, 4194301,
    8388593, 16777213, 33554393, 67108859, 134217689, 268435399, 536870909,
    1073741789, 2147483647,
)


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def hgen(data: bytes | bytearray | memoryview | str) -> int:
    """Return a 32-bit one-at-a-time hash of a byte sequence."""
    hv = 0
    for byte in _as_bytes(data):
        hv = (hv + byte) & _MASK32
        hv = (hv + (hv << 10)) & _MASK32
        hv ^= hv >> 6
    hv = (hv + (hv << 3)) & _MASK32
    hv ^= hv >> 11
    hv = (hv + (hv << 15)) & _MASK32
    return hv


def hash_str(s: str | bytes) -> int:
    """Return the 32-bit djb2 hash of a string (bytes taken as signed chars)."""
    h = 5381
    for byte in _as_bytes(s):
        signed = byte - 256 if byte > 127 else byte
        h = ((h << 5) + h + signed) & _MASK32
    return h


def hash_float(d: float) -> int:
    """Return the hash of a float: its integer part as an unsigned 32-bit value."""
    return int(d) & _MASK32


def hash_int(n: int) -> int:
    """Return the hash of an integer: its low 32 bits."""
    return n & _MASK32


def compare_int(a: int, b: int) -> int:
    """Order two integers by their difference."""
    return a - b


def compare_float(a: float, b: float) -> int:
    """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_str(a: str, b: str) -> int:
    """Return -1, 0 or 1 as a sorts before, equal to or after b."""
    return (a > b) - (a < b)