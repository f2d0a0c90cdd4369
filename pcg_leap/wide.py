"""Unsigned 64-bit arithmetic helpers, native and split into 32-bit halves."""

from typing import Tuple

MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1


def to_uint64(x: int) -> int:
    """Reduce any integer to its unsigned 64-bit two's-complement value."""
    return int(x) & MASK64


def to_uint32(x: int) -> int:
    """Reduce any integer to its unsigned 32-bit two's-complement value."""
    return int(x) & MASK32


def mul64(a: int, b: int) -> int:
    return (a * b) & MASK64


def add64(a: int, b: int) -> int:
    return (a + b) & MASK64


def split_u64(x: int) -> Tuple[int, int]:
    """Return ``(low, high)`` 32-bit halves of a 64-bit value."""
    x = to_uint64(x)
    return x & MASK32, x >> 32


def join_u64(low: int, high: int) -> int:
    return (to_uint32(high) << 32) | to_uint32(low)


def rotr32(value: int, rotation: int) -> int:
    rotation &= 31
    value &= MASK32
    return ((value >> rotation) | (value << ((32 - rotation) & 31))) & MASK32


# Emulated representation: each operand is a (hi, lo) pair of 32-bit words.
# Only the low 64 bits of the 128-bit product are kept, so the hi*hi term
# never contributes and the cross terms only feed the upper word.


def _mul32_low(a: int, b: int) -> int:
    return (a * b) & MASK32


def mul64_halves(a_hi: int, a_lo: int, b_hi: int, b_lo: int) -> Tuple[int, int]:
    """Multiply two split 64-bit values, returning the wrapped ``(hi, lo)`` product."""
    a_hi, a_lo, b_hi, b_lo = (to_uint32(v) for v in (a_hi, a_lo, b_hi, b_lo))

    c1 = (a_lo >> 16) * (b_lo & 0xFFFF)
    c0 = (a_lo & 0xFFFF) * (b_lo >> 16)

    lo = (a_lo & 0xFFFF) * (b_lo & 0xFFFF)
    hi = ((a_lo >> 16) * (b_lo >> 16) + (c0 >> 16) + (c1 >> 16)) & MASK32

    c0 = (c0 << 16) & MASK32
    lo = (lo + c0) & MASK32
    if lo < c0:
        hi = (hi + 1) & MASK32

    c1 = (c1 << 16) & MASK32
    lo = (lo + c1) & MASK32
    if lo < c1:
        hi = (hi + 1) & MASK32

    hi = (hi + _mul32_low(a_lo, b_hi)) & MASK32
    hi = (hi + _mul32_low(a_hi, b_lo)) & MASK32
    return hi, lo


def add64_halves(a_hi: int, a_lo: int, b_hi: int, b_lo: int) -> Tuple[int, int]:
    """Add two split 64-bit values, propagating the carry out of the low word."""
    a_hi, a_lo, b_hi, b_lo = (to_uint32(v) for v in (a_hi, a_lo, b_hi, b_lo))
    hi = (a_hi + b_hi) & MASK32
    lo = (a_lo + b_lo) & MASK32
    if lo < a_lo:
        hi = (hi + 1) & MASK32
    return hi, lo
