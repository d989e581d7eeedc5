"""
Stage 2 — NIBBLE TRANSFORM
==========================
One character code plus one key code becomes two printable bytes:

    combined = code + key_code          (plain addition, no wrap)
    high     = ((combined & 0xF0) >> 4) | 0x30
    low      =  (combined & 0x0F)       | 0x30

Both output bytes land in 0x30..0x3F ('0'..'?'). Only the low 8 bits of
`combined` survive the split; anything above bit 7 is dropped here.

The inverse rebuilds the 8-bit value from the two low nibbles, subtracts
the key code and folds a negative result to its absolute value. That
fold is not an exact inverse of the unbounded addition. It recovers the
original code whenever `code + key_code` stayed inside 0..255, and gives
a deterministic but different code otherwise.
"""

from typing import Tuple

PRINTABLE_BASE = 0x30
HIGH_MASK      = 0xF0
LOW_MASK       = 0x0F


def split(code: int, key_code: int) -> Tuple[int, int]:
    """Return the (high, low) printable nibble bytes for one character."""
    combined = code + key_code
    high = ((combined & HIGH_MASK) >> 4) | PRINTABLE_BASE
    low  = (combined & LOW_MASK) | PRINTABLE_BASE
    return high, low


def join(high: int, low: int, key_code: int) -> int:
    """Rebuild a character code from its nibble bytes and key code."""
    combined = ((high & LOW_MASK) * 16) | (low & LOW_MASK)
    value = combined - key_code
    if value < 0:
        value = -value
    return value
