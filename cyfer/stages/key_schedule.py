"""
Stage 1 — KEY SCHEDULE: cyclic key index
========================================
Supplies one key code value per processed character, round-robin over
the key, wrapping back to the first character at the end.

The index lives on the scheduler instance. Every encode or decode call
builds its own scheduler, so two calls never observe each other's
position in the key.
"""

from ..errors import InvalidArgument


class KeyScheduler:
    """Round-robin source of key code values."""

    def __init__(self, key: str):
        if not key:
            raise InvalidArgument("Key must contain at least one character.")
        self._codes = tuple(ord(ch) for ch in key)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def next(self) -> int:
        """Return the key code at the current index, then advance it."""
        code = self._codes[self._index]
        self._index = (self._index + 1) % len(self._codes)
        return code

    def __len__(self):
        return len(self._codes)

    def __repr__(self):
        return f"KeyScheduler(length={len(self._codes)}, index={self._index})"
