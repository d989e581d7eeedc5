"""
Stage 3 — ALPHABET TRANSCODER
=============================
Standard base-64 over the raw nibble buffer, with one substitution:
every 'O' in the output is written as '-'. The decoder turns '-' back
into 'O' before anything else, so the swap carries no information.

Decoding is lenient: characters outside the base-64 alphabet are
dropped, padding is recomputed and a dangling single character (which
cannot hold a whole byte) is discarded. Any string therefore decodes to
some byte sequence.
"""

import base64
import string

AVOIDED    = "O"
SUBSTITUTE = "-"

_B64_CHARS = frozenset(string.ascii_letters + string.digits + "+/")


def to_text(buffer: bytes) -> str:
    """Encode raw bytes as base-64 text with 'O' replaced by '-'."""
    return base64.b64encode(bytes(buffer)).decode("ascii").replace(AVOIDED, SUBSTITUTE)


def from_text(text: str) -> bytes:
    """Reverse to_text(). Never raises on malformed input."""
    restored = text.replace(SUBSTITUTE, AVOIDED)
    body = "".join(ch for ch in restored if ch in _B64_CHARS)
    if len(body) % 4 == 1:
        body = body[:-1]
    body += "=" * (-len(body) % 4)
    return base64.b64decode(body)
