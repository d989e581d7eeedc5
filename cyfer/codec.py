"""
CYFER CODEC  |  banner obfuscation
==================================
Reversible text obfuscation for short banner strings. NOT encryption:
there is no key derivation, no authentication, no secrecy against anyone
who has read this file.

    encode:  reverse text -> (code + key) -> nibble pairs -> base-64, O -> -
    decode:  - -> O, base-64 -> reverse bytes -> pairs from the end
             -> (combined - key, folded positive) -> reverse text

The two reversals are a positional convention. They must stay exactly as
they are or previously issued strings stop decoding.

Round-trip envelope: decode(encode(p, k), k) == p whenever every
`code + key code` seen by the encoder stays inside 0..255. Plain ASCII
text under a short ASCII key is well inside it.
"""

import logging

from .errors import InvalidArgument
from .stages import alphabet, nibble
from .stages.key_schedule import KeyScheduler

logger = logging.getLogger(__name__)


def _scheduler(text: str, key: str):
    # empty text needs no key; anything else does, checked before any work
    if not text:
        return None
    if not key:
        raise InvalidArgument("Key must not be empty.")
    return KeyScheduler(key)


def encode(plaintext: str, key: str) -> str:
    """Obfuscate `plaintext` under `key`. Output never contains 'O'."""
    keys = _scheduler(plaintext, key)
    if keys is None:
        return ""
    buffer = bytearray()
    for ch in reversed(plaintext):
        buffer.extend(nibble.split(ord(ch), keys.next()))
    encoded = alphabet.to_text(buffer)
    logger.debug(f"encode: {len(plaintext)} chars -> {len(buffer)}B -> {len(encoded)} chars")
    return encoded


def decode(encoded: str, key: str) -> str:
    """
    Best-effort inverse of encode().
    Always returns a string; outside the round-trip envelope it is simply
    a different string.
    """
    keys = _scheduler(encoded, key)
    if keys is None:
        return ""
    buffer = alphabet.from_text(encoded)[::-1]
    out = []
    x = len(buffer)
    while x >= 2:
        out.append(chr(nibble.join(buffer[x - 1], buffer[x - 2], keys.next())))
        x -= 2
    logger.debug(f"decode: {len(encoded)} chars -> {len(buffer)}B -> {len(out)} chars")
    return "".join(reversed(out))


class CyferCipher:
    """
    Key-bound wrapper around encode()/decode().

    Holds the key only. Every call still gets its own key schedule, so a
    single instance can be shared between threads.
    """

    def __init__(self, key: str):
        if not key:
            raise InvalidArgument("Key must not be empty.")
        self._key = key

    def encrypt(self, plaintext: str) -> str:
        return encode(plaintext, self._key)

    def decrypt(self, encoded: str) -> str:
        return decode(encoded, self._key)

    def __repr__(self):
        return f"CyferCipher(key_length={len(self._key)})"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format=' %(message)s')

    samples = [
        ("Hello, World!", "MySecretKey"),
        ("hola",          "API Working"),
        ("SensitiveData", "Key1"),
    ]
    print(f"{'═'*60}")
    for text, key in samples:
        enc = encode(text, key)
        dec = decode(enc, key)
        assert dec == text
        print(f"{text!r:<18} key={key!r:<16} -> {enc}")
    print(f"{'═'*60}")
    print("Round trips: PASSED")
    print(f"{'═'*60}\n")
