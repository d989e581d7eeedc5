"""
cyfer — banner obfuscation codec
================================
Reversible, key-driven text obfuscation for short strings handed back
to API callers. Not a cipher in the cryptographic sense: it hides a
string from a casual glance, nothing more.

Stages:
    1  KEY SCHEDULE  — cyclic key index, one key code per character
    2  NIBBLE        — code + key code -> two printable bytes '0'..'?'
    3  ALPHABET      — base-64 with 'O' written as '-'
    FACADE           — encode() / decode(), reverse/process/reverse order

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors               import InvalidArgument
from .stages.key_schedule  import KeyScheduler
from .codec                import encode, decode, CyferCipher
from .banner               import banner_payload

__all__ = [
    "InvalidArgument",
    "KeyScheduler",
    "encode",
    "decode",
    "CyferCipher",
    "banner_payload",
]
