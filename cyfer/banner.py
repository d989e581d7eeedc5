"""
Banner payload: the "API Working" greeting handed back by the default
route, with the greeting obfuscated by the codec.
"""

from .codec import encode

BANNER_PREFIX = "API Working"


def banner_payload(greeting: str, key: str) -> dict:
    """Build the {"msg": ...} body. Raises InvalidArgument on an empty key."""
    return {"msg": f"{BANNER_PREFIX}: {encode(greeting, key)}"}
