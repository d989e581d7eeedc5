"""
Runtime settings, read from the environment (and a local .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BANNER_TEXT = "hola"
DEFAULT_BANNER_KEY  = "API Working"
DEFAULT_HOST        = "0.0.0.0"
DEFAULT_PORT        = 3000


def banner_text() -> str:
    return os.getenv("CYFER_BANNER_TEXT", DEFAULT_BANNER_TEXT)


def banner_key() -> str:
    return os.getenv("CYFER_BANNER_KEY", DEFAULT_BANNER_KEY)


def host() -> str:
    return os.getenv("HOST", DEFAULT_HOST)


def port(default: int = DEFAULT_PORT) -> int:
    try:
        return int(os.getenv("PORT", default))
    except ValueError:
        return default
