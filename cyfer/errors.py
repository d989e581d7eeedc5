"""
Errors raised by the cyfer codec.
"""


class InvalidArgument(ValueError):
    """Raised when a codec call is given an argument it cannot work with."""
