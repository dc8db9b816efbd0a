"""
Custom exception classes.

Represent errors raised while decoding a request body.
"""


class ParseBodyError(Exception):
    """Base exception class for request body decoding."""

    pass


class Base64DecodeError(ParseBodyError, ValueError):
    """Raised when a body flagged as base64 is not valid base64 text."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Invalid base64 body: {cause}")


class Utf8DecodeError(ParseBodyError, ValueError):
    """Raised when a decoded body is not valid UTF-8 text."""

    def __init__(self, cause: UnicodeDecodeError):
        self.cause = cause
        super().__init__(f"Body is not valid UTF-8: {cause}")
