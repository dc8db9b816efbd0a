"""
Body codec helpers.

Base64 and UTF-8 conversions shared by the request and response models.
"""

import base64
import binascii

from ..exceptions import Base64DecodeError, Utf8DecodeError


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard, padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: str) -> bytes:
    """
    Strictly decode standard base64 text.

    Characters outside the alphabet and bad padding raise Base64DecodeError.
    """
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except UnicodeEncodeError as e:
        # Non-ASCII text cannot be base64.
        raise Base64DecodeError(e) from e
    except binascii.Error as e:
        raise Base64DecodeError(e) from e


def decode_utf8(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8DecodeError(e) from e
