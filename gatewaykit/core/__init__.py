"""
Core logic package.

Provides the codecs and lookup tables used by the models.
"""

from .body_codec import decode_base64, decode_utf8, encode_base64
from .content_sniffing import FALLBACK_MIME, content_type_for, sniff_mime
from .status_codes import UNKNOWN_STATUS_TEXT, reason_phrase

__all__ = [
    "decode_base64",
    "decode_utf8",
    "encode_base64",
    "FALLBACK_MIME",
    "content_type_for",
    "sniff_mime",
    "UNKNOWN_STATUS_TEXT",
    "reason_phrase",
]
