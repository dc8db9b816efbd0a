"""
Content type sniffing for binary response bodies.

Thin wrapper over filetype's magic-number matchers.
"""

import logging
from typing import Optional

import filetype

logger = logging.getLogger("gatewaykit.content_sniffing")

FALLBACK_MIME = "application/octet-stream"
SAMPLE_LIMIT = 31


def sample(data: bytes) -> bytes:
    """
    Return the prefix of data used for sniffing.

    The sample is data[0:min(31, len(data) - 1)], so the last byte of a short
    input is never inspected and inputs of length 0 or 1 give an empty sample.
    """
    end = min(SAMPLE_LIMIT, len(data) - 1)
    if end <= 0:
        return b""
    return bytes(data[:end])


def sniff_mime(data: bytes) -> Optional[str]:
    """Match the sample against known file signatures."""
    head = sample(data)
    if not head:
        return None
    return filetype.guess_mime(head)


def content_type_for(data: bytes) -> str:
    """Sniffed MIME type, or application/octet-stream when nothing matches."""
    mime = sniff_mime(data)
    if mime is None:
        logger.debug(
            "No signature match, using fallback content type",
            extra={"size": len(data), "content_type": FALLBACK_MIME},
        )
        return FALLBACK_MIME
    return mime
