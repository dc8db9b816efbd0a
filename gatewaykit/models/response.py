"""
Proxy integration response model.

Builds the {isBase64Encoded, statusCode, body, headers} payload a function
returns to the gateway. Response is immutable: constructors return a complete
value and every with_* method returns a new Response, leaving the receiver
untouched. Body and is_base64encoded are always replaced together.
"""

import logging
from typing import Any, Dict

from pydantic import Field

from ..core.body_codec import encode_base64
from ..core.content_sniffing import content_type_for
from ..core.status_codes import UNKNOWN_STATUS_TEXT, reason_phrase
from .context import EventModel

logger = logging.getLogger("gatewaykit.response")

CONTENT_TYPE = "Content-Type"
MIME_HTML = "text/html; charset=utf-8"
MIME_JSON = "application/json"
MIME_TEXT = "text/plain; charset=utf-8"


class Response(EventModel):
    """API Gateway HTTP API response (payload format 2.0)."""

    is_base64encoded: bool = Field(default=False, alias="isBase64Encoded")
    status_code: int = Field(default=200, ge=0, le=65535)
    body: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)

    # ===========================================
    # Constructors
    # ===========================================

    @classmethod
    def new_file(cls, data: bytes) -> "Response":
        """200 response with a base64 body and a sniffed Content-Type."""
        return cls(
            is_base64encoded=True,
            status_code=200,
            body=encode_base64(data),
            headers={CONTENT_TYPE: content_type_for(data)},
        )

    @classmethod
    def new_html(cls, text: str) -> "Response":
        return cls._new_text_body(text, MIME_HTML)

    @classmethod
    def new_json(cls, text: str) -> "Response":
        """200 response with a pre-serialized JSON body."""
        return cls._new_text_body(text, MIME_JSON)

    @classmethod
    def new_text(cls, text: str) -> "Response":
        return cls._new_text_body(text, MIME_TEXT)

    @classmethod
    def new_status(cls, status_code: int) -> "Response":
        """
        Plain text response whose body is the reason phrase of status_code.

        Codes without a registered phrase get "An unknown error occurred".
        """
        phrase = reason_phrase(status_code)
        if phrase is None:
            logger.debug("No reason phrase for status code", extra={"status_code": status_code})
            phrase = UNKNOWN_STATUS_TEXT
        return cls(
            is_base64encoded=False,
            status_code=status_code,
            body=phrase,
            headers={CONTENT_TYPE: MIME_TEXT},
        )

    @classmethod
    def _new_text_body(cls, text: str, mime: str) -> "Response":
        return cls(is_base64encoded=False, status_code=200, body=text, headers={CONTENT_TYPE: mime})

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Response":
        return cls.model_validate(payload)

    def to_payload(self) -> Dict[str, Any]:
        """Encode to the wire dict returned to the Lambda runtime."""
        return self.model_dump(by_alias=True)

    # ===========================================
    # Fluent mutators
    # ===========================================

    def with_header(self, key: str, value: str) -> "Response":
        """Set a header. An existing header with the same key is replaced."""
        return self._replace(headers={**self.headers, key: value})

    def with_status_code(self, status_code: int) -> "Response":
        return self._replace(status_code=status_code)

    def with_body_text(self, text: str) -> "Response":
        return self.with_body(text, False, MIME_TEXT)

    def with_body_json(self, text: str) -> "Response":
        return self.with_body(text, False, MIME_JSON)

    def with_body_html(self, text: str) -> "Response":
        return self.with_body(text, False, MIME_HTML)

    def with_body_file(self, data: bytes) -> "Response":
        """Base64 body with a Content-Type sniffed the same way as new_file()."""
        return self.with_body(encode_base64(data), True, content_type_for(data))

    def with_body(self, body: str, is_base64encoded: bool, mime: str) -> "Response":
        """
        Replace body, encoding flag and Content-Type at once.

        The caller guarantees that body is base64 text when is_base64encoded is set.
        """
        return self._replace(
            body=body,
            is_base64encoded=is_base64encoded,
            headers={**self.headers, CONTENT_TYPE: mime},
        )

    def _replace(self, **changes: Any) -> "Response":
        # Re-validate so a bad status code cannot slip in through a mutator.
        return self.model_validate({**self.model_dump(), **changes})
