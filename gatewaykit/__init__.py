"""
gatewaykit: request/response transcoding for API Gateway HTTP API Lambda functions.
"""

from .exceptions import Base64DecodeError, ParseBodyError, Utf8DecodeError
from .models import (
    AuthorizationRequest,
    AuthorizerResponse,
    BaseRequest,
    HttpRequest,
    Response,
)

__all__ = [
    "AuthorizationRequest",
    "AuthorizerResponse",
    "Base64DecodeError",
    "BaseRequest",
    "HttpRequest",
    "ParseBodyError",
    "Response",
    "Utf8DecodeError",
]
