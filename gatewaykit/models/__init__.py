"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .authorizer import AuthorizerResponse
from .context import (
    Authentication,
    AuthorizerResult,
    ClientCertificate,
    HttpLineInfo,
    HttpRequestContext,
    RequestContext,
    Validity,
)
from .request import AuthorizationRequest, BaseRequest, HttpRequest
from .response import Response

__all__ = [
    "Authentication",
    "AuthorizationRequest",
    "AuthorizerResponse",
    "AuthorizerResult",
    "BaseRequest",
    "ClientCertificate",
    "HttpLineInfo",
    "HttpRequest",
    "HttpRequestContext",
    "RequestContext",
    "Response",
    "Validity",
]
