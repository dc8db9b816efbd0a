"""
Lambda authorizer simple response model.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from .context import EventModel


class AuthorizerResponse(EventModel):
    """Simple response format: {"isAuthorized": bool, "context": {...}}."""

    is_authorized: bool = False
    context: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def new(cls, is_authorized: bool, context: Optional[Dict[str, str]] = None) -> "AuthorizerResponse":
        return cls(is_authorized=is_authorized, context=dict(context or {}))

    @classmethod
    def new_nc(cls, is_authorized: bool) -> "AuthorizerResponse":
        """Response without context."""
        return cls(is_authorized=is_authorized)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
