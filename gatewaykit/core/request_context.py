"""
RequestContext management.
Use ContextVar to share the invocation Request ID with log records.
"""

from contextvars import ContextVar
from typing import Optional

# Context variable for Request ID (requestContext.requestId of the event).
_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def set_request_id(request_id: Optional[str]) -> Optional[str]:
    """
    Set the Request ID for the current context.

    Empty strings are stored as None.
    """
    _request_id_var.set(request_id or None)
    return get_request_id()


def clear_request_id() -> None:
    """Clear the Request ID context."""
    _request_id_var.set(None)
