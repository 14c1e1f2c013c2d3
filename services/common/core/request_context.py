"""
RequestContext management.
Use ContextVar to share the Request ID across async execution.
"""

import uuid
from contextvars import ContextVar
from typing import Optional


# Context variable for Request ID (X-Request-ID).
_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def set_request_id(request_id: str) -> str:
    """
    Set the Request ID for the current context.

    Args:
        request_id: X-Request-ID header value

    Returns:
        The Request ID that was set
    """
    _request_id_var.set(request_id)
    return request_id


def generate_request_id() -> str:
    """
    Generate and set a new Request ID (UUID) for the current context.
    """
    return set_request_id(str(uuid.uuid4()))


def resolve_request_id(header_value: Optional[str]) -> str:
    """Reuse an incoming X-Request-ID when present, otherwise generate one."""
    if header_value and header_value.strip():
        return set_request_id(header_value.strip())
    return generate_request_id()


def clear_request_id() -> None:
    """Clear the Request ID context."""
    _request_id_var.set(None)
