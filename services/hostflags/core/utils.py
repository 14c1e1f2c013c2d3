"""
Service Utility Module
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..models.errors import ApiError, ErrorCode


def create_api_error(
    message: str,
    code: ErrorCode,
    details: Optional[Dict[str, Any]] = None,
    request_id: str = "",
) -> ApiError:
    """Build the error object embedded in every failure response."""
    return ApiError(message=message, code=code, details=details or {}, request_id=request_id)


def validate_required_fields(body: Mapping[str, Any], fields: Iterable[str]) -> List[str]:
    """
    Return the required string fields that are missing from ``body``.

    A field counts as missing when it is absent, not a string, or empty.
    """
    missing = []
    for field in fields:
        value = body.get(field)
        if not isinstance(value, str) or not value:
            missing.append(field)
    return missing


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
