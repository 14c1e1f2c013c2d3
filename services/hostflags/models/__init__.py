"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .context import GetHostFlagsRequest, RequestContext
from .errors import ApiError, ErrorCode
from .responses import ErrorResponse, HostFlagsResponse
from .result import (
    ExtractionFailure,
    ExtractionOutcome,
    ExtractionSuccess,
    NotFoundFailure,
    UpstreamFailure,
    ValidationFailure,
)

__all__ = [
    "ApiError",
    "ErrorCode",
    "ErrorResponse",
    "ExtractionFailure",
    "ExtractionOutcome",
    "ExtractionSuccess",
    "GetHostFlagsRequest",
    "HostFlagsResponse",
    "NotFoundFailure",
    "RequestContext",
    "UpstreamFailure",
    "ValidationFailure",
]
