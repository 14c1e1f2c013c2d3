"""
Response body models.
"""

from pydantic import BaseModel

from .errors import ApiError


class HostFlagsResponse(BaseModel):
    encrypted_host_flags: str
    success: bool = True
    timestamp: str
    processing_time_ms: int


class ErrorResponse(BaseModel):
    success: bool = False
    error: ApiError
    timestamp: str
