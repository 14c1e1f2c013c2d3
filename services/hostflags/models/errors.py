"""
API error models.

Every failure response carries one of these under its ``error`` key.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    MISSING_REQUIRED_PARAMS = "MISSING_REQUIRED_PARAMS"
    FLAGS_NOT_FOUND = "FLAGS_NOT_FOUND"
    FETCH_ERROR = "FETCH_ERROR"


class ApiError(BaseModel):
    """Structured error with a stable code and the originating request ID."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    code: ErrorCode
    details: Dict[str, Any] = Field(default_factory=dict)
    request_id: str = Field(alias="requestId")
