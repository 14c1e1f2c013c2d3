"""
Input context models.

Encapsulates all data required to process an extraction request.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class RequestContext(BaseModel):
    """
    Context representing an incoming request.

    This model decouples the handler from FastAPI's Request object.
    ``start_time`` is a ``time.perf_counter()`` reading taken on arrival.
    """

    request_id: str
    start_time: float
    body: Dict[str, Any] = Field(default_factory=dict)


class GetHostFlagsRequest(BaseModel):
    """Request body of the extraction endpoint."""

    video_id: str = Field(..., min_length=1, description="Video identifier")
