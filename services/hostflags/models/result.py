"""
Extraction outcome models.

The handler reduces every request to exactly one of these values; the HTTP
status and body are derived from it in a single place.
"""

from dataclasses import dataclass
from typing import ClassVar, List, Union

from .errors import ErrorCode


@dataclass(frozen=True)
class ExtractionSuccess:
    encrypted_host_flags: str
    fetch_duration_ms: float
    processing_time_ms: int


@dataclass(frozen=True)
class ValidationFailure:
    """video_id missing, empty or not a string. ``received`` lists the body keys."""

    received: List[str]

    code: ClassVar[ErrorCode] = ErrorCode.MISSING_REQUIRED_PARAMS
    status_code: ClassVar[int] = 400


@dataclass(frozen=True)
class NotFoundFailure:
    """Embed page fetched, but no encryptedHostFlags value in it."""

    video_id: str

    code: ClassVar[ErrorCode] = ErrorCode.FLAGS_NOT_FOUND
    status_code: ClassVar[int] = 404


@dataclass(frozen=True)
class UpstreamFailure:
    """Upstream returned a non-2xx status or the fetch raised."""

    message: str

    code: ClassVar[ErrorCode] = ErrorCode.FETCH_ERROR
    status_code: ClassVar[int] = 500


ExtractionFailure = Union[ValidationFailure, NotFoundFailure, UpstreamFailure]
ExtractionOutcome = Union[ExtractionSuccess, ExtractionFailure]
