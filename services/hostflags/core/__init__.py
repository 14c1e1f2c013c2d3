"""
Core logic package.

Provides extraction, error construction and request validation helpers.
"""

from .exceptions import UpstreamFetchError
from .extraction import ENCRYPTED_HOST_FLAGS_PATTERN, extract_encrypted_host_flags
from .utils import create_api_error, utc_timestamp, validate_required_fields

__all__ = [
    "ENCRYPTED_HOST_FLAGS_PATTERN",
    "UpstreamFetchError",
    "create_api_error",
    "extract_encrypted_host_flags",
    "utc_timestamp",
    "validate_required_fields",
]
