"""
Services package.

Provides the extraction handler and its upstream integration.
"""

from .fetcher import EmbedPageFetcher
from .handler import ExtractionHandler

__all__ = [
    "EmbedPageFetcher",
    "ExtractionHandler",
]
