"""
Comic sources.

Each source implements the Comic interface: it builds the page URL for a date
and extracts the strip's image URL from the fetched page.
"""

from .base import Comic, ExtractionResult, ExtractionStatus
from .registry import COMICS, UnknownComicError, available_comics, resolve

__all__ = [
    "Comic",
    "ExtractionResult",
    "ExtractionStatus",
    "COMICS",
    "UnknownComicError",
    "available_comics",
    "resolve",
]
