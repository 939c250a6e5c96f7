"""
Exceptions raised by the resize pipeline.
"""

from typing import Optional


class TiersizeError(Exception):
    """Base class for tiersize errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DecodeError(TiersizeError):
    """Input image is missing, unreadable, empty or not a supported format."""


class OutputError(TiersizeError, OSError):
    """Output directory could not be created or an output file could not be written."""
