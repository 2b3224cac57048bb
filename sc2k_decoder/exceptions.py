"""Exceptions raised while decoding save files."""
from typing import Optional


class Sc2kDecodeError(Exception):
    """Base class for all decoding failures."""
    pass


class NotASaveFile(Sc2kDecodeError):
    """Raised when the FORM/SCDH header does not match."""
    pass


class MalformedFile(Sc2kDecodeError):
    """Raised when the segment stream ends mid-header or mid-payload."""
    pass


class MalformedSegment(Sc2kDecodeError):
    """Raised when a segment payload is truncated."""

    def __init__(self, message: str, title: Optional[str] = None):
        if title:
            message = f"{title}: {message}"
        super().__init__(message)
        self.title = title
