"""Pydantic models for mediafuse."""

from .classification import (
    DEFAULT_EXTENSION,
    UNKNOWN_DURATION,
    UNKNOWN_MIME_TYPE,
    ClassificationResult,
)
from .file import FileInfo, format_size
from .record import MediaRecord

__all__ = [
    # Main model
    "MediaRecord",
    # Classification
    "ClassificationResult",
    "DEFAULT_EXTENSION",
    "UNKNOWN_DURATION",
    "UNKNOWN_MIME_TYPE",
    # File
    "FileInfo",
    "format_size",
]
