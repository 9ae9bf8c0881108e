"""Exceptions raised by mediafuse.

Every failure of an external collaborator (file system, ExifTool, MediaInfo,
the digest scan, serialization) is fatal for the run. Missing or malformed
fields inside a successfully retrieved document are never errors.
"""

from __future__ import annotations


class MediafuseError(Exception):
    """Base class for all mediafuse errors.

    Attributes:
        stage: Short name of the pipeline stage that failed, used in
            the one-line CLI diagnostic.
    """

    stage: str = "mediafuse"

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class MissingArgumentError(MediafuseError):
    """No input file was given."""

    stage = "arguments"


class FileAccessError(MediafuseError):
    """The input file could not be stat'ed or opened."""

    stage = "file"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot access {path}: {reason}")
        self.path = path
        self.reason = reason


class SourceUnavailableError(MediafuseError):
    """A metadata source failed or returned unparseable content."""

    stage = "metadata"

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source} failed: {reason}")
        self.source = source
        self.reason = reason


class DigestIOError(MediafuseError):
    """Reading the file for hashing failed."""

    stage = "digest"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot hash {path}: {reason}")
        self.path = path
        self.reason = reason


class SerializationError(MediafuseError):
    """The final record could not be encoded."""

    stage = "output"
