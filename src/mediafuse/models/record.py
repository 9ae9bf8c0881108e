"""Final assembled record for one analyzed file."""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .classification import ClassificationResult
from .file import FileInfo


class MediaRecord(BaseModel):
    """Unified media record.

    Field names are the serialized output names. The raw ExifTool and
    MediaInfo documents are carried verbatim for downstream consumers.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    mime_type: str
    file_extension: str
    file_size: int
    file_size_human: str
    duration: str
    media_is_animation: bool
    media_is_encrypted: bool
    media_video_with_audio_only: bool
    hashes: dict[str, str] = Field(default_factory=dict)
    exif: dict[str, Any] = Field(default_factory=dict)
    media: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def assemble(
        cls,
        file_info: FileInfo,
        classification: ClassificationResult,
        hashes: dict[str, str],
        exif: dict[str, Any],
        media: dict[str, Any],
    ) -> "MediaRecord":
        """Combine file facts, classification and digests into a record."""
        return cls(
            file_name=file_info.path,
            mime_type=classification.mime_type,
            file_extension=classification.file_extension,
            file_size=file_info.size_bytes,
            file_size_human=file_info.size_human,
            duration=classification.duration,
            media_is_animation=classification.is_animation,
            media_is_encrypted=classification.is_encrypted,
            media_video_with_audio_only=classification.is_audio_only_video,
            hashes=hashes,
            exif=exif,
            media=media,
        )

    @property
    def classification(self) -> ClassificationResult:
        """Return the classification facts of this record."""
        return ClassificationResult(
            mime_type=self.mime_type,
            file_extension=self.file_extension,
            duration=self.duration,
            is_animation=self.media_is_animation,
            is_encrypted=self.media_is_encrypted,
            is_audio_only_video=self.media_video_with_audio_only,
        )

    @property
    def filename(self) -> str:
        """Return the base name of the analyzed file."""
        return os.path.basename(self.file_name)
