"""Fused classification results."""

from pydantic import BaseModel, ConfigDict

UNKNOWN_MIME_TYPE = "unknown"
UNKNOWN_DURATION = "Unknown"
DEFAULT_EXTENSION = "txt"


class ClassificationResult(BaseModel):
    """Facts derived from the tag document, the track document and the sniffer."""

    model_config = ConfigDict(frozen=True)

    mime_type: str = UNKNOWN_MIME_TYPE
    file_extension: str = DEFAULT_EXTENSION
    duration: str = UNKNOWN_DURATION
    is_animation: bool = False
    is_encrypted: bool = False
    is_audio_only_video: bool = False
