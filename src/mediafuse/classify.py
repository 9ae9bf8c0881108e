"""Fuse ExifTool tags and MediaInfo tracks into classification facts.

ExifTool produces a flat tag document (``{"MIMEType": "image/gif",
"FrameCount": 12, ...}``) and MediaInfo a track document
(``{"media": {"track": [{"@type": "General", ...}, ...]}}``). Neither shape
is guaranteed: keys come and go per file type and tool version, and values
may be strings, numbers or null. Every lookup here degrades to "absent"
instead of raising, and the precedence between the two documents is fixed:

- MIME type: tag ``MIMEType`` > libmagic sniffing > ``"unknown"``
- Extension: tag ``FileTypeExtension`` > ``"txt"``
- Duration: tag ``Duration`` > first Video track ``Duration`` > ``"Unknown"``

The boolean facts are evaluated as ordered predicate lists. A predicate
returns True (evidence found), False (checked, no evidence) or None (does
not apply to this MIME type).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from mediafuse.models import (
    DEFAULT_EXTENSION,
    UNKNOWN_DURATION,
    UNKNOWN_MIME_TYPE,
    ClassificationResult,
)

logger = logging.getLogger(__name__)

# ExifTool's placeholder when it cannot identify the content
PLACEHOLDER_MIME_TYPES = {"application/unknown"}

ANIMATED_IMAGE_FORMATS = {
    "image/gif": "GIF",
    "image/webp": "WebP",
}

ANIMATION_FLAG_VALUES = {"Yes", "True"}

VIDEO_RATE_TAGS = ("VideoFrameRate", "FrameRate")

_INTEGER_RE = re.compile(r"[+-]?\d+")

Predicate = Callable[[Mapping[str, Any], list[dict[str, Any]], str], bool | None]
Sniffed = str | Callable[[], str] | None


# Safe accessors


def as_text(value: Any) -> str | None:
    """Return value if it is a string, else None."""
    return value if isinstance(value, str) else None


def as_number(value: Any) -> float | None:
    """Return value as a float if it is a JSON number (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def as_int(value: Any) -> int | None:
    """Parse an integer from a decimal string or an integral number."""
    if isinstance(value, str):
        return int(value) if _INTEGER_RE.fullmatch(value) else None
    number = as_number(value)
    if number is not None and number.is_integer():
        return int(number)
    return None


def format_value(value: Any) -> str:
    """Render a loosely-typed document value for display."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def as_mapping(document: Any) -> Mapping[str, Any]:
    """Return document if it is a mapping, else an empty one."""
    return document if isinstance(document, Mapping) else {}


def get_tracks(document: Any) -> list[dict[str, Any]]:
    """Return the track list of a MediaInfo document.

    MediaInfo emits a single object instead of a list when the file has
    only one track; both shapes are accepted. Non-object entries are dropped.
    """
    root = as_mapping(as_mapping(document).get("media"))
    tracks = root.get("track")
    if isinstance(tracks, Mapping):
        tracks = [tracks]
    if not isinstance(tracks, list):
        return []
    return [track for track in tracks if isinstance(track, dict)]


def track_type(track: Mapping[str, Any]) -> str | None:
    """Return the ``@type`` discriminator of a track."""
    return as_text(track.get("@type"))


# Field resolution


def resolve_mime_type(tags: Mapping[str, Any], sniffed: Sniffed = None) -> str:
    """Resolve the MIME type, preferring the tag document over sniffing.

    Args:
        tags: ExifTool tag document
        sniffed: Sniffed MIME type, or a callable producing it. The callable
            is only invoked when the tag document has no usable MIMEType.
    """
    declared = as_text(as_mapping(tags).get("MIMEType"))
    if declared and declared not in PLACEHOLDER_MIME_TYPES:
        return declared

    if callable(sniffed):
        sniffed = sniffed()
    if isinstance(sniffed, str) and sniffed:
        return sniffed
    return UNKNOWN_MIME_TYPE


def resolve_extension(tags: Mapping[str, Any]) -> str:
    """Resolve the file extension from the tag document."""
    extension = as_text(as_mapping(tags).get("FileTypeExtension"))
    if extension:
        return extension.lower()
    # TODO: drop the "txt" default once consumers accept an empty extension
    return DEFAULT_EXTENSION


def resolve_duration(tags: Mapping[str, Any], tracks: list[dict[str, Any]]) -> str:
    """Resolve a display duration from tags, then from the first Video track.

    A tag Duration of null counts as absent.
    """
    duration = as_mapping(tags).get("Duration")
    if duration is not None:
        return format_value(duration)

    for track in tracks:
        if track_type(track) == "Video" and track.get("Duration") is not None:
            return format_value(track["Duration"])
    return UNKNOWN_DURATION


# Animation predicates


def frame_count_predicate(
    tags: Mapping[str, Any], tracks: list[dict[str, Any]], mime_type: str
) -> bool | None:
    """More than one frame according to ExifTool."""
    frame_count = as_number(tags.get("FrameCount"))
    return frame_count is not None and frame_count > 1


def animation_flag_predicate(
    tags: Mapping[str, Any], tracks: list[dict[str, Any]], mime_type: str
) -> bool | None:
    """Explicit ExifTool animation flag."""
    return as_text(tags.get("Animation")) in ANIMATION_FLAG_VALUES


def image_duration_predicate(
    tags: Mapping[str, Any], tracks: list[dict[str, Any]], mime_type: str
) -> bool | None:
    """A positive duration on a GIF/WebP image implies several frames."""
    if mime_type not in ANIMATED_IMAGE_FORMATS:
        return None
    duration = as_number(tags.get("Duration"))
    return duration is not None and duration > 0


def track_frames_predicate(
    tags: Mapping[str, Any], tracks: list[dict[str, Any]], mime_type: str
) -> bool | None:
    """GIF/WebP tracks reporting more than one frame or a non-zero duration."""
    format_name = ANIMATED_IMAGE_FORMATS.get(mime_type)
    if format_name is None:
        return None

    for track in tracks:
        if format_name not in (as_text(track.get("Format")) or ""):
            continue
        frame_count = as_text(track.get("FrameCount"))
        if frame_count is not None and frame_count != "1":
            return True
        duration = as_text(track.get("Duration"))
        if duration is not None and duration != "0":
            return True
    return False


ANIMATION_PREDICATES: list[Predicate] = [
    frame_count_predicate,
    animation_flag_predicate,
    image_duration_predicate,
    track_frames_predicate,
]


def is_animation(tags: Mapping[str, Any], tracks: list[dict[str, Any]], mime_type: str) -> bool:
    """Check if the file is an animation; the first matching predicate wins."""
    tags = as_mapping(tags)
    for predicate in ANIMATION_PREDICATES:
        if predicate(tags, tracks, mime_type):
            logger.debug("Animation detected by %s", predicate.__name__)
            return True
    return False


def is_encrypted(tracks: list[dict[str, Any]]) -> bool:
    """Check if any track is marked as encrypted."""
    for track in tracks:
        encryption = as_text(track.get("Encryption"))
        if encryption is not None and encryption.casefold() == "encrypted":
            return True
    return False


# Video presence signals


def has_video_track(tags: Mapping[str, Any], tracks: list[dict[str, Any]]) -> bool:
    """A MediaInfo track of type Video exists."""
    return any(track_type(track) == "Video" for track in tracks)


def has_general_video_count(tags: Mapping[str, Any], tracks: list[dict[str, Any]]) -> bool:
    """The General track counts at least one video stream."""
    for track in tracks:
        if track_type(track) != "General":
            continue
        count = as_int(track.get("VideoCount"))
        if count is not None and count > 0:
            return True
    return False


def has_video_rate_tag(tags: Mapping[str, Any], tracks: list[dict[str, Any]]) -> bool:
    """ExifTool reports a video frame rate."""
    return any(key in tags for key in VIDEO_RATE_TAGS)


VIDEO_PRESENCE_SIGNALS = [
    has_video_track,
    has_general_video_count,
    has_video_rate_tag,
]


def is_audio_only_video(
    tags: Mapping[str, Any], tracks: list[dict[str, Any]], mime_type: str
) -> bool:
    """Check if a video container carries no video stream at all.

    Only applies to ``video/*`` MIME types. The file is audio-only when none
    of the video presence signals fire.
    """
    if not mime_type.startswith("video/"):
        return False
    tags = as_mapping(tags)
    return not any(signal(tags, tracks) for signal in VIDEO_PRESENCE_SIGNALS)


def classify(tags: Any, tracks_document: Any, sniffed: Sniffed = None) -> ClassificationResult:
    """Derive all classification facts from the two metadata documents.

    Args:
        tags: ExifTool tag document
        tracks_document: MediaInfo track document
        sniffed: Sniffed MIME type or a callable producing it, used only
            when the tag document has no usable MIMEType

    Returns:
        ClassificationResult
    """
    tags = as_mapping(tags)
    tracks = get_tracks(tracks_document)
    mime_type = resolve_mime_type(tags, sniffed)

    result = ClassificationResult(
        mime_type=mime_type,
        file_extension=resolve_extension(tags),
        duration=resolve_duration(tags, tracks),
        is_animation=is_animation(tags, tracks, mime_type),
        is_encrypted=is_encrypted(tracks),
        is_audio_only_video=is_audio_only_video(tags, tracks, mime_type),
    )
    logger.debug("Classified as %s", result)
    return result
