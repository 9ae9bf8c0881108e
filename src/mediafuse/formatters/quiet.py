"""Quiet output formatter - one-line summary."""

from mediafuse.models import MediaRecord


def format_quiet(record: MediaRecord) -> str:
    """Format a record as a one-line summary.

    Format: filename | mime type | size | duration | flags | sha256
    """
    flags = []
    if record.media_is_animation:
        flags.append("animated")
    if record.media_is_encrypted:
        flags.append("encrypted")
    if record.media_video_with_audio_only:
        flags.append("audio-only")

    parts = [
        record.filename,
        record.mime_type,
        record.file_size_human,
        record.duration,
        ",".join(flags) or "-",
        record.hashes.get("sha256", "-"),
    ]
    return " | ".join(parts)
