"""Default text formatter - human-readable report."""

from mediafuse.classify import get_tracks
from mediafuse.models import MediaRecord


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def format_default(record: MediaRecord) -> str:
    """Format a record as a readable report.

    Sections: file identity, classification flags, digests, and a count of
    the raw tag/track fields carried in the record.
    """
    lines = []

    lines.append("=" * 70)
    lines.append(f"File: {record.filename}")
    lines.append("=" * 70)

    lines.append("")
    lines.append("## FILE")
    lines.append(f"  Path:         {record.file_name}")
    lines.append(f"  Size:         {record.file_size_human} ({record.file_size} bytes)")
    lines.append(f"  MIME type:    {record.mime_type}")
    lines.append(f"  Extension:    {record.file_extension}")
    lines.append(f"  Duration:     {record.duration}")

    lines.append("")
    lines.append("## CLASSIFICATION")
    lines.append(f"  Animation:    {_yes_no(record.media_is_animation)}")
    lines.append(f"  Encrypted:    {_yes_no(record.media_is_encrypted)}")
    lines.append(f"  Audio only:   {_yes_no(record.media_video_with_audio_only)}")

    if record.hashes:
        lines.append("")
        lines.append("## DIGESTS")
        width = max(len(name) for name in record.hashes)
        for name, digest in record.hashes.items():
            lines.append(f"  {name.ljust(width)}  {digest}")

    track_count = len(get_tracks(record.media))
    lines.append("")
    lines.append("## RAW METADATA")
    lines.append(f"  ExifTool tags:     {len(record.exif)}")
    lines.append(f"  MediaInfo tracks:  {track_count}")

    return "\n".join(lines)
