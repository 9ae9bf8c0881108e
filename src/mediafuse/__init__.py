"""mediafuse - fused media file metadata.

Combine ExifTool tags, MediaInfo tracks and libmagic sniffing into one
consistent record, with eight content digests computed in a single pass.

Usage:
    from mediafuse import analyze_file, format_json

    record = analyze_file("clip.mp4")

    if record.media_video_with_audio_only:
        print(f"{record.filename} is an audio track in a video container")

    print(record.hashes["sha256"])
    print(format_json(record, indent=2))
"""

from mediafuse._version import __version__
from mediafuse.analyze import analyze_file, get_file_info
from mediafuse.classify import classify
from mediafuse.config import MediafuseConfig, get_config, load_config
from mediafuse.exceptions import (
    DigestIOError,
    FileAccessError,
    MediafuseError,
    MissingArgumentError,
    SerializationError,
    SourceUnavailableError,
)
from mediafuse.extractors import (
    ExifToolSource,
    MagicSniffer,
    MediaInfoSource,
    get_source_status,
    print_source_status,
)
from mediafuse.formatters import format_default, format_json, format_quiet, to_dict
from mediafuse.hashing import DIGEST_ALGORITHMS, compute_digests
from mediafuse.models import ClassificationResult, FileInfo, MediaRecord, format_size
from mediafuse.utils import check_all_dependencies, print_dependency_status

__all__ = [
    # Version
    "__version__",
    # Main functions
    "analyze_file",
    "get_file_info",
    "classify",
    "compute_digests",
    "DIGEST_ALGORITHMS",
    # Models
    "MediaRecord",
    "ClassificationResult",
    "FileInfo",
    "format_size",
    # Sources
    "ExifToolSource",
    "MediaInfoSource",
    "MagicSniffer",
    "get_source_status",
    "print_source_status",
    # Formatters
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
    # Config
    "MediafuseConfig",
    "get_config",
    "load_config",
    # Errors
    "MediafuseError",
    "MissingArgumentError",
    "FileAccessError",
    "SourceUnavailableError",
    "DigestIOError",
    "SerializationError",
    # Dependency functions
    "check_all_dependencies",
    "print_dependency_status",
]
