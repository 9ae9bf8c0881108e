"""Metadata sources for mediafuse."""

from mediafuse.config import ToolsConfig
from mediafuse.extractors.base import BaseSource
from mediafuse.extractors.exiftool import ExifToolSource
from mediafuse.extractors.mediainfo import MediaInfoSource
from mediafuse.extractors.sniffer import MagicSniffer

# Tag source first, then track source
_SOURCES: list[type[BaseSource]] = [
    ExifToolSource,
    MediaInfoSource,
]


def get_source_status(tools: ToolsConfig | None = None) -> dict[str, bool]:
    """Get availability status of all metadata sources and the sniffer.

    Returns:
        Dict mapping source names to availability status.
    """
    status = {source_cls.name: source_cls.is_available(tools) for source_cls in _SOURCES}
    status[MagicSniffer.name] = MagicSniffer.is_available()
    return status


def print_source_status(tools: ToolsConfig | None = None) -> None:
    """Print metadata source availability status."""
    status = get_source_status(tools)

    print("mediafuse source status:")
    print("-" * 40)

    for name, available in sorted(status.items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")


__all__ = [
    # Base class
    "BaseSource",
    # Sources
    "ExifToolSource",
    "MediaInfoSource",
    "MagicSniffer",
    # Functions
    "get_source_status",
    "print_source_status",
]
