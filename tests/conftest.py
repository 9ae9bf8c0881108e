"""Pytest configuration and fixtures."""

import subprocess

import pytest

from mediafuse.config import reset_config


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    try:
        subprocess.run(
            [cmd, "--version"],
            capture_output=True,
            timeout=5,
        )
        return True
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


@pytest.fixture
def has_exiftool() -> bool:
    """Check if exiftool is available."""
    return command_exists("exiftool")


@pytest.fixture
def has_mediainfo() -> bool:
    """Check if mediainfo is available."""
    return command_exists("mediainfo")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep user config files and MEDIAFUSE_* variables out of tests."""
    monkeypatch.setattr("mediafuse.config.CONFIG_LOCATIONS", [])
    for key in (
        "EXIFTOOL",
        "MEDIAINFO",
        "TOOL_TIMEOUT",
        "HASH_ALGORITHMS",
        "HASH_CHUNK_SIZE",
    ):
        monkeypatch.delenv(f"MEDIAFUSE_{key}", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def gif_tags() -> dict:
    """ExifTool output for an animated GIF."""
    return {
        "SourceFile": "anim.gif",
        "FileType": "GIF",
        "FileTypeExtension": "gif",
        "MIMEType": "image/gif",
        "FrameCount": 12,
        "Duration": "1.20 s",
    }


@pytest.fixture
def mp4_tracks() -> dict:
    """MediaInfo output for an MP4 with one video and one audio stream."""
    return {
        "creatingLibrary": {"name": "MediaInfoLib", "version": "23.04"},
        "media": {
            "@ref": "clip.mp4",
            "track": [
                {
                    "@type": "General",
                    "VideoCount": "1",
                    "AudioCount": "1",
                    "Format": "MPEG-4",
                    "Duration": "10.010",
                },
                {"@type": "Video", "Format": "AVC", "Duration": "10.000", "FrameCount": "300"},
                {"@type": "Audio", "Format": "AAC", "Duration": "10.010"},
            ],
        },
    }


@pytest.fixture
def audio_only_tracks() -> dict:
    """MediaInfo output for an MP4 that only carries audio."""
    return {
        "media": {
            "@ref": "song.mp4",
            "track": [
                {"@type": "General", "AudioCount": "1", "Format": "MPEG-4"},
                {"@type": "Audio", "Format": "AAC", "Duration": "180.000"},
            ],
        },
    }
