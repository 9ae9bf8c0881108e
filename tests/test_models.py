"""Tests for models and formatting helpers."""

import json

import pytest

from mediafuse import __version__
from mediafuse.models import ClassificationResult, FileInfo, MediaRecord, format_size

OUTPUT_FIELDS = [
    "file_name",
    "mime_type",
    "file_extension",
    "file_size",
    "file_size_human",
    "duration",
    "media_is_animation",
    "media_is_encrypted",
    "media_video_with_audio_only",
    "hashes",
    "exif",
    "media",
]


def make_record(**overrides) -> MediaRecord:
    file_info = FileInfo(path="/test/clip.mp4", filename="clip.mp4", size_bytes=1_500_000)
    classification = ClassificationResult(
        mime_type="video/mp4",
        file_extension="mp4",
        duration="0:00:10",
        is_audio_only_video=True,
    )
    fields = {
        "hashes": {"md5": "d41d8cd98f00b204e9800998ecf8427e"},
        "exif": {"MIMEType": "video/mp4"},
        "media": {"media": {"track": [{"@type": "General"}]}},
    }
    fields.update(overrides)
    return MediaRecord.assemble(file_info, classification, **fields)


def test_version():
    """Test that version is defined and follows semver format."""
    assert __version__
    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (500, "500 B"),
        (999, "999 B"),
        (1000, "1.0 KB"),
        (1500, "1.5 KB"),
        (1_500_000, "1.5 MB"),
        (2_000_000_000, "2.0 GB"),
        (3_260_000_000_000, "3.3 TB"),
        (5_000_000_000_000_000, "5000.0 TB"),
    ],
)
def test_format_size(size, expected):
    """Test decimal human-readable size formatting."""
    assert format_size(size) == expected


def test_file_info_size_human():
    info = FileInfo(path="a.gif", filename="a.gif", size_bytes=1500)
    assert info.size_human == "1.5 KB"


def test_classification_defaults():
    result = ClassificationResult()
    assert result.mime_type == "unknown"
    assert result.file_extension == "txt"
    assert result.duration == "Unknown"
    assert not (result.is_animation or result.is_encrypted or result.is_audio_only_video)


def test_record_assemble():
    record = make_record()
    assert record.file_name == "/test/clip.mp4"
    assert record.filename == "clip.mp4"
    assert record.file_size == 1_500_000
    assert record.file_size_human == "1.5 MB"
    assert record.mime_type == "video/mp4"
    assert record.media_video_with_audio_only is True
    assert record.classification.is_audio_only_video is True
    assert record.classification.duration == "0:00:10"


def test_record_serialized_field_order():
    data = json.loads(make_record().model_dump_json())
    assert list(data) == OUTPUT_FIELDS
    assert data["exif"] == {"MIMEType": "video/mp4"}
    assert data["media"]["media"]["track"][0]["@type"] == "General"


def test_record_is_frozen():
    record = make_record()
    with pytest.raises(Exception):
        record.mime_type = "image/png"
