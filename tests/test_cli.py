"""Tests for the command-line interface."""

import json

import pytest

from mediafuse import cli
from mediafuse.exceptions import DigestIOError, SerializationError, SourceUnavailableError
from mediafuse.models import ClassificationResult, FileInfo, MediaRecord


@pytest.fixture
def record():
    return MediaRecord.assemble(
        FileInfo(path="anim.gif", filename="anim.gif", size_bytes=500),
        ClassificationResult(
            mime_type="image/gif",
            file_extension="gif",
            duration="1.20 s",
            is_animation=True,
        ),
        hashes={"sha256": "ab" * 32},
        exif={"MIMEType": "image/gif", "FrameCount": 12},
        media={"media": {"track": [{"@type": "General", "Format": "GIF"}]}},
    )


@pytest.fixture
def fake_analyze(monkeypatch, record):
    calls = []

    def analyze(path, config=None, **kwargs):
        calls.append((path, kwargs))
        return record

    monkeypatch.setattr(cli, "analyze_file", analyze)
    return calls


def failing_analyze(exc):
    def analyze(path, config=None, **kwargs):
        raise exc

    return analyze


def test_missing_argument(capsys):
    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error (arguments): missing file argument" in captured.err


def test_json_output(capsys, fake_analyze):
    assert cli.main(["anim.gif"]) == 0
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["file_name"] == "anim.gif"
    assert data["mime_type"] == "image/gif"
    assert data["file_size_human"] == "500 B"
    assert data["media_is_animation"] is True
    assert data["exif"]["FrameCount"] == 12
    # Compact by default
    assert out.count("\n") == 1
    assert fake_analyze[0] == ("anim.gif", {"algorithms": None})


def test_indent(capsys, fake_analyze):
    assert cli.main(["--indent", "2", "anim.gif"]) == 0
    out = capsys.readouterr().out
    assert '\n  "file_name": "anim.gif"' in out


def test_hash_selection(capsys, fake_analyze):
    assert cli.main(["--hash", "md5", "--hash", "sha256", "anim.gif"]) == 0
    assert fake_analyze[0][1] == {"algorithms": ["md5", "sha256"]}


def test_invalid_hash_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--hash", "crc32", "anim.gif"])
    assert excinfo.value.code == 2


def test_quiet(capsys, fake_analyze):
    assert cli.main(["-q", "anim.gif"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("anim.gif | image/gif | 500 B | 1.20 s | animated | ")


def test_text(capsys, fake_analyze):
    assert cli.main(["--text", "anim.gif"]) == 0
    out = capsys.readouterr().out
    assert "## CLASSIFICATION" in out
    assert "Animation:    yes" in out


def test_output_file(tmp_path, capsys, fake_analyze):
    target = tmp_path / "record.json"
    assert cli.main(["-q", "-o", str(target), "anim.gif"]) == 0
    assert json.loads(target.read_text())["file_extension"] == "gif"


@pytest.mark.parametrize(
    "exc, stage",
    [
        (SourceUnavailableError("mediainfo", "exit status 1"), "metadata"),
        (DigestIOError("anim.gif", "Input/output error"), "digest"),
        (SerializationError("failed to encode record"), "output"),
    ],
)
def test_fatal_errors(monkeypatch, capsys, exc, stage):
    monkeypatch.setattr(cli, "analyze_file", failing_analyze(exc))
    assert cli.main(["anim.gif"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(f"Error ({stage}): ")


def test_missing_file_end_to_end(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.gif")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error (file): cannot access" in captured.err


def test_status(capsys):
    assert cli.main(["--status"]) == 0
    out = capsys.readouterr().out
    assert "mediafuse source status:" in out
    assert "libmagic" in out
    assert "blake2b-512" in out


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert "mediafuse" in capsys.readouterr().out


def test_output_write_failure_prints_nothing(tmp_path, capsys, fake_analyze):
    target = tmp_path / "missing-dir" / "record.json"
    assert cli.main(["-o", str(target), "anim.gif"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error (output): cannot write")
