"""Tests for configuration loading."""

from mediafuse import config
from mediafuse.config import (
    DEFAULT_CHUNK_SIZE,
    MediafuseConfig,
    get_config,
    load_config,
    reset_config,
)


def test_defaults():
    cfg = load_config([])
    assert cfg == MediafuseConfig()
    assert cfg.tools.exiftool == "exiftool"
    assert cfg.tools.mediainfo == "mediainfo"
    assert cfg.tools.timeout_seconds == 60
    assert cfg.hashing.algorithms == []
    assert cfg.hashing.chunk_size == DEFAULT_CHUNK_SIZE


def test_yaml_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "tools:\n"
        "  exiftool: /opt/exiftool\n"
        "  timeout_seconds: 5\n"
        "hashing:\n"
        "  algorithms: [SHA256, md5]\n"
        "  chunk_size: 4096\n"
    )
    cfg = load_config([tmp_path / "absent.yaml", path])
    assert cfg.tools.exiftool == "/opt/exiftool"
    assert cfg.tools.mediainfo == "mediainfo"
    assert cfg.tools.timeout_seconds == 5
    assert cfg.hashing.algorithms == ["sha256", "md5"]
    assert cfg.hashing.chunk_size == 4096


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("tools:\n  mediainfo: /opt/mediainfo\n")
    monkeypatch.setenv("MEDIAFUSE_MEDIAINFO", "/usr/bin/mediainfo")
    monkeypatch.setenv("MEDIAFUSE_HASH_ALGORITHMS", "md5, sha1")
    monkeypatch.setenv("MEDIAFUSE_TOOL_TIMEOUT", "12")

    cfg = load_config([path])
    assert cfg.tools.mediainfo == "/usr/bin/mediainfo"
    assert cfg.tools.timeout_seconds == 12
    assert cfg.hashing.algorithms == ["md5", "sha1"]


def test_empty_or_invalid_file(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_config([empty]) == MediafuseConfig()

    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("just a string\n")
    assert load_config([scalar]) == MediafuseConfig()


def test_broken_yaml_is_skipped(tmp_path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("tools: [unclosed\n")
    good = tmp_path / "good.yaml"
    good.write_text("tools:\n  exiftool: /opt/exiftool\n")
    assert load_config([broken, good]).tools.exiftool == "/opt/exiftool"


def test_get_config_is_cached(monkeypatch):
    first = get_config()
    assert get_config() is first
    reset_config()
    monkeypatch.setenv("MEDIAFUSE_EXIFTOOL", "/custom/exiftool")
    assert get_config().tools.exiftool == "/custom/exiftool"


def test_default_locations_are_used(tmp_path, monkeypatch):
    path = tmp_path / ".mediafuse.yaml"
    path.write_text("hashing:\n  chunk_size: 1024\n")
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [path])
    assert load_config().hashing.chunk_size == 1024
