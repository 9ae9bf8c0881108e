"""Configuration management for mediafuse.

Supports loading configuration from:
1. Environment variables (MEDIAFUSE_*)
2. Config file (~/.mediafuse/config.yaml)
3. Default values

Example config file (~/.mediafuse/config.yaml):
    tools:
      exiftool: "/usr/local/bin/exiftool"
      mediainfo: "mediainfo"
      timeout_seconds: 60
    hashing:
      algorithms: ["md5", "sha256", "blake2b-512"]
      chunk_size: 1048576
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".mediafuse" / "config.yaml",
    Path.home() / ".config" / "mediafuse" / "config.yaml",
    Path(".mediafuse.yaml"),
]

DEFAULT_CHUNK_SIZE = 1024 * 1024


@dataclass
class ToolsConfig:
    """External tool configuration."""

    exiftool: str = "exiftool"
    mediainfo: str = "mediainfo"
    timeout_seconds: int = 60


@dataclass
class HashingConfig:
    """Digest engine configuration.

    An empty algorithm list means every supported algorithm.
    """

    algorithms: list[str] = field(default_factory=list)
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass
class MediafuseConfig:
    """Main configuration for mediafuse."""

    tools: ToolsConfig = field(default_factory=ToolsConfig)
    hashing: HashingConfig = field(default_factory=HashingConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    try:
        import yaml
    except ImportError:
        return {}

    for config_path in locations if locations is not None else CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", config_path, e)
                continue
            logger.debug("Loaded config from %s", config_path)
            return data if isinstance(data, dict) else {}
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MEDIAFUSE_ prefix."""
    return os.environ.get(f"MEDIAFUSE_{key}", default)


def _parse_list(value: str | list[str] | None) -> list[str]:
    """Parse a comma separated string (or list) into stripped, non-empty names."""
    if not value:
        return []
    items = value.split(",") if isinstance(value, str) else value
    return [str(item).strip().lower() for item in items if str(item).strip()]


def load_config(locations: list[Path] | None = None) -> MediafuseConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MEDIAFUSE_*)
    2. Config file (~/.mediafuse/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config(locations)

    tools_config = file_config.get("tools") or {}
    tools = ToolsConfig(
        exiftool=_get_env("EXIFTOOL") or tools_config.get("exiftool", "exiftool"),
        mediainfo=_get_env("MEDIAINFO") or tools_config.get("mediainfo", "mediainfo"),
        timeout_seconds=int(
            _get_env("TOOL_TIMEOUT") or tools_config.get("timeout_seconds", 60)
        ),
    )

    hashing_config = file_config.get("hashing") or {}
    hashing = HashingConfig(
        algorithms=_parse_list(
            _get_env("HASH_ALGORITHMS") or hashing_config.get("algorithms")
        ),
        chunk_size=int(
            _get_env("HASH_CHUNK_SIZE") or hashing_config.get("chunk_size", DEFAULT_CHUNK_SIZE)
        ),
    )

    return MediafuseConfig(tools=tools, hashing=hashing)


# Global config instance (lazy loaded)
_config: MediafuseConfig | None = None


def get_config() -> MediafuseConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
