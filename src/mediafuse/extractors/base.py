"""Base metadata source class."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from mediafuse.config import ToolsConfig
from mediafuse.exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)


class BaseSource(ABC):
    """Abstract base class for metadata sources.

    A source runs one external tool against a file and returns its parsed
    JSON document. Sources never interpret the document; any failure to
    produce one is raised as SourceUnavailableError and aborts the run.

    Attributes:
        name: Human-readable name of the source
        tool_attr: ToolsConfig attribute holding the tool's executable
    """

    name: ClassVar[str] = "base"
    tool_attr: ClassVar[str] = ""

    def __init__(self, tools: ToolsConfig | None = None) -> None:
        self.tools = tools or ToolsConfig()

    @property
    def executable(self) -> str:
        """Return the configured executable for this source."""
        return getattr(self.tools, self.tool_attr)

    @classmethod
    def is_available(cls, tools: ToolsConfig | None = None) -> bool:
        """Check if the source's tool is on PATH."""
        executable = getattr(tools or ToolsConfig(), cls.tool_attr)
        return shutil.which(executable) is not None

    @abstractmethod
    def command(self, path: str) -> list[str]:
        """Return the command line that dumps metadata for path as JSON."""
        pass

    @abstractmethod
    def parse(self, output: str) -> dict[str, Any]:
        """Turn the tool's JSON output into the source document.

        Raises:
            SourceUnavailableError: If the output is not a usable document
        """
        pass

    def fetch(self, path: str) -> dict[str, Any]:
        """Run the tool against path and return the parsed document.

        Raises:
            SourceUnavailableError: If the tool is missing, times out, exits
                with an error, or prints unparseable output
        """
        cmd = self.command(path)
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.tools.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise self.error(f"{self.executable} not found") from e
        except subprocess.TimeoutExpired as e:
            raise self.error(f"timed out after {self.tools.timeout_seconds}s") from e
        except OSError as e:
            raise self.error(str(e)) from e

        if result.returncode != 0:
            detail = (result.stderr or "").strip() or f"exit status {result.returncode}"
            raise self.error(detail)
        return self.parse(result.stdout)

    def decode(self, output: str) -> Any:
        """Decode JSON output, raising SourceUnavailableError on failure."""
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise self.error(f"failed to parse output: {e}") from e

    def error(self, reason: str) -> SourceUnavailableError:
        return SourceUnavailableError(self.name, reason)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, executable={self.executable!r})"
