"""Content-based MIME type sniffing with libmagic."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import Any, ClassVar

logger = logging.getLogger(__name__)


class MagicSniffer:
    """Best-effort MIME type detection using python-magic.

    The libmagic handle is opened once per run and released when the
    sniffer is closed; use it as a context manager:

        with MagicSniffer() as sniffer:
            mime = sniffer.sniff("clip.mp4")

    Sniffing never raises. Any classifier failure yields an empty string so
    the caller can fall back to "unknown".
    """

    name: ClassVar[str] = "libmagic"

    def __init__(self) -> None:
        self._magic: Any = None

    @classmethod
    def is_available(cls) -> bool:
        """Check if python-magic and libmagic can be loaded."""
        try:
            import magic  # noqa: F401
        except ImportError:
            return False
        return True

    @property
    def is_open(self) -> bool:
        return self._magic is not None

    def open(self) -> MagicSniffer:
        """Acquire the libmagic handle.

        A missing binding or an unloadable magic database leaves the sniffer
        closed, so sniff() reports "" instead of failing the run.
        """
        if self._magic is None:
            try:
                import magic

                self._magic = magic.Magic(mime=True)
            except Exception as e:
                # ImportError without libmagic, MagicException without a database
                logger.warning("libmagic unavailable, MIME sniffing disabled: %s", e)
                self._magic = None
        return self

    def close(self) -> None:
        """Release the libmagic handle."""
        self._magic = None

    def sniff(self, path: str | Path) -> str:
        """Return the MIME type of path, or "" if it cannot be determined."""
        if self._magic is None:
            return ""
        try:
            mime_type = self._magic.from_file(str(path))
        except Exception as e:
            # python-magic raises MagicException, OSError or decode errors
            logger.warning("MIME sniffing failed for %s: %s", path, e)
            return ""
        return mime_type or ""

    def __enter__(self) -> MagicSniffer:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
