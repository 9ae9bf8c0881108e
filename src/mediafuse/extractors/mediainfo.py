"""MediaInfo track-metadata source."""

from typing import Any, ClassVar

from mediafuse.extractors.base import BaseSource


class MediaInfoSource(BaseSource):
    """Read the container's track list using MediaInfo.

    The document has the shape ``{"media": {"track": [...]}}`` where each
    track carries an ``@type`` of General, Video, Audio, Image, Text, ...
    and MediaInfo's string-valued fields (Format, Duration, FrameCount,
    VideoCount, Encryption).

    Install: brew install media-info (macOS) or apt install mediainfo (Linux)
    """

    name: ClassVar[str] = "mediainfo"
    tool_attr: ClassVar[str] = "mediainfo"

    def command(self, path: str) -> list[str]:
        return [self.executable, "--Output=JSON", path]

    def parse(self, output: str) -> dict[str, Any]:
        data = self.decode(output)
        if not isinstance(data, dict):
            raise self.error(f"unexpected output type {type(data).__name__}")
        return data
