"""ExifTool tag-metadata source."""

from typing import Any, ClassVar

from mediafuse.extractors.base import BaseSource


class ExifToolSource(BaseSource):
    """Read embedded tags (EXIF, XMP, QuickTime, ...) using ExifTool.

    ExifTool prints a JSON array with one object per input file; the object
    for our single file is the tag document. Values keep ExifTool's default
    print conversion, so most fields are human-readable strings while counts
    such as FrameCount stay numeric.

    Install: brew install exiftool (macOS) or apt install libimage-exiftool-perl (Linux)
    """

    name: ClassVar[str] = "exiftool"
    tool_attr: ClassVar[str] = "exiftool"

    def command(self, path: str) -> list[str]:
        return [self.executable, "-json", path]

    def parse(self, output: str) -> dict[str, Any]:
        data = self.decode(output)
        if isinstance(data, list):
            if not data:
                raise self.error("no metadata found")
            data = data[0]  # ExifTool returns a list
        if not isinstance(data, dict):
            raise self.error(f"unexpected output type {type(data).__name__}")
        return data
