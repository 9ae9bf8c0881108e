"""File information models."""

from pydantic import BaseModel

SIZE_UNITS = ["KB", "MB", "GB", "TB"]


def format_size(size_bytes: int) -> str:
    """Convert bytes to a human-readable string using decimal (1000) steps.

    Sizes below 1000 bytes are shown as whole bytes ("500 B"); larger sizes
    keep one decimal ("1.5 KB"). Anything past terabytes stays in TB.
    """
    if size_bytes < 1000:
        return f"{size_bytes} B"
    divisor = 1000
    exponent = 0
    remaining = size_bytes // 1000
    while remaining >= 1000 and exponent < len(SIZE_UNITS) - 1:
        divisor *= 1000
        exponent += 1
        remaining //= 1000
    return f"{size_bytes / divisor:.1f} {SIZE_UNITS[exponent]}"


class FileInfo(BaseModel):
    """Basic file information."""

    path: str
    filename: str
    size_bytes: int

    @property
    def size_human(self) -> str:
        """Return human-readable file size."""
        return format_size(self.size_bytes)
