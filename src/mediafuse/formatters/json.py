"""JSON output formatter."""

from typing import Any

from mediafuse.exceptions import SerializationError
from mediafuse.models import MediaRecord


def format_json(record: MediaRecord, indent: int | None = None) -> str:
    """Format a record as a JSON string.

    Args:
        record: MediaRecord object
        indent: JSON indentation level (None for compact output)

    Returns:
        JSON formatted string

    Raises:
        SerializationError: If the record cannot be encoded
    """
    try:
        return record.model_dump_json(indent=indent)
    except ValueError as e:
        # PydanticSerializationError is a ValueError
        raise SerializationError(f"failed to encode record: {e}") from e


def to_dict(record: MediaRecord) -> dict[str, Any]:
    """Convert a record to a JSON-compatible dictionary.

    Args:
        record: MediaRecord object

    Returns:
        Dictionary representation
    """
    try:
        return record.model_dump(mode="json")
    except ValueError as e:
        raise SerializationError(f"failed to encode record: {e}") from e
