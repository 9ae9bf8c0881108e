"""Multi-digest file hashing.

The file is read once, sequentially, and every chunk is fed to all
configured hash accumulators before the next chunk is read. Digests are
finalized only after EOF, so a read error never yields a partial result.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from mediafuse.config import DEFAULT_CHUNK_SIZE
from mediafuse.exceptions import DigestIOError

logger = logging.getLogger(__name__)

# Canonical algorithm set, in output order
DIGEST_ALGORITHMS: dict[str, Callable[[], Any]] = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
    "sha3-256": hashlib.sha3_256,
    "sha3-512": hashlib.sha3_512,
    "blake2b-256": lambda: hashlib.blake2b(digest_size=32),
    "blake2b-512": lambda: hashlib.blake2b(digest_size=64),
}


def resolve_algorithms(algorithms: Iterable[str] | None = None) -> list[str]:
    """Validate and normalize a selection of algorithm names.

    Args:
        algorithms: Algorithm names, or None/empty for the full set

    Returns:
        Unique lower-case names in canonical order

    Raises:
        ValueError: If a name is not a supported algorithm
    """
    if not algorithms:
        return list(DIGEST_ALGORITHMS)

    requested = {name.strip().lower() for name in algorithms}
    unknown = sorted(requested - DIGEST_ALGORITHMS.keys())
    if unknown:
        supported = ", ".join(DIGEST_ALGORITHMS)
        raise ValueError(
            f"Unsupported digest algorithm(s): {', '.join(unknown)} (supported: {supported})"
        )
    return [name for name in DIGEST_ALGORITHMS if name in requested]


def _new_accumulators(algorithms: Iterable[str] | None) -> dict[str, Any]:
    return {name: DIGEST_ALGORITHMS[name]() for name in resolve_algorithms(algorithms)}


def compute_digests(
    path: str | Path,
    algorithms: Iterable[str] | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    stop: threading.Event | None = None,
) -> dict[str, str]:
    """Hash a file with several algorithms in a single read pass.

    Args:
        path: File to hash
        algorithms: Subset of DIGEST_ALGORITHMS names (default: all)
        chunk_size: Read buffer size in bytes
        stop: Event checked before each chunk is hashed; once set the scan
            is abandoned

    Returns:
        Mapping of algorithm name to lowercase hex digest

    Raises:
        ValueError: If an algorithm is unknown or chunk_size is not positive
        DigestIOError: If the file cannot be opened or read, or the scan
            was stopped
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    accumulators = _new_accumulators(algorithms)
    total = 0
    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(chunk_size), b""):
                if stop is not None and stop.is_set():
                    raise DigestIOError(str(path), "cancelled")
                for accumulator in accumulators.values():
                    accumulator.update(chunk)
                total += len(chunk)
    except OSError as e:
        raise DigestIOError(str(path), e.strerror or str(e)) from e

    logger.debug("Hashed %d bytes of %s with %d algorithms", total, path, len(accumulators))
    return {name: accumulator.hexdigest() for name, accumulator in accumulators.items()}


def digest_bytes(data: bytes, algorithms: Iterable[str] | None = None) -> dict[str, str]:
    """Hash an in-memory payload with several algorithms."""
    accumulators = _new_accumulators(algorithms)
    for accumulator in accumulators.values():
        accumulator.update(data)
    return {name: accumulator.hexdigest() for name, accumulator in accumulators.items()}
