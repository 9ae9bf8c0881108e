"""Core analysis functions."""

from __future__ import annotations

import logging
import os
import stat
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from contextlib import ExitStack
from pathlib import Path
from typing import Any

from mediafuse.classify import classify
from mediafuse.config import MediafuseConfig, get_config
from mediafuse.exceptions import FileAccessError
from mediafuse.extractors import BaseSource, ExifToolSource, MagicSniffer, MediaInfoSource
from mediafuse.hashing import compute_digests, resolve_algorithms
from mediafuse.models import FileInfo, MediaRecord

logger = logging.getLogger(__name__)


def get_file_info(path: str | Path) -> FileInfo:
    """Get basic file information.

    Args:
        path: Path to the file

    Returns:
        FileInfo object with file details

    Raises:
        FileAccessError: If the file cannot be stat'ed or is not a regular file
    """
    path = str(path)
    try:
        st = os.stat(path)
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e
    if not stat.S_ISREG(st.st_mode):
        raise FileAccessError(path, "not a regular file")

    return FileInfo(
        path=path,
        filename=os.path.basename(path),
        size_bytes=st.st_size,
    )


def analyze_file(
    path: str | Path,
    config: MediafuseConfig | None = None,
    *,
    algorithms: Iterable[str] | None = None,
    sniffer: MagicSniffer | None = None,
    tag_source: BaseSource | None = None,
    track_source: BaseSource | None = None,
) -> MediaRecord:
    """Analyze a media file and build its fused record.

    This is the main entry point. It:
    1. Stats the file
    2. Runs ExifTool, MediaInfo and the digest scan concurrently
    3. Classifies the file from both documents (sniffing only if needed)
    4. Returns a MediaRecord

    The first collaborator to fail aborts the run at once: the digest scan
    is told to stop and the driver does not wait for tool processes still
    running. No partial record is ever built.

    Args:
        path: Path to the media file
        config: Configuration (default: global config)
        algorithms: Digest algorithms (default: config, then all)
        sniffer: Open MIME sniffer to use; one is opened for this run if omitted
        tag_source: Tag-metadata source (default: ExifToolSource)
        track_source: Track-metadata source (default: MediaInfoSource)

    Returns:
        MediaRecord with all extracted information

    Raises:
        FileAccessError: If the file cannot be stat'ed
        SourceUnavailableError: If ExifTool or MediaInfo fails
        DigestIOError: If the file cannot be read for hashing
        ValueError: If an unknown digest algorithm is requested
    """
    config = config or get_config()
    path = str(path)
    digest_algorithms = resolve_algorithms(algorithms or config.hashing.algorithms)

    file_info = get_file_info(path)
    tag_source = tag_source or ExifToolSource(config.tools)
    track_source = track_source or MediaInfoSource(config.tools)

    stop = threading.Event()
    with ExitStack() as stack:
        if sniffer is None:
            sniffer = stack.enter_context(MagicSniffer())

        results = _run_collaborators(
            {
                "exif": lambda: tag_source.fetch(path),
                "media": lambda: track_source.fetch(path),
                "hashes": lambda: compute_digests(
                    path, digest_algorithms, config.hashing.chunk_size, stop
                ),
            },
            stop,
        )

        classification = classify(
            results["exif"],
            results["media"],
            lambda: sniffer.sniff(path),
        )

    return MediaRecord.assemble(
        file_info,
        classification,
        hashes=results["hashes"],
        exif=results["exif"],
        media=results["media"],
    )


def _run_collaborators(tasks: dict[str, Any], stop: threading.Event) -> dict[str, Any]:
    """Run independent tasks concurrently and collect their results.

    The first task to fail, in completion order, is re-raised at once after
    setting stop. Tasks still running are not waited for.
    """
    results: dict[str, Any] = {}
    executor = ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix="mediafuse")
    futures = {executor.submit(task): name for name, task in tasks.items()}
    try:
        for future in as_completed(futures):
            results[futures[future]] = future.result()
            logger.debug("%s finished", futures[future])
    except BaseException:
        stop.set()
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown()
    return results
