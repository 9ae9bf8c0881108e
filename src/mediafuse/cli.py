"""
Command-line interface for mediafuse.

Usage:
  mediafuse clip.mp4                  # Compact JSON record on stdout
  mediafuse --indent 2 clip.mp4       # Pretty-printed JSON
  mediafuse --text clip.mp4           # Human-readable report
  mediafuse -q clip.mp4               # One-line summary
  mediafuse -o record.json clip.mp4   # Save JSON record to file
  mediafuse --hash sha256 clip.mp4    # Restrict digests
"""

from __future__ import annotations

import argparse
import logging
import sys

from mediafuse._version import __version__
from mediafuse.analyze import analyze_file
from mediafuse.config import get_config
from mediafuse.exceptions import MediafuseError, MissingArgumentError
from mediafuse.extractors import print_source_status
from mediafuse.formatters import format_default, format_json, format_quiet
from mediafuse.hashing import DIGEST_ALGORITHMS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mediafuse",
        description=(
            "Fuse ExifTool, MediaInfo and libmagic metadata into one record with file digests."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output:
  (default)    Compact JSON record
  --indent N   Pretty-printed JSON record
  --text       Human-readable report
  -q/--quiet   One-line summary

Digests (default: all):
  """
        + ", ".join(DIGEST_ALGORITHMS)
        + """

Examples:
  mediafuse clip.mp4
  mediafuse --indent 2 -o record.json clip.mp4
  mediafuse --hash md5 --hash sha256 photo.gif
        """,
    )
    parser.add_argument("file", nargs="?", help="Media file to analyze")
    parser.add_argument("-o", "--output", help="Save JSON record to file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Indent JSON output by N spaces",
    )
    parser.add_argument(
        "--hash",
        dest="algorithms",
        action="append",
        choices=list(DIGEST_ALGORITHMS),
        metavar="ALG",
        help="Digest algorithm to compute (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-q", "--quiet", action="store_true", help="One-line summary only")
    mode_group.add_argument("--text", action="store_true", help="Human-readable report")
    mode_group.add_argument(
        "--status",
        action="store_true",
        help="Show metadata source availability status",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout only carries the record."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for mediafuse CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = get_config()
    except (ValueError, TypeError) as e:
        print(f"Error (config): {e}", file=sys.stderr)
        return 1

    if args.status:
        print_source_status(config.tools)
        print(f"\nDigests: {', '.join(DIGEST_ALGORITHMS)}")
        return 0

    try:
        if not args.file:
            raise MissingArgumentError("missing file argument (usage: mediafuse FILE)")

        record = analyze_file(args.file, config, algorithms=args.algorithms)
        json_output = format_json(record, indent=args.indent)
    except MediafuseError as e:
        print(f"Error ({e.stage}): {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # A failed write leaves stdout empty
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(json_output)
        except OSError as e:
            print(f"Error (output): cannot write {args.output}: {e}", file=sys.stderr)
            return 1
        logger.info("Record saved to %s", args.output)

    if args.quiet:
        print(format_quiet(record))
    elif args.text:
        print(format_default(record))
    else:
        print(json_output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
