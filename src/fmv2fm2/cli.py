"""
Command-line interface for fmv2fm2.

Usage:
  fmv2fm2 game.nes movie.fmv                 # Writes movie.fm2
  fmv2fm2 game.nes *.fmv -d out/             # Batch into a directory
  fmv2fm2 game.nes movie.fmv -o run.fm2      # Explicit output path
  fmv2fm2 --info game.nes movie.fmv          # Show movie details only
  fmv2fm2 --info --json game.nes movie.fmv   # Movie details as JSON
"""

from __future__ import annotations

import argparse
import logging
import sys

from fmv2fm2._version import __version__
from fmv2fm2.config import get_config
from fmv2fm2.convert import convert_file, load_recording, output_path_for
from fmv2fm2.errors import ConversionError
from fmv2fm2.formatters import format_default, format_json_list, format_quiet

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fmv2fm2 CLI."""
    parser = argparse.ArgumentParser(
        prog="fmv2fm2",
        description="Convert Famtasia FMV movies to FCEUX FM2 movies.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The ROM is needed for the FM2 romFilename and romChecksum fields.
Each FMV is written next to itself with an .fm2 extension unless
-o or -d is given.

Examples:
  fmv2fm2 game.nes movie.fmv                 # Writes movie.fm2
  fmv2fm2 game.nes *.fmv -d out/             # Batch into a directory
  fmv2fm2 --info game.nes movie.fmv          # Show movie details only
        """,
    )
    parser.add_argument("rom", help="ROM image the movie(s) were recorded on")
    parser.add_argument("files", nargs="+", help="FMV movie file(s) to convert")
    parser.add_argument("-o", "--output", help="Output FM2 path (single input only)")
    parser.add_argument("-d", "--output-dir", help="Directory for converted files")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "--comments",
        action="store_true",
        default=None,
        help="Write FMV emulator identifier and title as FM2 comment lines",
    )
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of replacing existing FM2 files",
    )

    # Mode selection
    parser.add_argument(
        "--info",
        action="store_true",
        help="Show movie details without writing any file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print movie details as JSON (with --info)",
    )

    # Verbosity (mutually exclusive)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if args.verbose else get_config().logging.level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def show_info(args: argparse.Namespace) -> int:
    """Decode movies and print their details.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    recordings = []
    errors = 0

    for file_path in args.files:
        try:
            recording = load_recording(file_path, args.rom)
        except (OSError, ConversionError) as e:
            print(f"Error reading {file_path}: {e}", file=sys.stderr)
            errors += 1
            continue

        recordings.append(recording)
        if not args.json:
            print(f"Movie: {file_path}")
            print(format_default(recording))
            print()

    if args.json and recordings:
        print(format_json_list(recordings))

    return 1 if errors > 0 else 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for fmv2fm2 CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output and len(args.files) != 1:
        parser.error("-o/--output requires exactly one input file")
    if args.output and args.output_dir:
        parser.error("-o/--output and -d/--output-dir are mutually exclusive")
    if args.json and not args.info:
        parser.error("--json requires --info")

    _configure_logging(args)

    if args.info:
        return show_info(args)

    overwrite = False if args.no_overwrite else None
    errors = 0
    logger.debug("Converting %d file(s) recorded on %s", len(args.files), args.rom)

    for file_path in args.files:
        output_path = args.output
        if output_path is None and args.output_dir:
            output_path = output_path_for(file_path, args.output_dir)

        try:
            result = convert_file(
                file_path,
                args.rom,
                output_path,
                include_comments=args.comments,
                overwrite=overwrite,
            )
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            errors += 1
            continue
        except (OSError, ConversionError) as e:
            print(f"Error converting {file_path}: {e}", file=sys.stderr)
            errors += 1
            continue

        if not args.quiet:
            print(f"Converted: {file_path} -> {result.output}")
            print(f"  {format_quiet(result.recording)}")

    return 1 if errors > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
