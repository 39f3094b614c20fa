# src/pycodon_frames/cli.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Command-Line Interface for the reading-frame codon counter.

Counts the codons of a DNA sequence in one reading frame and prints those
whose number of occurrences falls inside a given range.
"""

import argparse
import sys
import logging
from typing import Any
try:
    from rich.console import Console # type: ignore
    from rich.logging import RichHandler # type: ignore
    RICH_AVAILABLE = True
except ImportError:
    RICH_AVAILABLE = False
    Console = Any
    RichHandler = logging.StreamHandler
    logging.warning("WARNING: 'rich' library not found. Logging will be basic. Install with 'pip install rich'")

from . import analysis
from . import reporting
from . import utils
from .utils import CodonFrame, check_codon_frame


# --- Configure logging ---
# Get a logger specific to this application
logger = logging.getLogger("pycodon_frames")


def _read_sequence_argument(sequence_arg: str) -> str:
    """Returns the sequence given on the command line, or read from stdin for '-'."""
    if sequence_arg != "-":
        return sequence_arg
    logger.debug("Reading sequence from standard input...")
    # Raw text only: drop line breaks and other whitespace
    return "".join(sys.stdin.read().split())


def handle_count_command(args: argparse.Namespace) -> None:
    """Handles the 'count' subcommand."""
    sequence = _read_sequence_argument(args.sequence)
    if not sequence:
        logger.error("No sequence provided (empty input). Exiting.")
        sys.exit(1)

    frame = CodonFrame(sequence,
                       reading_frame=args.frame,
                       min_count=args.min_count,
                       max_count=args.max_count)
    logger.debug(f"Query: {frame!r}")
    check_codon_frame(frame)

    entries = analysis.count_codons_in_frame(frame, sort=args.sort)

    if args.format == "tsv":
        sys.stdout.write(reporting.format_codon_table(entries))
    else:
        print(reporting.format_codon_report(frame, entries))
    logger.info(f"Reported {len(entries)} codon(s) in reading frame {frame.reading_frame}.")


def main() -> None:
    """Main CLI entry point with subcommands."""
    # --- Main Parser ---
    parser = argparse.ArgumentParser(
        description="PyCodon Frames: codon occurrence counts in a chosen reading frame.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Increase output verbosity (set logging to DEBUG)."
    )
    try:
        from . import __version__ as pkg_version
    except ImportError: # pragma: no cover
        pkg_version = "unknown"
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {pkg_version}')

    subparsers = parser.add_subparsers(dest="command",
                                       required=True,
                                       title="Available subcommands",
                                       help="Run 'pycodon_frames <subcommand> --help' for more information.")

    # --- Sub-parser for 'count' command ---
    count_parser = subparsers.add_parser(
        "count",
        help="Count codons in one reading frame and report those within an occurrence range.",
        description="Tallies the codons starting at FRAME, FRAME+3, ... and lists those "
                    "occurring between --min and --max times (inclusive).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    count_parser.add_argument("-s",
                              "--sequence",
                              required=True,
                              type=str,
                              help="DNA sequence as raw text, or '-' to read it from standard input.")
    count_parser.add_argument("-f",
                              "--frame",
                              type=int,
                              default=0,
                              help="Reading frame offset (0, 1 or 2).")
    count_parser.add_argument("--min",
                              dest="min_count",
                              type=int,
                              default=utils.DEFAULT_MIN_COUNT,
                              help="Minimum number of occurrences to report.")
    count_parser.add_argument("--max",
                              dest="max_count",
                              type=int,
                              default=utils.DEFAULT_MAX_COUNT,
                              help="Maximum number of occurrences to report.")
    count_parser.add_argument("--sort",
                              action="store_true",
                              help="Sort reported codons alphabetically.")
    count_parser.add_argument("--format",
                              choices=["text", "tsv"],
                              default="text",
                              type=str.lower,
                              help="Output format for the report.")
    count_parser.set_defaults(func=handle_count_command)

    # --- Parse Arguments ---
    args = parser.parse_args()

    # --- Configure Logging ---
    # The report goes to stdout, so log messages go to stderr
    log_level = logging.DEBUG if args.verbose else logging.INFO
    if RICH_AVAILABLE: # pragma: no cover
        handler_to_use: logging.Handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True, show_path=False, markup=True, show_level=True, log_time_format="[%X]"
        )
        formatter = logging.Formatter("%(message)s", datefmt="[%X]")
        handler_to_use.setFormatter(formatter)
    else: # pragma: no cover
        handler_to_use = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
        handler_to_use.setFormatter(formatter)

    app_logger = logging.getLogger("pycodon_frames")
    if app_logger.hasHandlers(): # pragma: no cover
        app_logger.handlers.clear()
    app_logger.addHandler(handler_to_use)
    app_logger.setLevel(log_level)

    logger.debug(f"PyCodon Frames - Command: {args.command}")
    if args.verbose:
        logger.debug(f"Full arguments: {args}")

    # --- Execute the function associated with the subcommand ---
    if hasattr(args, 'func'):
        args.func(args)
    else: # pragma: no cover
        parser.print_help()

if __name__ == '__main__': # pragma: no cover
    main()
