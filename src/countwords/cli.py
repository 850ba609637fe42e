#!/usr/bin/env python3
"""Command-line entry point for countwords."""

import argparse
import cProfile
import io
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, TextIO

from . import __version__
from .config import CountOptions
from .counter import count_words
from .errors import CountWordsError, CreateError, OpenError, ProfileError
from .models import WordCount
from .output import write_json, write_table
from .ranker import rank_words

PROG = "countwords"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Count and sort words by their number of occurrences.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Reads from file IN or, if - is given, from standard input.
Default is to write to standard output, or to file OUT if given.

Examples:
  %(prog)s book.txt                  # Most frequent words first
  %(prog)s --reverse book.txt        # Least frequent words first
  cat book.txt | %(prog)s -          # Read standard input
  %(prog)s --json book.txt out.json  # Write JSON to a file
        """,
    )

    parser.add_argument("input", nargs="?", metavar="IN", help="Input file, or - for stdin")
    parser.add_argument("output", nargs="?", metavar="OUT", type=Path, help="Output file")

    parser.add_argument("--reverse", action="store_true", help="Reverse sort order")
    parser.add_argument("--json", action="store_true", help="Output to JSON format")
    parser.add_argument(
        "--cpuprofile",
        metavar="FILE",
        type=Path,
        help="Write CPU profile of counting and sorting to FILE",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _open_input(options: CountOptions, stack: ExitStack) -> BinaryIO:
    if options.reads_stdin:
        return sys.stdin.buffer
    try:
        return stack.enter_context(open(options.input, "rb"))
    except OSError as e:
        raise OpenError() from e


def _open_output(options: CountOptions, stack: ExitStack) -> TextIO:
    # Invalid UTF-8 read from the input is written back unchanged
    if options.output is None:
        if isinstance(sys.stdout, io.TextIOWrapper):
            sys.stdout.reconfigure(errors="surrogateescape")
        return sys.stdout
    try:
        return stack.enter_context(
            open(options.output, "w", encoding="utf-8", errors="surrogateescape")
        )
    except OSError as e:
        raise CreateError() from e


def _count_and_rank(stream: BinaryIO, options: CountOptions) -> list[WordCount]:
    counts = count_words(stream)
    return rank_words(counts, reverse=options.reverse)


def _dump_profile(profiler: cProfile.Profile, path: Path) -> None:
    try:
        profiler.dump_stats(path)
    except OSError as e:
        raise ProfileError() from e


def run(options: CountOptions) -> None:
    """Count words from the configured input and write the ranking.

    Streams opened here are closed on every exit path. Standard input and
    output are left open.

    Raises:
        CountWordsError: On any failure to open, read, profile, encode or write.
    """
    with ExitStack() as stack:
        in_stream = _open_input(options, stack)
        out_stream = _open_output(options, stack)

        if options.cpu_profile is not None:
            profiler = cProfile.Profile()
            entries = profiler.runcall(_count_and_rank, in_stream, options)
            _dump_profile(profiler, options.cpu_profile)
        else:
            entries = _count_and_rank(in_stream, options)

        if options.json:
            write_json(entries, out_stream)
        else:
            write_table(entries, out_stream)


def main(argv: list[str] | None = None) -> int:
    """Run countwords and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        run(CountOptions.from_args(args))
    except CountWordsError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
