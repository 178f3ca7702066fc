"""
contl – command-line interface
==============================

Reads possibly continued lines and turns each continued line into a single
one that does not break.

Usage
-----
::

    python -m contl.cli [INPUT] [OPTIONS]

Options
-------
--delimiter, -d   Text placed between joined segments (default: one space).
--output, -o      Output file path (default: stdout).
--verbose, -v     Enable DEBUG logging.

Examples
--------
::

    contl < headers.txt
    contl message.eml -d '\\t' -o unfolded.txt

Exit status is 0 once the input is exhausted and 1 on any other error.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from .errors import ConfigurationError, EndOfStream, ValidationError
from .models import ReaderConfig
from .reader.continued_line import ContinuedLineReader

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="contl",
        description=(
            "Read possibly continued lines and turn each continued line "
            "into a single one that does not break."
        ),
    )
    p.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file (default: stdin)",
    )
    p.add_argument(
        "--delimiter", "-d",
        default=" ",
        metavar="TEXT",
        help="Text joining continued segments; escapes like \\t are expanded (default: one space)",
    )
    p.add_argument(
        "--output", "-o",
        default="-",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def unfold(reader: ContinuedLineReader, out: BinaryIO) -> int:
    """Write every logical line from *reader* to *out*; return the count."""
    count = 0
    while True:
        try:
            line = reader.read_continued_line_bytes()
        except EndOfStream:
            return count
        out.write(line)
        out.write(b"\n")
        count += 1


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ReaderConfig.from_text(args.delimiter)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        src = sys.stdin.buffer if args.input == "-" else Path(args.input).open("rb")
        try:
            dst = sys.stdout.buffer if args.output == "-" else Path(args.output).open("wb")
            try:
                count = unfold(ContinuedLineReader(src, config), dst)
                dst.flush()
            finally:
                if dst is not sys.stdout.buffer:
                    dst.close()
        finally:
            if src is not sys.stdin.buffer:
                src.close()
    except (OSError, ValidationError) as exc:
        print(f"fatal: {exc}", file=sys.stderr)
        return 1

    logger.debug("Wrote %d logical lines", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
