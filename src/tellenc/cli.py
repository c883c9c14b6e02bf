"""Command-line interface for tellenc."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import tellenc
from tellenc._utils import DEFAULT_MAX_BYTES, UNKNOWN
from tellenc.report import format_report


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        msg = f"invalid positive integer: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def main(argv: list[str] | None = None) -> None:
    """Run the ``tellenc`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        prog="tellenc", description="Guess the character encoding of a file."
    )
    parser.add_argument("filename", help="File to examine")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print byte and double-byte statistics before the encoding",
    )
    parser.add_argument(
        "--max-bytes",
        type=_positive_int,
        default=DEFAULT_MAX_BYTES,
        help=f"Number of bytes to read from the file (default {DEFAULT_MAX_BYTES})",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log detection steps to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"tellenc {tellenc.__version__}"
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        with Path(args.filename).open("rb") as f:
            data = f.read(args.max_bytes)
    except OSError as e:
        print(
            f"tellenc: cannot open file {args.filename!r}: {e.strerror or e}",
            file=sys.stderr,
        )
        sys.exit(1)

    result = tellenc.analyze(data, max_bytes=args.max_bytes)
    if args.verbose and result.statistics is not None:
        print(format_report(result.statistics))
    print(result.encoding or UNKNOWN)


if __name__ == "__main__":
    main()
