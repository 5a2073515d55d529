"""
fix-latin: read mixed UTF-8 / legacy 8-bit bytes, write clean UTF-8.

Usage:
    fix-latin < mixed.txt > clean.txt
    fix-latin --assume iso-8859-15 in.txt -o out.txt
    fix-latin --no-control < mixed.txt    # fail on C1 control bytes

By default C1 control bytes are allowed and stray bytes are read as CP1252.
The whole input is read before anything is written; on error nothing is
written and the exit status is 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .errors import FixLatinError
from .fixer import fix_latin
from .models import AssumedEncoding, make_options

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fix-latin",
        description="Convert mixed UTF-8 / Latin-1 / CP1252 input into well-formed UTF-8.",
    )
    parser.add_argument("input", nargs="?", default=None,
                        help="input file (default: stdin)")
    parser.add_argument("-o", "--output", default=None,
                        help="output file (default: stdout)")
    parser.add_argument("--assume", default=AssumedEncoding.CP1252.value,
                        choices=[e.value for e in AssumedEncoding],
                        help="legacy encoding of stray bytes (default: %(default)s)")
    parser.add_argument("--no-control", dest="allow_control", action="store_false",
                        help="fail on C1 control bytes (0x80-0x9F) instead of passing them through")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log a summary to stderr")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, stream=sys.stderr, format="%(name)s: %(levelname)s: %(message)s")


def _read_input(path: Optional[str]) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as fh:
        return fh.read()


def _write_output(path: Optional[str], data: bytes) -> None:
    if path is None or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as fh:
        fh.write(data)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    try:
        options = make_options(allow_control=args.allow_control, assume=args.assume)
        raw = _read_input(args.input)
        fixed, report = fix_latin(raw, options)
    except FixLatinError as exc:
        _LOGGER.error("%s", exc)
        return 1
    except OSError as exc:
        _LOGGER.error("cannot read %s: %s", args.input, exc)
        return 1

    try:
        _write_output(args.output, fixed)
    except OSError as exc:
        _LOGGER.error("cannot write %s: %s", args.output, exc)
        return 1

    _LOGGER.info(
        "%d bytes in, %d bytes out: %d legacy bytes converted (%d via %s table)",
        report["input_bytes"], report["output_bytes"],
        report["legacy_bytes"], report["exceptions_mapped"], options.assume.value,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
