from __future__ import annotations

import argparse
import io
import logging
import os
import sys

from . import __version__
from .api import tail_files
from .config import DEFAULT_LINES, TailConfig
from .errors import OffsetError
from .offsets import parse_offset


def _offset(text: str) -> str:
    # Validate while parsing arguments; TailConfig does the conversion.
    try:
        parse_offset(text)
    except OffsetError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return text


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tailpy", description="Print the last part of files")
    ap.add_argument("files", nargs="+", metavar="FILE", help="Input file(s)")
    which = ap.add_mutually_exclusive_group()
    which.add_argument(
        "-n",
        "--lines",
        type=_offset,
        default=DEFAULT_LINES,
        metavar="LINES",
        help="Number of lines; +N starts at line N (default: %(default)s)",
    )
    which.add_argument(
        "-c",
        "--bytes",
        type=_offset,
        metavar="BYTES",
        help="Number of bytes; +N starts at byte N",
    )
    ap.add_argument("-q", "--quiet", action="store_true", help="Suppress headers")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    config = TailConfig.from_args(args.files, lines=args.lines, bytes=args.bytes, quiet=args.quiet)
    try:
        tail_files(config, sys.stdout.buffer, sys.stderr)
        sys.stdout.flush()
    except BrokenPipeError:
        # The reader went away (e.g. `| head`); stop without a message.
        _discard_stdout()
        return 1
    except OSError as e:
        print(f"tailpy: {e}", file=sys.stderr)
        return 1
    return 0


def _discard_stdout() -> None:
    # Python flushes stdout again at exit; point it at devnull so that cannot fail.
    try:
        fd = sys.stdout.fileno()
    except io.UnsupportedOperation:
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
