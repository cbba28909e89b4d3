from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, TextIO

from .config import TailConfig
from .errors import FileOpenError
from .extent import Mode, measure
from .extract import extract_bytes, extract_lines
from .offsets import resolve_start

_log = logging.getLogger(__name__)


def open_input(path: str | Path) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as e:
        raise FileOpenError(path=str(path), reason=e.strerror or str(e)) from e


def tail_stream(stream: BinaryIO, config: TailConfig, out: BinaryIO, *, name: str = "<stream>") -> int:
    """Measure ``stream``, resolve the start and write the suffix to ``out``.

    The stream must be seekable; it is read from its beginning whatever
    its current position. Returns the number of bytes written.
    """
    stream.seek(0)
    extent = measure(stream)
    mode = config.mode
    start = resolve_start(config.offset, extent.total(mode))
    _log.debug("%s: %s, %s start=%s", name, extent, mode.value, start)
    if start is None:
        return 0
    if mode is Mode.BYTES:
        written = extract_bytes(stream, start, out)
    else:
        stream.seek(0)
        written = extract_lines(stream, start, out)
    _log.debug("%s: wrote %d bytes", name, written)
    return written


def tail_file(path: str | Path, config: TailConfig, out: BinaryIO) -> int:
    """Raises FileOpenError if ``path`` cannot be opened.

    Errors while reading an opened file propagate unchanged.
    """
    with open_input(path) as f:
        return tail_stream(f, config, out, name=str(path))


def format_header(path: str, index: int) -> bytes:
    # Every header but the first named file's gets a blank line above it.
    sep = "\n" if index > 0 else ""
    return f"{sep}==> {path} <==\n".encode()


def tail_files(config: TailConfig, out: BinaryIO, err: TextIO) -> int:
    """Process ``config.files`` in order; return how many could not be opened.

    A file that cannot be opened is reported on ``err`` and skipped. Any
    other OSError aborts the whole run.
    """
    failed = 0
    for index, path in enumerate(config.files):
        try:
            f = open_input(path)
        except FileOpenError as e:
            failed += 1
            _log.info("skipping %s", e)
            print(e, file=err)
            continue
        with f:
            if config.show_headers:
                out.write(format_header(path, index))
            tail_stream(f, config, out, name=path)
    return failed
