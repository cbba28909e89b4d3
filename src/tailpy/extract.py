from __future__ import annotations

import codecs
from itertools import islice
from typing import BinaryIO

from .extent import BLOCK_SIZE

# Byte offsets can land inside a multi-byte character; such fragments are
# shown as U+FFFD instead of failing the read.
_DISPLAY_ENCODING = "utf-8"


def extract_lines(stream: BinaryIO, start: int | None, out: BinaryIO) -> int:
    """Write every line from zero-based line ``start`` onward, byte-for-byte.

    Reads from the stream's current position, which must be the beginning
    of the file. Returns the number of bytes written.
    """
    if start is None:
        return 0
    written = 0
    for line in islice(stream, start, None):
        out.write(line)
        written += len(line)
    return written


def extract_bytes(stream: BinaryIO, start: int | None, out: BinaryIO) -> int:
    """Seek to byte ``start`` and write the rest of the file.

    Returns the number of bytes written, which differs from the bytes read
    when malformed sequences were replaced.
    """
    if start is None:
        return 0
    stream.seek(start)
    decoder = codecs.getincrementaldecoder(_DISPLAY_ENCODING)(errors="replace")
    written = 0
    while True:
        block = stream.read(BLOCK_SIZE)
        text = decoder.decode(block, final=not block)
        if text:
            data = text.encode(_DISPLAY_ENCODING)
            out.write(data)
            written += len(data)
        if not block:
            return written

