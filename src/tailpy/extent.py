from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

BLOCK_SIZE = 64 * 1024


class Mode(str, Enum):
    LINES = "lines"
    BYTES = "bytes"


@dataclass(frozen=True, slots=True)
class Extent:
    total_lines: int
    total_bytes: int

    def total(self, mode: Mode) -> int:
        return self.total_bytes if mode is Mode.BYTES else self.total_lines


def measure(stream: BinaryIO) -> Extent:
    """Count lines and bytes from the current position to EOF.

    A trailing fragment without a newline still counts as a line. The
    stream is left at EOF; rewind it before extracting.
    """
    lines = 0
    total = 0
    last = b""
    while True:
        block = stream.read(BLOCK_SIZE)
        if not block:
            break
        lines += block.count(b"\n")
        total += len(block)
        last = block[-1:]
    if total and last != b"\n":
        lines += 1
    return Extent(total_lines=lines, total_bytes=total)


def measure_file(path: str | Path) -> Extent:
    with open(path, "rb") as f:
        return measure(f)
