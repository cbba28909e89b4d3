from __future__ import annotations

import re
from dataclasses import dataclass
from .errors import OffsetError


@dataclass(frozen=True, slots=True)
class FromStart:
    """Start at the first line/byte, written as ``+0`` on the command line.

    Not the same as ``Count(0)``: this prints the whole file, that prints nothing.
    """


@dataclass(frozen=True, slots=True)
class Count:
    """A signed count.

    Positive values are 1-based positions from the front of the file
    (``+3`` starts at the third line/byte). Zero and negative values take
    the last ``abs(n)`` lines/bytes.
    """

    n: int


OffsetSpec = FromStart | Count

# ASCII digits only; int() alone would also accept "1_0", " 7" and "٣".
_INT_RE = re.compile(r"[+-]?[0-9]+")
# Offsets are 64-bit signed, like the counts they are compared with.
_MIN_OFFSET = -(2**63)
_MAX_OFFSET = 2**63 - 1


def parse_offset(text: str) -> OffsetSpec:
    if text == "+0":
        return FromStart()
    if not _INT_RE.fullmatch(text):
        raise OffsetError(text)
    num = int(text)
    if not _MIN_OFFSET <= num <= _MAX_OFFSET:
        raise OffsetError(text)
    # A bare number means "the last N", as with tail(1).
    if text.startswith("+") or num < 0:
        return Count(num)
    return Count(-num)


def resolve_start(spec: OffsetSpec, total: int) -> int | None:
    """Map an offset onto a zero-based start index into ``total`` items.

    ``total`` is a line count or a byte count; the arithmetic is the same.
    Returns None when nothing should be printed.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")

    match spec:
        case FromStart():
            return None if total == 0 else 0
        case Count(n=n):
            if n == 0 or total == 0:
                return None
            if n > 0:
                # Starting past the end prints nothing.
                return None if n > total else n - 1
            return max(0, total + n)
        case _:
            raise TypeError(f"unexpected offset spec: {spec!r}")
