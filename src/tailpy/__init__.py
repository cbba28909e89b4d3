from __future__ import annotations

from .api import tail_file, tail_files, tail_stream
from .config import TailConfig
from .errors import FileOpenError, OffsetError
from .extent import Extent, Mode, measure, measure_file
from .extract import extract_bytes, extract_lines
from .offsets import Count, FromStart, OffsetSpec, parse_offset, resolve_start

__version__ = "0.1.0"

__all__ = [
    "Count",
    "Extent",
    "FileOpenError",
    "FromStart",
    "Mode",
    "OffsetError",
    "OffsetSpec",
    "TailConfig",
    "extract_bytes",
    "extract_lines",
    "measure",
    "measure_file",
    "parse_offset",
    "resolve_start",
    "tail_file",
    "tail_files",
    "tail_stream",
]
