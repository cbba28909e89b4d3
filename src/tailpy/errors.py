from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class OffsetError(Exception):
    """An offset argument that is neither ``+0`` nor a signed integer."""

    text: str

    def __str__(self) -> str:
        return f"illegal offset -- {self.text}: Invalid argument"


@dataclass(slots=True)
class FileOpenError(Exception):
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"
