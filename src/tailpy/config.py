from __future__ import annotations

from dataclasses import dataclass

from .extent import Mode
from .offsets import OffsetSpec, parse_offset

DEFAULT_LINES = "-10"


@dataclass(frozen=True, slots=True)
class TailConfig:
    """Everything one invocation needs, built once and passed explicitly.

    ``bytes`` wins over ``lines`` when both are set; the CLI makes them
    mutually exclusive.
    """

    files: tuple[str, ...]
    lines: OffsetSpec = parse_offset(DEFAULT_LINES)
    bytes: OffsetSpec | None = None
    quiet: bool = False

    def __post_init__(self) -> None:
        if not self.files:
            raise ValueError("at least one file is required")

    @classmethod
    def from_args(
        cls,
        files: list[str] | tuple[str, ...],
        *,
        lines: str = DEFAULT_LINES,
        bytes: str | None = None,
        quiet: bool = False,
    ) -> TailConfig:
        return cls(
            files=tuple(files),
            lines=parse_offset(lines),
            bytes=None if bytes is None else parse_offset(bytes),
            quiet=quiet,
        )

    @property
    def mode(self) -> Mode:
        return Mode.BYTES if self.bytes is not None else Mode.LINES

    @property
    def offset(self) -> OffsetSpec:
        return self.bytes if self.bytes is not None else self.lines

    @property
    def show_headers(self) -> bool:
        return not self.quiet and len(self.files) > 1
