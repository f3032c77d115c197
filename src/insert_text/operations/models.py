"""Dataclasses describing the single edit an invocation performs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from insert_text.errors import MalformedRangeError


def _parse_line_number(raw: str, label: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise MalformedRangeError(f"Invalid {label} line number: '{raw}'")
    return int(raw)


@dataclass(frozen=True, slots=True)
class ClearRange:
    """1-based line range; ``end`` of ``None`` means "through end of file"."""

    start: int
    end: Optional[int] = None

    def __post_init__(self) -> None:
        if self.start <= 0 or (self.end is not None and self.end <= 0):
            raise MalformedRangeError("Line numbers must be greater than 0")
        if self.end is not None and self.start > self.end:
            raise MalformedRangeError(
                "Start line must be less than or equal to end line"
            )

    @classmethod
    def parse(cls, value: str) -> "ClearRange":
        """Parse ``START`` or ``START,END``."""

        parts = value.split(",")
        if len(parts) == 1:
            return cls(_parse_line_number(parts[0], "start"))
        if len(parts) == 2:
            start = _parse_line_number(parts[0], "start")
            end = _parse_line_number(parts[1], "end")
            return cls(start, end)
        raise MalformedRangeError("Expected format: START or START,END")

    def __str__(self) -> str:
        return str(self.start) if self.end is None else f"{self.start},{self.end}"


@dataclass(frozen=True, slots=True)
class Insert:
    text: str = ""
    at: Optional[int] = None
    overwrite: bool = False

    @property
    def name(self) -> str:
        return "overwrite" if self.overwrite else "insert"


@dataclass(frozen=True, slots=True)
class Append:
    text: str = ""

    @property
    def name(self) -> str:
        return "append"


@dataclass(frozen=True, slots=True)
class Clear:
    range: ClearRange

    @property
    def name(self) -> str:
        return "clear"


@dataclass(frozen=True, slots=True)
class DefaultAppendEmpty:
    """Selected when no insert, append, or clear flag is given."""

    @property
    def name(self) -> str:
        return "default_append"


Operation = Union[Insert, Append, Clear, DefaultAppendEmpty]
