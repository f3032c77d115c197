"""Line buffer storage and the loader that builds it from raw file content."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from insert_text.errors import ReadFailedError

RawContent = Union[bytes, str]


@dataclass(slots=True)
class LineBuffer:
    """Ordered, newline-stripped lines of one target file.

    The buffer never holds fewer than one line. Content with no lines at all
    (a missing or zero-byte file) is represented as a single ``""`` line with
    ``placeholder`` set, so appends can tell a real blank line apart from
    the normalization artifact.
    """

    _lines: List[str] = field(default_factory=list)
    had_trailing_newline: bool = False
    placeholder: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]
            self.placeholder = True

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, had_trailing_newline: bool = False
    ) -> "LineBuffer":
        items = list(lines)
        return cls(
            _lines=items,
            had_trailing_newline=had_trailing_newline,
            placeholder=not items,
        )

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(self, lines: Iterable[str]) -> "LineBuffer":
        """Return a buffer holding ``lines`` with the same trailing-newline flag."""

        return LineBuffer.from_lines(
            lines, had_trailing_newline=self.had_trailing_newline
        )

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def __len__(self) -> int:
        return len(self._lines)


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` and drop one trailing ``\\r`` per line.

    A single final terminator does not yield an empty last line; two
    consecutive final terminators yield exactly one.
    """

    if not text:
        return []
    body = text[:-1] if text.endswith("\n") else text
    return [line[:-1] if line.endswith("\r") else line for line in body.split("\n")]


def decode(raw: RawContent, *, path: Optional[str] = None) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReadFailedError(
            f"Cannot read '{path or '<buffer>'}': content is not valid UTF-8 ({exc.reason})",
            path=path,
        ) from exc


def load(raw: Optional[RawContent], *, path: Optional[str] = None) -> LineBuffer:
    """Build a ``LineBuffer`` from file content; ``None`` means a missing file."""

    text = "" if raw is None else decode(raw, path=path)
    return LineBuffer.from_lines(
        split_lines(text), had_trailing_newline=text.endswith("\n")
    )
