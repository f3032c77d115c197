"""Apply one ``Operation`` to a ``LineBuffer``."""

from __future__ import annotations

from typing import Callable, Dict, List, Type, cast

from insert_text.buffer import LineBuffer, ensure_clear_bounds, to_index
from insert_text.runtime import telemetry

from .models import Append, Clear, DefaultAppendEmpty, Insert, Operation

OperationHandler = Callable[[LineBuffer, Operation], LineBuffer]


def apply(buffer: LineBuffer, operation: Operation) -> LineBuffer:
    """Return the buffer produced by ``operation``; ``buffer`` is left untouched.

    Raises ``StartBeyondEndError`` / ``EndBeyondEndError`` for clear ranges
    past the end of the buffer. Insert and overwrite never fail on
    addressing because they auto-grow the buffer.
    """

    handler = _HANDLERS.get(type(operation))
    if handler is None:
        raise TypeError(f"Unsupported operation: {operation!r}")
    with telemetry.span(
        f"engine::{operation.name}",
        component="engine",
        context={"lines": buffer.line_count},
    ):
        updated = handler(buffer, operation)
    telemetry.record_event(
        "engine.applied",
        level="debug",
        data={
            "operation": operation.name,
            "lines_before": buffer.line_count,
            "lines_after": updated.line_count,
        },
    )
    return updated


def _append(buffer: LineBuffer, operation: Operation) -> LineBuffer:
    op = cast(Append, operation)
    lines = [] if buffer.placeholder else list(buffer.snapshot())
    lines.append(op.text)
    return buffer.replace(lines)


def _default_append(buffer: LineBuffer, operation: Operation) -> LineBuffer:
    del operation
    return _append(buffer, Append(""))


def _grow_to(lines: List[str], index: int) -> None:
    if index >= len(lines):
        lines.extend([""] * (index + 1 - len(lines)))


def _insert(buffer: LineBuffer, operation: Operation) -> LineBuffer:
    op = cast(Insert, operation)
    index = to_index(op.at if op.at is not None else 1)
    lines = list(buffer.snapshot())
    _grow_to(lines, index)
    if op.overwrite:
        lines[index] = op.text
    else:
        lines.insert(index, op.text)
    return buffer.replace(lines)


def _clear(buffer: LineBuffer, operation: Operation) -> LineBuffer:
    op = cast(Clear, operation)
    start_index, end_index = ensure_clear_bounds(buffer, op.range.start, op.range.end)
    lines = list(buffer.snapshot())
    del lines[start_index:end_index]
    return buffer.replace(lines)


_HANDLERS: Dict[Type[object], OperationHandler] = {
    Append: _append,
    DefaultAppendEmpty: _default_append,
    Insert: _insert,
    Clear: _clear,
}


__all__ = ["apply"]
