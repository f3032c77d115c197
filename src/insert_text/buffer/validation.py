"""Line address helpers shared by the engine and the CLI."""

from __future__ import annotations

from typing import Optional, Tuple

from insert_text.errors import EndBeyondEndError, StartBeyondEndError

from .document import LineBuffer

LineAddress = int  # 1-based


def to_index(address: LineAddress) -> int:
    """Convert a 1-based address to a 0-based index, saturating at zero."""

    return max(address - 1, 0)


def ensure_clear_bounds(
    buffer: LineBuffer, start: LineAddress, end: Optional[LineAddress]
) -> Tuple[int, int]:
    """Return the half-open ``[start_index, end_index)`` slice for a clear."""

    line_count = buffer.line_count
    start_index = to_index(start)
    if start_index >= line_count:
        raise StartBeyondEndError(
            f"Start line {start} is beyond file length",
            address=start,
            line_count=line_count,
        )
    end_index = line_count if end is None else end
    if end_index > line_count:
        raise EndBeyondEndError(
            f"End line {end_index} is beyond file length",
            address=end_index,
            line_count=line_count,
        )
    return start_index, end_index
