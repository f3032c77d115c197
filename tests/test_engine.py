from __future__ import annotations

import pytest

from insert_text.buffer import LineBuffer, load
from insert_text.errors import (
    AddressOutOfRangeError,
    EndBeyondEndError,
    MalformedRangeError,
    StartBeyondEndError,
)
from insert_text.operations import (
    Append,
    Clear,
    ClearRange,
    DefaultAppendEmpty,
    Insert,
    apply,
)


def make_buffer(*lines: str) -> LineBuffer:
    return LineBuffer.from_lines(lines, had_trailing_newline=True)


def test_insert_shifts_following_lines_down() -> None:
    buffer = make_buffer("Line 1", "Line 2")

    result = apply(buffer, Insert("New Line", at=2))

    assert result.snapshot() == ("Line 1", "New Line", "Line 2")
    assert buffer.snapshot() == ("Line 1", "Line 2")


@pytest.mark.parametrize("index", [0, 1, 2])
def test_insert_inside_buffer_adds_exactly_one_line(index: int) -> None:
    lines = ("a", "b", "c")
    buffer = make_buffer(*lines)

    result = apply(buffer, Insert("new", at=index + 1)).snapshot()

    assert len(result) == len(lines) + 1
    assert result[index] == "new"
    assert result[:index] + result[index + 1 :] == lines


def test_insert_one_past_last_line_pads_then_inserts() -> None:
    result = apply(make_buffer("a", "b", "c"), Insert("new", at=4))

    assert result.snapshot() == ("a", "b", "c", "new", "")


def test_append_keeps_lines_of_directly_built_buffer() -> None:
    buffer = LineBuffer(_lines=["a", "b"])

    result = apply(buffer, Append("c"))

    assert buffer.placeholder is False
    assert result.snapshot() == ("a", "b", "c")


def test_default_buffer_is_a_placeholder() -> None:
    buffer = LineBuffer()

    assert buffer.snapshot() == ("",)
    assert apply(buffer, Append("Hi")).snapshot() == ("Hi",)


def test_insert_defaults_to_first_line() -> None:
    result = apply(make_buffer("a", "b"), Insert("top"))

    assert result.snapshot() == ("top", "a", "b")


def test_insert_beyond_end_auto_grows() -> None:
    result = apply(make_buffer("a"), Insert("e", at=5))

    assert result.snapshot() == ("a", "", "", "", "e", "")


def test_overwrite_replaces_in_place() -> None:
    result = apply(make_buffer("Line 1", "Line 2"), Insert("X", at=2, overwrite=True))

    assert result.snapshot() == ("Line 1", "X")


def test_overwrite_beyond_end_pads_with_empty_lines() -> None:
    result = apply(make_buffer("a", "b"), Insert("z", at=5, overwrite=True))

    assert result.snapshot() == ("a", "b", "", "", "z")


def test_overwrite_without_text_blanks_the_line() -> None:
    result = apply(make_buffer("a", "b"), Insert(at=1, overwrite=True))

    assert result.snapshot() == ("", "b")


def test_append_adds_final_line() -> None:
    result = apply(make_buffer("a"), Append("Hi"))

    assert result.snapshot() == ("a", "Hi")


def test_append_replaces_placeholder_line() -> None:
    result = apply(load(None), Append("Hi"))

    assert result.snapshot() == ("Hi",)
    assert result.placeholder is False


def test_append_keeps_real_blank_line() -> None:
    result = apply(load(b"\n"), Append("Hi"))

    assert result.snapshot() == ("", "Hi")


def test_default_append_matches_append_of_empty_string() -> None:
    buffer = make_buffer("a", "b")

    assert (
        apply(buffer, DefaultAppendEmpty()).snapshot()
        == apply(buffer, Append("")).snapshot()
        == ("a", "b", "")
    )


def test_default_append_on_missing_file_yields_one_blank_line() -> None:
    result = apply(load(None), DefaultAppendEmpty())

    assert result.snapshot() == ("",)
    assert result.placeholder is False


def test_clear_to_end_of_file() -> None:
    result = apply(make_buffer("A", "B", "C"), Clear(ClearRange(2)))

    assert result.snapshot() == ("A",)


def test_clear_closed_range() -> None:
    result = apply(make_buffer("A", "B", "C", "D"), Clear(ClearRange(2, 3)))

    assert result.snapshot() == ("A", "D")


def test_clear_removes_end_minus_start_plus_one_lines() -> None:
    lines = ("1", "2", "3", "4", "5")

    result = apply(make_buffer(*lines), Clear(ClearRange(2, 4))).snapshot()

    assert len(result) == len(lines) - 3
    assert result == ("1", "5")


def test_clear_single_line_range() -> None:
    result = apply(make_buffer("A", "B", "C"), Clear(ClearRange(2, 2)))

    assert result.snapshot() == ("A", "C")


def test_clear_everything_renormalizes_to_single_empty_line() -> None:
    result = apply(make_buffer("A", "B"), Clear(ClearRange(1)))

    assert result.snapshot() == ("",)
    assert result.line_count == 1


def test_clear_start_beyond_end_fails() -> None:
    with pytest.raises(StartBeyondEndError) as info:
        apply(make_buffer("A"), Clear(ClearRange(5)))

    assert info.value.address == 5
    assert info.value.line_count == 1
    assert str(info.value) == "Start line 5 is beyond file length"


def test_clear_end_beyond_end_fails() -> None:
    with pytest.raises(EndBeyondEndError) as info:
        apply(make_buffer("A", "B"), Clear(ClearRange(1, 3)))

    assert isinstance(info.value, AddressOutOfRangeError)
    assert info.value.address == 3


def test_clear_on_empty_buffer_only_accepts_line_one() -> None:
    assert apply(load(None), Clear(ClearRange(1))).snapshot() == ("",)
    with pytest.raises(StartBeyondEndError):
        apply(load(None), Clear(ClearRange(2)))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("2", ClearRange(2)), ("2,3", ClearRange(2, 3)), ("4,4", ClearRange(4, 4))],
)
def test_clear_range_parse(raw: str, expected: ClearRange) -> None:
    assert ClearRange.parse(raw) == expected


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("abc", "Invalid start line number"),
        ("2,x", "Invalid end line number"),
        ("0", "greater than 0"),
        ("1,0", "greater than 0"),
        ("3,2", "less than or equal"),
        ("1,2,3", "Expected format"),
        ("", "Invalid start line number"),
        ("1_0", "Invalid start line number"),
        ("+2", "Invalid start line number"),
        (" 2", "Invalid start line number"),
        ("2, 3", "Invalid end line number"),
        ("\u0662", "Invalid start line number"),
    ],
)
def test_clear_range_parse_rejects_malformed_values(raw: str, message: str) -> None:
    with pytest.raises(MalformedRangeError) as info:
        ClearRange.parse(raw)

    assert message in str(info.value)
    assert isinstance(info.value, ValueError)


def test_clear_range_str_round_trips() -> None:
    assert str(ClearRange(2)) == "2"
    assert str(ClearRange(2, 5)) == "2,5"


def test_unsupported_operation_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        apply(make_buffer("a"), object())  # type: ignore[arg-type]
