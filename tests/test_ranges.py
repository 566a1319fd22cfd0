import pytest

from line_patch.text import (
    ErrorKind,
    InvalidRangeBounds,
    InvalidRangeOrder,
    LineRange,
    RangeOutOfBounds,
    decompose,
    replace_lines,
)


def test_delete_single_line() -> None:
    assert replace_lines(["a", "b", "c"], 2, 2, []) == ["a", "c"]


def test_grow_single_line() -> None:
    assert replace_lines(["a", "b", "c"], 2, 2, ["x", "y"]) == ["a", "x", "y", "c"]


def test_replace_whole_sequence() -> None:
    assert replace_lines(["a", "b"], 1, 2, ["z"]) == ["z"]


def test_delete_everything_leaves_empty_sequence() -> None:
    assert replace_lines(["a", "b"], 1, 2, []) == []


def test_input_is_not_mutated() -> None:
    lines = ["a", "b", "c"]

    replace_lines(lines, 1, 3, ["z"])

    assert lines == ["a", "b", "c"]


def test_empty_text_line_can_be_replaced() -> None:
    layout = decompose("")

    result = layout.render(replace_lines(layout.lines, 1, 1, ["hello"]))

    assert result == "hello"


@pytest.mark.parametrize("replacement", [[], ["x"], ["x", "y", "z"]])
def test_end_past_last_line_is_out_of_bounds(replacement: list[str]) -> None:
    with pytest.raises(RangeOutOfBounds) as info:
        replace_lines(["a", "b"], 1, 3, replacement)

    assert info.value.line_count == 2
    assert info.value.end == 3
    assert info.value.kind is ErrorKind.RANGE_OUT_OF_BOUNDS
    assert "2 lines" in str(info.value)


@pytest.mark.parametrize(
    ("start", "end"),
    [(0, 1), (-1, 2), (1.0, 2), ("1", 2), (1, None), (True, 1)],
)
def test_invalid_bounds(start: object, end: object) -> None:
    with pytest.raises(InvalidRangeBounds):
        replace_lines(["a", "b"], start, end, [])  # type: ignore[arg-type]


def test_end_before_start_is_invalid_order() -> None:
    with pytest.raises(InvalidRangeOrder) as info:
        replace_lines(["a", "b", "c"], 3, 2, [])

    assert (info.value.start, info.value.end) == (3, 2)


def test_line_range_helpers() -> None:
    line_range = LineRange.of(2, 4, line_count=5)

    assert line_range.length == 3
    assert ["a", "b", "c", "d", "e"][line_range.as_slice()] == ["b", "c", "d"]
