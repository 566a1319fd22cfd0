import pytest

from line_patch.text import (
    LineLayout,
    NewlineStyle,
    decompose,
    detect_newline,
    recompose,
    split_replacement,
)


def test_empty_text_is_one_empty_line() -> None:
    layout = decompose("")

    assert layout == LineLayout(lines=("",), newline=NewlineStyle.LF, trailing_newline=False)


def test_trailing_newline_is_metadata_not_a_line() -> None:
    layout = decompose("a\nb\n")

    assert layout.lines == ("a", "b")
    assert layout.trailing_newline is True
    assert layout.newline is NewlineStyle.LF


def test_crlf_is_a_single_terminator() -> None:
    layout = decompose("a\r\nb\r\n")

    assert layout.lines == ("a", "b")
    assert layout.newline is NewlineStyle.CRLF
    assert layout.trailing_newline is True


def test_lone_carriage_return_stays_in_line() -> None:
    assert decompose("a\rb\nc").lines == ("a\rb", "c")


def test_single_crlf_marks_whole_text_as_crlf() -> None:
    assert detect_newline("a\nb\r\nc\n") is NewlineStyle.CRLF
    assert detect_newline("a\nb") is NewlineStyle.LF


def test_mixed_styles_normalize_on_recompose() -> None:
    layout = decompose("a\nb\r\nc\n")

    assert layout.render() == "a\r\nb\r\nc\r\n"


@pytest.mark.parametrize(
    "text",
    ["", "\n", "\r\n", "a", "a\n", "a\nb", "a\r\nb\r\n", "\n\n", "x\r\n\r\ny"],
)
def test_round_trip(text: str) -> None:
    layout = decompose(text)

    assert recompose(layout.lines, layout.newline, layout.trailing_newline) == text


def test_empty_sequence_recomposes_to_empty_text() -> None:
    assert recompose((), NewlineStyle.CRLF, True) == ""


def test_render_with_other_lines_keeps_layout_style() -> None:
    layout = decompose("one\r\ntwo")

    assert layout.render(["x", "y", "z"]) == "x\r\ny\r\nz"


def test_split_replacement_discards_block_style() -> None:
    assert split_replacement("x\r\ny\r\n") == ("x", "y")
    assert split_replacement("") == ("",)
