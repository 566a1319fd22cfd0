"""Decompose text into lines plus newline metadata, and back again."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

_TERMINATOR = re.compile(r"\r?\n")


class NewlineStyle(str, Enum):
    LF = "\n"
    CRLF = "\r\n"

    @property
    def terminator(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LineLayout:
    """Lines of a text block together with the facts needed to rebuild it.

    ``lines`` never contain terminators. A text ending with a terminator
    records that in ``trailing_newline`` instead of yielding an extra empty
    line, so an empty text is a single empty line.
    """

    lines: tuple[str, ...]
    newline: NewlineStyle = NewlineStyle.LF
    trailing_newline: bool = False

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def render(self, lines: Iterable[str] | None = None) -> str:
        """Rebuild text from ``lines`` (default: our own) using this layout's style."""

        return recompose(
            self.lines if lines is None else tuple(lines),
            self.newline,
            self.trailing_newline,
        )


def detect_newline(text: str) -> NewlineStyle:
    return NewlineStyle.CRLF if "\r\n" in text else NewlineStyle.LF


def _split(text: str) -> list[str]:
    if text == "":
        return [""]
    parts = _TERMINATOR.split(text)
    if text.endswith("\n"):
        parts.pop()
    return parts


def decompose(text: str) -> LineLayout:
    return LineLayout(
        lines=tuple(_split(text)),
        newline=detect_newline(text),
        trailing_newline=text.endswith("\n"),
    )


def recompose(
    lines: Sequence[str], newline: NewlineStyle, trailing_newline: bool
) -> str:
    if not lines:
        return ""
    text = newline.terminator.join(lines)
    if trailing_newline:
        text += newline.terminator
    return text


def split_replacement(block: str) -> tuple[str, ...]:
    """Split a replacement block into lines, discarding its own newline style."""

    return tuple(_split(block))


__all__ = [
    "LineLayout",
    "NewlineStyle",
    "decompose",
    "detect_newline",
    "recompose",
    "split_replacement",
]
