"""1-based inclusive line ranges and the pure range replacement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .errors import InvalidRangeBounds, InvalidRangeOrder, RangeOutOfBounds


def _is_line_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_bounds(start: object, end: object) -> None:
    """Run the checks that do not need the line count.

    Raises ``InvalidRangeBounds`` or ``InvalidRangeOrder``.
    """

    if not _is_line_number(start) or not _is_line_number(end):
        raise InvalidRangeBounds(
            "start/end must be integers (1-based).", start=start, end=end
        )
    if start < 1:  # type: ignore[operator]
        raise InvalidRangeBounds("start must be >= 1 (1-based).", start=start, end=end)
    if end < start:  # type: ignore[operator]
        raise InvalidRangeOrder("end must be >= start.", start=start, end=end)


@dataclass(frozen=True, slots=True)
class LineRange:
    """Validated ``[start, end]`` span; both ends 1-based and inclusive."""

    start: int
    end: int

    @classmethod
    def of(cls, start: object, end: object, line_count: int) -> "LineRange":
        check_bounds(start, end)
        line_range = cls(start, end)  # type: ignore[arg-type]
        line_range.validate(line_count)
        return line_range

    def validate(self, line_count: int) -> None:
        check_bounds(self.start, self.end)
        if self.end > line_count:
            raise RangeOutOfBounds(
                start=self.start, end=self.end, line_count=line_count
            )

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def as_slice(self) -> slice:
        return slice(self.start - 1, self.end)


def replace_lines(
    lines: Sequence[str],
    start: int,
    end: int,
    replacement: Iterable[str],
) -> List[str]:
    """Return a new list with lines ``start..end`` swapped for ``replacement``.

    ``replacement`` may be empty (the span is deleted) or longer than the span.
    ``lines`` itself is left untouched.
    """

    span = LineRange.of(start, end, len(lines)).as_slice()
    return [*lines[: span.start], *replacement, *lines[span.stop :]]


__all__ = ["LineRange", "check_bounds", "replace_lines"]
