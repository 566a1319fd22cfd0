"""Error taxonomy shared by the splitter, range replacer, and file patcher."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]


class ErrorKind(str, Enum):
    INVALID_RANGE_BOUNDS = "invalid_range_bounds"
    INVALID_RANGE_ORDER = "invalid_range_order"
    RANGE_OUT_OF_BOUNDS = "range_out_of_bounds"
    IO_READ_FAILURE = "io_read_failure"
    IO_WRITE_FAILURE = "io_write_failure"


class LinePatchError(RuntimeError):
    """Base class for every failure surfaced by ``line_patch``."""

    kind: ErrorKind


class RangeError(LinePatchError):
    """Raised before any I/O when a requested line range is unusable."""

    def __init__(self, message: str, *, start: object, end: object) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class InvalidRangeBounds(RangeError):
    kind = ErrorKind.INVALID_RANGE_BOUNDS


class InvalidRangeOrder(RangeError):
    kind = ErrorKind.INVALID_RANGE_ORDER


class RangeOutOfBounds(RangeError):
    kind = ErrorKind.RANGE_OUT_OF_BOUNDS

    def __init__(self, *, start: int, end: int, line_count: int) -> None:
        super().__init__(
            f"end line is out of range: text has {line_count} lines, got end={end}.",
            start=start,
            end=end,
        )
        self.line_count = line_count


class PatchIOError(LinePatchError):
    """Raised when the target file cannot be read or written.

    The originating ``OSError`` (or decode error) is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, path: PathType) -> None:
        super().__init__(message)
        self.path = path


class IOReadFailure(PatchIOError):
    kind = ErrorKind.IO_READ_FAILURE


class IOWriteFailure(PatchIOError):
    kind = ErrorKind.IO_WRITE_FAILURE


__all__ = [
    "ErrorKind",
    "LinePatchError",
    "RangeError",
    "InvalidRangeBounds",
    "InvalidRangeOrder",
    "RangeOutOfBounds",
    "PatchIOError",
    "IOReadFailure",
    "IOWriteFailure",
    "PathType",
]
