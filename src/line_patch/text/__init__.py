"""Pure line decomposition and range replacement."""

from .errors import (
    ErrorKind,
    InvalidRangeBounds,
    InvalidRangeOrder,
    IOReadFailure,
    IOWriteFailure,
    LinePatchError,
    PatchIOError,
    RangeError,
    RangeOutOfBounds,
)
from .ranges import LineRange, check_bounds, replace_lines
from .splitter import (
    LineLayout,
    NewlineStyle,
    decompose,
    detect_newline,
    recompose,
    split_replacement,
)

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
    "LineRange",
    "check_bounds",
    "replace_lines",
    "LineLayout",
    "NewlineStyle",
    "decompose",
    "detect_newline",
    "recompose",
    "split_replacement",
]
