"""Line-addressed text replacement for files and in-memory text."""

from .patcher import (
    PatchOptions,
    PatchResult,
    apply_range_replacement,
    apply_range_replacement_async,
)
from .text import (
    ErrorKind,
    InvalidRangeBounds,
    InvalidRangeOrder,
    IOReadFailure,
    IOWriteFailure,
    LineLayout,
    LinePatchError,
    LineRange,
    NewlineStyle,
    RangeOutOfBounds,
    decompose,
    recompose,
    replace_lines,
)

__all__ = [
    "PatchOptions",
    "PatchResult",
    "apply_range_replacement",
    "apply_range_replacement_async",
    "ErrorKind",
    "LinePatchError",
    "InvalidRangeBounds",
    "InvalidRangeOrder",
    "RangeOutOfBounds",
    "IOReadFailure",
    "IOWriteFailure",
    "LineLayout",
    "LineRange",
    "NewlineStyle",
    "decompose",
    "recompose",
    "replace_lines",
]

__version__ = "0.1.0"
