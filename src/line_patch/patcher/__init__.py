"""File-level orchestration of line-range replacements."""

from .file_patcher import (
    PatchOptions,
    PatchResult,
    Replacement,
    apply_range_replacement,
    apply_range_replacement_async,
    to_lines,
)

__all__ = [
    "PatchOptions",
    "PatchResult",
    "Replacement",
    "apply_range_replacement",
    "apply_range_replacement_async",
    "to_lines",
]
