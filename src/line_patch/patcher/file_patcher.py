"""Apply a single line-range replacement to a file on disk.

The file is read fresh, decomposed, patched, and rebuilt with the file's own
newline style and trailing-newline flag. The file is rewritten only when the
rebuilt text differs from what was read. There is no locking: concurrent
callers targeting the same path must serialize themselves.
"""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from line_patch.runtime import telemetry
from line_patch.text import (
    IOReadFailure,
    IOWriteFailure,
    LinePatchError,
    LineRange,
    check_bounds,
    decompose,
    replace_lines,
    split_replacement,
)
from line_patch.text.errors import PathType

Replacement = Union[str, Sequence[str]]

ENCODING_ENV = "LINE_PATCH_ENCODING"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class PatchOptions:
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls) -> "PatchOptions":
        return cls(encoding=os.getenv(ENCODING_ENV) or DEFAULT_ENCODING)


@dataclass(frozen=True, slots=True)
class PatchResult:
    path: PathType
    range: LineRange
    changed: bool
    lines_before: int
    lines_after: int


def to_lines(replacement: Replacement) -> tuple[str, ...]:
    """Normalize a replacement payload to a tuple of lines."""

    if isinstance(replacement, str):
        return split_replacement(replacement)
    return tuple(replacement)


def _read_text(path: PathType, encoding: str) -> str:
    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeError) as exc:
        raise IOReadFailure(
            f"Cannot read {os.fspath(path)}: {exc}", path=path
        ) from exc


def _write_text(path: PathType, text: str, encoding: str) -> None:
    try:
        # Encode up front so an unencodable payload fails before truncation.
        payload = text.encode(encoding)
        with open(path, "wb") as handle:
            handle.write(payload)
    except (OSError, UnicodeError) as exc:
        raise IOWriteFailure(
            f"Cannot write {os.fspath(path)}: {exc}", path=path
        ) from exc


def _patch(
    handle: telemetry.SpanHandle,
    path: PathType,
    start: int,
    end: int,
    new_lines: tuple[str, ...],
    encoding: str,
) -> PatchResult:
    original = _read_text(path, encoding)
    layout = decompose(original)
    line_range = LineRange.of(start, end, layout.line_count)
    patched = layout.render(replace_lines(layout.lines, start, end, new_lines))
    lines_after = layout.line_count - line_range.length + len(new_lines)
    handle.add_metadata("newline", layout.newline.name)

    changed = patched != original
    if changed:
        _write_text(path, patched, encoding)
        telemetry.record_event(
            "patch.write",
            level="debug",
            data={
                "path": path,
                "lines_before": layout.line_count,
                "lines_after": lines_after,
            },
        )
    else:
        telemetry.record_event("patch.unchanged", level="debug", data={"path": path})

    return PatchResult(
        path=path,
        range=line_range,
        changed=changed,
        lines_before=layout.line_count,
        lines_after=lines_after,
    )


def apply_range_replacement(
    path: PathType,
    start: int,
    end: int,
    replacement: Replacement,
    options: Optional[PatchOptions] = None,
) -> PatchResult:
    """Replace lines ``start..end`` (1-based, inclusive) of ``path``.

    Raises ``InvalidRangeBounds``/``InvalidRangeOrder`` before touching the
    file, ``IOReadFailure`` if it cannot be read, ``RangeOutOfBounds`` if
    ``end`` is past the last line, and ``IOWriteFailure`` if the write fails.
    None of these are logged here; reporting them is up to the caller.
    """

    check_bounds(start, end)
    opts = options or PatchOptions()
    new_lines = to_lines(replacement)

    failure: Optional[LinePatchError] = None
    with telemetry.span(
        "patch::apply_range",
        component=True,
        metadata={"path": path, "start": start, "end": end},
    ) as handle:
        try:
            result = _patch(handle, path, start, end, new_lines, opts.encoding)
        except LinePatchError as exc:
            # Raised after the span closes; reporting it is up to the caller.
            failure = exc
    if failure is not None:
        raise failure
    return result


async def apply_range_replacement_async(
    path: PathType,
    start: int,
    end: int,
    replacement: Replacement,
    options: Optional[PatchOptions] = None,
) -> PatchResult:
    """Awaitable form of ``apply_range_replacement``; runs in a worker thread."""

    return await asyncio.to_thread(
        apply_range_replacement, path, start, end, replacement, options
    )


__all__ = [
    "PatchOptions",
    "PatchResult",
    "Replacement",
    "apply_range_replacement",
    "apply_range_replacement_async",
    "to_lines",
]
