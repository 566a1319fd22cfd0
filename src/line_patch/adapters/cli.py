"""Command-line entry point: ``line-patch PATH START END``."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, TextIO

from line_patch.patcher import PatchOptions, apply_range_replacement
from line_patch.runtime import telemetry
from line_patch.text import PatchIOError, RangeError

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_RANGE_ERROR = 2


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="line-patch",
        description="Replace a 1-based inclusive range of lines in a file.",
    )
    parser.add_argument("path", help="File to patch")
    parser.add_argument("start", type=int, help="First line to replace (1-based)")
    parser.add_argument("end", type=int, help="Last line to replace (inclusive)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="Replacement text (default: read stdin)")
    source.add_argument(
        "--from-file",
        metavar="FILE",
        help="Read the replacement text from FILE",
    )
    source.add_argument(
        "--delete",
        action="store_true",
        help="Remove the range instead of replacing it",
    )
    parser.add_argument(
        "--encoding",
        default=PatchOptions.from_env().encoding,
        help="Text encoding of the target file (default: $LINE_PATCH_ENCODING or utf-8)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("LINE_PATCH_LOG_PRESET") or None,
        help="Telemetry preset to activate before patching",
    )
    return parser.parse_args(argv)


def _read_replacement(args: argparse.Namespace, stdin: TextIO) -> str | list[str]:
    if args.delete:
        return []
    if args.text is not None:
        return args.text
    if args.from_file is not None:
        with open(args.from_file, "r", encoding=args.encoding, newline="") as handle:
            return handle.read()
    return stdin.read()


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = _parse_args(argv)
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)

    try:
        replacement = _read_replacement(args, stdin or sys.stdin)
    except (OSError, UnicodeError) as exc:
        print(f"line-patch: cannot read replacement: {exc}", file=err)
        return EXIT_IO_ERROR

    try:
        result = apply_range_replacement(
            args.path,
            args.start,
            args.end,
            replacement,
            PatchOptions(encoding=args.encoding),
        )
    except RangeError as exc:
        print(f"line-patch: {exc}", file=err)
        return EXIT_RANGE_ERROR
    except PatchIOError as exc:
        print(f"line-patch: {exc}", file=err)
        return EXIT_IO_ERROR

    status = "updated" if result.changed else "unchanged"
    print(f"{status} {args.path}", file=out)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
