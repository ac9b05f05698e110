"""
cli.py

Command-line driver: preview the first lines of up to two files.

Usage:
  linepreview [path1] [path2]

Output (stdout):
  First argument is: <path1>
  <up to 5 lines of path1, or "Unable to open file">
  Second argument is: <path2>
  <up to 5 lines of path2, or "Unable to open file">

With no paths, prints "No argument passed through command line." instead.
A missing second path prints an empty label and the open-failure line.
Paths past the second are ignored. The exit status is always 0.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from linepreview.preview import preview

NO_ARGUMENT_MESSAGE = b"No argument passed through command line."
FIRST_LABEL = b"First argument is: "
SECOND_LABEL = b"Second argument is: "


def _build_argparser() -> argparse.ArgumentParser:
    # No -h/--help: every token on the command line is a path, even "-h".
    p = argparse.ArgumentParser(
        prog="linepreview",
        description="Print the first lines of up to two files.",
        add_help=False,
    )
    p.add_argument("paths", nargs="*", help="Files to preview (only the first two are used).")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = _build_argparser()
    args = ap.parse_args(["--", *argv])
    out = sys.stdout.buffer

    if not args.paths:
        out.write(NO_ARGUMENT_MESSAGE + b"\n")
        out.flush()
        return 0

    first = args.paths[0]
    second = args.paths[1] if len(args.paths) > 1 else None

    out.write(FIRST_LABEL + os.fsencode(first) + b"\n")
    preview(first, out)

    out.write(SECOND_LABEL + (os.fsencode(second) if second is not None else b"") + b"\n")
    preview(second, out)

    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
