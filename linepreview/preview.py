"""
preview.py

Print the first few lines of a file.

A line is the raw bytes up to a b'\\n' (the delimiter itself is dropped) or up
to end-of-file when the last line has no trailing newline. Nothing is decoded:
each line is written back out byte for byte, followed by exactly one b'\\n'.
Files that cannot be opened produce the single diagnostic line
"Unable to open file" instead.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

# -------- Defaults --------
MAX_LINES = 5
OPEN_FAILURE_MESSAGE = b"Unable to open file"
MISSING_PATH_REASON = "no path given"
# --------------------------


def _warn(msg: str) -> None:
    """Print a warning to stderr."""
    sys.stderr.write(msg.rstrip() + "\n")


@dataclass(frozen=True)
class OpenOutcome:
    """Result of trying to open a path: either a handle or the reason it failed."""
    path: Optional[str]
    handle: Optional[BinaryIO] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.handle is not None


def open_for_preview(path: Optional[str]) -> OpenOutcome:
    """Open `path` for reading. Never raises for unopenable paths."""
    if path is None:
        return OpenOutcome(path=None, reason=MISSING_PATH_REASON)
    try:
        handle = open(path, "rb")
    except OSError as e:
        return OpenOutcome(path=path, reason=e.strerror or str(e))
    return OpenOutcome(path=path, handle=handle)


def iter_lines(handle: BinaryIO, max_lines: int = MAX_LINES, path: Optional[str] = None) -> Iterator[bytes]:
    """
    Yield at most `max_lines` lines from `handle`, newline removed.

    A read error part way through ends iteration the same way end-of-file does.
    """
    count = 0
    while count < max_lines:
        try:
            raw = handle.readline()
        except OSError as e:
            _warn(f"WARNING: read of '{path or getattr(handle, 'name', '?')}' stopped early: {e}")
            return
        if not raw:
            return
        count += 1
        yield raw[:-1] if raw.endswith(b"\n") else raw


def preview(path: Optional[str], out: Optional[BinaryIO] = None, max_lines: int = MAX_LINES) -> OpenOutcome:
    """
    Write up to `max_lines` lines of `path` to the binary stream `out`
    (stdout's buffer by default).

    Returns the OpenOutcome so callers can inspect why a file was skipped;
    the printed output never carries that reason. On success the outcome's
    handle has already been closed when this returns.
    """
    if out is None:
        out = sys.stdout.buffer

    outcome = open_for_preview(path)
    if not outcome.ok:
        out.write(OPEN_FAILURE_MESSAGE + b"\n")
        return outcome

    with outcome.handle as f:
        for line in iter_lines(f, max_lines, path=outcome.path):
            out.write(line + b"\n")
    return outcome
