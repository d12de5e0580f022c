"""
Turn one unified-diff fragment into a LineDelta in original-file coordinates.

Only the before-side numbers of each hunk header are trusted. Every line that
is not an addition consumes one before-line slot of the current hunk; once the
slot budget declared by the header is used up the next non-addition line must
be a new header.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..errors import InvalidHunkHeaderError
from ..models import HunkHeader, LineDelta

# @@ -<int>[,<int>] +<int>[,<int>] @@ [section heading]
_HUNK_HEADER_RE = re.compile(
    r"""
    ^@@\ -(?P<before_start>\d+)(?:,(?P<before_count>\d+))?
    \ \+(?P<after_start>\d+)(?:,(?P<after_count>\d+))?\ @@
    """,
    re.VERBOSE,
)

_NO_NEWLINE_MARKER = "\\"


def parse_hunk_header(line: str) -> HunkHeader:
    """
    Parse ``@@ -a[,b] +c[,d] @@``; omitted counts default to 1.

    The header must start the line and a comma must be followed by a count,
    so ``" @@ -1 +1 @@"`` and ``"@@ -1 +5, @@"`` are rejected rather than
    read leniently.
    """
    m = _HUNK_HEADER_RE.match(line)
    if not m:
        raise InvalidHunkHeaderError(line)
    return HunkHeader(
        before_start=int(m.group("before_start")),
        before_count=int(m.group("before_count") or "1"),
        after_start=int(m.group("after_start")),
        after_count=int(m.group("after_count") or "1"),
    )


def split_patch_lines(text: str) -> List[str]:
    """
    Split patch text into newline-terminated physical lines, minus the
    ``---``/``+++`` file preamble.
    """
    lines = [line + "\n" for line in text.split("\n")]
    if lines and lines[-1] == "\n":
        lines.pop()
    if len(lines) >= 2 and lines[0].startswith("--- ") and lines[1].startswith("+++ "):
        lines = lines[2:]
    return lines


def parse_fragment(text: str) -> LineDelta:
    """
    Classify every line of a single-file diff into deletions and additions.

    Blank lines inside a hunk count as context, matching how diffs pasted
    through markdown lose the leading space of empty context lines. A
    ``\\ No newline at end of file`` marker takes no before-line slot; it stays
    glued to the deleted or added line it follows so re-emitted hunks keep it.
    """
    delta = LineDelta()
    current: Optional[int] = None
    lines_left = 0
    # Where the last deleted/added line was stored; None after context.
    last_change: Optional[Tuple[str, int]] = None

    for line in split_patch_lines(text):
        if line.startswith("+"):
            if current is None:
                raise InvalidHunkHeaderError(line)
            delta.added.setdefault(current - 1, []).append(line)
            last_change = ("+", current - 1)
        elif line.startswith(_NO_NEWLINE_MARKER):
            if last_change is not None:
                _attach_marker(delta, last_change, line)
        elif lines_left == 0:
            header = parse_hunk_header(line)
            current = header.before_start
            lines_left = header.before_count
            last_change = None
        else:
            if line.startswith("-"):
                delta.deleted[current] = line
                last_change = ("-", current)
            else:
                last_change = None
            current += 1
            lines_left -= 1

    return delta


def _attach_marker(delta: LineDelta, change: Tuple[str, int], marker: str) -> None:
    kind, key = change
    if kind == "-":
        delta.deleted[key] += marker
    else:
        delta.added[key][-1] += marker
