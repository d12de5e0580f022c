from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from .._logging import combine_logger
from ..errors import NoPatchesError, NoValidPatchesError
from ..models import LineDelta, Patch
from .emitter import emit_hunks, render_hunks
from .parser import parse_fragment


def merge_deltas(deltas: Iterable[LineDelta], *, logger=None, log: bool = False) -> LineDelta:
    """
    Fold per-fragment deltas into one, in the order supplied.

    Insertions at a shared anchor are concatenated. A deletion at a position
    already deleted by an earlier fragment replaces it: callers are expected to
    hand in fragments whose deleted ranges do not overlap.
    """
    lg = combine_logger(logger=logger, enabled=log)
    merged = LineDelta()
    for i, delta in enumerate(deltas, 1):
        for position, line in delta.deleted.items():
            if position in merged.deleted:
                lg.debug(f"fragment {i} overwrites the deletion at line {position}")
            merged.deleted[position] = line
        for anchor, lines in delta.added.items():
            merged.added.setdefault(anchor, []).extend(lines)
    return merged


def combine_patches(
    patches: List[Patch],
    *,
    validate: Optional[Callable[[Patch], bool]] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> Patch:
    """
    Merge diffs computed against the same original file into one zero-context
    patch suitable for ``git apply --unidiff-zero``.

    Args:
        patches: Fragments for a single target file, in the order their
                 insertions should appear when they share an anchor.
        validate: Optional gate run on each fragment before merging (usually a
                  ``git apply --check`` dry run). Fragments it rejects are dropped.
        logger / log: Opt-in debug logging, tagged with the target filename.

    Raises:
        NoPatchesError: `patches` is empty.
        NoValidPatchesError: every fragment was rejected by `validate`.
        InvalidHunkHeaderError: a fragment has a malformed hunk header.
    """
    if not patches:
        raise NoPatchesError()
    lg = combine_logger(logger=logger, enabled=log, filename=patches[0].filename)

    valid = patches
    if validate is not None:
        valid = [p for p in patches if validate(p)]
        lg.debug(f"{len(valid)}/{len(patches)} fragments apply in isolation")
    if not valid:
        raise NoValidPatchesError()

    merged = merge_deltas((parse_fragment(p.text) for p in valid), logger=lg)
    hunks = emit_hunks(merged)
    lg.debug(f"combined {len(valid)} fragments into {len(hunks)} hunks")

    return Patch.from_body(patches[0].filename, render_hunks(hunks))
