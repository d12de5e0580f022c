"""
Re-emit a merged LineDelta as a zero-context unified diff body.

The walk over sorted before-positions is a fold: `_step` takes the running
EmitState and one position and returns the next state. Hunks are closed in
ascending before-order, so the running (added - deleted) total at the moment
a hunk closes is exactly its before -> after shift.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from functools import partial, reduce
from typing import List, Optional, Tuple

from ..models import Hunk, LineDelta


@dataclass(frozen=True)
class _OpenHunk:
    start: int
    last: int  # last before-position placed into this hunk
    deleted: int = 0
    added: int = 0
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EmitState:
    current: Optional[_OpenHunk] = None
    total_added: int = 0
    total_deleted: int = 0
    hunks: Tuple[Hunk, ...] = ()


def _close(state: EmitState) -> EmitState:
    cur = state.current
    if cur is None or not cur.lines:
        return replace(state, current=None)
    hunk = Hunk(
        before_start=cur.start,
        before_count=cur.deleted,
        after_start=cur.start + state.total_added - state.total_deleted,
        after_count=cur.added,
        lines=cur.lines,
    )
    return EmitState(
        current=None,
        total_added=state.total_added + cur.added,
        total_deleted=state.total_deleted + cur.deleted,
        hunks=state.hunks + (hunk,),
    )


def _step(delta: LineDelta, state: EmitState, position: int) -> EmitState:
    cur = state.current
    if cur is None or position > cur.last + 1:
        state = _close(state)
        cur = _OpenHunk(start=position, last=position - 1)

    additions = delta.added.get(position - 1)
    if additions:
        cur = replace(
            cur,
            lines=cur.lines + tuple(additions),
            added=cur.added + len(additions),
            last=position - 1,
        )
    deletion = delta.deleted.get(position)
    if deletion:
        cur = replace(
            cur,
            lines=cur.lines + (deletion,),
            deleted=cur.deleted + 1,
            last=position,
        )
    return replace(state, current=cur)


def emit_hunks(delta: LineDelta) -> List[Hunk]:
    """Group the delta into minimal contiguous hunks with recomputed headers."""
    state = reduce(partial(_step, delta), delta.positions(), EmitState())
    return list(_close(state).hunks)


def render_hunks(hunks: List[Hunk]) -> str:
    return "".join(h.render() for h in hunks)
