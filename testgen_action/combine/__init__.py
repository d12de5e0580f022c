from .emitter import emit_hunks, render_hunks
from .merger import combine_patches, merge_deltas
from .parser import parse_fragment, parse_hunk_header

__all__ = [
    "combine_patches",
    "merge_deltas",
    "parse_fragment",
    "parse_hunk_header",
    "emit_hunks",
    "render_hunks",
]
