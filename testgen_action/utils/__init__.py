# testgen_action/utils/__init__.py
from .paths import compile_path_filter, ensure_patchable, resolve_in_workspace
from .text import normalize_newlines, unified_diff_body

__all__ = [
    "compile_path_filter",
    "ensure_patchable",
    "resolve_in_workspace",
    "normalize_newlines",
    "unified_diff_body",
]
