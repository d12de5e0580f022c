import os
from typing import Iterable, Optional

import pathspec

from ..errors import PathViolation


def resolve_in_workspace(workspace: str, rel_path: str) -> str:
    """
    Join a repository-relative path onto the workspace and make sure the
    result stays inside it. Raises PathViolation otherwise.
    """
    base_real = os.path.realpath(workspace)
    if os.path.isabs(rel_path):
        raise PathViolation(f"Absolute path '{rel_path}' is not allowed")
    resolved = os.path.abspath(os.path.join(base_real, *rel_path.split("/")))
    if os.path.commonpath([base_real, resolved]) != base_real:
        raise PathViolation(f"Path traversal attempt detected for '{rel_path}'")
    return resolved


def compile_path_filter(patterns: Iterable[str]) -> Optional[pathspec.PathSpec]:
    """
    Build a gitwildmatch spec from the configured `paths` globs. Blank lines
    and `#` comments are ignored; an empty filter returns None (allow all).
    """
    lines = [p.strip() for p in patterns if p.strip() and not p.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def ensure_patchable(workspace: str, rel_path: str, spec: Optional[pathspec.PathSpec] = None) -> str:
    """Return the absolute target path, or raise PathViolation."""
    resolved = resolve_in_workspace(workspace, rel_path)
    if spec is not None and not spec.match_file(rel_path):
        raise PathViolation(f"'{rel_path}' is outside the configured paths")
    return resolved
