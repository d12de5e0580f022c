# testgen_action/git.py
import logging
import subprocess
from typing import List, Optional

from .errors import GitApplyError

log = logging.getLogger(__name__)


def _apply_args(git: str, check: bool, unidiff_zero: bool) -> List[str]:
    args = [git, "apply"]
    if check:
        args.append("--check")
    if unidiff_zero:
        args.append("--unidiff-zero")
    return args


def apply_git_patch(
    patch: str,
    *,
    check: bool = False,
    unidiff_zero: bool = False,
    cwd: Optional[str] = None,
    git: str = "git",
) -> None:
    """
    Pipe `patch` into ``git apply`` run from `cwd`.

    The child's stdout/stderr are inherited so git's own diagnostics land in
    the job log. Raises GitApplyError on a non-zero exit or if git cannot be
    started.
    """
    args = _apply_args(git, check, unidiff_zero)
    log.debug(f"running {' '.join(args)} in {cwd or '.'}")
    try:
        proc = subprocess.run(args, input=patch, text=True, cwd=cwd, check=False)
    except OSError as e:
        raise GitApplyError(f"{git} apply failed to start: {e}") from e
    if proc.returncode != 0:
        raise GitApplyError(f"{git} apply exited with code {proc.returncode}", proc.returncode)


def check_git_patch(patch: str, *, cwd: Optional[str] = None, git: str = "git") -> bool:
    """Dry run: True if `patch` would apply cleanly on its own."""
    try:
        apply_git_patch(patch, check=True, cwd=cwd, git=git)
    except GitApplyError as e:
        log.info(f"  - Patch does not apply in isolation: {e}")
        return False
    return True
