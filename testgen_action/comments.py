import re
from typing import Dict, Iterable, List, Optional

from .config import DEFAULT_BOT_APP_NAME
from .models import Comment, Patch
from .utils.text import normalize_newlines

# Greedy on purpose: the diff body may itself contain fences, the closing one
# is the last fence before the filename line.
_DIFF_BLOCK_RE = re.compile(r"```diff\n(.*)\n```", re.DOTALL)
_FILENAME_RE = re.compile(r"```\n(.*)\n</details>")


def is_bot_comment(comment: Comment, app_name: str = DEFAULT_BOT_APP_NAME) -> bool:
    return comment.app_name == app_name


def is_accepted(comment: Comment) -> bool:
    """A reviewer accepts a proposed test by reacting with +1."""
    return comment.thumbs_up > 0


def parse_comment_to_patch(body: str) -> Optional[Patch]:
    """
    Recover the proposed diff and its target file from a comment rendered by
    post-tests. Returns None for comments that don't carry both.
    """
    text = normalize_newlines(body)
    diff = _DIFF_BLOCK_RE.search(text)
    if not diff or not diff.group(1):
        return None
    filename = _FILENAME_RE.search(text)
    if not filename or not filename.group(1):
        return None
    return Patch.from_body(filename.group(1), diff.group(1))


def group_patches_by_filename(patches: Iterable[Patch]) -> Dict[str, List[Patch]]:
    grouped: Dict[str, List[Patch]] = {}
    for p in patches:
        grouped.setdefault(p.filename, []).append(p)
    return grouped
