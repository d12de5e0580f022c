from .comment import Comment
from .hunk import Hunk, HunkHeader
from .patch import LineDelta, Patch
from .results import DisplayedTest, GeneratedTest

__all__ = [
    "Comment",
    "DisplayedTest",
    "GeneratedTest",
    "Hunk",
    "HunkHeader",
    "LineDelta",
    "Patch",
]
