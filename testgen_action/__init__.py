from .apply_tests import ApplySummary, apply_tests
from .combine import combine_patches, emit_hunks, merge_deltas, parse_fragment, parse_hunk_header
from .comments import group_patches_by_filename, parse_comment_to_patch
from .config import ActionConfig
from .errors import (
    CombineError,
    ConfigError,
    GitApplyError,
    GitHubError,
    InvalidHunkHeaderError,
    NoPatchesError,
    NoValidPatchesError,
    PathViolation,
    ResultsError,
)
from .git import apply_git_patch, check_git_patch
from .models import Hunk, HunkHeader, LineDelta, Patch
from .post_tests import post_test_results

__all__ = [
    "combine_patches",
    "merge_deltas",
    "parse_fragment",
    "parse_hunk_header",
    "emit_hunks",
    "parse_comment_to_patch",
    "group_patches_by_filename",
    "apply_git_patch",
    "check_git_patch",
    "apply_tests",
    "post_test_results",
    "ApplySummary",
    "ActionConfig",
    "Patch",
    "LineDelta",
    "Hunk",
    "HunkHeader",
    "CombineError",
    "NoPatchesError",
    "NoValidPatchesError",
    "InvalidHunkHeaderError",
    "GitApplyError",
    "GitHubError",
    "ResultsError",
    "PathViolation",
    "ConfigError",
]
