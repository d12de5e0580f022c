from .apply import GitApplyError
from .combine import CombineError, InvalidHunkHeaderError, NoPatchesError, NoValidPatchesError
from .config import ConfigError
from .github import GitHubError
from .path import PathViolation
from .results import ResultsError

__all__ = [
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
