class PathViolation(Exception):
    """A target filename escapes the workspace or is outside the allowed paths."""
