from typing import Optional


class GitHubError(Exception):
    """A GitHub REST call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
