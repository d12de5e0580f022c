from typing import Optional


class GitApplyError(Exception):
    """The external ``git apply`` process failed or could not be started."""

    def __init__(self, message: str, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode
