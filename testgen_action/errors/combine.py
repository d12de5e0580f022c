class CombineError(Exception):
    """Raised when a set of patch fragments cannot be merged into one diff."""


class NoPatchesError(CombineError):
    def __init__(self) -> None:
        super().__init__("No patches to combine")


class NoValidPatchesError(CombineError):
    def __init__(self) -> None:
        super().__init__("No valid patches to apply")


class InvalidHunkHeaderError(CombineError):
    """A line that should open a hunk is not an ``@@ -a[,b] +c[,d] @@`` header."""

    def __init__(self, header: str) -> None:
        self.header = header.rstrip("\n")
        super().__init__(f'Invalid git header format. Received header "{self.header}"')
