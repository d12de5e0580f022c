from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class HunkHeader:
    """The four numbers of an ``@@ -a,b +c,d @@`` line."""

    before_start: int
    before_count: int
    after_start: int
    after_count: int


@dataclass(frozen=True)
class Hunk:
    before_start: int
    before_count: int
    after_start: int
    after_count: int
    lines: Tuple[str, ...]  # '+'/'-' prefixed, newline terminated

    @property
    def header(self) -> str:
        return (
            f"@@ -{self.before_start},{self.before_count} "
            f"+{self.after_start},{self.after_count} @@\n"
        )

    def render(self) -> str:
        return self.header + "".join(self.lines)
