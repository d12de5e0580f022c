from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Patch:
    """A unified diff for a single target file, ``---``/``+++`` preamble included."""

    filename: str
    text: str

    @classmethod
    def from_body(cls, filename: str, body: str) -> "Patch":
        return cls(filename=filename, text=f"--- a/{filename}\n+++ b/{filename}\n{body}")


@dataclass
class LineDelta:
    """
    Deletions and insertions expressed in original-file line numbers.

    deleted: position -> the deleted line exactly as it appeared in the diff.
    added:   anchor -> inserted lines, where the anchor is the original line
             immediately preceding the insertion point.

    A line that ends its file without a newline carries the
    ``\\ No newline at end of file`` marker inside the same string.
    """

    deleted: Dict[int, str] = field(default_factory=dict)
    added: Dict[int, List[str]] = field(default_factory=dict)

    def positions(self) -> List[int]:
        """Sorted before-coordinates a re-emitted diff has to visit."""
        anchored = {anchor + 1 for anchor in self.added}
        return sorted(set(self.deleted) | anchored)

    def is_empty(self) -> bool:
        return not self.deleted and not self.added
