from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class GeneratedTest:
    """One entry of the generated test results file."""

    status: str  # "PASS" or "FAIL"
    test_name: str
    test_behavior: str
    original_test_file: str
    processed_test_file: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratedTest":
        test = data.get("test") or {}
        return cls(
            status=data["status"],
            test_name=test.get("test_name", ""),
            test_behavior=test.get("test_behavior", ""),
            original_test_file=data.get("original_test_file", ""),
            processed_test_file=data.get("processed_test_file", ""),
        )

    @property
    def passed(self) -> bool:
        return self.status != "FAIL"


@dataclass
class DisplayedTest:
    """A passing test prepared for posting as a review comment."""

    name: str
    filename: str
    behavior: str
    diff: str
