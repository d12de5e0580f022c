import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config import ActionConfig
from ..errors import ConfigError


@dataclass(frozen=True)
class EventContext:
    """Repository and pull request (issue) the workflow run belongs to."""

    owner: str
    repo: str
    issue_number: int

    @property
    def comments_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/issues/{self.issue_number}/comments"


def _issue_number(payload: Dict[str, Any]) -> Optional[int]:
    source = payload.get("issue") or payload.get("pull_request") or payload
    number = source.get("number")
    return int(number) if number is not None else None


def load_event_context(config: ActionConfig) -> EventContext:
    """Build the EventContext from GITHUB_REPOSITORY and the event payload file."""
    owner, sep, repo = config.repository.partition("/")
    if not sep or not owner or not repo:
        raise ConfigError(
            f"GITHUB_REPOSITORY must look like 'owner/repo', got '{config.repository}'"
        )

    payload: Dict[str, Any] = {}
    if config.event_path:
        try:
            with open(config.event_path, encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not read event payload '{config.event_path}': {e}") from e

    number = _issue_number(payload)
    if number is None:
        raise ConfigError("The triggering event is not associated with an issue or pull request")
    return EventContext(owner=owner, repo=repo, issue_number=number)
