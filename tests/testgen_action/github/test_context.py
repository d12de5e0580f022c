import json

import pytest

from testgen_action.config import ActionConfig
from testgen_action.errors import ConfigError
from testgen_action.github import EventContext, load_event_context


def _config(tmp_path, payload, repository="octo/todo") -> ActionConfig:
    event = tmp_path / "event.json"
    event.write_text(json.dumps(payload))
    return ActionConfig(repository=repository, event_path=str(event))


def test_pull_request_event(tmp_path):
    ctx = load_event_context(_config(tmp_path, {"pull_request": {"number": 12}, "number": 12}))
    assert ctx == EventContext(owner="octo", repo="todo", issue_number=12)
    assert ctx.comments_path == "/repos/octo/todo/issues/12/comments"


def test_issue_comment_event_prefers_issue(tmp_path):
    ctx = load_event_context(_config(tmp_path, {"issue": {"number": 5}, "pull_request": {"number": 6}}))
    assert ctx.issue_number == 5


def test_event_without_number(tmp_path):
    with pytest.raises(ConfigError, match="not associated"):
        load_event_context(_config(tmp_path, {"ref": "refs/heads/main"}))


def test_bad_repository(tmp_path):
    with pytest.raises(ConfigError, match="owner/repo"):
        load_event_context(_config(tmp_path, {"number": 1}, repository="octo"))


def test_unreadable_event_file(tmp_path):
    config = ActionConfig(repository="octo/todo", event_path=str(tmp_path / "missing.json"))
    with pytest.raises(ConfigError, match="Could not read event payload"):
        load_event_context(config)
