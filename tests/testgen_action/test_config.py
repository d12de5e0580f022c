import os

import pytest

from testgen_action.config import ActionConfig, get_boolean_input, get_input, get_multiline_input
from testgen_action.errors import ConfigError


def test_get_input_uses_actions_naming():
    env = {"INPUT_RESULTS-FILE": " results.json ", "INPUT_BOT_APP_NAME": "x"}
    assert get_input(env, "results-file") == "results.json"
    assert get_input(env, "bot app name") == "x"
    assert get_input(env, "missing", "fallback") == "fallback"


@pytest.mark.parametrize("raw,expected", [("true", True), ("TRUE", True), ("False", False), ("", False)])
def test_get_boolean_input(raw, expected):
    assert get_boolean_input({"INPUT_FLAG": raw}, "flag") is expected


def test_get_boolean_input_rejects_other_values():
    with pytest.raises(ConfigError, match="flag"):
        get_boolean_input({"INPUT_FLAG": "yes"}, "flag")


def test_get_multiline_input_drops_blank_lines():
    assert get_multiline_input({"INPUT_PATHS": "tests/**\n\n  src/*.py  \n"}, "paths") == ["tests/**", "src/*.py"]


def test_from_env_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = ActionConfig.from_env({})
    assert config.action == ""
    assert config.workspace == os.getcwd()
    assert config.results_file == "test_results.json"
    assert config.check_patches is False
    assert config.fail_fast is False
    assert config.paths == []
    assert config.git == "git"
    assert config.bot_app_name == "GitHub Actions"
    assert config.api_url == "https://api.github.com"
    assert config.event_path is None
    assert config.debug is False


def test_from_env_reads_runner_environment():
    config = ActionConfig.from_env(
        {
            "INPUT_ACTION": "apply-tests",
            "INPUT_TOKEN": "secret",
            "INPUT_CHECK-PATCHES": "true",
            "INPUT_PATHS": "tests/**",
            "GITHUB_WORKSPACE": "/github/workspace",
            "GITHUB_REPOSITORY": "octo/repo",
            "GITHUB_EVENT_PATH": "/github/event.json",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            "RUNNER_DEBUG": "1",
        }
    )
    assert config.action == "apply-tests"
    assert config.require_token() == "secret"
    assert config.check_patches is True
    assert config.paths == ["tests/**"]
    assert config.workspace == "/github/workspace"
    assert config.repository == "octo/repo"
    assert config.event_path == "/github/event.json"
    assert config.api_url == "https://ghe.example.com/api/v3"
    assert config.debug is True


def test_require_token_when_missing():
    with pytest.raises(ConfigError, match="token"):
        ActionConfig().require_token()
