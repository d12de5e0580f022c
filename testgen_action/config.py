"""
Action configuration, read from the environment the Actions runner provides.

Inputs declared in action.yml reach the process as `INPUT_<NAME>` variables,
the name upper-cased with spaces replaced by underscores (hyphens are kept).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .errors import ConfigError

DEFAULT_RESULTS_FILE = "test_results.json"
DEFAULT_BOT_APP_NAME = "GitHub Actions"
DEFAULT_API_URL = "https://api.github.com"

_TRUE = ("true", "True", "TRUE")
_FALSE = ("false", "False", "FALSE")


def get_input(environ: Mapping[str, str], name: str, default: str = "") -> str:
    key = "INPUT_" + name.replace(" ", "_").upper()
    value = environ.get(key, "").strip()
    return value or default


def get_boolean_input(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = get_input(environ, name)
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ConfigError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def get_multiline_input(environ: Mapping[str, str], name: str) -> List[str]:
    return [ln.strip() for ln in get_input(environ, name).splitlines() if ln.strip()]


@dataclass
class ActionConfig:
    action: str = ""
    token: str = ""
    workspace: str = field(default_factory=os.getcwd)
    results_file: str = DEFAULT_RESULTS_FILE
    check_patches: bool = False
    fail_fast: bool = False
    paths: List[str] = field(default_factory=list)
    git: str = "git"
    bot_app_name: str = DEFAULT_BOT_APP_NAME
    repository: str = ""
    event_path: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ActionConfig":
        env = os.environ if environ is None else environ
        return cls(
            action=get_input(env, "action"),
            token=get_input(env, "token"),
            workspace=env.get("GITHUB_WORKSPACE") or os.getcwd(),
            results_file=get_input(env, "results-file", DEFAULT_RESULTS_FILE),
            check_patches=get_boolean_input(env, "check-patches"),
            fail_fast=get_boolean_input(env, "fail-fast"),
            paths=get_multiline_input(env, "paths"),
            git=get_input(env, "git-executable", "git"),
            bot_app_name=get_input(env, "bot-app-name", DEFAULT_BOT_APP_NAME),
            repository=env.get("GITHUB_REPOSITORY", ""),
            event_path=env.get("GITHUB_EVENT_PATH") or None,
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            debug=env.get("RUNNER_DEBUG") == "1",
        )

    def require_token(self) -> str:
        if not self.token:
            raise ConfigError("Input required and not supplied: token")
        return self.token
