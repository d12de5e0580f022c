# conftest.py - pytest configuration
import os

import pytest


@pytest.fixture(autouse=True)
def _clean_actions_env(monkeypatch):
    """Keep a developer's or runner's Actions variables out of the tests."""
    for key in list(os.environ):
        if key.startswith(("INPUT_", "GITHUB_")) or key == "RUNNER_DEBUG":
            monkeypatch.delenv(key, raising=False)
