"""Pytest fixtures for todolint tests."""

from typing import Dict, List

import pytest

from todolint.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests independent of the caller's environment and .env file."""
    for name in ("TERMS", "LOCATION", "URL", "MAX_MESSAGE_LENGTH", "LOG_LEVEL"):
        monkeypatch.delenv(f"TODOLINT_{name}", raising=False)
    monkeypatch.setenv("TODOLINT_DISCOVER_URL", "false")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_comments() -> Dict[str, List[str]]:
    """Sample comment bodies, as a host would extract them."""
    return {
        "undocumented": [
            " TODO: refactor this",
            " FIXME handle the empty case",
            " xxx: remove before release",
            "todo",
        ],
        "clean": [
            " refactor this later",
            " the mastodon API returns pages",
            " todoist integration",
            "",
            "   ",
        ],
    }


@pytest.fixture
def tracker_url() -> str:
    return "https://x.test/issues"
