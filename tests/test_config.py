"""Tests for configuration loading."""

import pytest

from review_tally.config import DEFAULT_GRAPHQL_URL, ActionConfig, get_input, is_debug, parse_repository
from review_tally.errors import ConfigError


@pytest.fixture
def action_env(monkeypatch, tmp_path):
    """Set the environment a runner provides to a step."""
    monkeypatch.setenv("INPUT_REPO-TOKEN", "ghp_test")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(tmp_path / "event.json"))
    monkeypatch.setenv("GITHUB_REPOSITORY", "myorg/myrepo")
    monkeypatch.delenv("GITHUB_GRAPHQL_URL", raising=False)
    return monkeypatch


class TestGetInput:
    """Tests for reading action inputs."""

    def test_reads_hyphenated_input(self, monkeypatch):
        monkeypatch.setenv("INPUT_REPO-TOKEN", "  secret  ")
        assert get_input("repo-token") == "secret"

    def test_spaces_become_underscores(self, monkeypatch):
        monkeypatch.setenv("INPUT_MY_INPUT", "value")
        assert get_input("my input") == "value"

    def test_missing_optional(self, monkeypatch):
        monkeypatch.delenv("INPUT_REPO-TOKEN", raising=False)
        assert get_input("repo-token") == ""

    def test_missing_required(self, monkeypatch):
        monkeypatch.delenv("INPUT_REPO-TOKEN", raising=False)
        with pytest.raises(ConfigError, match="Input required and not supplied: repo-token"):
            get_input("repo-token", required=True)


class TestParseRepository:
    """Tests for splitting GITHUB_REPOSITORY."""

    def test_owner_and_name(self):
        assert parse_repository("myorg/myrepo") == ("myorg", "myrepo")

    @pytest.mark.parametrize("value", ["myrepo", "a/b/c", "/myrepo", "myorg/", ""])
    def test_malformed(self, value):
        with pytest.raises(ConfigError):
            parse_repository(value)


class TestActionConfig:
    """Tests for ActionConfig.from_env."""

    def test_from_env(self, action_env, tmp_path):
        config = ActionConfig.from_env()
        assert config.token == "ghp_test"
        assert config.repo_owner == "myorg"
        assert config.repo_name == "myrepo"
        assert config.repository == "myorg/myrepo"
        assert config.event_path == str(tmp_path / "event.json")
        assert config.graphql_url == DEFAULT_GRAPHQL_URL

    def test_enterprise_graphql_url(self, action_env):
        action_env.setenv("GITHUB_GRAPHQL_URL", "https://github.example.com/api/graphql")
        assert ActionConfig.from_env().graphql_url == "https://github.example.com/api/graphql"

    def test_missing_token(self, action_env):
        action_env.delenv("INPUT_REPO-TOKEN")
        with pytest.raises(ConfigError, match="repo-token"):
            ActionConfig.from_env()

    def test_missing_event_path(self, action_env):
        action_env.delenv("GITHUB_EVENT_PATH")
        with pytest.raises(ConfigError, match="GITHUB_EVENT_PATH"):
            ActionConfig.from_env()

    def test_missing_repository(self, action_env):
        action_env.delenv("GITHUB_REPOSITORY")
        with pytest.raises(ConfigError, match="GITHUB_REPOSITORY"):
            ActionConfig.from_env()


class TestIsDebug:
    def test_runner_debug(self, monkeypatch):
        monkeypatch.setenv("RUNNER_DEBUG", "1")
        assert is_debug() is True

    def test_default(self, monkeypatch):
        monkeypatch.delenv("RUNNER_DEBUG", raising=False)
        assert is_debug() is False
