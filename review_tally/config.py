"""Configuration for the review tally step.

Everything comes from the environment GitHub Actions provides to a step.
A local .env file is honoured so the step can be run by hand.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

load_dotenv(find_dotenv(usecwd=True))

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"

# GitHub caps connection page sizes at 100
PAGE_SIZE = 100

TOKEN_INPUT = "repo-token"


def get_input(name: str, required: bool = False) -> str:
    """Read an action input the way the Actions runner exposes it.

    `repo-token` arrives as the INPUT_REPO-TOKEN environment variable.
    """
    env_name = f"INPUT_{name.replace(' ', '_').upper()}"
    value = os.environ.get(env_name, "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def is_debug() -> bool:
    """Whether the runner has step debug logging turned on."""
    return os.environ.get("RUNNER_DEBUG") == "1"


def parse_repository(full_name: str) -> tuple[str, str]:
    """Split an `owner/name` repository string."""
    parts = full_name.split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigError(f"GITHUB_REPOSITORY must look like 'owner/name', got {full_name!r}")
    return parts[0], parts[1]


@dataclass(frozen=True)
class ActionConfig:
    """Validated settings for a single run."""

    token: str
    repo_owner: str
    repo_name: str
    event_path: str
    graphql_url: str = DEFAULT_GRAPHQL_URL

    @property
    def repository(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"

    @classmethod
    def from_env(cls) -> "ActionConfig":
        """Build config from the environment, failing before any network call."""
        token = get_input(TOKEN_INPUT, required=True)

        event_path = os.environ.get("GITHUB_EVENT_PATH")
        if not event_path:
            raise ConfigError("GITHUB_EVENT_PATH is not set")

        repository = os.environ.get("GITHUB_REPOSITORY")
        if not repository:
            raise ConfigError("GITHUB_REPOSITORY is not set")
        owner, name = parse_repository(repository)

        return cls(
            token=token,
            repo_owner=owner,
            repo_name=name,
            event_path=event_path,
            graphql_url=os.environ.get("GITHUB_GRAPHQL_URL") or DEFAULT_GRAPHQL_URL,
        )
