"""Shared test fixtures."""

import json

import httpx
import pytest

GRAPHQL_URL = "https://api.github.com/graphql"


def make_review_node(login: str | None = "octocat", state: str = "APPROVED", **overrides) -> dict:
    base = {
        "authorAssociation": "MEMBER",
        "author": {"login": login} if login is not None else None,
        "state": state,
    }
    base.update(overrides)
    return base


def make_request_node(login: str | None = None, team: str | None = None) -> dict:
    if team is not None:
        return {"requestedReviewer": {"__typename": "Team", "name": team}}
    return {"requestedReviewer": {"__typename": "User", "login": login or "reviewer"}}


def make_connection(field: str, nodes: list[dict], has_next_page: bool = False, total: int | None = None) -> dict:
    return {
        "data": {
            "repository": {
                "pullRequest": {
                    field: {
                        "totalCount": len(nodes) if total is None else total,
                        "pageInfo": {"hasNextPage": has_next_page},
                        "nodes": nodes,
                    }
                }
            }
        }
    }


def graphql_router(review_nodes: list[dict], request_nodes: list[dict]):
    """respx side effect answering both queries from one endpoint."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if "reviewRequests" in body["query"]:
            return httpx.Response(200, json=make_connection("reviewRequests", request_nodes))
        return httpx.Response(200, json=make_connection("reviews", review_nodes))

    return handler


@pytest.fixture
def event_file(tmp_path):
    """Write an event payload to disk and return its path."""

    def _write(payload) -> str:
        path = tmp_path / "event.json"
        path.write_text(json.dumps(payload))
        return str(path)

    return _write


@pytest.fixture
def github_client_uninit():
    """Create an uninitialized GitHubClient with a fake token.

    Use this for sync tests that don't need the async context manager.
    """
    from review_tally.github_client import GitHubClient

    return GitHubClient(token="fake-token")


@pytest.fixture
async def github_client():
    """Create async GitHubClient for tests."""
    from review_tally.github_client import GitHubClient

    async with GitHubClient(token="fake-token") as client:
        yield client
