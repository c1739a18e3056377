"""GitHub GraphQL API client.

Uses httpx.AsyncClient under trio. Requests are not retried; any failure
ends the run and fails the workflow step.
"""

import json
import logging
from typing import Any

import httpx

from .config import DEFAULT_GRAPHQL_URL
from .errors import GraphQLError

logger = logging.getLogger(__name__)

USER_AGENT = "review-tally"


class GitHubClient:
    """Async client for the GitHub GraphQL endpoint.

    Use as an async context manager so the underlying connection pool is
    always closed:

        async with GitHubClient(token) as client:
            data = await client.graphql(query, variables)
    """

    def __init__(self, token: str, graphql_url: str = DEFAULT_GRAPHQL_URL):
        if not token:
            raise ValueError("GitHub auth required. Provide the repo-token input.")
        self.token = token
        self.graphql_url = graphql_url
        self.client: httpx.AsyncClient | None = None
        self._request_count = 0

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": USER_AGENT,
            },
            timeout=30.0,
            http2=True,
        )
        return self

    async def __aexit__(self, *args):
        if self.client:
            await self.client.aclose()

    @property
    def request_count(self) -> int:
        return self._request_count

    async def graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict:
        """Run a GraphQL query and return its `data` object.

        Raises:
            httpx.HTTPStatusError: on a non-2xx response (bad token, outage)
            GraphQLError: if the response carries an `errors` array
        """
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        logger.debug(f"Using query:\n{query}")
        logger.debug(f"Variables: {json.dumps(variables, indent=2)}")

        response = await self.client.post(self.graphql_url, json=payload)
        self._request_count += 1
        response.raise_for_status()

        result = response.json()
        errors = result.get("errors")
        if errors:
            messages = "; ".join(str(e.get("message", e)) for e in errors)
            raise GraphQLError(f"GraphQL query failed: {messages}", errors)

        data = result.get("data")
        if data is None:
            raise GraphQLError("GraphQL response contained no data")
        return data
