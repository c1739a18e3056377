"""GraphQL queries for pull request reviews and review requests."""

import logging
from typing import Any

from .config import PAGE_SIZE
from .errors import GraphQLError
from .github_client import GitHubClient
from .models import Review, ReviewRequest

logger = logging.getLogger(__name__)

# Deleted accounts come back with a null author
GHOST_LOGIN = "ghost"

QUERY_VARIABLE_TYPES = {
    "repoOwner": "String!",
    "repoName": "String!",
    "prNumber": "Int!",
}

QUERY_ARGS = ", ".join(f"${name}: {type_}" for name, type_ in QUERY_VARIABLE_TYPES.items())

REVIEWS_QUERY = f"""
query GetCollaboratorApprovedPrReviewCount({QUERY_ARGS}) {{
  repository(owner: $repoOwner, name: $repoName) {{
    pullRequest(number: $prNumber) {{
      reviews(first: {PAGE_SIZE}) {{
        totalCount
        pageInfo {{
          hasNextPage
        }}
        nodes {{
          authorAssociation
          author {{
            login
          }}
          state
        }}
      }}
    }}
  }}
}}
"""

REVIEW_REQUESTS_QUERY = f"""
query GetRequestedReviewers({QUERY_ARGS}) {{
  repository(owner: $repoOwner, name: $repoName) {{
    pullRequest(number: $prNumber) {{
      reviewRequests(first: {PAGE_SIZE}) {{
        totalCount
        pageInfo {{
          hasNextPage
        }}
        nodes {{
          requestedReviewer {{
            __typename
            ... on User {{
              login
            }}
            ... on Team {{
              name
            }}
            ... on Mannequin {{
              login
            }}
          }}
        }}
      }}
    }}
  }}
}}
"""


def query_variables(repo_owner: str, repo_name: str, pr_number: int) -> dict[str, Any]:
    return {"repoOwner": repo_owner, "repoName": repo_name, "prNumber": pr_number}


def extract_review(node: dict) -> Review:
    """Extract review data from a GraphQL review node."""
    author = node.get("author") or {}

    return Review(
        author_login=author.get("login") or GHOST_LOGIN,
        author_association=node["authorAssociation"],
        state=node["state"],
    )


def extract_review_request(node: dict) -> ReviewRequest:
    """Extract a requested user or team from a GraphQL review request node."""
    reviewer = node.get("requestedReviewer") or {}

    return ReviewRequest(
        reviewer=reviewer.get("login") or reviewer.get("name"),
        is_team=reviewer.get("__typename") == "Team",
    )


def _connection(data: dict, field: str) -> dict:
    """Dig `repository.pullRequest.<field>` out of a query result."""
    repository = data.get("repository")
    if repository is None:
        raise GraphQLError("Repository not found or not accessible with the given token")
    pull_request = repository.get("pullRequest")
    if pull_request is None:
        raise GraphQLError("Pull request not found")
    connection = pull_request.get(field)
    if connection is None:
        raise GraphQLError(f"Pull request response has no {field}")
    return connection


def _warn_if_truncated(connection: dict, what: str, pr_number: int) -> None:
    if connection.get("pageInfo", {}).get("hasNextPage"):
        total = connection.get("totalCount", "more than")
        logger.warning(
            f"Pull request #{pr_number} has {total} {what}; only the first {PAGE_SIZE} are counted"
        )


async def fetch_reviews(
    client: GitHubClient, repo_owner: str, repo_name: str, pr_number: int
) -> list[Review]:
    """Fetch up to PAGE_SIZE submitted reviews, in API order."""
    data = await client.graphql(REVIEWS_QUERY, query_variables(repo_owner, repo_name, pr_number))
    connection = _connection(data, "reviews")
    _warn_if_truncated(connection, "reviews", pr_number)

    reviews = [extract_review(node) for node in connection.get("nodes") or [] if node]
    logger.debug(f"{len(reviews)} reviews fetched")
    return reviews


async def fetch_review_requests(
    client: GitHubClient, repo_owner: str, repo_name: str, pr_number: int
) -> list[ReviewRequest]:
    """Fetch up to PAGE_SIZE outstanding review requests."""
    data = await client.graphql(
        REVIEW_REQUESTS_QUERY, query_variables(repo_owner, repo_name, pr_number)
    )
    connection = _connection(data, "reviewRequests")
    _warn_if_truncated(connection, "review requests", pr_number)

    requests = [extract_review_request(node) for node in connection.get("nodes") or [] if node]
    logger.debug(f"{len(requests)} review requests outstanding")
    return requests
