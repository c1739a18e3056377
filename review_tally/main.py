"""Review tally step: count pull request reviews by state.

Reads the triggering event, queries reviews and outstanding review requests
concurrently with trio, and publishes one step output per review state.
"""

import logging

import trio

from .actions import ActionsLogHandler, set_failed, set_outputs
from .config import ActionConfig, is_debug
from .events import load_event, pull_request_number
from .github_client import GitHubClient
from .models import Review, ReviewRequest
from .queries import fetch_review_requests, fetch_reviews
from .tally import latest_review_states, tally_reviews


def setup_logging(debug: bool = False):
    """Route logging through workflow commands."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        handlers=[ActionsLogHandler()],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


async def count_reviews(
    client: GitHubClient, repo_owner: str, repo_name: str, pr_number: int
) -> dict[str, int]:
    """Fetch reviews and review requests for a PR and tally them.

    The two queries are independent, so they run side by side.
    """
    reviews: list[Review] = []
    requests: list[ReviewRequest] = []

    async def _reviews():
        reviews.extend(await fetch_reviews(client, repo_owner, repo_name, pr_number))

    async def _requests():
        requests.extend(await fetch_review_requests(client, repo_owner, repo_name, pr_number))

    try:
        async with trio.open_nursery() as nursery:
            nursery.start_soon(_reviews)
            nursery.start_soon(_requests)
    except ExceptionGroup as group:
        # Report the first failure; the sibling query was cancelled
        raise group.exceptions[0] from None

    return tally_reviews(latest_review_states(reviews), pending_requests=len(requests))


async def run(config: ActionConfig) -> dict[str, int]:
    """Run the whole pipeline for one event."""
    payload = load_event(config.event_path)
    pr_number = pull_request_number(payload)
    logger.info(f"Counting reviews on {config.repository}#{pr_number}")

    async with GitHubClient(config.token, config.graphql_url) as client:
        counts = await count_reviews(client, config.repo_owner, config.repo_name, pr_number)
        logger.debug(f"{client.request_count} API requests")

    set_outputs(counts)
    return counts


def main():
    """Console entry point."""
    setup_logging(debug=is_debug())
    try:
        config = ActionConfig.from_env()
        trio.run(run, config)
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        set_failed(str(e) or type(e).__name__)


if __name__ == "__main__":
    main()
