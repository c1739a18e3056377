"""Review state aggregation."""

import logging
from collections.abc import Iterable

from .models import Review, ReviewState

logger = logging.getLogger(__name__)

# Output order; every run emits exactly these states
REVIEW_STATES: tuple[ReviewState, ...] = (
    ReviewState.APPROVED,
    ReviewState.CHANGES_REQUESTED,
    ReviewState.COMMENTED,
    ReviewState.DISMISSED,
    ReviewState.PENDING,
)

OUTPUT_KEYS: tuple[str, ...] = tuple(state.output_key for state in REVIEW_STATES)


def latest_review_states(reviews: Iterable[Review]) -> dict[str, ReviewState]:
    """Collapse reviews to one state per author.

    Reviews are folded in the order given, so a later review by the same
    login overwrites an earlier one.
    """
    states: dict[str, ReviewState] = {}
    for review in reviews:
        states[review.author_login] = review.state
    return states


def tally_reviews(states: dict[str, ReviewState], pending_requests: int = 0) -> dict[str, int]:
    """Count authors per review state.

    Outstanding review requests count as pending reviews: requested but not
    yet submitted.
    """
    if pending_requests < 0:
        raise ValueError(f"pending_requests must be non-negative, got {pending_requests}")

    logger.debug(f"{len(states)} total reviews")

    counts: dict[str, int] = {}
    for state in REVIEW_STATES:
        count = sum(1 for s in states.values() if s == state)
        if state is ReviewState.PENDING:
            logger.debug(f"{state.value} list of needed reviewers: {pending_requests}")
            count += pending_requests
        logger.debug(f"  {state.output_key}: {count:,}")
        counts[state.output_key] = count
    return counts
