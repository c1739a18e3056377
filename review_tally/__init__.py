"""Pull request review-state tallies for GitHub Actions workflows."""

from .errors import (
    ConfigError,
    EventPayloadError,
    GraphQLError,
    ReviewTallyError,
    UnrecognizedEventError,
)
from .models import CommentAuthorAssociation, Review, ReviewRequest, ReviewState
from .tally import OUTPUT_KEYS, REVIEW_STATES, latest_review_states, tally_reviews

__all__ = [
    "OUTPUT_KEYS",
    "REVIEW_STATES",
    "CommentAuthorAssociation",
    "ConfigError",
    "EventPayloadError",
    "GraphQLError",
    "Review",
    "ReviewRequest",
    "ReviewState",
    "ReviewTallyError",
    "UnrecognizedEventError",
    "latest_review_states",
    "tally_reviews",
]
