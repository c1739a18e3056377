"""Exceptions raised while computing review tallies."""


class ReviewTallyError(Exception):
    """Base class for all review-tally failures."""


class ConfigError(ReviewTallyError, ValueError):
    """A required input or environment variable is missing or malformed."""


class EventPayloadError(ReviewTallyError):
    """The event payload file could not be read or decoded."""


class UnrecognizedEventError(ReviewTallyError, ValueError):
    """The event payload is neither a pull_request nor a pull_request_review event."""


class GraphQLError(ReviewTallyError):
    """The GraphQL API answered with errors or without the expected data."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []
