"""Event payload loading and classification."""

import json
import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .errors import EventPayloadError, UnrecognizedEventError

logger = logging.getLogger(__name__)


class PullRequestEvent(BaseModel):
    """A `pull_request` or `pull_request_target` event."""
    number: int = Field(strict=True, gt=0)


class PullRequestReviewEvent(BaseModel):
    """A `pull_request_review` event."""
    number: int = Field(strict=True, gt=0)


PullRequestEventType = PullRequestEvent | PullRequestReviewEvent


def load_event(path: str) -> dict[str, Any]:
    """Read and decode the JSON event payload written by the runner."""
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        raise EventPayloadError(f"Could not read event payload {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EventPayloadError(f"Event payload {path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise EventPayloadError(f"Event payload {path} is not a JSON object")
    return payload


def _pr_number(pr_data: Any) -> Any:
    if not isinstance(pr_data, dict):
        return None
    return pr_data.get("number")


def classify_event(payload: dict[str, Any]) -> PullRequestEventType:
    """Work out which pull request the event is about.

    A top-level `pull_request` key wins over `pull_request_review`.

    Raises:
        UnrecognizedEventError: if the payload has neither shape, or the
            shape is present without a usable pull request number.
    """
    try:
        if payload.get("pull_request") is not None:
            return PullRequestEvent(number=_pr_number(payload["pull_request"]))

        review = payload.get("pull_request_review")
        if review is not None:
            pr_data = review.get("pull_request") if isinstance(review, dict) else None
            return PullRequestReviewEvent(number=_pr_number(pr_data))
    except ValidationError as e:
        raise UnrecognizedEventError(f"Failed to extract pull request number: {e}") from e

    raise UnrecognizedEventError(
        "Failed to extract pull request data. "
        "Expected a pull_request or pull_request_review event payload."
    )


def pull_request_number(payload: dict[str, Any]) -> int:
    """Classify the payload and return its pull request number."""
    event = classify_event(payload)
    logger.debug(f"{type(event).__name__} for pull request #{event.number}")
    return event.number
