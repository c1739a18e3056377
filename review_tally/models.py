"""Pydantic models for review data returned by the GraphQL API."""

from enum import Enum

from pydantic import BaseModel, Field


class ReviewState(str, Enum):
    """Pull request review states, in output order."""

    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    COMMENTED = "COMMENTED"
    DISMISSED = "DISMISSED"
    PENDING = "PENDING"

    @property
    def output_key(self) -> str:
        return self.name.lower()


class CommentAuthorAssociation(str, Enum):
    """Relationship of a review author to the repository."""

    COLLABORATOR = "COLLABORATOR"
    CONTRIBUTOR = "CONTRIBUTOR"
    FIRST_TIME_CONTRIBUTOR = "FIRST_TIME_CONTRIBUTOR"
    FIRST_TIMER = "FIRST_TIMER"
    MANNEQUIN = "MANNEQUIN"
    MEMBER = "MEMBER"
    NONE = "NONE"
    OWNER = "OWNER"


COLLABORATOR_ASSOCIATIONS = frozenset(
    {
        CommentAuthorAssociation.COLLABORATOR,
        CommentAuthorAssociation.MEMBER,
        CommentAuthorAssociation.OWNER,
    }
)


class Review(BaseModel):
    """A submitted pull request review."""
    author_login: str
    # Values GitHub adds later are kept as plain strings
    author_association: CommentAuthorAssociation | str = Field(union_mode="left_to_right")
    state: ReviewState

    @property
    def is_collaborator(self) -> bool:
        return self.author_association in COLLABORATOR_ASSOCIATIONS


class ReviewRequest(BaseModel):
    """An outstanding review request for a user or a team."""
    reviewer: str | None
    is_team: bool = False
