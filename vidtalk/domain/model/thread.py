"""Read models returned by listing operations."""

import math
from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from vidtalk.domain.model.comment import Comment
from vidtalk.domain.model.common import DomainModel
from vidtalk.domain.value import CommentId, VoteType

T = TypeVar("T")


class Pagination(DomainModel):
    """Offset pagination metadata."""

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total: int = Field(ge=0)

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_more(self) -> bool:
        return self.page * self.limit < self.total


class Page(DomainModel, Generic[T]):
    """A page of items with its pagination metadata."""

    items: List[T]
    pagination: Pagination


class ThreadedComment(DomainModel):
    """A comment paired with the viewer's vote on it."""

    comment: Comment
    user_vote: Optional[VoteType] = None


class CommentThread(DomainModel):
    """A top-level comment with its active replies, oldest first."""

    comment: Comment
    user_vote: Optional[VoteType] = None
    replies: List[ThreadedComment] = Field(default_factory=list)


class CommentThreadPage(DomainModel):
    """One page of threads on a video."""

    comments: List[CommentThread]
    pagination: Pagination


class BulkActionResult(DomainModel):
    """Outcome of a bulk moderation action on a single comment."""

    comment_id: str  # Raw id as submitted, may not be a valid UUID
    success: bool
    error: Optional[str] = None
