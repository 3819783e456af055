"""Shared request/response building blocks for use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from vidtalk.domain.error import NotFoundError
from vidtalk.domain.model import Comment, Pagination
from vidtalk.domain.service import CommentService
from vidtalk.domain.value import CommentId, CommentStatus, VideoId, VoteType


class ApiModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def parse_id(value: str, resource: str) -> UUID:
    """Parse a UUID string, treating malformed ids as unknown resources.

    Raises:
        NotFoundError: If ``value`` is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise NotFoundError(resource, str(value))


async def require_comment_on_video(
    comment_service: CommentService, comment_id: CommentId, video_id: VideoId
) -> Comment:
    """Load a comment and check it belongs to the video in the path.

    Raises:
        NotFoundError: If the comment is missing or on another video
    """
    comment = await comment_service.get_comment_by_id(comment_id)
    if comment is None or comment.video_id != video_id:
        raise NotFoundError("Comment", str(comment_id))
    return comment


class PaginationView(ApiModel):
    """Pagination metadata."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> "PaginationView":
        return cls(
            page=pagination.page,
            limit=pagination.limit,
            total=pagination.total,
            pages=pagination.pages,
        )


class CommentView(ApiModel):
    """A comment as returned to clients."""

    id: str
    video_id: str
    author_id: str
    author_display_name: str
    author_avatar_url: str | None
    content: str
    parent_id: str | None
    status: CommentStatus
    like_count: int
    dislike_count: int
    reply_count: int
    pinned: bool
    pinned_at: datetime | None
    pinned_by: str | None
    created_at: datetime
    updated_at: datetime
    user_vote: VoteType | None = None
    replies: list["CommentView"] | None = None

    @classmethod
    def from_comment(
        cls,
        comment: Comment,
        user_vote: Optional[VoteType] = None,
        replies: Optional[list["CommentView"]] = None,
    ) -> "CommentView":
        return cls(
            id=str(comment.id),
            video_id=str(comment.video_id),
            author_id=str(comment.author_id),
            author_display_name=comment.author_display_name,
            author_avatar_url=comment.author_avatar_url,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            status=comment.status,
            like_count=comment.like_count,
            dislike_count=comment.dislike_count,
            reply_count=comment.reply_count,
            pinned=comment.pinned,
            pinned_at=comment.pinned_at,
            pinned_by=str(comment.pinned_by) if comment.pinned_by else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            user_vote=user_vote,
            replies=replies,
        )
