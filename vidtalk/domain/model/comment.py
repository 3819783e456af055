"""Comment entity.

Comments form two-level threads on a video: top-level comments and their
direct replies. Replies never nest further.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vidtalk.domain.model.common import DomainModel
from vidtalk.domain.value import CommentId, CommentStatus, UserId, VideoId


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a video or a reply to one.

    Derived counters (like_count, dislike_count, reply_count) mirror the
    vote ledger and the active children; only the services that own those
    aggregates write them. Pin fields are only ever set on top-level
    comments.
    """

    id: CommentId
    video_id: VideoId
    author_id: UserId
    author_display_name: str
    author_avatar_url: Optional[str] = None
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    status: CommentStatus = CommentStatus.ACTIVE
    like_count: int = Field(default=0, ge=0)
    dislike_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    pinned: bool = False
    pinned_at: Optional[datetime] = None
    pinned_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def is_deleted(self) -> bool:
        return self.status == CommentStatus.DELETED

    @property
    def score(self) -> int:
        """Net score used by the ``top`` ordering."""
        return self.like_count - self.dislike_count
