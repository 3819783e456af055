"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from vidtalk.domain.model.comment import Comment
from vidtalk.domain.repository.comment import CommentRepository
from vidtalk.domain.value import (
    CommentId,
    CommentSortOrder,
    CommentStatus,
    UserId,
    VideoId,
)
from vidtalk.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self.database.comments

    def _update(self, comment_id: CommentId, **values) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(update=values)
        self._comments[comment_id] = updated
        return updated

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments at once."""
        return [self._comments[cid] for cid in comment_ids if cid in self._comments]

    async def lock(self, comment_id: CommentId) -> Optional[Comment]:
        """Row locks are implied by the database-wide unit lock."""
        return self._comments.get(comment_id)

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        return self._update(comment_id, content=content, updated_at=updated_at)

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change status without touching updated_at."""
        return self._update(comment_id, status=status)

    async def set_vote_counts(
        self, comment_id: CommentId, like_count: int, dislike_count: int
    ) -> Optional[Comment]:
        """Write cached vote counters."""
        return self._update(
            comment_id, like_count=like_count, dislike_count=dislike_count
        )

    async def set_reply_count(
        self, comment_id: CommentId, reply_count: int
    ) -> Optional[Comment]:
        """Write cached reply counter."""
        return self._update(comment_id, reply_count=reply_count)

    async def count_children(
        self,
        parent_id: CommentId,
        statuses: Sequence[CommentStatus] = (CommentStatus.ACTIVE,),
    ) -> int:
        """Count direct replies in the given statuses."""
        return sum(
            1
            for c in self._comments.values()
            if c.parent_id == parent_id and c.status in statuses
        )

    async def clear_pins(self, video_id: VideoId) -> int:
        """Unpin all pinned top-level comments on a video."""
        pinned = [
            c
            for c in self._comments.values()
            if c.video_id == video_id and c.parent_id is None and c.pinned
        ]
        for comment in pinned:
            self._update(comment.id, pinned=False, pinned_at=None, pinned_by=None)
        return len(pinned)

    async def set_pin(
        self, comment_id: CommentId, pinned_by: UserId, pinned_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as pinned."""
        return self._update(
            comment_id, pinned=True, pinned_at=pinned_at, pinned_by=pinned_by
        )

    async def clear_pin(self, comment_id: CommentId) -> Optional[Comment]:
        """Clear one comment's pin."""
        return self._update(comment_id, pinned=False, pinned_at=None, pinned_by=None)

    async def find_top_level(
        self,
        video_id: VideoId,
        statuses: Sequence[CommentStatus],
        sort: CommentSortOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[Comment], int]:
        """Find a page of top-level comments, pinned first."""
        comments = [
            c
            for c in self._comments.values()
            if c.video_id == video_id
            and c.parent_id is None
            and c.status in statuses
        ]

        # Python's sort is stable: apply the least significant key first
        comments.sort(key=lambda c: str(c.id))
        if sort == CommentSortOrder.OLDEST:
            comments.sort(key=lambda c: c.created_at)
        elif sort == CommentSortOrder.TOP:
            comments.sort(key=lambda c: c.created_at, reverse=True)
            comments.sort(key=lambda c: c.score, reverse=True)
        else:
            comments.sort(key=lambda c: c.created_at, reverse=True)
        comments.sort(key=lambda c: not c.pinned)

        return comments[offset : offset + limit], len(comments)

    async def find_replies(
        self,
        parent_ids: Sequence[CommentId],
        statuses: Sequence[CommentStatus] = (CommentStatus.ACTIVE,),
    ) -> list[Comment]:
        """Find replies of several parents, oldest first."""
        parents = set(parent_ids)
        replies = [
            c
            for c in self._comments.values()
            if c.parent_id in parents and c.status in statuses
        ]
        replies.sort(key=lambda c: (c.created_at, str(c.id)))
        return replies
