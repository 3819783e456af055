"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from vidtalk.domain.model.comment import Comment
from vidtalk.domain.value import (
    CommentId,
    CommentSortOrder,
    CommentStatus,
    UserId,
    VideoId,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Updates are column-scoped so that a content edit can never overwrite
    counters written by a concurrent vote, and vice versa.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments at once (batch query).

        Args:
            comment_ids: Comment IDs to look up

        Returns:
            The comments that exist, in no particular order
        """
        pass

    @abstractmethod
    async def lock(self, comment_id: CommentId) -> Optional[Comment]:
        """Load a comment and lock its row until the enclosing unit ends.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The locked comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Replace a comment's content and bump ``updated_at``.

        Returns:
            Updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change a comment's status. ``updated_at`` is left alone."""
        pass

    @abstractmethod
    async def set_vote_counts(
        self, comment_id: CommentId, like_count: int, dislike_count: int
    ) -> Optional[Comment]:
        """Write the cached like/dislike counters recounted from the ledger."""
        pass

    @abstractmethod
    async def set_reply_count(
        self, comment_id: CommentId, reply_count: int
    ) -> Optional[Comment]:
        """Write the cached reply counter recounted from the children."""
        pass

    @abstractmethod
    async def count_children(
        self,
        parent_id: CommentId,
        statuses: Sequence[CommentStatus] = (CommentStatus.ACTIVE,),
    ) -> int:
        """Count the direct replies of a comment whose status is in ``statuses``."""
        pass

    @abstractmethod
    async def clear_pins(self, video_id: VideoId) -> int:
        """Unpin every pinned top-level comment on a video.

        Returns:
            Number of comments that were unpinned
        """
        pass

    @abstractmethod
    async def set_pin(
        self, comment_id: CommentId, pinned_by: UserId, pinned_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as pinned."""
        pass

    @abstractmethod
    async def clear_pin(self, comment_id: CommentId) -> Optional[Comment]:
        """Clear the pin fields of one comment."""
        pass

    @abstractmethod
    async def find_top_level(
        self,
        video_id: VideoId,
        statuses: Sequence[CommentStatus],
        sort: CommentSortOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[Comment], int]:
        """Find one page of top-level comments on a video.

        The pinned comment (if it matches ``statuses``) always sorts first;
        the rest follow ``sort``. The total is computed by the same query.

        Args:
            video_id: Video ID
            statuses: Statuses to include
            sort: Ordering after the pinned comment
            limit: Page size
            offset: Number of top-level comments to skip

        Returns:
            Tuple of (comments on this page, total matching top-level comments)
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_ids: Sequence[CommentId],
        statuses: Sequence[CommentStatus] = (CommentStatus.ACTIVE,),
    ) -> list[Comment]:
        """Find the replies of several comments, oldest first.

        Args:
            parent_ids: Parent comment IDs
            statuses: Statuses to include

        Returns:
            Replies ordered by created_at ascending
        """
        pass
