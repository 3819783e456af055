"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from vidtalk.config import CommentSettings, ConcurrencySettings
from vidtalk.domain.error import (
    InvalidParentError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from vidtalk.domain.model import Comment, Video
from vidtalk.domain.repository import (
    CommentRepository,
    TransactionManager,
    VideoRepository,
)
from vidtalk.domain.value import (
    CommentId,
    CommentStatus,
    Principal,
    UserId,
    VideoId,
)
from vidtalk.util.retry import run_with_retry

from .base import Service
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for the comment lifecycle.

    Owns creation, edits, soft deletion and the active/hidden transition.
    Keeps each parent's reply_count and each video's comment_count in step
    with those changes.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        transactions: TransactionManager,
        notification_service: NotificationService,
        comment_settings: CommentSettings,
        concurrency_settings: ConcurrencySettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            video_repository: Video repository
            transactions: Unit-of-work scope for counter updates
            notification_service: Notification dispatcher for replies
            comment_settings: Content limits
            concurrency_settings: Retry policy for contended counters
        """
        self.comment_repository = comment_repository
        self.video_repository = video_repository
        self.transactions = transactions
        self.notification_service = notification_service
        self.comment_settings = comment_settings
        self.concurrency_settings = concurrency_settings

    def validate_content(self, content: str) -> str:
        """Enforce the length limits and trim content.

        The maximum applies to the content as submitted, surrounding
        whitespace included.

        Returns:
            The trimmed content

        Raises:
            ValidationError: If content is empty or too long
        """
        raw = content or ""
        if len(raw) > self.comment_settings.max_length:
            raise ValidationError(
                f"Comment is too long (max {self.comment_settings.max_length} characters)"
            )
        text = raw.strip()
        if not text:
            raise ValidationError("Comment content is required")
        return text

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def create_comment(
        self,
        video_id: VideoId,
        author: Principal,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a top-level comment on a video or a reply to one.

        Args:
            video_id: Video ID
            author: The authenticated author
            content: Comment text (trimmed before storing)
            parent_id: Top-level comment being replied to (None for top-level)

        Returns:
            Created comment with zeroed counters

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the video does not exist
            InvalidParentError: If parent is not an active top-level comment
                on the same video
        """
        with logfire.span(
            "comment_service.create_comment",
            video_id=str(video_id),
            author_id=str(author.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = self.validate_content(content)

            video = await self.video_repository.find_by_id(video_id)
            if not video:
                logfire.warn("Comment on unknown video", video_id=str(video_id))
                raise NotFoundError("Video", str(video_id))

            async def unit() -> Comment:
                async with self.transactions.atomic():
                    parent = None
                    if parent_id:
                        parent = await self.comment_repository.lock(parent_id)
                        self._check_parent(parent, parent_id, video_id)

                    now = datetime.now()
                    saved = await self.comment_repository.create(
                        Comment(
                            id=CommentId(uuid4()),
                            video_id=video_id,
                            author_id=author.id,
                            author_display_name=author.display_name,
                            author_avatar_url=author.avatar_url,
                            content=text,
                            parent_id=parent_id,
                            status=CommentStatus.ACTIVE,
                            created_at=now,
                            updated_at=now,
                        )
                    )

                    if parent:
                        parent = await self._recount_replies(parent.id)

                    await self.video_repository.adjust_comment_count(video_id, 1)

                    if parent and parent.author_id != author.id:
                        await self.notification_service.notify_reply(saved, parent)

                    return saved

            saved = await run_with_retry(
                "comment_service.create_comment", unit, self.concurrency_settings
            )
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                video_id=str(video_id),
                is_reply=saved.is_reply,
            )
            return saved

    def _check_parent(
        self, parent: Comment | None, parent_id: CommentId, video_id: VideoId
    ) -> None:
        if not parent:
            raise InvalidParentError(str(parent_id), "parent comment not found")
        if parent.video_id != video_id:
            logfire.warn(
                "Parent comment belongs to another video",
                parent_id=str(parent_id),
                parent_video_id=str(parent.video_id),
                target_video_id=str(video_id),
            )
            raise InvalidParentError(
                str(parent_id), "parent comment belongs to another video"
            )
        if parent.is_reply:
            raise InvalidParentError(str(parent_id), "replies cannot be replied to")
        if parent.status != CommentStatus.ACTIVE:
            raise InvalidParentError(str(parent_id), "parent comment is not active")

    async def _recount_replies(self, parent_id: CommentId) -> Comment | None:
        """Lock the parent and rewrite reply_count from its active children."""
        await self.comment_repository.lock(parent_id)
        count = await self.comment_repository.count_children(parent_id)
        return await self.comment_repository.set_reply_count(parent_id, count)

    async def edit_comment(
        self, comment_id: CommentId, editor_id: UserId, content: str
    ) -> Comment:
        """Replace a comment's content.

        Only ``content`` and ``updated_at`` change. Submitting the current
        content again leaves the comment untouched.

        Args:
            comment_id: Comment to edit
            editor_id: Caller, who must be the author
            content: New content

        Returns:
            The edited comment

        Raises:
            NotFoundError: If the comment is missing or deleted
            NotAuthorizedError: If the editor is not the author
            ValidationError: If content is empty or too long
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            editor_id=str(editor_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.is_deleted:
                logfire.warn("Edit on missing comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != editor_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    author_id=str(comment.author_id),
                    editor_id=str(editor_id),
                )
                raise NotAuthorizedError(
                    "edit", "comment", str(comment_id), str(editor_id)
                )

            text = self.validate_content(content)
            if text == comment.content:
                logfire.info("Comment content unchanged", comment_id=str(comment_id))
                return comment

            updated = await self.comment_repository.update_content(
                comment_id, text, datetime.now()
            )
            if not updated:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                content_length=len(text),
            )
            return updated

    async def delete_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Soft-delete a comment.

        The row is kept with status DELETED. A pinned comment loses its pin.
        Replies of a deleted top-level comment stay stored but are no longer
        reachable from the thread view, so the video's comment_count drops
        by the comment plus its non-deleted replies.

        Args:
            comment_id: Comment to delete
            requester_id: The author or the video's channel owner

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment is missing or already deleted
            NotAuthorizedError: If the requester is neither author nor owner
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):

            async def unit() -> Comment:
                async with self.transactions.atomic():
                    comment = await self.comment_repository.lock(comment_id)
                    if not comment or comment.is_deleted:
                        raise NotFoundError("Comment", str(comment_id))

                    if comment.author_id != requester_id:
                        video = await self.video_repository.find_by_id(
                            comment.video_id
                        )
                        if not video or not video.is_owned_by(requester_id):
                            logfire.warn(
                                "Unauthorized comment delete attempt",
                                comment_id=str(comment_id),
                                requester_id=str(requester_id),
                            )
                            raise NotAuthorizedError(
                                "delete", "comment", str(comment_id), str(requester_id)
                            )

                    if comment.pinned:
                        await self.comment_repository.clear_pin(comment_id)

                    deleted = await self.comment_repository.update_status(
                        comment_id, CommentStatus.DELETED
                    )
                    removed = 1
                    if comment.parent_id:
                        parent = await self._recount_replies(comment.parent_id)
                        if parent and parent.is_deleted:
                            # Left the count together with its parent
                            removed = 0
                    else:
                        removed += await self.comment_repository.count_children(
                            comment_id,
                            statuses=[CommentStatus.ACTIVE, CommentStatus.HIDDEN],
                        )

                    if removed:
                        await self.video_repository.adjust_comment_count(
                            comment.video_id, -removed
                        )
                    return deleted

            deleted = await run_with_retry(
                "comment_service.delete_comment", unit, self.concurrency_settings
            )
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return deleted

    async def set_status(
        self, comment_id: CommentId, requester_id: UserId, status: CommentStatus
    ) -> Comment:
        """Move a comment between ACTIVE and HIDDEN.

        Args:
            comment_id: Comment to moderate
            requester_id: Caller, who must own the video's channel
            status: ACTIVE or HIDDEN

        Returns:
            The comment in its new status

        Raises:
            ValidationError: If ``status`` is DELETED
            NotFoundError: If the comment is missing or deleted
            NotAuthorizedError: If the requester does not own the video
        """
        with logfire.span(
            "comment_service.set_status",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
            status=status.value,
        ):
            if status == CommentStatus.DELETED:
                raise ValidationError(
                    "Use delete to remove a comment; status must be active or hidden"
                )

            async def unit() -> Comment:
                async with self.transactions.atomic():
                    comment = await self.comment_repository.lock(comment_id)
                    if not comment or comment.is_deleted:
                        raise NotFoundError("Comment", str(comment_id))

                    video = await self.video_repository.find_by_id(comment.video_id)
                    self._require_owner(video, comment, requester_id)

                    if comment.status == status:
                        return comment

                    updated = await self.comment_repository.update_status(
                        comment_id, status
                    )
                    if comment.parent_id:
                        await self._recount_replies(comment.parent_id)
                    return updated

            updated = await run_with_retry(
                "comment_service.set_status", unit, self.concurrency_settings
            )
            logfire.info(
                "Comment status changed",
                comment_id=str(comment_id),
                status=updated.status.value,
            )
            return updated

    def _require_owner(
        self, video: Video | None, comment: Comment, requester_id: UserId
    ) -> None:
        if not video or not video.is_owned_by(requester_id):
            logfire.warn(
                "Moderation attempt by non-owner",
                comment_id=str(comment.id),
                video_id=str(comment.video_id),
                requester_id=str(requester_id),
            )
            raise NotAuthorizedError(
                "moderate", "comment", str(comment.id), str(requester_id)
            )
