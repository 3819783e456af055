"""Pin domain service.

The only writer of pin state. Every video has at most one pinned
top-level comment; pins on the same video are serialized on the video row.
"""

from datetime import datetime

import logfire

from vidtalk.config import ConcurrencySettings
from vidtalk.domain.error import InvalidTargetError, NotAuthorizedError, NotFoundError
from vidtalk.domain.model import Comment, Video
from vidtalk.domain.repository import (
    CommentRepository,
    TransactionManager,
    VideoRepository,
)
from vidtalk.domain.value import CommentId, CommentStatus, UserId, VideoId
from vidtalk.util.retry import run_with_retry

from .base import Service
from .notification_service import NotificationService


class PinService(Service):
    """Domain service for the per-video pinned comment."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        transactions: TransactionManager,
        notification_service: NotificationService,
        concurrency_settings: ConcurrencySettings,
    ) -> None:
        self.comment_repository = comment_repository
        self.video_repository = video_repository
        self.transactions = transactions
        self.notification_service = notification_service
        self.concurrency_settings = concurrency_settings

    async def _lock_owned_video(
        self, video_id: VideoId, requester_id: UserId, action: str
    ) -> Video:
        video = await self.video_repository.lock(video_id)
        if not video:
            raise NotFoundError("Video", str(video_id))
        if not video.is_owned_by(requester_id):
            logfire.warn(
                f"Non-owner attempted to {action}",
                video_id=str(video_id),
                requester_id=str(requester_id),
            )
            raise NotAuthorizedError(
                action, "comments on video", str(video_id), str(requester_id)
            )
        return video

    async def _find_on_video(self, video_id: VideoId, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.lock(comment_id)
        if not comment or comment.video_id != video_id:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def pin(
        self, video_id: VideoId, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Pin a top-level comment, unpinning whatever was pinned before.

        Pinning the comment that is already pinned changes nothing.

        Args:
            video_id: Video the comment belongs to
            comment_id: Comment to pin
            requester_id: Caller, who must own the video's channel

        Returns:
            The pinned comment

        Raises:
            NotFoundError: If the video or comment is missing, or the
                comment is on another video
            NotAuthorizedError: If the requester is not the channel owner
            InvalidTargetError: If the comment is a reply or not active
        """
        with logfire.span(
            "pin_service.pin",
            video_id=str(video_id),
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):

            async def unit() -> tuple[Comment, bool]:
                async with self.transactions.atomic():
                    await self._lock_owned_video(video_id, requester_id, "pin")
                    comment = await self._find_on_video(video_id, comment_id)

                    if comment.is_reply:
                        raise InvalidTargetError(
                            str(comment_id), "only top-level comments can be pinned"
                        )
                    if comment.status != CommentStatus.ACTIVE:
                        raise InvalidTargetError(
                            str(comment_id), "only active comments can be pinned"
                        )
                    if comment.pinned:
                        return comment, False

                    cleared = await self.comment_repository.clear_pins(video_id)
                    pinned = await self.comment_repository.set_pin(
                        comment_id, pinned_by=requester_id, pinned_at=datetime.now()
                    )
                    logfire.info(
                        "Comment pinned",
                        video_id=str(video_id),
                        comment_id=str(comment_id),
                        previously_pinned=cleared,
                    )

                    if pinned.author_id != requester_id:
                        await self.notification_service.notify_pinned(
                            pinned, requester_id
                        )
                    return pinned, True

            pinned, changed = await run_with_retry(
                "pin_service.pin", unit, self.concurrency_settings
            )
            if not changed:
                logfire.info("Comment already pinned", comment_id=str(comment_id))
            return pinned

    async def unpin(
        self, video_id: VideoId, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Clear the pin on a comment if it is currently pinned.

        Unpinning a comment that is not pinned is a successful no-op.

        Raises:
            NotFoundError: If the video or comment is missing
            NotAuthorizedError: If the requester is not the channel owner
        """
        with logfire.span(
            "pin_service.unpin",
            video_id=str(video_id),
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):

            async def unit() -> Comment:
                async with self.transactions.atomic():
                    await self._lock_owned_video(video_id, requester_id, "unpin")
                    comment = await self._find_on_video(video_id, comment_id)
                    if not comment.pinned:
                        return comment
                    unpinned = await self.comment_repository.clear_pin(comment_id)
                    logfire.info(
                        "Comment unpinned",
                        video_id=str(video_id),
                        comment_id=str(comment_id),
                    )
                    return unpinned

            return await run_with_retry(
                "pin_service.unpin", unit, self.concurrency_settings
            )
