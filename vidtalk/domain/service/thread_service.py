"""Thread assembler: the paginated read view of a video's comments."""

from typing import Optional

import logfire

from vidtalk.config import CommentSettings
from vidtalk.domain.error import NotFoundError
from vidtalk.domain.model import (
    CommentThread,
    CommentThreadPage,
    Pagination,
    ThreadedComment,
)
from vidtalk.domain.repository import CommentRepository, VideoRepository
from vidtalk.domain.value import CommentSortOrder, CommentStatus, UserId, VideoId

from .base import Service, page_window
from .vote_service import VoteService


class ThreadService(Service):
    """Builds pages of two-level threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        vote_service: VoteService,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_repository = comment_repository
        self.video_repository = video_repository
        self.vote_service = vote_service
        self.comment_settings = comment_settings

    async def list_threads(
        self,
        video_id: VideoId,
        page: int = 1,
        limit: int | None = None,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        viewer_id: Optional[UserId] = None,
    ) -> CommentThreadPage:
        """List one page of top-level comments with their replies.

        - The pinned comment always comes first, then ``sort`` applies
        - The channel owner also sees hidden top-level comments
        - Replies are the active ones only, oldest first
        - With a viewer, every comment carries the viewer's vote

        Args:
            video_id: Video ID
            page: 1-based page number over top-level comments
            limit: Top-level comments per page
            sort: newest, oldest or top
            viewer_id: Authenticated viewer, if any

        Returns:
            Threads plus pagination metadata

        Raises:
            NotFoundError: If the video does not exist
        """
        with logfire.span(
            "thread_service.list_threads",
            video_id=str(video_id),
            page=page,
            sort=sort.value,
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            video = await self.video_repository.find_by_id(video_id)
            if not video:
                raise NotFoundError("Video", str(video_id))

            limit, offset = page_window(
                page,
                limit or self.comment_settings.default_page_size,
                self.comment_settings,
            )

            statuses = [CommentStatus.ACTIVE]
            if viewer_id and video.is_owned_by(viewer_id):
                statuses.append(CommentStatus.HIDDEN)

            top_level, total = await self.comment_repository.find_top_level(
                video_id, statuses=statuses, sort=sort, limit=limit, offset=offset
            )
            replies = await self.comment_repository.find_replies(
                [c.id for c in top_level]
            )

            user_votes = {}
            if viewer_id:
                user_votes = await self.vote_service.get_user_votes(
                    viewer_id, [c.id for c in top_level] + [r.id for r in replies]
                )

            replies_by_parent = {}
            for reply in replies:
                replies_by_parent.setdefault(reply.parent_id, []).append(
                    ThreadedComment(comment=reply, user_vote=user_votes.get(reply.id))
                )

            threads = [
                CommentThread(
                    comment=comment,
                    user_vote=user_votes.get(comment.id),
                    replies=replies_by_parent.get(comment.id, []),
                )
                for comment in top_level
            ]

            logfire.info(
                "Threads listed",
                video_id=str(video_id),
                count=len(threads),
                total=total,
            )
            return CommentThreadPage(
                comments=threads,
                pagination=Pagination(page=page, limit=limit, total=total),
            )
