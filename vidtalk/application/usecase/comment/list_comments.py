"""List comments use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import CommentView, PaginationView, parse_id
from vidtalk.domain.service import ThreadService
from vidtalk.domain.value import CommentSortOrder, UserId, VideoId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    video_id: str  # UUID string
    page: int = 1
    limit: int | None = None
    sort: CommentSortOrder = CommentSortOrder.NEWEST
    viewer_id: str | None = None  # Authenticated viewer (optional)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentView]
    pagination: PaginationView


class ListCommentsUseCase:
    """Use case for listing a video's comment threads."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize list comments use case.

        Args:
            thread_service: Thread assembler
        """
        self.thread_service = thread_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Video, paging, sort order and optional viewer

        Returns:
            Threads with replies, pinned comment first
        """
        video_id = VideoId(parse_id(request.video_id, "Video"))
        viewer_id = (
            UserId(parse_id(request.viewer_id, "User")) if request.viewer_id else None
        )

        result = await self.thread_service.list_threads(
            video_id=video_id,
            page=request.page,
            limit=request.limit,
            sort=request.sort,
            viewer_id=viewer_id,
        )

        comments = [
            CommentView.from_comment(
                thread.comment,
                user_vote=thread.user_vote,
                replies=[
                    CommentView.from_comment(reply.comment, user_vote=reply.user_vote)
                    for reply in thread.replies
                ],
            )
            for thread in result.comments
        ]
        return ListCommentsResponse(
            comments=comments,
            pagination=PaginationView.from_pagination(result.pagination),
        )
