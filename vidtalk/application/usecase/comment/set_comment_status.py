"""Set comment status use case (owner moderation)."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import (
    CommentView,
    parse_id,
    require_comment_on_video,
)
from vidtalk.domain.service import CommentService
from vidtalk.domain.value import CommentId, CommentStatus, UserId, VideoId


class SetCommentStatusRequest(BaseModel):
    """Set comment status request."""

    video_id: str
    comment_id: str
    user_id: str  # Must own the video's channel
    status: CommentStatus


class SetCommentStatusResponse(BaseModel):
    """Set comment status response."""

    comment: CommentView


class SetCommentStatusUseCase:
    """Use case for hiding or unhiding a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: SetCommentStatusRequest
    ) -> SetCommentStatusResponse:
        video_id = VideoId(parse_id(request.video_id, "Video"))
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        user_id = UserId(parse_id(request.user_id, "User"))

        await require_comment_on_video(self.comment_service, comment_id, video_id)
        updated = await self.comment_service.set_status(
            comment_id, user_id, request.status
        )
        return SetCommentStatusResponse(comment=CommentView.from_comment(updated))
