"""Delete comment use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import (
    ApiModel,
    parse_id,
    require_comment_on_video,
)
from vidtalk.domain.service import CommentService
from vidtalk.domain.value import CommentId, UserId, VideoId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    video_id: str
    comment_id: str
    user_id: str  # Author or channel owner


class DeleteCommentResponse(ApiModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment is missing, deleted or on another video
            NotAuthorizedError: If the user is neither author nor channel owner
        """
        video_id = VideoId(parse_id(request.video_id, "Video"))
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        user_id = UserId(parse_id(request.user_id, "User"))

        await require_comment_on_video(self.comment_service, comment_id, video_id)
        await self.comment_service.delete_comment(comment_id, user_id)

        return DeleteCommentResponse(comment_id=str(comment_id), deleted=True)
