"""Edit comment use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import (
    CommentView,
    parse_id,
    require_comment_on_video,
)
from vidtalk.domain.service import CommentService
from vidtalk.domain.value import CommentId, UserId, VideoId


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    video_id: str  # UUID string (for validation)
    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str  # New content (required, cannot be empty)


class EditCommentResponse(BaseModel):
    """Edit comment response."""

    comment: CommentView


class EditCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Raises:
            NotFoundError: If the comment is missing, deleted or on another video
            NotAuthorizedError: If the user is not the author
            ValidationError: If content is empty or too long
        """
        video_id = VideoId(parse_id(request.video_id, "Video"))
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        user_id = UserId(parse_id(request.user_id, "User"))

        await require_comment_on_video(self.comment_service, comment_id, video_id)

        updated = await self.comment_service.edit_comment(
            comment_id, user_id, request.content
        )
        return EditCommentResponse(comment=CommentView.from_comment(updated))
