"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from vidtalk.application.usecase.common import CommentView, parse_id
from vidtalk.domain.error import InvalidParentError
from vidtalk.domain.service import CommentService
from vidtalk.domain.value import CommentId, Principal, VideoId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    video_id: str  # UUID string
    principal: Principal  # Authenticated author
    content: str
    parent_id: str | None = None  # UUID string for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentView


class CreateCommentUseCase:
    """Use case for creating a comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the video does not exist
            InvalidParentError: If the parent cannot be replied to
            ValidationError: If content is empty or too long
        """
        video_id = VideoId(parse_id(request.video_id, "Video"))

        parent_id = None
        if request.parent_id:
            try:
                parent_id = CommentId(UUID(request.parent_id))
            except ValueError:
                raise InvalidParentError(request.parent_id, "parent comment not found")

        comment = await self.comment_service.create_comment(
            video_id=video_id,
            author=request.principal,
            content=request.content,
            parent_id=parent_id,
        )
        return CreateCommentResponse(comment=CommentView.from_comment(comment))
