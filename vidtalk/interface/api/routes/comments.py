"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status

from vidtalk.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    SetCommentStatusRequest,
    SetCommentStatusUseCase,
)
from vidtalk.application.usecase.common import ApiModel, CommentView
from vidtalk.application.usecase.vote import (
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)
from vidtalk.domain.service import JWTService
from vidtalk.domain.value import CommentSortOrder, CommentStatus, VoteType
from vidtalk.interface.api.auth import get_principal, require_principal
from vidtalk.interface.api.schemas import Envelope, ok

router = APIRouter(prefix="/videos", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(ApiModel):
    """API request for creating a comment."""

    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class EditCommentAPIRequest(ApiModel):
    """API request for editing a comment."""

    content: str


class VoteAPIRequest(ApiModel):
    """API request for voting on a comment."""

    type: VoteType


class SetStatusAPIRequest(ApiModel):
    """API request for hiding or unhiding a comment."""

    status: CommentStatus


@router.get("/{video_id}/comments", response_model=Envelope[ListCommentsResponse])
async def list_comments(
    video_id: str,
    request: Request,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: CommentSortOrder = Query(default=CommentSortOrder.NEWEST),
) -> Envelope[ListCommentsResponse]:
    """List a video's comment threads.

    Authentication is optional. The channel owner also sees hidden
    comments, and signed-in viewers get their own vote on each comment.
    """
    principal = get_principal(request, jwt_service)
    result = await list_comments_use_case.execute(
        ListCommentsRequest(
            video_id=video_id,
            page=page,
            limit=limit,
            sort=sort,
            viewer_id=str(principal.id) if principal else None,
        )
    )
    return ok(result)


@router.post(
    "/{video_id}/comments",
    response_model=Envelope[CommentView],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    video_id: str,
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[CommentView]:
    """Create a comment on a video or reply to a top-level comment.

    Requires authentication.
    """
    principal = require_principal(request, jwt_service, "comment")
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            video_id=video_id,
            principal=principal,
            content=body.content,
            parent_id=body.parent_id,
        )
    )
    return ok(result.comment)


@router.put("/{video_id}/comments/{comment_id}", response_model=Envelope[CommentView])
async def edit_comment(
    video_id: str,
    comment_id: str,
    body: EditCommentAPIRequest,
    request: Request,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[CommentView]:
    """Edit a comment's content. Only the author can edit."""
    principal = require_principal(request, jwt_service, "edit comments")
    result = await edit_comment_use_case.execute(
        EditCommentRequest(
            video_id=video_id,
            comment_id=comment_id,
            user_id=str(principal.id),
            content=body.content,
        )
    )
    return ok(result.comment)


@router.delete(
    "/{video_id}/comments/{comment_id}",
    response_model=Envelope[DeleteCommentResponse],
)
async def delete_comment(
    video_id: str,
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[DeleteCommentResponse]:
    """Delete a comment. Allowed for the author and the channel owner."""
    principal = require_principal(request, jwt_service, "delete comments")
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(
            video_id=video_id, comment_id=comment_id, user_id=str(principal.id)
        )
    )
    return ok(result)


@router.post(
    "/{video_id}/comments/{comment_id}",
    response_model=Envelope[VoteCommentResponse],
)
async def vote_comment(
    video_id: str,
    comment_id: str,
    body: VoteAPIRequest,
    request: Request,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[VoteCommentResponse]:
    """Like or dislike a comment. Repeating the same vote removes it."""
    principal = require_principal(request, jwt_service, "vote")
    result = await vote_comment_use_case.execute(
        VoteCommentRequest(
            video_id=video_id,
            comment_id=comment_id,
            user_id=str(principal.id),
            type=body.type,
        )
    )
    return ok(result)


@router.put(
    "/{video_id}/comments/{comment_id}/status",
    response_model=Envelope[CommentView],
)
async def set_comment_status(
    video_id: str,
    comment_id: str,
    body: SetStatusAPIRequest,
    request: Request,
    set_comment_status_use_case: FromDishka[SetCommentStatusUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[CommentView]:
    """Hide or unhide a comment. Channel owner only."""
    principal = require_principal(request, jwt_service, "moderate comments")
    result = await set_comment_status_use_case.execute(
        SetCommentStatusRequest(
            video_id=video_id,
            comment_id=comment_id,
            user_id=str(principal.id),
            status=body.status,
        )
    )
    return ok(result.comment)
