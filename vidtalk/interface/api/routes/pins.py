"""Pin routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from vidtalk.application.usecase.common import CommentView
from vidtalk.application.usecase.pin import (
    PinCommentRequest,
    PinCommentUseCase,
    UnpinCommentUseCase,
)
from vidtalk.domain.service import JWTService
from vidtalk.interface.api.auth import require_principal
from vidtalk.interface.api.schemas import Envelope, ok

router = APIRouter(prefix="/videos", tags=["pins"], route_class=DishkaRoute)


@router.post(
    "/{video_id}/comments/{comment_id}/pin", response_model=Envelope[CommentView]
)
async def pin_comment(
    video_id: str,
    comment_id: str,
    request: Request,
    pin_comment_use_case: FromDishka[PinCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[CommentView]:
    """Pin a top-level comment. Replaces any existing pin on the video."""
    principal = require_principal(request, jwt_service, "pin comments")
    result = await pin_comment_use_case.execute(
        PinCommentRequest(
            video_id=video_id, comment_id=comment_id, user_id=str(principal.id)
        )
    )
    return ok(result.comment)


@router.delete(
    "/{video_id}/comments/{comment_id}/pin", response_model=Envelope[CommentView]
)
async def unpin_comment(
    video_id: str,
    comment_id: str,
    request: Request,
    unpin_comment_use_case: FromDishka[UnpinCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[CommentView]:
    """Remove a comment's pin."""
    principal = require_principal(request, jwt_service, "unpin comments")
    result = await unpin_comment_use_case.execute(
        PinCommentRequest(
            video_id=video_id, comment_id=comment_id, user_id=str(principal.id)
        )
    )
    return ok(result.comment)
