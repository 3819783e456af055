"""Moderation routes: reports, report review and bulk actions."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import Field

from vidtalk.application.usecase.common import ApiModel
from vidtalk.application.usecase.moderation import (
    BulkModerateRequest,
    BulkModerateResponse,
    BulkModerateUseCase,
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
    ReportView,
    ReviewReportRequest,
    ReviewReportUseCase,
)
from vidtalk.domain.service import JWTService
from vidtalk.domain.value import ModerationAction, ReportStatus
from vidtalk.interface.api.auth import require_principal
from vidtalk.interface.api.schemas import Envelope, ok

router = APIRouter(tags=["moderation"], route_class=DishkaRoute)


class ReportAPIRequest(ApiModel):
    """API request for reporting a comment."""

    reason: str | None = None
    description: str | None = None


class ReviewReportAPIRequest(ApiModel):
    """API request for reviewing a report."""

    status: ReportStatus


class BulkActionAPIRequest(ApiModel):
    """API request for a bulk moderation action."""

    comment_ids: list[str] = Field(min_length=1)
    action: ModerationAction


@router.post(
    "/videos/{video_id}/comments/{comment_id}/report",
    response_model=Envelope[ReportView],
    status_code=status.HTTP_201_CREATED,
)
async def report_comment(
    video_id: str,
    comment_id: str,
    body: ReportAPIRequest,
    request: Request,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[ReportView]:
    """Report a comment for the channel owner to review."""
    principal = require_principal(request, jwt_service, "report comments")
    result = await report_comment_use_case.execute(
        ReportCommentRequest(
            video_id=video_id,
            comment_id=comment_id,
            user_id=str(principal.id),
            reason=body.reason,
            description=body.description,
        )
    )
    return ok(result.report)


@router.get(
    "/videos/{video_id}/comments/reports",
    response_model=Envelope[ListReportsResponse],
)
async def list_reports(
    video_id: str,
    request: Request,
    list_reports_use_case: FromDishka[ListReportsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    report_status: ReportStatus | None = Query(default=None, alias="status"),
) -> Envelope[ListReportsResponse]:
    """List reports on a video's comments. Channel owner only."""
    principal = require_principal(request, jwt_service, "view reports")
    result = await list_reports_use_case.execute(
        ListReportsRequest(
            video_id=video_id,
            user_id=str(principal.id),
            page=page,
            limit=limit,
            status=report_status,
        )
    )
    return ok(result)


@router.put(
    "/videos/{video_id}/comments/reports/{report_id}",
    response_model=Envelope[ReportView],
)
async def review_report(
    video_id: str,
    report_id: str,
    body: ReviewReportAPIRequest,
    request: Request,
    review_report_use_case: FromDishka[ReviewReportUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[ReportView]:
    """Mark a report reviewed or dismissed. Channel owner only."""
    principal = require_principal(request, jwt_service, "review reports")
    result = await review_report_use_case.execute(
        ReviewReportRequest(
            video_id=video_id,
            report_id=report_id,
            user_id=str(principal.id),
            status=body.status,
        )
    )
    return ok(result.report)


@router.post(
    "/moderation/comments/bulk", response_model=Envelope[BulkModerateResponse]
)
async def bulk_moderate(
    body: BulkActionAPIRequest,
    request: Request,
    bulk_moderate_use_case: FromDishka[BulkModerateUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[BulkModerateResponse]:
    """Hide, unhide or delete several comments.

    Each comment succeeds or fails on its own; see ``results``.
    """
    principal = require_principal(request, jwt_service, "moderate comments")
    result = await bulk_moderate_use_case.execute(
        BulkModerateRequest(
            comment_ids=body.comment_ids,
            action=body.action,
            user_id=str(principal.id),
        )
    )
    return ok(result)
