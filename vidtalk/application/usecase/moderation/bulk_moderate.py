"""Bulk moderation use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import ApiModel, parse_id
from vidtalk.domain.service import ModerationService
from vidtalk.domain.value import ModerationAction, UserId


class BulkResultItem(ApiModel):
    """Outcome for one submitted comment id."""

    comment_id: str
    success: bool
    error: str | None = None


class BulkModerateRequest(BaseModel):
    """Bulk moderation request."""

    comment_ids: list[str]  # Raw ids, validated per item
    action: ModerationAction
    user_id: str  # Must own each comment's video


class BulkModerateResponse(ApiModel):
    """Bulk moderation response."""

    action: ModerationAction
    results: list[BulkResultItem]
    succeeded: int
    failed: int


class BulkModerateUseCase:
    """Use case for hiding, unhiding or deleting many comments at once."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: BulkModerateRequest) -> BulkModerateResponse:
        """Execute bulk moderation.

        Per-comment failures are reported in ``results``; they never fail
        the request.
        """
        results = await self.moderation_service.bulk_action(
            request.comment_ids,
            request.action,
            UserId(parse_id(request.user_id, "User")),
        )
        items = [
            BulkResultItem(comment_id=r.comment_id, success=r.success, error=r.error)
            for r in results
        ]
        succeeded = sum(1 for item in items if item.success)
        return BulkModerateResponse(
            action=request.action,
            results=items,
            succeeded=succeeded,
            failed=len(items) - succeeded,
        )
