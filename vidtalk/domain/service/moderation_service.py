"""Moderation domain service."""

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

import logfire

from vidtalk.config import CommentSettings, ModerationSettings
from vidtalk.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from vidtalk.domain.model import BulkActionResult, Page, Pagination, Report
from vidtalk.domain.repository import (
    CommentRepository,
    ReportRepository,
    TransactionManager,
    VideoRepository,
)
from vidtalk.domain.value import (
    CommentId,
    CommentStatus,
    ModerationAction,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
    VideoId,
)

from .base import Service, page_window
from .comment_service import CommentService

MAX_DESCRIPTION_LENGTH = 1000


class ModerationService(Service):
    """Domain service for reports and owner moderation."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_repository: CommentRepository,
        report_repository: ReportRepository,
        video_repository: VideoRepository,
        transactions: TransactionManager,
        moderation_settings: ModerationSettings,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_service: Comment service (status changes and deletes)
            comment_repository: Comment repository
            report_repository: Report repository
            video_repository: Video repository
            transactions: Unit-of-work scope for per-item isolation
            moderation_settings: Report deduplication policy
            comment_settings: Page size limits
        """
        self.comment_service = comment_service
        self.comment_repository = comment_repository
        self.report_repository = report_repository
        self.video_repository = video_repository
        self.transactions = transactions
        self.moderation_settings = moderation_settings
        self.comment_settings = comment_settings

    @staticmethod
    def parse_reason(reason: str | ReportReason | None) -> ReportReason:
        """Validate a report reason.

        Raises:
            ValidationError: If the reason is missing or unknown
        """
        if reason is None or reason == "":
            raise ValidationError("Report reason is required")
        try:
            return ReportReason(reason)
        except ValueError:
            allowed = ", ".join(r.value for r in ReportReason)
            raise ValidationError(f"Invalid report reason (expected one of: {allowed})")

    async def report(
        self,
        comment_id: CommentId,
        reporter_id: UserId,
        reason: str | ReportReason | None,
        description: Optional[str] = None,
    ) -> Report:
        """Record a report against a comment.

        Args:
            comment_id: Reported comment
            reporter_id: Reporting user
            reason: One of spam, harassment, inappropriate, other
            description: Optional free text

        Returns:
            The stored report in PENDING status

        Raises:
            ValidationError: If the reason is invalid, the description is too
                long, or the reporter already reported this comment while
                deduplication is enabled
            NotFoundError: If the comment is missing or deleted
        """
        with logfire.span(
            "moderation_service.report",
            comment_id=str(comment_id),
            reporter_id=str(reporter_id),
        ):
            parsed_reason = self.parse_reason(reason)
            text = description.strip() if description else None
            if text and len(text) > MAX_DESCRIPTION_LENGTH:
                raise ValidationError(
                    f"Report description is too long (max {MAX_DESCRIPTION_LENGTH} characters)"
                )

            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.is_deleted:
                raise NotFoundError("Comment", str(comment_id))

            if self.moderation_settings.deduplicate_reports:
                if await self.report_repository.exists_for_reporter(
                    comment_id, reporter_id
                ):
                    logfire.info(
                        "Duplicate report rejected",
                        comment_id=str(comment_id),
                        reporter_id=str(reporter_id),
                    )
                    raise ValidationError("You have already reported this comment")

            report = await self.report_repository.save(
                Report(
                    id=ReportId(uuid4()),
                    comment_id=comment_id,
                    reporter_id=reporter_id,
                    reason=parsed_reason,
                    description=text or None,
                    status=ReportStatus.PENDING,
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Comment reported",
                report_id=str(report.id),
                comment_id=str(comment_id),
                reason=parsed_reason.value,
            )
            return report

    async def list_reports(
        self,
        video_id: VideoId,
        requester_id: UserId,
        page: int = 1,
        limit: int | None = None,
        status: Optional[ReportStatus] = None,
    ) -> Page[Report]:
        """List reports against a video's comments for its channel owner.

        Raises:
            NotFoundError: If the video does not exist
            NotAuthorizedError: If the requester is not the channel owner
        """
        with logfire.span(
            "moderation_service.list_reports",
            video_id=str(video_id),
            requester_id=str(requester_id),
            status=status.value if status else None,
        ):
            video = await self.video_repository.find_by_id(video_id)
            if not video:
                raise NotFoundError("Video", str(video_id))
            if not video.is_owned_by(requester_id):
                raise NotAuthorizedError(
                    "view reports for", "video", str(video_id), str(requester_id)
                )

            limit, offset = page_window(
                page,
                limit or self.comment_settings.default_page_size,
                self.comment_settings,
            )
            items, total = await self.report_repository.find_by_video(
                video_id, status=status, limit=limit, offset=offset
            )
            return Page[Report](
                items=items,
                pagination=Pagination(page=page, limit=limit, total=total),
            )

    async def review_report(
        self,
        video_id: VideoId,
        report_id: ReportId,
        requester_id: UserId,
        status: ReportStatus,
    ) -> Report:
        """Record the channel owner's decision on a report.

        A report may be marked reviewed or dismissed, and a later review
        overwrites an earlier one. Reviewing never changes the comment.

        Raises:
            ValidationError: If ``status`` is PENDING
            NotFoundError: If the video or report is missing, or the report
                is against a comment on another video
            NotAuthorizedError: If the requester is not the channel owner
        """
        with logfire.span(
            "moderation_service.review_report",
            video_id=str(video_id),
            report_id=str(report_id),
            requester_id=str(requester_id),
            status=status.value,
        ):
            if status == ReportStatus.PENDING:
                raise ValidationError("Reports can only be marked reviewed or dismissed")

            video = await self.video_repository.find_by_id(video_id)
            if not video:
                raise NotFoundError("Video", str(video_id))
            if not video.is_owned_by(requester_id):
                raise NotAuthorizedError(
                    "review reports for", "video", str(video_id), str(requester_id)
                )

            report = await self.report_repository.find_by_id(report_id)
            comment = (
                await self.comment_repository.find_by_id(report.comment_id)
                if report
                else None
            )
            if not comment or comment.video_id != video_id:
                raise NotFoundError("Report", str(report_id))

            updated = await self.report_repository.update_status(report_id, status)
            if not updated:
                raise NotFoundError("Report", str(report_id))

            logfire.info(
                "Report reviewed",
                report_id=str(report_id),
                comment_id=str(updated.comment_id),
                status=status.value,
            )
            return updated

    async def bulk_action(
        self,
        comment_ids: Iterable[str],
        action: ModerationAction,
        requester_id: UserId,
    ) -> list[BulkActionResult]:
        """Apply one moderation action to many comments.

        Each comment is handled in its own atomic unit. A failure on one id
        is reported in its result and never stops the others. Duplicate ids
        are collapsed, keeping first-seen order.

        Args:
            comment_ids: Raw comment ids as submitted
            action: HIDE, UNHIDE or DELETE
            requester_id: Caller, who must own each comment's video

        Returns:
            One result per distinct id, in submission order
        """
        unique_ids = list(dict.fromkeys(comment_ids))
        with logfire.span(
            "moderation_service.bulk_action",
            action=action.value,
            requester_id=str(requester_id),
            count=len(unique_ids),
        ):
            results = []
            for raw_id in unique_ids:
                try:
                    async with self.transactions.atomic():
                        await self._apply(raw_id, action, requester_id)
                    results.append(BulkActionResult(comment_id=raw_id, success=True))
                except DomainError as e:
                    logfire.warn(
                        "Bulk action failed for comment",
                        comment_id=raw_id,
                        action=action.value,
                        error=str(e),
                    )
                    results.append(
                        BulkActionResult(comment_id=raw_id, success=False, error=str(e))
                    )

            logfire.info(
                "Bulk action completed",
                action=action.value,
                succeeded=sum(1 for r in results if r.success),
                failed=sum(1 for r in results if not r.success),
            )
            return results

    async def _apply(
        self, raw_id: str, action: ModerationAction, requester_id: UserId
    ) -> None:
        try:
            comment_id = CommentId(UUID(raw_id))
        except (TypeError, ValueError):
            raise NotFoundError("Comment", raw_id)

        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment or comment.is_deleted:
            raise NotFoundError("Comment", raw_id)

        video = await self.video_repository.find_by_id(comment.video_id)
        if not video or not video.is_owned_by(requester_id):
            raise NotAuthorizedError("moderate", "comment", raw_id, str(requester_id))

        if action == ModerationAction.DELETE:
            await self.comment_service.delete_comment(comment_id, requester_id)
        elif action == ModerationAction.HIDE:
            await self.comment_service.set_status(
                comment_id, requester_id, CommentStatus.HIDDEN
            )
        else:
            await self.comment_service.set_status(
                comment_id, requester_id, CommentStatus.ACTIVE
            )
