"""Unit tests for ReportCommentUseCase and ListReportsUseCase."""

from uuid import uuid4

import pytest

from vidtalk.application.usecase.moderation import (
    ListReportsRequest,
    ListReportsUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
)
from vidtalk.domain.error import NotFoundError, ValidationError
from vidtalk.domain.repository import VideoRepository
from vidtalk.domain.service import CommentService
from vidtalk.domain.value import ReportReason, ReportStatus
from tests.conftest import make_principal, make_video
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReportCommentUseCase:
    """Tests for ReportCommentUseCase."""

    @pytest.mark.asyncio
    async def test_report_then_owner_lists_it(self, unit_env):
        # Arrange
        report_comment_use_case = await unit_env.get(ReportCommentUseCase)
        list_reports_use_case = await unit_env.get(ListReportsUseCase)
        comment_service = await unit_env.get(CommentService)
        video_repo = await unit_env.get(VideoRepository)
        owner = make_principal("Owner")
        video = await video_repo.save(make_video(owner_id=owner.id))
        comment = await comment_service.create_comment(
            video.id, make_principal(), "Spam spam"
        )
        reporter_id = str(uuid4())

        # Act
        created = await report_comment_use_case.execute(
            ReportCommentRequest(
                video_id=str(video.id),
                comment_id=str(comment.id),
                user_id=reporter_id,
                reason="spam",
            )
        )
        listed = await list_reports_use_case.execute(
            ListReportsRequest(
                video_id=str(video.id),
                user_id=str(owner.id),
                status=ReportStatus.PENDING,
            )
        )

        # Assert
        assert created.report.reason == ReportReason.SPAM
        assert created.report.status == ReportStatus.PENDING
        assert created.report.reporter_id == reporter_id
        assert [r.id for r in listed.reports] == [created.report.id]
        assert listed.pagination.total == 1

    @pytest.mark.asyncio
    async def test_invalid_reason_is_checked_before_comment(self, unit_env):
        """A bad reason is a validation error even for an unknown comment."""
        report_comment_use_case = await unit_env.get(ReportCommentUseCase)

        with pytest.raises(ValidationError):
            await report_comment_use_case.execute(
                ReportCommentRequest(
                    video_id=str(uuid4()),
                    comment_id=str(uuid4()),
                    user_id=str(uuid4()),
                    reason="meh",
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_comment_is_not_found(self, unit_env):
        report_comment_use_case = await unit_env.get(ReportCommentUseCase)

        with pytest.raises(NotFoundError):
            await report_comment_use_case.execute(
                ReportCommentRequest(
                    video_id=str(uuid4()),
                    comment_id=str(uuid4()),
                    user_id=str(uuid4()),
                    reason="other",
                )
            )
