"""Integration tests for the PostgreSQL comment repositories.

These tests assume PostgreSQL is reachable at ``DATABASE__URL`` with the
migrations applied. They are skipped when the database cannot be reached.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from vidtalk.domain.model import Comment, Report, Video
from vidtalk.domain.repository import (
    CommentRepository,
    ReportRepository,
    VideoRepository,
    VoteRepository,
)
from vidtalk.domain.service import VoteService
from vidtalk.domain.value import (
    ChannelId,
    CommentId,
    CommentSortOrder,
    CommentStatus,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
    VideoId,
    VoteType,
)
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def postgres_env(integration_env):
    session = await integration_env.get(AsyncSession)
    try:
        await session.execute(text("SELECT 1"))
    except (OSError, DBAPIError) as e:
        await session.rollback()
        pytest.skip(f"PostgreSQL not reachable: {e}")
    return integration_env


def _comment(video_id: VideoId, content: str, created_at: datetime) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        video_id=video_id,
        author_id=UserId(uuid4()),
        author_display_name="Tester",
        content=content,
        status=CommentStatus.ACTIVE,
        created_at=created_at,
        updated_at=created_at,
    )


async def _save_video(env) -> Video:
    video_repo = await env.get(VideoRepository)
    return await video_repo.save(
        Video(
            id=VideoId(uuid4()),
            channel_id=ChannelId(uuid4()),
            owner_id=UserId(uuid4()),
            title="Integration video",
        )
    )


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_find_top_level_puts_pinned_first(self, postgres_env):
        # Arrange
        video = await _save_video(postgres_env)
        comment_repo = await postgres_env.get(CommentRepository)
        now = datetime.now()
        older = await comment_repo.create(_comment(video.id, "older", now))
        newer = await comment_repo.create(
            _comment(video.id, "newer", now + timedelta(seconds=1))
        )
        await comment_repo.set_pin(older.id, pinned_by=video.owner_id, pinned_at=now)

        # Act
        comments, total = await comment_repo.find_top_level(
            video.id,
            statuses=[CommentStatus.ACTIVE],
            sort=CommentSortOrder.NEWEST,
            limit=10,
            offset=0,
        )

        # Assert
        assert total == 2
        assert [c.id for c in comments] == [older.id, newer.id]
        assert comments[0].pinned is True

    @pytest.mark.asyncio
    async def test_page_past_end_still_counts(self, postgres_env):
        video = await _save_video(postgres_env)
        comment_repo = await postgres_env.get(CommentRepository)
        await comment_repo.create(_comment(video.id, "only", datetime.now()))

        comments, total = await comment_repo.find_top_level(
            video.id,
            statuses=[CommentStatus.ACTIVE],
            sort=CommentSortOrder.NEWEST,
            limit=10,
            offset=10,
        )

        assert comments == []
        assert total == 1

    @pytest.mark.asyncio
    async def test_adjust_comment_count_never_negative(self, postgres_env):
        video = await _save_video(postgres_env)
        video_repo = await postgres_env.get(VideoRepository)

        await video_repo.adjust_comment_count(video.id, -1)

        stored = await video_repo.find_by_id(video.id)
        assert stored.comment_count == 0

    @pytest.mark.asyncio
    async def test_count_children_filters_by_status(self, postgres_env):
        video = await _save_video(postgres_env)
        comment_repo = await postgres_env.get(CommentRepository)
        now = datetime.now()
        parent = await comment_repo.create(_comment(video.id, "parent", now))
        statuses = (CommentStatus.ACTIVE, CommentStatus.HIDDEN, CommentStatus.DELETED)
        for status in statuses:
            reply = await comment_repo.create(
                _comment(video.id, status.value, now).model_copy(
                    update={"parent_id": parent.id}
                )
            )
            await comment_repo.update_status(reply.id, status)

        active = await comment_repo.count_children(parent.id)
        live = await comment_repo.count_children(
            parent.id, statuses=[CommentStatus.ACTIVE, CommentStatus.HIDDEN]
        )

        assert (active, live) == (1, 2)


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository through VoteService."""

    @pytest.mark.asyncio
    async def test_vote_switch_keeps_one_row(self, postgres_env):
        # Arrange
        video = await _save_video(postgres_env)
        comment_repo = await postgres_env.get(CommentRepository)
        comment = await comment_repo.create(
            _comment(video.id, "vote on me", datetime.now())
        )
        vote_service = await postgres_env.get(VoteService)
        vote_repo = await postgres_env.get(VoteRepository)
        voter = UserId(uuid4())

        # Act
        await vote_service.vote(comment.id, voter, VoteType.LIKE)
        tally = await vote_service.vote(comment.id, voter, VoteType.DISLIKE)

        # Assert
        assert tally.like_count == 0
        assert tally.dislike_count == 1
        counts = await vote_repo.count_by_comment(comment.id)
        assert counts == {VoteType.LIKE: 0, VoteType.DISLIKE: 1}
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.dislike_count == 1


class TestReportRepositoryIntegration:
    """Integration tests for PostgresReportRepository."""

    @pytest.mark.asyncio
    async def test_update_status_moves_report_between_filters(self, postgres_env):
        # Arrange
        video = await _save_video(postgres_env)
        comment_repo = await postgres_env.get(CommentRepository)
        report_repo = await postgres_env.get(ReportRepository)
        comment = await comment_repo.create(
            _comment(video.id, "reported", datetime.now())
        )
        report = await report_repo.save(
            Report(
                id=ReportId(uuid4()),
                comment_id=comment.id,
                reporter_id=UserId(uuid4()),
                reason=ReportReason.SPAM,
            )
        )

        # Act
        updated = await report_repo.update_status(report.id, ReportStatus.DISMISSED)

        # Assert
        assert updated.status == ReportStatus.DISMISSED
        assert (await report_repo.find_by_id(report.id)).status == (
            ReportStatus.DISMISSED
        )
        _, pending = await report_repo.find_by_video(
            video.id, status=ReportStatus.PENDING, limit=10, offset=0
        )
        dismissed, total = await report_repo.find_by_video(
            video.id, status=ReportStatus.DISMISSED, limit=10, offset=0
        )
        assert pending == 0
        assert total == 1
        assert dismissed[0].id == report.id

    @pytest.mark.asyncio
    async def test_unknown_report_is_none(self, postgres_env):
        report_repo = await postgres_env.get(ReportRepository)

        assert await report_repo.find_by_id(ReportId(uuid4())) is None
        assert (
            await report_repo.update_status(ReportId(uuid4()), ReportStatus.REVIEWED)
            is None
        )
