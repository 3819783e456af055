"""Unit tests for the in-memory store and its repositories."""

import asyncio
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from vidtalk.domain.model import Comment, Vote
from vidtalk.domain.value import (
    CommentId,
    CommentSortOrder,
    CommentStatus,
    UserId,
    VideoId,
    VoteId,
    VoteType,
)
from vidtalk.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryTransactionManager,
    InMemoryVideoRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_video


def _comment(video_id: VideoId, minutes: int = 0, **values) -> Comment:
    created = datetime(2024, 1, 1) + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        video_id=video_id,
        author_id=UserId(uuid4()),
        author_display_name="Someone",
        content="Text",
        created_at=created,
        updated_at=created,
        **values,
    )


class TestUnitOfWork:
    """Atomic units on the in-memory store."""

    @pytest.mark.asyncio
    async def test_failed_unit_restores_previous_state(self):
        """A unit that raises leaves no partial writes behind."""
        # Arrange
        database = InMemoryDatabase()
        transactions = InMemoryTransactionManager(database)
        comments = InMemoryCommentRepository(database)
        videos = InMemoryVideoRepository(database)
        video = await videos.save(make_video())

        # Act
        with pytest.raises(RuntimeError):
            async with transactions.atomic():
                await comments.create(_comment(video.id))
                await videos.adjust_comment_count(video.id, 1)
                raise RuntimeError("boom")

        # Assert
        assert database.comments == {}
        assert (await videos.find_by_id(video.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_nested_unit_rolls_back_only_itself(self):
        """An inner unit behaves like a savepoint."""
        database = InMemoryDatabase()
        transactions = InMemoryTransactionManager(database)
        videos = InMemoryVideoRepository(database)
        video = await videos.save(make_video())

        async with transactions.atomic():
            await videos.adjust_comment_count(video.id, 1)
            with pytest.raises(ValueError):
                async with transactions.atomic():
                    await videos.adjust_comment_count(video.id, 5)
                    raise ValueError("inner")

        assert (await videos.find_by_id(video.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_units_from_different_tasks_are_serialized(self):
        """Read-modify-write inside a unit never interleaves with another task."""
        database = InMemoryDatabase()
        transactions = InMemoryTransactionManager(database)
        videos = InMemoryVideoRepository(database)
        video = await videos.save(make_video())

        async def increment():
            async with transactions.atomic():
                current = await videos.find_by_id(video.id)
                await asyncio.sleep(0)
                await videos.save(
                    current.model_copy(
                        update={"comment_count": current.comment_count + 1}
                    )
                )

        await asyncio.gather(*(increment() for _ in range(20)))

        assert (await videos.find_by_id(video.id)).comment_count == 20

    @pytest.mark.asyncio
    async def test_comment_count_never_goes_negative(self):
        database = InMemoryDatabase()
        videos = InMemoryVideoRepository(database)
        video = await videos.save(make_video())

        updated = await videos.adjust_comment_count(video.id, -3)

        assert updated.comment_count == 0


class TestCommentRepository:
    """Queries on the in-memory comment repository."""

    @pytest.mark.asyncio
    async def test_find_top_level_filters_and_counts(self):
        database = InMemoryDatabase()
        repo = InMemoryCommentRepository(database)
        video_id = VideoId(uuid4())
        parent = await repo.create(_comment(video_id, 1))
        await repo.create(_comment(video_id, 2, parent_id=parent.id))
        await repo.create(_comment(video_id, 3, status=CommentStatus.HIDDEN))
        await repo.create(_comment(VideoId(uuid4()), 4))

        items, total = await repo.find_top_level(
            video_id,
            statuses=[CommentStatus.ACTIVE],
            sort=CommentSortOrder.NEWEST,
            limit=10,
            offset=0,
        )

        assert [c.id for c in items] == [parent.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_equal_timestamps_have_stable_order(self):
        """Ties on the sort key fall back to the id, so pages never overlap."""
        database = InMemoryDatabase()
        repo = InMemoryCommentRepository(database)
        video_id = VideoId(uuid4())
        created = [await repo.create(_comment(video_id, 0)) for _ in range(6)]

        seen = []
        for offset in (0, 2, 4):
            items, _ = await repo.find_top_level(
                video_id,
                statuses=[CommentStatus.ACTIVE],
                sort=CommentSortOrder.NEWEST,
                limit=2,
                offset=offset,
            )
            seen.extend(c.id for c in items)

        assert sorted(seen, key=str) == sorted((c.id for c in created), key=str)
        assert len(set(seen)) == 6

    @pytest.mark.asyncio
    async def test_clear_pins_unpins_every_top_level_comment(self):
        database = InMemoryDatabase()
        repo = InMemoryCommentRepository(database)
        video_id = VideoId(uuid4())
        first = await repo.create(_comment(video_id, 1, pinned=True))
        second = await repo.create(_comment(video_id, 2))

        cleared = await repo.clear_pins(video_id)

        assert cleared == 1
        assert (await repo.find_by_id(first.id)).pinned is False
        assert (await repo.find_by_id(second.id)).pinned is False


class TestVoteRepository:
    """Ledger operations on the in-memory vote repository."""

    @pytest.mark.asyncio
    async def test_save_replaces_existing_vote_for_user(self):
        database = InMemoryDatabase()
        repo = InMemoryVoteRepository(database)
        comment_id = CommentId(uuid4())
        user_id = UserId(uuid4())

        for vote_type in (VoteType.LIKE, VoteType.DISLIKE):
            await repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    comment_id=comment_id,
                    user_id=user_id,
                    type=vote_type,
                    created_at=datetime.now(),
                )
            )

        counts = await repo.count_by_comment(comment_id)
        assert counts == {VoteType.LIKE: 0, VoteType.DISLIKE: 1}

    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_vote_existed(self):
        database = InMemoryDatabase()
        repo = InMemoryVoteRepository(database)

        deleted = await repo.delete_by_user_and_comment(
            UserId(uuid4()), CommentId(uuid4())
        )

        assert deleted is False
