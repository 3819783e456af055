"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from vidtalk.domain.error import NotFoundError
from vidtalk.domain.repository import CommentRepository, VideoRepository, VoteRepository
from vidtalk.domain.service import CommentService, VoteService
from vidtalk.domain.value import CommentId, UserId, VoteType
from tests.conftest import make_principal, make_video
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _create_comment(unit_env):
    comment_service = await unit_env.get(CommentService)
    video_repo = await unit_env.get(VideoRepository)
    video = await video_repo.save(make_video())
    return await comment_service.create_comment(video.id, make_principal(), "Vote me")


class TestVote:
    """Tests for vote method."""

    @pytest.mark.asyncio
    async def test_like_creates_vote_and_updates_count(self, unit_env):
        """First like records the vote and sets like_count to 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _create_comment(unit_env)
        user_id = UserId(uuid4())

        # Act
        tally = await vote_service.vote(comment.id, user_id, VoteType.LIKE)

        # Assert
        assert tally.like_count == 1
        assert tally.dislike_count == 0
        assert tally.user_vote == VoteType.LIKE
        assert tally.liked is True
        assert tally.disliked is False

        saved = await vote_repo.find_by_user_and_comment(user_id, comment.id)
        assert saved is not None
        assert saved.type == VoteType.LIKE
        assert (await comment_repo.find_by_id(comment.id)).like_count == 1

    @pytest.mark.asyncio
    async def test_same_vote_twice_toggles_off(self, unit_env):
        """Repeating the same vote removes it."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await _create_comment(unit_env)
        user_id = UserId(uuid4())

        await vote_service.vote(comment.id, user_id, VoteType.LIKE)
        tally = await vote_service.vote(comment.id, user_id, VoteType.LIKE)

        assert tally.like_count == 0
        assert tally.user_vote is None
        assert await vote_repo.find_by_user_and_comment(user_id, comment.id) is None

    @pytest.mark.asyncio
    async def test_switching_vote_moves_count(self, unit_env):
        """Switching like to dislike keeps one ledger row per user."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _create_comment(unit_env)
        user_id = UserId(uuid4())
        await vote_service.vote(comment.id, UserId(uuid4()), VoteType.LIKE)

        await vote_service.vote(comment.id, user_id, VoteType.LIKE)
        tally = await vote_service.vote(comment.id, user_id, VoteType.DISLIKE)

        assert (tally.like_count, tally.dislike_count) == (1, 1)
        assert tally.user_vote == VoteType.DISLIKE
        stored = await comment_repo.find_by_id(comment.id)
        assert (stored.like_count, stored.dislike_count) == (1, 1)

    @pytest.mark.asyncio
    async def test_counts_match_distinct_voters(self, unit_env):
        """N likes and M dislikes from distinct users give counts N and M."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _create_comment(unit_env)

        for _ in range(4):
            await vote_service.vote(comment.id, UserId(uuid4()), VoteType.LIKE)
        for _ in range(3):
            await vote_service.vote(comment.id, UserId(uuid4()), VoteType.DISLIKE)

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 4
        assert stored.dislike_count == 3

    @pytest.mark.asyncio
    async def test_concurrent_likes_are_all_counted(self, unit_env):
        """Concurrent voters on one comment never lose an update."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _create_comment(unit_env)
        voters = [UserId(uuid4()) for _ in range(25)]

        await asyncio.gather(
            *(vote_service.vote(comment.id, v, VoteType.LIKE) for v in voters)
        )

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 25
        assert stored.dislike_count == 0

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_is_not_found(self, unit_env):
        """Voting needs an existing comment."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.vote(CommentId(uuid4()), UserId(uuid4()), VoteType.LIKE)

    @pytest.mark.asyncio
    async def test_vote_on_deleted_comment_is_not_found(self, unit_env):
        """Deleted comments accept no votes."""
        vote_service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video())
        author = make_principal()
        comment = await comment_service.create_comment(video.id, author, "Gone")
        await comment_service.delete_comment(comment.id, author.id)

        with pytest.raises(NotFoundError):
            await vote_service.vote(comment.id, UserId(uuid4()), VoteType.LIKE)


class TestGetUserVotes:
    """Tests for get_user_votes method."""

    @pytest.mark.asyncio
    async def test_returns_only_voted_comments(self, unit_env):
        """Comments without a vote are absent from the mapping."""
        vote_service = await unit_env.get(VoteService)
        first = await _create_comment(unit_env)
        second = await _create_comment(unit_env)
        third = await _create_comment(unit_env)
        user_id = UserId(uuid4())
        await vote_service.vote(first.id, user_id, VoteType.LIKE)
        await vote_service.vote(second.id, user_id, VoteType.DISLIKE)

        votes = await vote_service.get_user_votes(
            user_id, [first.id, second.id, third.id]
        )

        assert votes == {first.id: VoteType.LIKE, second.id: VoteType.DISLIKE}

    @pytest.mark.asyncio
    async def test_empty_input_returns_empty_mapping(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_user_votes(UserId(uuid4()), []) == {}
