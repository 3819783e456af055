"""Container fixtures for unit and integration tests.

Unit tests run against the in-memory store and need nothing running.
Integration tests unmock ``persistence`` and need PostgreSQL at
``DATABASE__URL`` (environment or ``.env``).
"""

import pytest_asyncio

from vidtalk.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a REQUEST-scoped container.

    Every test gets a fresh container, so the in-memory store starts empty.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_vote(unit_env):
            service = await unit_env.get(VoteService)
            tally = await service.vote(comment_id, user_id, VoteType.LIKE)
            assert tally.like_count == 1
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _test_environment
