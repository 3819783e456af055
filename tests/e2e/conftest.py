"""Shared fixtures for end-to-end API tests."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from vidtalk.config import AuthSettings
from vidtalk.domain.model import Video
from vidtalk.interface.api.app import create_app
from vidtalk.persistence.repository.inmemory import InMemoryDatabase
from vidtalk.util.di.container import setup_di
from vidtalk.util.jwt import create_token
from tests.conftest import make_video
from tests.di import build_test_container


class ApiUser:
    """A signed-in user for API calls."""

    def __init__(self, display_name: str) -> None:
        self.id = str(uuid4())
        self.display_name = display_name
        self.token = create_token(self.id, display_name, AuthSettings())

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def container():
    """Test container with in-memory persistence."""
    return build_test_container()


@pytest.fixture
def database(container) -> InMemoryDatabase:
    """The in-memory store behind the API under test."""
    return asyncio.run(container.get(InMemoryDatabase))


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    return TestClient(app_instance)


@pytest.fixture
def owner() -> ApiUser:
    return ApiUser("Channel Owner")


@pytest.fixture
def alice() -> ApiUser:
    return ApiUser("Alice")


@pytest.fixture
def bob() -> ApiUser:
    return ApiUser("Bob")


@pytest.fixture
def video(database, owner) -> Video:
    """A video on the owner's channel."""
    created = make_video(owner_id=owner.id)
    database.videos[created.id] = created
    return created
