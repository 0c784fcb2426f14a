"""Shared pytest fixtures for the video likes tests."""

from unittest.mock import MagicMock

import pytest
from fastapi import Header
from fastapi.testclient import TestClient

from videolike.api.auth import get_current_user
from videolike.api.v1 import dependencies
from videolike.application.like_service import LikeService
from videolike.domain.entities.video import Video
from videolike.infrastructure.repositories.in_memory_video_repository import InMemoryVideoRepository
from videolike.main import app


@pytest.fixture
def repo() -> InMemoryVideoRepository:
    return InMemoryVideoRepository()


@pytest.fixture
def video(repo) -> Video:
    return repo.save(Video(name="Intro", url="http://example.com/intro.mp4", duration=120))


@pytest.fixture
def service(repo) -> LikeService:
    return LikeService(repo)


@pytest.fixture
def spy_repo(repo):
    """MagicMock wrapping the real repo so calls can be counted."""
    return MagicMock(wraps=repo)


def _user_from_token(authorization: str = Header(...)) -> str:
    return authorization.split(" ", 1)[1]


@pytest.fixture
def client(repo, service):
    app.dependency_overrides[get_current_user] = _user_from_token
    app.dependency_overrides[dependencies.get_video_repo] = lambda: repo
    app.dependency_overrides[dependencies.get_like_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
