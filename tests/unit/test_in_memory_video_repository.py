"""Tests for the process-local video store."""

from videolike.domain.entities.video import Video
from videolike.infrastructure.repositories.in_memory_video_repository import InMemoryVideoRepository


def test_save_assigns_sequential_ids(repo):
    first = repo.save(Video(name="a", url="u1", duration=1))
    second = repo.save(Video(name="b", url="u2", duration=2))

    assert (first.id, second.id) == (1, 2)
    assert [v.name for v in repo.get_all()] == ["a", "b"]


def test_missing_id_returns_none(repo):
    assert repo.get_by_id(42) is None


def test_save_overwrites_by_id(repo, video):
    video.like_count = 1
    video.liked_by = {"alice"}
    repo.save(video)

    stored = repo.get_by_id(video.id)
    assert stored.like_count == 1
    assert stored.liked_by == {"alice"}
    assert len(repo.get_all()) == 1


def test_reads_are_detached_copies(repo, video):
    snapshot = repo.get_by_id(video.id)
    snapshot.liked_by.add("mallory")
    snapshot.like_count = 99

    stored = repo.get_by_id(video.id)
    assert stored.liked_by == set()
    assert stored.like_count == 0


def test_saved_object_is_not_aliased():
    repo = InMemoryVideoRepository()
    original = Video(name="a", url="u", duration=1)

    saved = repo.save(original)
    saved.liked_by.add("mallory")

    assert original.id is None
    assert repo.get_by_id(saved.id).liked_by == set()
