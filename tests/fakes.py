"""Store doubles shared by the unit and API tests."""

import time

from videolike.domain.errors import StoreError
from videolike.infrastructure.repositories.in_memory_video_repository import InMemoryVideoRepository


class SlowSaveRepository(InMemoryVideoRepository):
    """Widens the read-then-write window so racing requests overlap."""

    def __init__(self, delay: float = 0.01):
        super().__init__()
        self.delay = delay

    def save(self, video):
        time.sleep(self.delay)
        return super().save(video)


class FailingSaveRepository(InMemoryVideoRepository):
    """Accepts inserts, then fails every overwrite of an existing video."""

    def save(self, video):
        if video.id is not None:
            raise StoreError("disk on fire")
        return super().save(video)


def auth(username: str) -> dict:
    # API tests override authentication so the bearer token is the username
    return {"Authorization": f"Bearer {username}"}
