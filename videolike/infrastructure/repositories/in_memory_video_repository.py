import copy
import itertools
import threading
from typing import Optional
from videolike.domain.entities.video import Video
from videolike.domain.repositories.video_repository import VideoRepository

class InMemoryVideoRepository(VideoRepository):
    """
    Process-local video store. Every read and write hands out a detached
    copy, so a caller holding a Video never shares sets with the store.
    """

    def __init__(self):
        self._videos: dict[int, Video] = {}
        self._ids = itertools.count(1)
        self._mutex = threading.Lock()

    def get_by_id(self, video_id: int) -> Optional[Video]:
        with self._mutex:
            video = self._videos.get(video_id)
            return copy.deepcopy(video) if video else None

    def get_all(self) -> list[Video]:
        with self._mutex:
            return [copy.deepcopy(v) for v in self._videos.values()]

    def save(self, video: Video) -> Video:
        with self._mutex:
            stored = copy.deepcopy(video)
            if stored.id is None:
                stored.id = next(self._ids)
            self._videos[stored.id] = stored
            return copy.deepcopy(stored)
