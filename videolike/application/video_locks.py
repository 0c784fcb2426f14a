import threading
from contextlib import contextmanager
from typing import Hashable, Iterator

class VideoLockRegistry:
    """
    Hands out one lock per video id. Holders of different ids never
    contend; an entry is dropped once nobody holds or waits on it.
    """

    def __init__(self):
        self._mutex = threading.Lock()
        # video_id -> [lock, number of holders + waiters]
        self._entries: dict[Hashable, list] = {}

    @contextmanager
    def hold(self, video_id: Hashable) -> Iterator[None]:
        with self._mutex:
            entry = self._entries.setdefault(video_id, [threading.Lock(), 0])
            entry[1] += 1

        lock = entry[0]
        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._mutex:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._entries[video_id]

    def __len__(self) -> int:
        with self._mutex:
            return len(self._entries)
