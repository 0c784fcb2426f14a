from abc import ABC, abstractmethod
from typing import Optional
from videolike.domain.entities.video import Video

class VideoRepository(ABC):
    @abstractmethod
    def get_by_id(self, video_id: int) -> Optional[Video]:
        pass

    @abstractmethod
    def get_all(self) -> list[Video]:
        pass

    @abstractmethod
    def save(self, video: Video) -> Video:
        """
        Overwrites the stored record with the same id.
        A video without an id is inserted and gets one assigned.
        """
        pass
