from videolike.domain.entities.video import Video
from videolike.domain.repositories.video_repository import VideoRepository

class CreateVideoUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self, name: str, url: str, duration: int) -> Video:
        """
        Adds a new video to the catalog. The store assigns the id;
        every new video starts with no likes.
        """
        video = Video(name=name, url=url, duration=duration)
        return self.video_repo.save(video)
