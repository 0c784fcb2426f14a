from videolike.domain.entities.video import Video
from videolike.domain.repositories.video_repository import VideoRepository

class ListVideosUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self) -> list[Video]:
        return self.video_repo.get_all()
