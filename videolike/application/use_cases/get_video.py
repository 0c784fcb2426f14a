from videolike.domain.entities.video import Video
from videolike.domain.errors import VideoNotFoundError
from videolike.domain.repositories.video_repository import VideoRepository

class GetVideoByIdUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self, video_id: int) -> Video:
        video = self.video_repo.get_by_id(video_id)

        if not video:
            raise VideoNotFoundError(video_id)

        return video
