from pydantic import BaseModel
from videolike.domain.entities.video import Video

class VideoCreateRequest(BaseModel):
    name: str
    url: str
    duration: int = 0

class VideoResponse(BaseModel):
    id: int
    name: str
    url: str
    duration: int
    likes: int
    liked_by: list[str]

    @classmethod
    def from_entity(cls, video: Video) -> "VideoResponse":
        return cls(
            id=video.id,
            name=video.name,
            url=video.url,
            duration=video.duration,
            likes=video.like_count,
            liked_by=sorted(video.liked_by),
        )
