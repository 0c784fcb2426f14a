from dataclasses import replace
from typing import Optional
from videolike.domain.entities.video import Video
from videolike.domain.errors import InvalidTransitionError, VideoNotFoundError
from videolike.domain.repositories.video_repository import VideoRepository
from videolike.application.video_locks import VideoLockRegistry

class LikeService:
    """
    Like/unlike state machine for a (video, user) pair.

    Each transition runs check, mutate and save while holding the video's
    lock, so like_count and liked_by always move together. The fetched
    snapshot is never modified: a new Video is built and saved, which
    leaves the stored record untouched when the save fails.
    """

    def __init__(self, video_repo: VideoRepository, locks: Optional[VideoLockRegistry] = None):
        self.video_repo = video_repo
        self.locks = locks or VideoLockRegistry()

    def like(self, video_id: int, username: str) -> Video:
        self._require_username(username)

        with self.locks.hold(video_id):
            video = self._load(video_id)
            if video.is_liked_by(username):
                raise InvalidTransitionError(video_id, username, "like")

            updated = replace(
                video,
                like_count=video.like_count + 1,
                liked_by=video.liked_by | {username},
            )
            return self.video_repo.save(updated)

    def unlike(self, video_id: int, username: str) -> Video:
        self._require_username(username)

        with self.locks.hold(video_id):
            video = self._load(video_id)
            if not video.is_liked_by(username):
                raise InvalidTransitionError(video_id, username, "unlike")

            updated = replace(
                video,
                like_count=video.like_count - 1,
                liked_by=video.liked_by - {username},
            )
            return self.video_repo.save(updated)

    def liked_by(self, video_id: int) -> frozenset[str]:
        with self.locks.hold(video_id):
            return frozenset(self._load(video_id).liked_by)

    def _load(self, video_id: int) -> Video:
        video = self.video_repo.get_by_id(video_id)
        if not video:
            raise VideoNotFoundError(video_id)
        return video

    @staticmethod
    def _require_username(username: str):
        if not username:
            raise ValueError("username must be a non-empty string")
