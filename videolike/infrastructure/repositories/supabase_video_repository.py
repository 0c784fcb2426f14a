from typing import Optional
from videolike.config import SUPABASE_VIDEOS_TABLE
from videolike.domain.entities.video import Video
from videolike.domain.errors import StoreError
from videolike.domain.repositories.video_repository import VideoRepository
from videolike.infrastructure.supabase_client import get_supabase

class SupabaseVideoRepository(VideoRepository):
    def __init__(self, client=None, table: str = SUPABASE_VIDEOS_TABLE):
        self.client = client
        self.table = table

    def _table(self):
        client = self.client or get_supabase()
        return client.table(self.table)

    def get_by_id(self, video_id: int) -> Optional[Video]:
        try:
            res = self._table().select("*").eq("id", video_id).limit(1).execute()
        except Exception as e:
            print(f"Database error: {e}")
            raise StoreError(f"Failed to load video {video_id}") from e

        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def get_all(self) -> list[Video]:
        try:
            res = self._table().select("*").order("id").execute()
        except Exception as e:
            print(f"List videos database error: {e}")
            raise StoreError("Failed to list videos") from e

        return [self._map_to_entity(item) for item in res.data or []]

    def save(self, video: Video) -> Video:
        data = {
            "name": video.name,
            "url": video.url,
            "duration": video.duration,
            "like_count": video.like_count,
            # Sorted so the stored array is stable between writes
            "liked_by": sorted(video.liked_by),
        }
        if video.id is not None:
            data["id"] = video.id

        try:
            res = self._table().upsert(data).execute()
        except Exception as e:
            print(f"Save video database error: {e}")
            raise StoreError(f"Failed to save video {video.id}") from e

        if not res.data:
            raise StoreError(f"Failed to save video {video.id}: no row returned")

        return self._map_to_entity(res.data[0])

    def _map_to_entity(self, data: dict) -> Video:
        return Video(
            id=data["id"],
            name=data.get("name", ""),
            url=data.get("url", ""),
            duration=data.get("duration") or 0,
            like_count=data.get("like_count") or 0,
            liked_by=set(data.get("liked_by") or []),
        )
