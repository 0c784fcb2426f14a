from functools import lru_cache
from fastapi import Depends

from videolike.config import VIDEO_STORE
from videolike.domain.repositories.video_repository import VideoRepository
from videolike.application.like_service import LikeService
from videolike.application.use_cases.create_video import CreateVideoUseCase
from videolike.application.use_cases.get_video import GetVideoByIdUseCase
from videolike.application.use_cases.list_videos import ListVideosUseCase
from videolike.infrastructure.repositories.in_memory_video_repository import InMemoryVideoRepository
from videolike.infrastructure.repositories.supabase_video_repository import SupabaseVideoRepository

# One store and one like service per process: the per-video locks only
# serialize requests that share the same LikeService.
@lru_cache(maxsize=1)
def get_video_repo() -> VideoRepository:
    if VIDEO_STORE == "supabase":
        return SupabaseVideoRepository()
    if VIDEO_STORE == "memory":
        return InMemoryVideoRepository()
    raise ValueError(f"Unknown VIDEO_STORE '{VIDEO_STORE}', expected 'memory' or 'supabase'")

@lru_cache(maxsize=1)
def get_like_service() -> LikeService:
    return LikeService(get_video_repo())

def get_video_use_case(repo: VideoRepository = Depends(get_video_repo)):
    return GetVideoByIdUseCase(repo)

def list_videos_use_case(repo: VideoRepository = Depends(get_video_repo)):
    return ListVideosUseCase(repo)

def create_video_use_case(repo: VideoRepository = Depends(get_video_repo)):
    return CreateVideoUseCase(repo)
