from fastapi import APIRouter, Depends, HTTPException
import traceback

from videolike.api.auth import get_current_user
from videolike.api.v1.dependencies import (
    create_video_use_case,
    get_like_service,
    get_video_use_case,
    list_videos_use_case,
)
from videolike.api.v1.schemas.video import VideoCreateRequest, VideoResponse
from videolike.application.like_service import LikeService
from videolike.application.use_cases.create_video import CreateVideoUseCase
from videolike.application.use_cases.get_video import GetVideoByIdUseCase
from videolike.application.use_cases.list_videos import ListVideosUseCase
from videolike.domain.errors import InvalidTransitionError, StoreError, VideoNotFoundError

router = APIRouter(prefix="/video", tags=["Videos"])

# Handlers are plain `def` so FastAPI runs them on its thread pool and
# the per-video locks in LikeService see truly concurrent requests.

@router.get("", response_model=list[VideoResponse])
def list_videos(
    user: str = Depends(get_current_user),
    use_case: ListVideosUseCase = Depends(list_videos_use_case)
):
    try:
        return [VideoResponse.from_entity(v) for v in use_case.execute()]
    except StoreError as e:
        print(f"List Videos Store Error: {e}")
        raise HTTPException(status_code=500, detail="Video store unavailable")

@router.post("", response_model=VideoResponse)
def add_video(
    request: VideoCreateRequest,
    user: str = Depends(get_current_user),
    use_case: CreateVideoUseCase = Depends(create_video_use_case)
):
    try:
        video = use_case.execute(request.name, request.url, request.duration)
        return VideoResponse.from_entity(video)
    except StoreError as e:
        print(f"Add Video Store Error: {e}")
        raise HTTPException(status_code=500, detail="Video store unavailable")

@router.get("/{video_id}", response_model=VideoResponse)
def get_video(
    video_id: int,
    user: str = Depends(get_current_user),
    use_case: GetVideoByIdUseCase = Depends(get_video_use_case)
):
    try:
        return VideoResponse.from_entity(use_case.execute(video_id))
    except VideoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        print(f"Get Video Store Error: {e}")
        raise HTTPException(status_code=500, detail="Video store unavailable")

@router.post("/{video_id}/like", response_model=VideoResponse)
def like_video(
    video_id: int,
    user: str = Depends(get_current_user),
    service: LikeService = Depends(get_like_service)
):
    """
    Marks the video as liked by the current user.
    200 on success, 404 if the video is missing, 400 if already liked.
    """
    try:
        return VideoResponse.from_entity(service.like(video_id, user))
    except VideoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTransitionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        print(f"Like Video Store Error: {e}")
        traceback.print_exc()
        raise HTTPException(status_code=500, detail="Video store unavailable")

@router.post("/{video_id}/unlike", response_model=VideoResponse)
def unlike_video(
    video_id: int,
    user: str = Depends(get_current_user),
    service: LikeService = Depends(get_like_service)
):
    """
    Removes the current user's like.
    200 on success, 404 if the video is missing, 400 if the user never liked it.
    """
    try:
        return VideoResponse.from_entity(service.unlike(video_id, user))
    except VideoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTransitionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        print(f"Unlike Video Store Error: {e}")
        traceback.print_exc()
        raise HTTPException(status_code=500, detail="Video store unavailable")

@router.get("/{video_id}/likedby", response_model=list[str])
def liked_by(
    video_id: int,
    user: str = Depends(get_current_user),
    service: LikeService = Depends(get_like_service)
):
    try:
        return sorted(service.liked_by(video_id))
    except VideoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        print(f"Liked By Store Error: {e}")
        raise HTTPException(status_code=500, detail="Video store unavailable")
