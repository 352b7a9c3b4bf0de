import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.deps.common import get_trace_id, get_video_service
from service.dto import ChannelStatistics, SortKey, VideoFilter, VideoRecord, VideoSummary
from service.videos_service import VideoService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["videos"])


def _not_found(code: str, message: str, trace_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "error": {
                "code": code,
                "message": message,
                "trace_id": trace_id
            }
        }
    )


@router.get("/videos", response_model=List[VideoRecord], response_model_by_alias=True)
def list_videos(
    category: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1),
    sort_by: Optional[SortKey] = Query(default=None, alias="sortBy"),
    use_real_api: Optional[bool] = Query(default=None, alias="useRealApi"),
    service: VideoService = Depends(get_video_service),
    trace_id: str = Depends(get_trace_id)
) -> List[VideoRecord]:
    """Trending tech videos, filtered, sorted and ranked"""
    video_filter = VideoFilter(
        category=category,
        limit=limit,
        sort_by=sort_by,
        use_real_api=use_real_api
    )
    return service.list_videos(video_filter, trace_id=trace_id)


@router.get("/videos/summary", response_model=VideoSummary, response_model_by_alias=True)
def video_summary(
    service: VideoService = Depends(get_video_service),
    trace_id: str = Depends(get_trace_id)
) -> VideoSummary:
    """Totals and averages over the current video set"""
    return service.get_summary(trace_id=trace_id)


@router.get("/videos/{video_id}", response_model=VideoRecord, response_model_by_alias=True)
def get_video(
    video_id: str,
    service: VideoService = Depends(get_video_service),
    trace_id: str = Depends(get_trace_id)
) -> VideoRecord:
    video = service.get_video_by_id(video_id, trace_id=trace_id)
    if video is None:
        raise _not_found("VIDEO_NOT_FOUND", f"Video {video_id} not found", trace_id)
    return video


@router.get("/channels/{channel_id}", response_model=ChannelStatistics, response_model_by_alias=True)
def get_channel(
    channel_id: str,
    service: VideoService = Depends(get_video_service),
    trace_id: str = Depends(get_trace_id)
) -> ChannelStatistics:
    statistics = service.get_channel_statistics(channel_id, trace_id=trace_id)
    if statistics is None:
        raise _not_found("CHANNEL_NOT_FOUND", f"Channel {channel_id} not available", trace_id)
    return statistics
