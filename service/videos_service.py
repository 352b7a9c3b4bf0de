"""Video aggregation service: live/static source selection and post-processing"""
import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Union

import httpx

from collection.clients.youtube import YouTubeClient, YouTubeError
from core.catalog import (
    CATEGORIES,
    CATEGORY_QUERIES,
    DEFAULT_LIVE_LIMIT,
    DEFAULT_QUERY,
    LIVE_LOOKBACK_DAYS,
    STATIC_VIDEOS,
    SUMMARY_LIMIT,
    YOUTUBE_MAX_RESULTS,
)
from core.config import AppSettings, get_settings
from core.formatting import derive_rating, format_views, parse_views, time_ago
from service.dto import ChannelStatistics, LiveVideo, VideoFilter, VideoRecord, VideoSummary

logger = logging.getLogger(__name__)

# Errors from the live source that are recovered by serving static data
LIVE_SOURCE_ERRORS = (YouTubeError, httpx.HTTPError)


@dataclass
class LiveResult:
    """Videos fetched from YouTube, already filtered by category query"""
    videos: List[VideoRecord]
    source: str = "live"


@dataclass
class StaticResult:
    """Videos from the bundled dataset, not yet filtered"""
    videos: List[VideoRecord]
    source: str = "static"


SourceResult = Union[LiveResult, StaticResult]


def _new_trace_id() -> str:
    return f"videos_{uuid.uuid4().hex[:8]}"


def _live_to_record(video: LiveVideo, category: Optional[str], rank: int = 1) -> VideoRecord:
    return VideoRecord(
        id=video.id,
        rank=rank,
        thumbnail=video.thumbnail_url,
        title=video.title,
        channel=video.channel_title,
        views=video.views,
        time_ago=time_ago(video.published_at),
        rating=derive_rating(video.like_count, video.view_count),
        category=category,
        description=video.description
    )


def _static_records() -> List[VideoRecord]:
    return [VideoRecord(**video) for video in STATIC_VIDEOS]


def sort_videos(videos: List[VideoRecord], sort_by: Optional[str]) -> List[VideoRecord]:
    """Sort by views (desc) or rating (Excellent first); other keys keep source order"""
    if sort_by == "views":
        return sorted(videos, key=lambda v: parse_views(v.views), reverse=True)
    if sort_by == "rating":
        return sorted(videos, key=lambda v: v.rating != "Excellent")
    return list(videos)


def assign_ranks(videos: List[VideoRecord]) -> List[VideoRecord]:
    return [video.model_copy(update={"rank": index}) for index, video in enumerate(videos, start=1)]


class VideoService:
    """Single entry point for video listing, summary and lookup"""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        client_factory: Optional[Callable[[AppSettings], YouTubeClient]] = None,
    ):
        self.settings = settings or get_settings()
        self.client_factory = client_factory or (lambda s: YouTubeClient(settings=s))

    def live_source_enabled(self, use_real_api: Optional[bool] = None) -> bool:
        return use_real_api is not False and self.settings.live_source_usable

    def list_videos(self, video_filter: Optional[VideoFilter] = None, *, trace_id: Optional[str] = None) -> List[VideoRecord]:
        """
        List trending videos.

        Uses YouTube when enabled and configured, otherwise (or on any live
        source failure) the bundled dataset. Filtering, sorting, limiting and
        ranking are applied identically to both sources.

        Args:
            video_filter: category / sort / limit / live toggle
            trace_id: Request tracing ID

        Returns:
            List[VideoRecord]: ranked videos, rank 1..len in final order
        """
        video_filter = video_filter or VideoFilter()
        trace_id = trace_id or _new_trace_id()
        start_time = time.time()

        result = self._fetch(video_filter, trace_id)
        videos = self._post_process(result, video_filter)

        logger.info("Videos listed", extra={
            "trace_id": trace_id,
            "source": result.source,
            "category": video_filter.category,
            "count": len(videos),
            "latency_ms": int((time.time() - start_time) * 1000)
        })
        return videos

    def get_summary(self, *, trace_id: Optional[str] = None) -> VideoSummary:
        """Totals and averages over the current video set"""
        videos = self.list_videos(VideoFilter(limit=SUMMARY_LIMIT), trace_id=trace_id)
        total_views = sum(parse_views(v.views) for v in videos)
        excellent = sum(1 for v in videos if v.rating == "Excellent")
        average = total_views / len(videos) if videos else 0

        return VideoSummary(
            total_videos=len(videos),
            total_views=format_views(total_views),
            excellent_rating=excellent,
            average_views=format_views(average),
            categories=list(CATEGORIES)
        )

    def get_video_by_id(self, video_id: str, *, trace_id: Optional[str] = None) -> Optional[VideoRecord]:
        """Look up one video; None when neither source knows the id"""
        trace_id = trace_id or _new_trace_id()

        if self.live_source_enabled():
            try:
                with self.client_factory(self.settings) as client:
                    video = client.get_video(video_id)
                if video is not None:
                    return _live_to_record(video, category=None)
            except LIVE_SOURCE_ERRORS as e:
                logger.warning("Live video lookup failed, using static data", extra={
                    "trace_id": trace_id,
                    "error": str(e)
                })

        for video in STATIC_VIDEOS:
            if video["id"] == video_id:
                return VideoRecord(**video)

        logger.info("Video not found", extra={"trace_id": trace_id, "video_id": video_id})
        return None

    def get_channel_statistics(self, channel_id: str, *, trace_id: Optional[str] = None) -> Optional[ChannelStatistics]:
        """Channel statistics from YouTube; None when unavailable"""
        if not self.live_source_enabled():
            return None
        try:
            with self.client_factory(self.settings) as client:
                return client.get_channel_statistics(channel_id)
        except LIVE_SOURCE_ERRORS as e:
            logger.warning("Channel statistics lookup failed", extra={
                "trace_id": trace_id or _new_trace_id(),
                "error": str(e)
            })
            return None

    def _fetch(self, video_filter: VideoFilter, trace_id: str) -> SourceResult:
        if self.live_source_enabled(video_filter.use_real_api):
            try:
                return self._fetch_live(video_filter)
            except LIVE_SOURCE_ERRORS as e:
                logger.warning("Live source failed, falling back to static data", extra={
                    "trace_id": trace_id,
                    "error": str(e),
                    "error_type": type(e).__name__
                })
        return StaticResult(videos=_static_records())

    def _fetch_live(self, video_filter: VideoFilter) -> LiveResult:
        category = video_filter.category
        if category:
            query = CATEGORY_QUERIES.get(category, category)
            published_after = datetime.now(timezone.utc) - timedelta(days=LIVE_LOOKBACK_DAYS)
        else:
            query = DEFAULT_QUERY
            published_after = None

        with self.client_factory(self.settings) as client:
            live_videos = client.search_videos(
                query=query,
                max_results=min(video_filter.limit or DEFAULT_LIVE_LIMIT, YOUTUBE_MAX_RESULTS),
                order="date" if video_filter.sort_by == "recent" else "viewCount",
                published_after=published_after,
                region_code=self.settings.youtube_region_code
            )

        return LiveResult(videos=[
            _live_to_record(video, category, rank=index)
            for index, video in enumerate(live_videos, start=1)
        ])

    @staticmethod
    def _post_process(result: SourceResult, video_filter: VideoFilter) -> List[VideoRecord]:
        videos = result.videos
        # Live results are already narrowed by the category query
        if isinstance(result, StaticResult) and video_filter.category:
            videos = [v for v in videos if v.category == video_filter.category]

        videos = sort_videos(videos, video_filter.sort_by)
        if video_filter.limit:
            videos = videos[:video_filter.limit]
        return assign_ranks(videos)


_default_service: Optional[VideoService] = None


def get_default_service() -> VideoService:
    global _default_service
    if _default_service is None:
        _default_service = VideoService()
    return _default_service


def list_videos(video_filter: Optional[VideoFilter] = None) -> List[VideoRecord]:
    return get_default_service().list_videos(video_filter)


def get_summary() -> VideoSummary:
    return get_default_service().get_summary()


def get_video_by_id(video_id: str) -> Optional[VideoRecord]:
    return get_default_service().get_video_by_id(video_id)
