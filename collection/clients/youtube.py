import httpx
import logging
from typing import List, Dict, Any, Optional, Union
from datetime import datetime, timezone
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential_jitter

from core.config import AppSettings, get_settings
from core.formatting import format_duration, format_views
from service.dto import ChannelStatistics, LiveVideo

logger = logging.getLogger(__name__)

SEARCH_ORDERS = ("date", "rating", "relevance", "viewCount")
VIDEO_DURATIONS = ("any", "short", "medium", "long")
THUMBNAIL_PREFERENCE = ("high", "medium", "default")


class YouTubeError(Exception):
    """Base error for the YouTube data source"""


class ConfigurationMissing(YouTubeError):
    """No usable YouTube API key is configured"""


class UpstreamRequestFailed(YouTubeError):
    """YouTube API returned an error status or an unusable payload"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        # Transport errors have no status
        return self.status_code is None or self.status_code == 429 or self.status_code >= 500


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, UpstreamRequestFailed) and exc.retryable


def _to_rfc3339(value: Union[str, datetime]) -> str:
    if isinstance(value, str):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class YouTubeClient:
    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        client: Optional[httpx.Client] = None,
        retry_wait=None,
    ):
        self.settings = settings or get_settings()
        if not self.settings.live_source_usable:
            raise ConfigurationMissing(
                "YouTube API key not found. Set YOUTUBE_API_KEY in the environment or .env file"
            )
        self.base_url = self.settings.youtube_base_url.rstrip("/")
        self.retry_wait = retry_wait or wait_exponential_jitter(initial=1, max=30, jitter=0.2)
        self.client = client or httpx.Client(
            timeout=self.settings.youtube_timeout,
            limits=httpx.Limits(max_connections=5, max_keepalive_connections=2)
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.client.close()

    def search_videos(
        self,
        query: str = "trending tech programming",
        max_results: int = 10,
        order: str = "viewCount",
        published_after: Optional[Union[str, datetime]] = None,
        published_before: Optional[Union[str, datetime]] = None,
        video_duration: str = "any",
        region_code: Optional[str] = None,
    ) -> List[LiveVideo]:
        """Search YouTube and return normalized videos in search order"""
        if order not in SEARCH_ORDERS:
            raise ValueError(f"order must be one of {SEARCH_ORDERS}, got {order!r}")
        if video_duration not in VIDEO_DURATIONS:
            raise ValueError(f"video_duration must be one of {VIDEO_DURATIONS}, got {video_duration!r}")
        if max_results < 1:
            raise ValueError("max_results must be a positive integer")

        # Step 1: search returns ids only, no statistics or duration
        search_response = self._search(
            query, max_results, order, published_after, published_before,
            video_duration, region_code or self.settings.youtube_region_code
        )
        video_ids = self._extract_search_ids(search_response)

        if not video_ids:
            logger.info("Search returned no videos", extra={"query": query})
            return []

        # Step 2: batch details lookup for statistics and content details
        details = self._fetch_videos_details(video_ids)
        return self._parse_videos(details)

    def get_video(self, video_id: str) -> Optional[LiveVideo]:
        """Fetch a single video; None when YouTube does not know the id"""
        videos = self._parse_videos(self._fetch_videos_details([video_id]))
        return videos[0] if videos else None

    def get_channel_statistics(self, channel_id: str) -> Optional[ChannelStatistics]:
        """Fetch public channel statistics; None when the channel does not exist"""
        response = self._make_request("channels", {
            "part": "statistics,snippet",
            "id": channel_id
        })
        items = self._items(response, required=False)
        if not items:
            return None

        try:
            snippet = items[0]["snippet"]
            statistics = items[0].get("statistics", {})
            return ChannelStatistics(
                title=snippet.get("title", ""),
                description=snippet.get("description", ""),
                subscriber_count=int(statistics.get("subscriberCount", 0)),
                video_count=int(statistics.get("videoCount", 0)),
                view_count=int(statistics.get("viewCount", 0)),
                thumbnail_url=self._pick_thumbnail(snippet.get("thumbnails", {}))
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise UpstreamRequestFailed(f"Malformed channel payload: {e}")

    def _search(
        self,
        query: str,
        max_results: int,
        order: str,
        published_after,
        published_before,
        video_duration: str,
        region_code: str,
    ) -> Dict[str, Any]:
        params = {
            "part": "snippet",
            "maxResults": max_results,
            "q": query,
            "type": "video",
            "order": order,
            "videoDuration": video_duration,
            "regionCode": region_code
        }
        if published_after:
            params["publishedAfter"] = _to_rfc3339(published_after)
        if published_before:
            params["publishedBefore"] = _to_rfc3339(published_before)
        return self._make_request("search", params)

    def _fetch_videos_details(self, video_ids: List[str]) -> Dict[str, Any]:
        """Fetch detailed video information"""
        return self._make_request("videos", {
            "part": "snippet,contentDetails,statistics",
            "id": ",".join(video_ids)
        })

    def _make_request(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET with retry on 429/5xx and transport errors"""
        retrying = Retrying(
            stop=stop_after_attempt(self.settings.youtube_max_attempts),
            wait=self.retry_wait,
            retry=retry_if_exception(_is_retryable),
            before_sleep=lambda state: logger.warning(
                f"Retry {state.attempt_number} for {endpoint}: {state.outcome.exception()}"
            ),
            reraise=True
        )
        for attempt in retrying:
            with attempt:
                return self._request_once(endpoint, params)

    def _request_once(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        params = {
            **params,
            "key": self.settings.youtube_api_key
        }

        try:
            response = self.client.get(f"{self.base_url}/{endpoint}", params=params)
        except httpx.RequestError as e:
            logger.error(f"Request error: {e}")
            raise UpstreamRequestFailed(f"YouTube API request failed: {e}") from e

        if response.is_error:
            message = self._error_message(response)
            logger.error(f"HTTP error {response.status_code}: {message}")
            raise UpstreamRequestFailed(f"YouTube API error: {message}", response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamRequestFailed(f"YouTube API returned invalid JSON: {e}", response.status_code) from e
        if not isinstance(payload, dict):
            raise UpstreamRequestFailed("YouTube API returned an unexpected payload", response.status_code)
        return payload

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return "Unknown error"

    @staticmethod
    def _items(payload: Dict[str, Any], required: bool = True) -> List[Any]:
        # channels.list omits "items" when nothing matches; search/videos always send it
        if "items" not in payload and not required:
            return []
        items = payload.get("items")
        if not isinstance(items, list):
            raise UpstreamRequestFailed("YouTube API payload has no items list")
        return items

    def _extract_search_ids(self, payload: Dict[str, Any]) -> List[str]:
        ids = []
        for item in self._items(payload):
            if not isinstance(item, dict) or not isinstance(item.get("id"), dict):
                raise UpstreamRequestFailed(f"Malformed search result item: {item!r}")
            video_id = item["id"].get("videoId")
            if video_id:
                ids.append(video_id)
        return ids

    @staticmethod
    def _pick_thumbnail(thumbnails: Dict[str, Any]) -> str:
        for size in THUMBNAIL_PREFERENCE:
            if size in thumbnails:
                return thumbnails[size].get("url", "")
        return ""

    def _parse_videos(self, videos_data: Dict[str, Any]) -> List[LiveVideo]:
        """Parse video data into LiveVideo models"""
        videos = []

        for item in self._items(videos_data):
            try:
                snippet = item["snippet"]
                statistics = item.get("statistics", {})
                content_details = item.get("contentDetails", {})
                view_count = int(statistics.get("viewCount", 0))

                video = LiveVideo(
                    id=item["id"],
                    title=snippet.get("title", ""),
                    description=snippet.get("description", ""),
                    channel_id=snippet.get("channelId", ""),
                    channel_title=snippet.get("channelTitle", ""),
                    thumbnail_url=self._pick_thumbnail(snippet.get("thumbnails", {})),
                    published_at=datetime.fromisoformat(snippet["publishedAt"].replace("Z", "+00:00")),
                    views=format_views(view_count),
                    view_count=view_count,
                    like_count=statistics.get("likeCount") or "0",
                    comment_count=statistics.get("commentCount") or "0",
                    duration=format_duration(content_details.get("duration", "")),
                    tags=snippet.get("tags", [])
                )
                videos.append(video)

            except (KeyError, ValueError, TypeError, AttributeError) as e:
                video_id = item.get("id", "unknown") if isinstance(item, dict) else "unknown"
                logger.warning(f"Failed to parse video {video_id}: {e}")
                continue

        return videos
