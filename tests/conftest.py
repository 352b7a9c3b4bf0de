"""Common test fixtures for all test modules"""
import pytest
import httpx
from tenacity import wait_none

from collection.clients.youtube import YouTubeClient
from core.config import AppSettings
from service.videos_service import VideoService


def youtube_video_item(video_id, view_count="1000000", like_count="60000", published_at="2025-01-01T00:00:00Z",
                       duration="PT4M13S", title=None):
    """YouTube videos.list item as returned with part=snippet,contentDetails,statistics"""
    return {
        "id": video_id,
        "snippet": {
            "title": title or f"Video {video_id}",
            "description": f"Description of {video_id}",
            "channelId": f"UC_{video_id}",
            "channelTitle": f"Channel {video_id}",
            "publishedAt": published_at,
            "thumbnails": {
                "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg", "width": 120, "height": 90},
                "high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg", "width": 480, "height": 360},
            },
            "tags": ["tech"],
        },
        "contentDetails": {"duration": duration},
        "statistics": {"viewCount": view_count, "likeCount": like_count, "commentCount": "12"},
    }


class FakeYouTubeAPI:
    """httpx.MockTransport handler emulating search + videos endpoints"""

    def __init__(self, items=None, search_status=200, videos_status=200, error_message="quotaExceeded"):
        self.items = items if items is not None else [
            youtube_video_item("a1", view_count="500000", like_count="10000"),
            youtube_video_item("b2", view_count="2500000", like_count="200000"),
        ]
        self.search_status = search_status
        self.videos_status = videos_status
        self.error_message = error_message
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]

        if endpoint == "search":
            if self.search_status != 200:
                return self._error(self.search_status)
            return httpx.Response(200, json={
                "items": [{"id": {"kind": "youtube#video", "videoId": item["id"]}} for item in self.items]
            })

        if endpoint == "videos":
            if self.videos_status != 200:
                return self._error(self.videos_status)
            wanted = request.url.params["id"].split(",")
            return httpx.Response(200, json={"items": [i for i in self.items if i["id"] in wanted]})

        if endpoint == "channels":
            return httpx.Response(200, json={"items": [{
                "snippet": {"title": "Fireship", "description": "High-intensity code tutorials",
                            "thumbnails": {"medium": {"url": "https://yt3.ggpht.com/fireship.jpg"}}},
                "statistics": {"subscriberCount": "3000000", "videoCount": "700", "viewCount": "450000000"},
            }]})

        return httpx.Response(404)

    def _error(self, status):
        return httpx.Response(status, json={"error": {"code": status, "message": self.error_message}})


@pytest.fixture
def static_settings():
    """Settings without a usable API key"""
    return AppSettings(youtube_api_key=None, _env_file=None)


@pytest.fixture
def live_settings():
    """Settings with a (fake) API key and a single attempt per request"""
    return AppSettings(youtube_api_key="test-key", youtube_max_attempts=1, _env_file=None)


@pytest.fixture
def fake_api():
    return FakeYouTubeAPI()


@pytest.fixture
def make_client():
    """Build a YouTubeClient talking to a fake API"""
    def _make(settings, api):
        return YouTubeClient(
            settings=settings,
            client=httpx.Client(transport=httpx.MockTransport(api)),
            retry_wait=wait_none()
        )
    return _make


@pytest.fixture
def live_service(live_settings, fake_api, make_client):
    return VideoService(settings=live_settings, client_factory=lambda s: make_client(s, fake_api))


@pytest.fixture
def static_service(static_settings):
    return VideoService(settings=static_settings)
