"""Data Transfer Objects for service layer"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Rating = Literal["Excellent", "Good"]
SortKey = Literal["views", "recent", "rating"]


class _CamelModel(BaseModel):
    """Accepts and serializes camelCase field names (dashboard / tool shape)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoRecord(_CamelModel):
    """Canonical video as returned to the dashboard and the assistant"""
    id: str
    rank: int = Field(ge=1)
    thumbnail: str
    title: str
    channel: str
    views: str
    time_ago: str
    rating: Rating
    category: Optional[str] = None
    description: Optional[str] = None


class VideoFilter(_CamelModel):
    """Filter/sort/limit options for video listing"""
    category: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1)
    sort_by: Optional[SortKey] = None
    use_real_api: Optional[bool] = None


class VideoSummary(_CamelModel):
    """Aggregate statistics over the current video set"""
    total_videos: int
    total_views: str
    excellent_rating: int
    average_views: str
    categories: List[str]


class LiveVideo(BaseModel):
    """Normalized YouTube video, before ranking"""
    id: str
    title: str
    description: str = ""
    channel_id: str = ""
    channel_title: str = ""
    thumbnail_url: str = ""
    published_at: datetime
    views: str
    view_count: int = 0
    like_count: str = "0"
    comment_count: str = "0"
    duration: str = "0:00"
    tags: List[str] = Field(default_factory=list)


class ChannelStatistics(_CamelModel):
    """Public statistics for a YouTube channel"""
    title: str
    description: str = ""
    subscriber_count: int = 0
    video_count: int = 0
    view_count: int = 0
    thumbnail_url: str = ""


class HealthResponseDTO(BaseModel):
    """Service layer DTO for health check responses"""
    ok: bool = True
    timestamp: Optional[str] = None
    version: Optional[str] = None
    live_source: bool = False
