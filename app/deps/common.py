"""Common dependencies for FastAPI dependency injection"""
import uuid
from datetime import datetime, timezone

from core.config import AppSettings, get_settings
from service.videos_service import VideoService, get_default_service


def get_app_settings() -> AppSettings:
    return get_settings()


def get_trace_id() -> str:
    """
    Generate unique trace ID for request tracking.

    Returns:
        str: Unique trace ID
    """
    return f"api_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"


def get_video_service() -> VideoService:
    """
    Video service dependency.

    Overridden in tests with a service bound to explicit settings.

    Returns:
        VideoService: process-wide service instance
    """
    return get_default_service()
