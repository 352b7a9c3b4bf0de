"""Application configuration from environment"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in sample .env files that must not be treated as real keys
PLACEHOLDER_API_KEYS = {
    "your_youtube_api_key_here",
    "your_api_key_here",
    "changeme",
}


class AppSettings(BaseSettings):
    """Service configuration loaded from environment / .env"""
    youtube_api_key: Optional[str] = None
    youtube_base_url: str = "https://www.googleapis.com/youtube/v3"
    youtube_region_code: str = "US"
    youtube_timeout: float = 10.0
    youtube_max_attempts: int = 3
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def live_source_usable(self) -> bool:
        """True when a real YouTube API key is configured"""
        key = (self.youtube_api_key or "").strip()
        if not key:
            return False
        return key.lower() not in PLACEHOLDER_API_KEYS


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
