"""Display formatting for video durations, view counts and publish times"""
import re
from datetime import datetime, timezone
from typing import Optional, Union

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")
_VIEWS_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)([KM]?)")

_MULTIPLIERS = {"K": 1_000, "M": 1_000_000, "": 1}

# (days per unit, singular label), checked largest first
_TIME_BUCKETS = (
    (365, "year"),
    (30, "month"),
    (7, "week"),
    (1, "day"),
)

EXCELLENT_LIKE_RATIO = 0.05


def format_duration(duration: str) -> str:
    """Format an ISO-8601 duration (PT#H#M#S) as H:MM:SS or M:SS"""
    match = _DURATION_RE.match(duration or "")
    if not match or not any(match.groups()):
        return "0:00"

    hours, minutes, seconds = match.groups()
    seconds = (seconds or "0").zfill(2)

    if hours and int(hours) > 0:
        return f"{int(hours)}:{(minutes or '0').zfill(2)}:{seconds}"
    return f"{int(minutes or 0)}:{seconds}"


def format_views(views: Union[int, float]) -> str:
    """Format a raw view count: 2500000 -> '2.5M views', 450000 -> '450K views'"""
    # Promote on the rounded value so 999,500 renders as 1.0M, not 1000K
    if views >= 1_000_000 or round(views / 1_000) >= 1_000:
        return f"{views / 1_000_000:.1f}M views"
    if views >= 1_000:
        return f"{views / 1_000:.0f}K views"
    return f"{round(views)} views"


def parse_views(display: str) -> int:
    """Parse a formatted view count back into an integer ('591K views' -> 591000)"""
    match = _VIEWS_RE.search(display or "")
    if not match:
        return 0
    return round(float(match.group(1)) * _MULTIPLIERS[match.group(2)])


def _parse_timestamp(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def time_ago(published_at: Union[str, datetime], now: Optional[datetime] = None) -> str:
    """Relative publish time: '2 years ago', '1 month ago', ..., 'Today'"""
    now = now or datetime.now(timezone.utc)
    days = (now - _parse_timestamp(published_at)).days

    for unit_days, label in _TIME_BUCKETS:
        count = days // unit_days
        if count > 0:
            return f"{count} {label if count == 1 else label + 's'} ago"
    return "Today"


def derive_rating(like_count: Union[int, str, None], view_count: Union[int, str, None]) -> str:
    """Excellent when more than 5% of viewers liked the video"""
    likes = int(like_count or 0)
    views = int(view_count or 0)
    if views <= 0:
        return "Good"
    return "Excellent" if likes / views > EXCELLENT_LIKE_RATIO else "Good"
