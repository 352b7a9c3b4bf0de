"""Unit tests for display formatting helpers"""
import pytest
from datetime import datetime, timedelta, timezone

from core.formatting import derive_rating, format_duration, format_views, parse_views, time_ago


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestFormatDuration:
    """ISO-8601 duration codes to clock display"""

    @pytest.mark.parametrize("code,expected", [
        ("PT4M13S", "4:13"),
        ("PT1H2M3S", "1:02:03"),
        ("PT1H", "1:00:00"),
        ("PT45S", "0:45"),
        ("PT10M", "10:00"),
        ("PT0H5M7S", "5:07"),
    ])
    def test_valid_codes(self, code, expected):
        assert format_duration(code) == expected

    def test_unparseable_code(self):
        assert format_duration("") == "0:00"
        assert format_duration("garbage") == "0:00"


class TestViewCounts:
    """View count formatting and parsing"""

    def test_format_millions(self):
        assert format_views(2500000) == "2.5M views"
        assert format_views(1000000) == "1.0M views"

    def test_format_thousands(self):
        assert format_views(450000) == "450K views"
        assert format_views(1000) == "1K views"

    def test_format_small(self):
        assert format_views(999) == "999 views"
        assert format_views(0) == "0 views"

    def test_parse_examples(self):
        assert parse_views("2.0M views") == 2000000
        assert parse_views("591K views") == 591000
        assert parse_views("1.3M views") == 1300000
        assert parse_views("42 views") == 42

    def test_parse_non_matching(self):
        assert parse_views("Today") == 0
        assert parse_views("") == 0

    def test_format_then_parse_keeps_magnitude(self):
        assert parse_views(format_views(450000)) == 450000


class TestTimeAgo:
    """Relative publish time buckets"""

    @pytest.mark.parametrize("days,expected", [
        (0, "Today"),
        (1, "1 day ago"),
        (6, "6 days ago"),
        (7, "1 week ago"),
        (20, "2 weeks ago"),
        (30, "1 month ago"),
        (300, "10 months ago"),
        (365, "1 year ago"),
        (800, "2 years ago"),
    ])
    def test_buckets(self, days, expected):
        assert time_ago(NOW - timedelta(days=days, hours=1), now=NOW) == expected

    def test_accepts_iso_string_with_z(self):
        assert time_ago("2026-02-20T12:00:00Z", now=NOW) == "1 week ago"

    def test_future_timestamp_is_today(self):
        assert time_ago(NOW + timedelta(days=3), now=NOW) == "Today"


class TestDeriveRating:
    """Like ratio rating"""

    def test_high_like_ratio_is_excellent(self):
        assert derive_rating("6000", "100000") == "Excellent"

    def test_boundary_ratio_is_good(self):
        assert derive_rating(5000, 100000) == "Good"

    def test_zero_views_is_good(self):
        assert derive_rating("10", "0") == "Good"
        assert derive_rating(None, None) == "Good"


class TestViewCountRounding:
    """Thousands that round up to a million are shown in millions"""

    @pytest.mark.parametrize("views,expected", [
        (999499, "999K views"),
        (999500, "1.0M views"),
        (999999, "1.0M views"),
    ])
    def test_promotes_to_millions(self, views, expected):
        assert format_views(views) == expected
