"""Tests for relative time phrases.

Run with: pytest tests/test_relative.py -v
"""

import pytest
from datetime import datetime, timedelta

from dateutil import tz

from timewise.relative import time_ago, time_until


NOW = datetime(2024, 3, 20, 12, 0)


class TestTimeAgo:
    """Test past phrases"""

    @pytest.mark.parametrize("delta,expected", [
        (timedelta(seconds=0), "just now"),
        (timedelta(seconds=59), "just now"),
        (timedelta(seconds=90), "1 minute ago"),
        (timedelta(minutes=5), "5 minutes ago"),
        (timedelta(minutes=59, seconds=59), "59 minutes ago"),
        (timedelta(minutes=60), "1 hour ago"),
        (timedelta(hours=3), "3 hours ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(hours=25), "1 day ago"),
        (timedelta(days=3), "3 days ago"),
        (timedelta(days=10), "1 week ago"),
        (timedelta(days=20), "2 weeks ago"),
        (timedelta(days=29), "4 weeks ago"),
        (timedelta(days=45), "1 month ago"),
        (timedelta(days=100), "3 months ago"),
        (timedelta(days=364), "12 months ago"),
        (timedelta(days=400), "1 year ago"),
        (timedelta(days=800), "2 years ago"),
        (timedelta(days=3650), "10 years ago"),
    ])
    def test_buckets(self, delta, expected):
        """Test each threshold row"""
        assert time_ago(NOW - delta, now=NOW) == expected

    def test_future_is_just_now(self):
        """Test a future value falls into the first row"""
        assert time_ago(NOW + timedelta(hours=5), now=NOW) == "just now"

    def test_default_now(self):
        """Test against the real clock"""
        assert time_ago(datetime.now() - timedelta(minutes=5, seconds=10)) == "5 minutes ago"

    def test_aware(self):
        """Test aware values use their own zone for now"""
        v = datetime.now(tz.UTC) - timedelta(hours=3, minutes=10)
        assert time_ago(v) == "3 hours ago"


class TestTimeUntil:
    """Test future phrases"""

    @pytest.mark.parametrize("delta,expected", [
        (timedelta(seconds=0), "in a few seconds"),
        (timedelta(seconds=59), "in a few seconds"),
        (timedelta(seconds=90), "in 1 minute"),
        (timedelta(minutes=30), "in 30 minutes"),
        (timedelta(hours=1, minutes=30), "in 1 hour"),
        (timedelta(hours=12), "in 12 hours"),
        (timedelta(hours=25), "in 1 day"),
        (timedelta(days=6), "in 6 days"),
        (timedelta(days=13), "in 1 week"),
        (timedelta(days=21), "in 3 weeks"),
        (timedelta(days=59), "in 1 month"),
        (timedelta(days=180), "in 6 months"),
        (timedelta(days=729), "in 1 year"),
        (timedelta(days=1100), "in 3 years"),
    ])
    def test_buckets(self, delta, expected):
        """Test each threshold row"""
        assert time_until(NOW + delta, now=NOW) == expected

    @pytest.mark.parametrize("delta", [timedelta(microseconds=1), timedelta(days=400)])
    def test_past(self, delta):
        """Test any negative duration is 'in the past'"""
        assert time_until(NOW - delta, now=NOW) == "in the past"

    def test_default_now(self):
        """Test against the real clock"""
        assert time_until(datetime.now() + timedelta(minutes=5, seconds=30)) == "in 5 minutes"
