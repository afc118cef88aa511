"""Tests for the free-function entry points.

These functions use a fresh default_rule() per call, so environment
overrides are picked up immediately.

Run with: pytest tests/test_nowapi.py -v
"""

import pytest
from datetime import datetime, timedelta

from dateutil import tz

import timewise
from timewise.exceptions import ParseError, UnknownTimezoneError
from timewise.rule import ENV_WEEK_START_DAY, ENV_TIMEZONE, FORMAT_DATE, CLOCK_HM_COLON


class TestBoundariesExplicit:
    """Test boundary functions with an explicit timestamp"""

    def test_day_month_year(self, wednesday):
        """Test explicit values"""
        assert timewise.beginning_of_day(wednesday) == datetime(2024, 3, 20)
        assert timewise.end_of_day(wednesday) == datetime(2024, 3, 20, 23, 59, 59, 999999)
        assert timewise.beginning_of_month(wednesday) == datetime(2024, 3, 1)
        assert timewise.end_of_month(wednesday) == datetime(2024, 3, 31, 23, 59, 59, 999999)
        assert timewise.beginning_of_quarter(wednesday) == datetime(2024, 1, 1)
        assert timewise.end_of_half(wednesday) == datetime(2024, 6, 30, 23, 59, 59, 999999)
        assert timewise.end_of_year(wednesday) == datetime(2024, 12, 31, 23, 59, 59, 999999)

    def test_week_default_sunday(self, wednesday):
        """Test default week start"""
        assert timewise.beginning_of_week(wednesday) == datetime(2024, 3, 17)

    def test_week_from_env(self, monkeypatch, wednesday):
        """Test TIMEWISE_WEEK_START_DAY is honoured"""
        monkeypatch.setenv(ENV_WEEK_START_DAY, "Monday")
        assert timewise.beginning_of_week(wednesday) == datetime(2024, 3, 18)
        assert timewise.end_of_week(wednesday) == datetime(2024, 3, 24, 23, 59, 59, 999999)

    def test_keeps_tzinfo(self, wednesday_utc):
        """Test aware values stay aware"""
        assert timewise.beginning_of_hour(wednesday_utc) == datetime(2024, 3, 20, 14, tzinfo=tz.UTC)


class TestBoundariesNow:
    """Test boundary functions on the current time"""

    def test_beginning_of_day(self):
        """Test today's midnight"""
        result = timewise.beginning_of_day()
        assert (result.hour, result.minute, result.second, result.microsecond) == (0, 0, 0, 0)
        assert result <= datetime.now()

    def test_end_of_minute(self):
        """Test end of the current minute"""
        result = timewise.end_of_minute()
        assert result.second == 59 and result.microsecond == 999999

    def test_now_in_env_zone(self, monkeypatch):
        """Test TIMEWISE_TIMEZONE makes now() aware"""
        monkeypatch.setenv(ENV_TIMEZONE, "UTC")
        assert timewise.beginning_of_day().utcoffset() == timedelta(0)

    def test_weekdays(self):
        """Test weekday lookups in the current week"""
        assert timewise.monday().weekday() == 0
        assert timewise.wednesday().weekday() == 2
        assert timewise.sunday().weekday() == 6
        assert timewise.sunday() - timewise.monday() == timedelta(days=6)

    def test_end_of_sunday(self):
        """Test end of this week's Sunday"""
        result = timewise.end_of_sunday()
        assert result.weekday() == 6
        assert (result.hour, result.minute, result.second) == (23, 59, 59)

    def test_weekday_of_parsed_date(self):
        """Test weekday lookups of a given date"""
        assert timewise.monday("2024-03-20") == datetime(2024, 3, 18)
        assert timewise.saturday("2024-03-20") == datetime(2024, 3, 23)

    def test_quarter(self):
        """Test quarter with and without a value"""
        assert timewise.quarter(datetime(2024, 8, 1)) == 3
        assert timewise.quarter() in (1, 2, 3, 4)


class TestParse:
    """Test parsing entry points"""

    def test_parse(self):
        """Test a complete string"""
        assert timewise.parse("2024-03-15 13:15") == datetime(2024, 3, 15, 13, 15)

    def test_parse_failure(self):
        """Test None vs ParseError"""
        assert timewise.parse("garbage") is None
        with pytest.raises(ParseError):
            timewise.must_parse("garbage")

    def test_parse_time_only_is_today(self):
        """Test time-only strings land on today"""
        result = timewise.must_parse("13:15")
        assert result.date() == datetime.now().date()
        assert (result.hour, result.minute) == (13, 15)

    def test_parse_in_location(self):
        """Test offset-less values land in the given zone"""
        result = timewise.parse_in_location("Asia/Tokyo", "2024-03-15 13:15")
        assert result.utcoffset() == timedelta(hours=9)
        assert result == datetime(2024, 3, 15, 4, 15, tzinfo=tz.UTC)

    def test_parse_in_location_tzinfo(self):
        """Test a tzinfo is accepted directly"""
        assert timewise.must_parse_in_location(tz.UTC, "2024-03-15").tzinfo is tz.UTC

    def test_parse_in_unknown_location(self):
        """Test unknown zones raise"""
        with pytest.raises(UnknownTimezoneError):
            timewise.must_parse_in_location("Not/AZone", "2024-03-15")
        with pytest.raises(UnknownTimezoneError):
            timewise.parse_in_location("Not/AZone", "2024-03-15")

    def test_must_parse_in_location_failure(self):
        """Test ParseError from the location variant"""
        with pytest.raises(ParseError):
            timewise.must_parse_in_location("UTC", "garbage")

    def test_between(self):
        """Test now against wide bounds"""
        assert timewise.between("2000-01-01", "2999-12-31")
        assert not timewise.between("2999-01-01", "2999-12-31")


class TestFormat:
    """Test formatting entry points"""

    def test_explicit(self, wednesday):
        """Test formatting an explicit value"""
        assert timewise.format_rfc(FORMAT_DATE, wednesday) == "2024-03-20"
        assert timewise.format_rfc_short(CLOCK_HM_COLON, wednesday) == "14:30"
        assert timewise.default_format(wednesday) == "2024-03-20 14:30:00"

    def test_now(self):
        """Test formatting the current time"""
        assert timewise.format_rfc(FORMAT_DATE) == datetime.now().strftime(FORMAT_DATE)
        assert len(timewise.default_format()) == len("2024-03-20 14:30:00")

    def test_relative(self, wednesday):
        """Test relative phrases"""
        assert timewise.time_ago(wednesday, now=wednesday + timedelta(hours=25)) == "1 day ago"
        assert timewise.time_until(wednesday, now=wednesday - timedelta(seconds=90)) == "in 1 minute"
        assert timewise.time_until(wednesday, now=wednesday + timedelta(days=1)) == "in the past"
