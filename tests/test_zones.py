"""Tests for zone constants and zone name resolution.

Run with: pytest tests/test_zones.py -v
"""

import pytest
from datetime import datetime, timedelta

from timewise import load_zone
from timewise.zones import (
    CITY_ZONES,
    CITY_ALIASES,
    ZONE_DELHI,
    ZONE_BEIJING,
    ZONE_HO_CHI_MINH,
    ZONE_WELLINGTON,
    ZONE_AUCKLAND,
    normalize_zone_name,
    zone_identifier,
    match_zone,
    list_zones,
)


class TestZoneData:
    """Test the constant table"""

    def test_city_count(self):
        """Test every listed city is present"""
        assert len(CITY_ZONES) == 34

    def test_constants(self):
        """Test cities mapped to their region's canonical zone"""
        assert ZONE_HO_CHI_MINH == "Asia/Ho_Chi_Minh"
        assert ZONE_DELHI == "Asia/Kolkata"
        assert ZONE_BEIJING == "Asia/Shanghai"
        assert ZONE_WELLINGTON == ZONE_AUCKLAND

    def test_all_zones_load(self):
        """Test every zone is known to the tz database"""
        for city, zone in CITY_ZONES.items():
            assert load_zone(zone) is not None, city

    def test_aliases_point_at_cities(self):
        """Test every alias names a table city"""
        for alias, city in CITY_ALIASES.items():
            assert city in CITY_ZONES, alias

    def test_offsets(self):
        """Test a few standard offsets"""
        winter = datetime(2024, 1, 15, 12, 0)
        assert winter.replace(tzinfo=load_zone("Asia/Kathmandu")).utcoffset() == timedelta(hours=5, minutes=45)
        assert winter.replace(tzinfo=load_zone(ZONE_HO_CHI_MINH)).utcoffset() == timedelta(hours=7)


class TestNormalizeZoneName:
    """Test name normalization"""

    @pytest.mark.parametrize("name,expected", [
        ("Asia/Ho_Chi_Minh", "asia ho chi minh"),
        ("  New   York ", "new york"),
        ("Port-Moresby", "port moresby"),
    ])
    def test_normalize(self, name, expected):
        """Test separators and case are folded"""
        assert normalize_zone_name(name) == expected


class TestZoneIdentifier:
    """Test zone resolution"""

    @pytest.mark.parametrize("name", ["Europe/Paris", "America/Chicago"])
    def test_iana_passthrough(self, name):
        """Test real IANA names pass through unchanged"""
        assert zone_identifier(name) == name

    @pytest.mark.parametrize("name,expected", [
        ("Tokyo", "Asia/Tokyo"),
        ("ho chi minh", "Asia/Ho_Chi_Minh"),
        ("NEW YORK", "America/New_York"),
        ("Saigon", "Asia/Ho_Chi_Minh"),
        ("Kiev", "Europe/Kiev"),
        ("Wellington", "Pacific/Auckland"),
        ("Kolkata", "Asia/Kolkata"),
        ("LA", "America/Los_Angeles"),
        ("nyc", "America/New_York"),
        ("KL", "Asia/Kuala_Lumpur"),
    ])
    def test_exact(self, name, expected):
        """Test city, alias and case-folded zone names"""
        assert zone_identifier(name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("Stokholm", "Europe/Stockholm"),
        ("Johanesburg", "Africa/Johannesburg"),
        ("Katmandu", "Asia/Kathmandu"),
    ])
    def test_fuzzy(self, name, expected):
        """Test misspellings resolve by fuzzy match"""
        assert zone_identifier(name) == expected

    def test_threshold(self):
        """Test a strict threshold rejects near misses"""
        assert zone_identifier("Stokholm", threshold=99) is None

    @pytest.mark.parametrize("name", ["Atlantis", "Lapland", "Klingon"])
    def test_short_alias_not_fuzzy(self, name):
        """Test names merely containing a two-letter alias do not match it"""
        assert zone_identifier(name) not in ("America/Los_Angeles", "Asia/Kuala_Lumpur")

    @pytest.mark.parametrize("name", ["", "   ", "Atlantis", "Mars/Olympus"])
    def test_no_match(self, name):
        """Test empty and unknown names"""
        assert zone_identifier(name) is None


class TestMatchZone:
    """Test top-K candidates"""

    def test_best_first(self):
        """Test ranking"""
        matches = match_zone("Sydny", k=3)
        assert matches[0]["zone"] == "Australia/Sydney"
        assert len(matches) == 3
        scores = [m["score"] for m in matches]
        assert scores == sorted(scores, reverse=True)

    def test_short_keys_excluded(self):
        """Test two- and three-letter aliases are never ranked"""
        assert all(len(m["name"]) >= 4 for m in match_zone("Atlantis", k=10))

    def test_zones_unique(self):
        """Test each zone appears once"""
        zones = [m["zone"] for m in match_zone("Auckland", k=10)]
        assert len(zones) == len(set(zones))


class TestListZones:
    """Test the DataFrame view"""

    def test_all(self):
        """Test full table"""
        df = list_zones()
        assert list(df.columns) == ["city", "zone", "region"]
        assert len(df) == 34

    def test_region_filter(self):
        """Test region filter, case-insensitive"""
        assert list_zones("Africa")["city"].tolist() == ["Cairo", "Johannesburg"]
        assert set(list_zones("pacific")["zone"]) == {"Pacific/Auckland", "Pacific/Port_Moresby", "Pacific/Fiji"}
