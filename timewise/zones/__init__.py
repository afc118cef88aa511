"""IANA zone constants and zone name resolution.

Examples:
    >>> from timewise.zones import zone_identifier, ZONE_TOKYO
    >>> ZONE_TOKYO
    'Asia/Tokyo'

    >>> zone_identifier("Ho Chi Minh")
    'Asia/Ho_Chi_Minh'
"""

from timewise.zones.zonedata import *  # noqa: F401,F403
from timewise.zones.zonedata import __all__ as _zonedata_all
from timewise.zones.zoneapi import (
    normalize_zone_name,
    zone_identifier,
    match_zone,
    list_zones,
)

__all__ = list(_zonedata_all) + [
    "normalize_zone_name",
    "zone_identifier",
    "match_zone",
    "list_zones",
]
