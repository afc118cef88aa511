"""Zone name resolution.

Turns loose place or zone names into IANA zone identifiers.

Resolution strategy:
  1. Exact IANA name (anything ``dateutil`` loads, e.g. "Europe/Paris")
  2. Exact city or alias match, case and punctuation insensitive
  3. RapidFuzz WRatio best match over cities, aliases and zone names
     (short aliases such as "LA" take part in exact matching only)
"""

import logging
import re
from functools import lru_cache
from typing import Optional

try:
    import pandas as pd
except ImportError as e:
    raise ImportError("pandas not installed. pip install pandas") from e

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

try:
    from dateutil import tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timewise.zones.zonedata import CITY_ALIASES, CITY_ZONES

logger = logging.getLogger(__name__)


def normalize_zone_name(name: str) -> str:
    """
    Normalize a city or zone name for matching.

    Examples:
        >>> normalize_zone_name("  Asia/Ho_Chi_Minh ")
        'asia ho chi minh'

        >>> normalize_zone_name("Port-Moresby")
        'port moresby'
    """
    text = re.sub(r"[/_\-.,]+", " ", name.lower())
    return re.sub(r"\s+", " ", text).strip()


@lru_cache(maxsize=1)
def _candidates() -> dict:
    """Normalized name -> IANA zone for every city, alias and zone in the table."""
    table = {}
    for zone in CITY_ZONES.values():
        table[normalize_zone_name(zone)] = zone
        table[normalize_zone_name(zone.split("/")[-1])] = zone
    for city, zone in CITY_ZONES.items():
        table[normalize_zone_name(city)] = zone
    for alias, city in CITY_ALIASES.items():
        table[normalize_zone_name(alias)] = CITY_ZONES[city]
    return table


# Keys shorter than this are matched exactly but never fuzzily.
FUZZY_MIN_LENGTH = 4


@lru_cache(maxsize=1)
def _fuzzy_keys() -> list:
    return [key for key in _candidates() if len(key) >= FUZZY_MIN_LENGTH]


def _is_iana_name(name: str) -> bool:
    return "/" in name and tz.gettz(name) is not None


def zone_identifier(name: str, *, threshold: int = 85) -> Optional[str]:
    """
    Resolve a city or zone name to an IANA zone identifier.

    Args:
        name: IANA name ("Asia/Tokyo"), city ("Tokyo", "ho chi minh"),
              alias ("Saigon") or a near miss ("Stokholm")
        threshold: Minimum fuzzy match score (0-100). Default 85.

    Returns:
        IANA zone identifier, or None if nothing matched above threshold

    Examples:
        >>> zone_identifier("Europe/Paris")
        'Europe/Paris'

        >>> zone_identifier("saigon")
        'Asia/Ho_Chi_Minh'

        >>> zone_identifier("Stokholm")
        'Europe/Stockholm'

        >>> zone_identifier("Atlantis") is None
        True
    """
    if not name or not name.strip():
        return None

    text = name.strip()
    if _is_iana_name(text):
        return text

    query = normalize_zone_name(text)
    candidates = _candidates()
    if query in candidates:
        return candidates[query]

    match = process.extractOne(query, _fuzzy_keys(), scorer=fuzz.WRatio, score_cutoff=threshold)
    if match is None:
        logger.debug(f"No zone matched {name!r} (threshold {threshold})")
        return None

    key, score, _ = match
    logger.debug(f"Fuzzy zone match {name!r} -> {candidates[key]} (score {score:.0f})")
    return candidates[key]


def match_zone(name: str, *, k: int = 5) -> list[dict]:
    """
    Top-K zone candidates with scores, best first.

    Examples:
        >>> match_zone("Sydny", k=1)[0]["zone"]
        'Australia/Sydney'
    """
    candidates = _candidates()
    results = process.extract(
        normalize_zone_name(name), _fuzzy_keys(), scorer=fuzz.WRatio, limit=None
    )
    best = {}
    for key, score, _ in results:
        zone = candidates[key]
        if zone not in best or score > best[zone]["score"]:
            best[zone] = {"zone": zone, "name": key, "score": score}
    return sorted(best.values(), key=lambda m: m["score"], reverse=True)[:k]


def list_zones(region: Optional[str] = None) -> pd.DataFrame:
    """
    List the city table, optionally filtered by IANA region.

    Args:
        region: Leading zone component (e.g., "Asia", "Europe", "Pacific")

    Returns:
        DataFrame with columns city, zone, region

    Examples:
        >>> list_zones("Africa")["city"].tolist()
        ['Cairo', 'Johannesburg']
    """
    df = pd.DataFrame(
        [
            {"city": city, "zone": zone, "region": zone.split("/")[0]}
            for city, zone in CITY_ZONES.items()
        ]
    )
    if region is not None:
        df = df[df["region"].str.lower() == region.lower()].reset_index(drop=True)
    return df


__all__ = [
    "normalize_zone_name",
    "zone_identifier",
    "match_zone",
    "list_zones",
]
