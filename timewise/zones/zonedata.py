"""IANA zone names for common cities.

Pure data: symbolic ``ZONE_*`` constants plus the ``CITY_ZONES`` lookup
table that ``zone_identifier`` resolves against.
"""

ZONE_HO_CHI_MINH = "Asia/Ho_Chi_Minh"
ZONE_NEW_YORK = "America/New_York"
ZONE_LONDON = "Europe/London"
ZONE_TOKYO = "Asia/Tokyo"
ZONE_SYDNEY = "Australia/Sydney"
ZONE_PARIS = "Europe/Paris"
ZONE_MOSCOW = "Europe/Moscow"
ZONE_LOS_ANGELES = "America/Los_Angeles"
ZONE_MANILA = "Asia/Manila"
ZONE_KUALA_LUMPUR = "Asia/Kuala_Lumpur"
ZONE_JAKARTA = "Asia/Jakarta"
ZONE_YANGON = "Asia/Yangon"
ZONE_AUCKLAND = "Pacific/Auckland"
ZONE_BANGKOK = "Asia/Bangkok"
ZONE_DELHI = "Asia/Kolkata"
ZONE_DUBAI = "Asia/Dubai"
ZONE_CAIRO = "Africa/Cairo"
ZONE_ATHENS = "Europe/Athens"
ZONE_ROME = "Europe/Rome"
ZONE_JOHANNESBURG = "Africa/Johannesburg"
ZONE_STOCKHOLM = "Europe/Stockholm"
ZONE_OSLO = "Europe/Oslo"
ZONE_HELSINKI = "Europe/Helsinki"
# Older tz databases only know the "Kiev" spelling; newer ones keep it as a link.
ZONE_KYIV = "Europe/Kiev"
ZONE_BEIJING = "Asia/Shanghai"
ZONE_SINGAPORE = "Asia/Singapore"
ZONE_ISLAMABAD = "Asia/Karachi"
ZONE_COLOMBO = "Asia/Colombo"
ZONE_DHAKA = "Asia/Dhaka"
ZONE_KATHMANDU = "Asia/Kathmandu"
ZONE_BRISBANE = "Australia/Brisbane"
ZONE_WELLINGTON = "Pacific/Auckland"
ZONE_PORT_MORESBY = "Pacific/Port_Moresby"
ZONE_SUVA = "Pacific/Fiji"

CITY_ZONES = {
    "Ho Chi Minh": ZONE_HO_CHI_MINH,
    "New York": ZONE_NEW_YORK,
    "London": ZONE_LONDON,
    "Tokyo": ZONE_TOKYO,
    "Sydney": ZONE_SYDNEY,
    "Paris": ZONE_PARIS,
    "Moscow": ZONE_MOSCOW,
    "Los Angeles": ZONE_LOS_ANGELES,
    "Manila": ZONE_MANILA,
    "Kuala Lumpur": ZONE_KUALA_LUMPUR,
    "Jakarta": ZONE_JAKARTA,
    "Yangon": ZONE_YANGON,
    "Auckland": ZONE_AUCKLAND,
    "Bangkok": ZONE_BANGKOK,
    "Delhi": ZONE_DELHI,
    "Dubai": ZONE_DUBAI,
    "Cairo": ZONE_CAIRO,
    "Athens": ZONE_ATHENS,
    "Rome": ZONE_ROME,
    "Johannesburg": ZONE_JOHANNESBURG,
    "Stockholm": ZONE_STOCKHOLM,
    "Oslo": ZONE_OSLO,
    "Helsinki": ZONE_HELSINKI,
    "Kyiv": ZONE_KYIV,
    "Beijing": ZONE_BEIJING,
    "Singapore": ZONE_SINGAPORE,
    "Islamabad": ZONE_ISLAMABAD,
    "Colombo": ZONE_COLOMBO,
    "Dhaka": ZONE_DHAKA,
    "Kathmandu": ZONE_KATHMANDU,
    "Brisbane": ZONE_BRISBANE,
    "Wellington": ZONE_WELLINGTON,
    "Port Moresby": ZONE_PORT_MORESBY,
    "Suva": ZONE_SUVA,
}

# Alternate names resolved exactly, before fuzzy matching.
CITY_ALIASES = {
    "Saigon": "Ho Chi Minh",
    "HCMC": "Ho Chi Minh",
    "NYC": "New York",
    "LA": "Los Angeles",
    "KL": "Kuala Lumpur",
    "Rangoon": "Yangon",
    "New Delhi": "Delhi",
    "Kiev": "Kyiv",
    "Peking": "Beijing",
}

__all__ = [name for name in dir() if name.startswith("ZONE_")] + [
    "CITY_ZONES",
    "CITY_ALIASES",
]
