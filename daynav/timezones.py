"""
Short names accepted wherever a timezone descriptor is expected.

resolve_alias() runs before the ZoneInfo lookup; anything it does not know
is handed to ZoneInfo unchanged (stripped) as an IANA key.
"""

UTC_ALIASES = {"UTC", "Z", "GMT", "ZULU"}

# One representative zone per abbreviation, both DST states included.
ABBR_TO_IANA = {
    "CET": "Europe/Paris",
    "CEST": "Europe/Paris",
    "EST": "America/New_York",
    "EDT": "America/New_York",
    "PST": "America/Los_Angeles",
    "PDT": "America/Los_Angeles",
}


def resolve_alias(name: str) -> str:
    """
    Map a short alias to its IANA name; unknown names are returned stripped.
    """
    raw = name.strip()
    upper = raw.upper()
    if upper in UTC_ALIASES:
        return "UTC"
    return ABBR_TO_IANA.get(upper, raw)
