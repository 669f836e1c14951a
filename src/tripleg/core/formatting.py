"""
Display helpers for leg instants.

Leg records store UTC instants plus the IANA zone of each endpoint. These helpers
render an instant as the traveller would read it at that endpoint, e.g.
"Tuesday, March 25th" or "7:23pm (ET)". Values may be aware datetimes or ISO-8601
strings (as persisted); empty input renders as "".
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from tripleg.config.settings import get_settings
from tripleg.core.time import parse_datetime, utc_to_local


def _to_local(value: datetime | str | None, zone: str) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = parse_datetime(value, "UTC")
    return utc_to_local(zone, value)


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day of month (1st, 2nd, 3rd, 11th...)."""
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def timezone_abbreviation(zone: str, abbreviations: Mapping[str, str] | None = None) -> str:
    """Short label for a zone; unknown zones use the first 3 letters of the last path segment."""
    if abbreviations is None:
        abbreviations = get_settings().formatting.timezone_abbreviations
    if zone in abbreviations:
        return abbreviations[zone]
    return zone.split("/")[-1][:3].upper()


def format_full_date(value: datetime | str | None, zone: str) -> str:
    """Format as "Tuesday, March 25th"."""
    local = _to_local(value, zone)
    if local is None:
        return ""
    return f"{local:%A}, {local:%B} {local.day}{ordinal_suffix(local.day)}"


def format_short_date(value: datetime | str | None, zone: str) -> str:
    """Format as "Tue, Mar 25"."""
    local = _to_local(value, zone)
    if local is None:
        return ""
    return f"{local:%a}, {local:%b} {local.day}"


def format_compact_date(value: datetime | str | None, zone: str) -> str:
    """Format as "3/25 Tue"."""
    local = _to_local(value, zone)
    if local is None:
        return ""
    return f"{local.month}/{local.day} {local:%a}"


def format_time_with_zone(
    value: datetime | str | None,
    zone: str,
    abbreviations: Mapping[str, str] | None = None,
) -> str:
    """Format as "7:23pm (ET)"."""
    local = _to_local(value, zone)
    if local is None:
        return ""
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{hour}:{local.minute:02d}{meridiem} ({timezone_abbreviation(zone, abbreviations)})"


def format_in_zone(value: datetime | str | None, zone: str) -> str:
    """ISO-8601 local time with offset, minute precision."""
    local = _to_local(value, zone)
    if local is None:
        return ""
    return local.isoformat(timespec="minutes")
