"""
Time parsing and timezone normalization.

tripleg treats every leg instant as a timezone-aware UTC datetime. Pasted itineraries
only ever carry wall-clock values ("Jun 15, 6:30 AM") without a UTC offset, so this
module converts wall-clock components in a named IANA zone into an absolute instant,
and renders instants back into a zone's wall clock.

Zone rules come from `zoneinfo` (the system tz database, or the `tzdata` package when
the platform has none). Offsets are derived here by rendering an instant in the zone
and diffing the wall clocks; we never hard-code offsets.

Notes:
- `resolve_to_utc` samples the offset once, at the wall-clock value read as if it were
  UTC. Close to a DST transition the sample can land on the wrong side, so local times
  in (or within one UTC-offset of) a spring-forward gap or fall-back overlap may come
  out one hour off. Callers currently rely on this exact behavior.
- Unknown zone ids never raise; they resolve to UTC and are logged once.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import NamedTuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

UTC = timezone.utc


class WallClock(NamedTuple):
    """Wall-clock components as read off a clock in some zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0


@lru_cache(maxsize=512)
def get_zone(zone: str | None) -> tzinfo:
    """Return tzinfo for an IANA id; unknown or blank ids fall back to UTC (logged once)."""
    name = str(zone or "").strip()
    if not name:
        logger.warning("Blank timezone id; treating as UTC.")
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unknown timezone %r; treating as UTC.", name)
        return UTC


def _as_utc(instant: datetime) -> datetime:
    # Naive values are taken to already be UTC.
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def _naive_utc(year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    # Out-of-range components roll over like a calendar (month 13 -> next January).
    extra_years, month_index = divmod(month - 1, 12)
    base = datetime(year + extra_years, month_index + 1, 1, tzinfo=UTC)
    return base + timedelta(days=day - 1, hours=hour, minutes=minute)


def render_wall_clock(zone: str | None, instant: datetime) -> WallClock:
    """Render `instant` as the wall clock observed in `zone`."""
    local = _as_utc(instant).astimezone(get_zone(zone))
    return WallClock(local.year, local.month, local.day, local.hour, local.minute, local.second)


def offset_minutes_at(zone: str | None, instant: datetime) -> int:
    """Minutes to add to UTC to get local wall-clock time in `zone` at `instant`."""
    utc_instant = _as_utc(instant).replace(microsecond=0)
    rendered = datetime(*render_wall_clock(zone, utc_instant), tzinfo=UTC)
    return round((rendered - utc_instant).total_seconds() / 60)


def resolve_to_utc(zone: str | None, year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    """Convert wall-clock components in `zone` to an absolute UTC instant.

    Single pass: read the components as UTC, sample the zone's offset at that
    instant, subtract it. `month` is 1-based.

    Raises `OverflowError`/`ValueError` only when the components fall outside the
    range `datetime` can represent.
    """
    naive = _naive_utc(year, month, day, hour, minute)
    return naive - timedelta(minutes=offset_minutes_at(zone, naive))


def local_to_utc(zone: str | None, local: datetime) -> datetime:
    """Convert a materialized wall-clock datetime in `zone` to UTC (tzinfo on `local` is ignored)."""
    naive = local.replace(tzinfo=UTC)
    return naive - timedelta(minutes=offset_minutes_at(zone, naive))


def utc_to_local(zone: str | None, instant: datetime) -> datetime:
    """Return `instant` as an aware datetime in `zone`."""
    return _as_utc(instant).astimezone(get_zone(zone))


def now_utc() -> datetime:
    return datetime.now(UTC)


def ensure_tz(dt: datetime, timezone: str) -> datetime:
    """Ensure `dt` has tzinfo; attach `timezone` if naive."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=get_zone(timezone))
    return dt


def parse_datetime(value: str, timezone: str) -> datetime:
    """Parse ISO-8601 datetime string and ensure tzinfo is present.

    Notes:
    - Accepts a trailing `Z` (UTC) and converts it to `+00:00` for `fromisoformat`.
    - If the parsed value is naive, the provided `timezone` is attached.
    """
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    return ensure_tz(dt, timezone)
