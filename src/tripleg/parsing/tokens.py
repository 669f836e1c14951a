"""
Shared token parsers.

Small extractors reused by every format parser. Each one takes a single line (or a
piece of one) and returns a typed value, a neutral default, or None. None of them
raise on malformed input.

Grammars:
- clock time:       "8:15 AM", "12:05pm"
- calendar date:    "Tue, Aug 12, 2025"
- month/day/year:   "Jul 29, 2025"
- month/day/time:   "Jul 29, 8:15 AM", "Wed, Aug 6, 9:25 PM", "Jun 15 2024, 6:30 AM"
- airport codes:    "Orlando, FL, US (MCO)" and the screen-reader layout "M,C,OMCO"
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*([AP])M$", re.IGNORECASE)
_CLOCK_PAIR_RE = re.compile(r"(\d{1,2}:\d{2}\s*[AP]M)\s+(\d{1,2}:\d{2}\s*[AP]M)", re.IGNORECASE)
_CALENDAR_DATE_RE = re.compile(r"^[A-Za-z]{3},\s*([A-Za-z]{3})\s+(\d{1,2}),\s*(\d{4})$")
_MONTH_DAY_YEAR_RE = re.compile(r"^([A-Za-z]{3})\s+(\d{1,2}),\s*(\d{4})$")
_MONTH_DAY_TIME_RE = re.compile(
    r"^(?:[A-Za-z]{3},\s*)?([A-Za-z]{3})\s+(\d{1,2})(?:,?\s+(\d{4}))?,\s*(\d{1,2}:\d{2}\s*[AP]M)$",
    re.IGNORECASE,
)
_PAREN_CODE_RE = re.compile(r"\(([A-Za-z]{3})\)\s*$")
_CSV_CODE_LAYOUTS = (
    re.compile(r"[A-Za-z],\s*[A-Za-z],\s*[A-Za-z],\s*[A-Za-z]\s*([A-Za-z]{4})\s*$"),
    re.compile(r"[A-Za-z],\s*[A-Za-z],\s*[A-Za-z]\s*([A-Za-z]{3})\s*$"),
)
_ODD_SPACES_RE = re.compile(r"[\u00a0\u202f]")
_WHITESPACE_RE = re.compile(r"\s+")
_COLUMN_GAP_RE = re.compile(r"\t+|\s{2,}")
_LINE_BREAK_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class ClockTime:
    """24-hour wall-clock time of day."""

    hour: int
    minute: int


@dataclass(frozen=True)
class CalendarDate:
    """A calendar date; `month` is 1-based."""

    year: int
    month: int
    day: int

    @property
    def month_index(self) -> int:
        return self.month - 1


def normalize_whitespace(s: str) -> str:
    """Turn NBSP/narrow NBSP into spaces and collapse whitespace runs to a single space."""
    return _WHITESPACE_RE.sub(" ", _ODD_SPACES_RE.sub(" ", s)).strip()


def content_lines(text: str) -> list[str]:
    """Split pasted text into stripped, non-blank lines."""
    lines = (line.strip() for line in _LINE_BREAK_RE.split(str(text)))
    return [line for line in lines if line]


def split_columns(line: str) -> tuple[str, str] | None:
    """Split a two-column line on tabs or 2+ spaces; returns (left, right) or None."""
    parts = [p.strip() for p in _COLUMN_GAP_RE.split(line.strip()) if p.strip()]
    if len(parts) < 2:
        return None
    return parts[0], parts[-1]


def _month(abbrev: str) -> int | None:
    return MONTHS.get(abbrev.lower())


def _checked_date(year: int, month: int | None, day: int) -> CalendarDate | None:
    if month is None:
        return None
    try:
        date(year, month, day)
    except ValueError:
        return None
    return CalendarDate(year, month, day)


def match_clock_time(token: str | None) -> ClockTime | None:
    """Strict "H:MM AM/PM" parser; None when the token does not match."""
    m = _CLOCK_RE.match(normalize_whitespace(str(token or "")))
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 12 or minute > 59:
        return None
    is_pm = m.group(3).upper() == "P"
    if is_pm and hour < 12:
        hour += 12
    if not is_pm and hour == 12:
        hour = 0
    return ClockTime(hour, minute)


def clock_time_12h(token: str | None) -> ClockTime:
    """Parse "H:MM AM/PM" into 24-hour time; unparsable input gives 00:00."""
    return match_clock_time(token) or ClockTime(0, 0)


def find_clock_time_pair(line: str) -> tuple[str, str] | None:
    """Find two clock-time tokens separated by whitespace ("8:15 AM 10:33 AM")."""
    m = _CLOCK_PAIR_RE.search(line)
    if not m:
        return None
    return m.group(1), m.group(2)


def calendar_date(token: str | None) -> CalendarDate | None:
    """Parse "Dow, Mon D, YYYY"."""
    m = _CALENDAR_DATE_RE.match(normalize_whitespace(str(token or "")))
    if not m:
        return None
    return _checked_date(int(m.group(3)), _month(m.group(1)), int(m.group(2)))


def month_day_year(token: str | None) -> CalendarDate | None:
    """Parse "Mon D, YYYY"."""
    m = _MONTH_DAY_YEAR_RE.match(normalize_whitespace(str(token or "")))
    if not m:
        return None
    return _checked_date(int(m.group(3)), _month(m.group(1)), int(m.group(2)))


def month_day_time(token: str | None, default_year: int) -> tuple[CalendarDate, ClockTime] | None:
    """Parse "[Dow,] Mon D[,] [YYYY,] H:MM AM/PM"; the year defaults to `default_year`."""
    m = _MONTH_DAY_TIME_RE.match(normalize_whitespace(str(token or "")))
    if not m:
        return None
    year = int(m.group(3)) if m.group(3) else default_year
    day = _checked_date(year, _month(m.group(1)), int(m.group(2)))
    clock = match_clock_time(m.group(4))
    if day is None or clock is None:
        return None
    return day, clock


def airport_code_parenthesized(token: str | None) -> str:
    """Return the 3-letter code in trailing parentheses ("Orlando, FL, US (MCO)"), or ""."""
    m = _PAREN_CODE_RE.search(str(token or ""))
    return m.group(1).upper() if m else ""


def airport_code_from_csv_line(token: str | None) -> str:
    """Return the code ending a spelled-out comma layout ("M,C,OMCO" or "K,S,F,OKSFO"), or ""."""
    line = str(token or "").strip()
    for layout in _CSV_CODE_LAYOUTS:
        m = layout.search(line)
        if m:
            return m.group(1).upper()
    return ""


def city_description(token: str | None) -> str:
    """Text before the first comma ("Orlando, FL, US" -> "Orlando")."""
    return str(token or "").split(",", 1)[0].strip()
