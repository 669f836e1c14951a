"""
Format parsers: pasted itinerary text -> `LegDraft`.

Every parser implements `parse(text, context)` and follows the same rules:
- it never raises on malformed input;
- a missing marker only defaults its own field (now / "" / None / the context
  timezone), every other field is still extracted;
- wall-clock values are resolved to UTC via `tripleg.core.time.resolve_to_utc`
  in the leg's own timezone.

Which fields each layout can supply:

| format       | name | dates/times | locations | leg timezones | carrier | confirmation |
|--------------|------|-------------|-----------|---------------|---------|--------------|
| DemoFlight   | -    | -           | -         | -             | yes     | raw text     |
| Gmail        | yes  | yes         | -         | -             | yes     | yes          |
| UnitedEmail  | yes  | shared date | yes       | -             | yes     | -            |
| UnitedEmail2 | city | yes         | yes       | registry      | yes     | yes          |
| UnitedWeb    | city | yes         | yes       | registry      | yes     | -            |
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from tripleg.core.time import now_utc, resolve_to_utc, utc_to_local
from tripleg.domain.models import LegDraft, ParseContext
from tripleg.locations.registry import lookup_zone
from tripleg.parsing.classifier import GMAIL_HEADER_RE, UNITED_EMAIL_2_HEADER_RE
from tripleg.parsing.tokens import (
    CalendarDate,
    ClockTime,
    airport_code_from_csv_line,
    airport_code_parenthesized,
    calendar_date,
    city_description,
    content_lines,
    find_clock_time_pair,
    match_clock_time,
    month_day_time,
    month_day_year,
    normalize_whitespace,
    split_columns,
)

logger = logging.getLogger(__name__)

_DASH_RE = re.compile(r"[–—]")
_AIRPORT_TOKEN_RE = re.compile(r"^[A-Za-z]{3,4}$")
_TRAILING_CODE_RE = re.compile(r"\s*\([A-Za-z]{3}\)\s*$")


def _index_after(lines: list[str], pattern: re.Pattern[str], start: int = 0) -> int:
    """Index of the first line at/after `start` matching `pattern`, or -1."""
    for i in range(start, len(lines)):
        if pattern.search(lines[i]):
            return i
    return -1


def _line_at(lines: list[str], index: int) -> str:
    return lines[index] if 0 <= index < len(lines) else ""


class LegParser:
    """Fallback parser for unrecognized text; also the base for every format parser."""

    default_name = "Unknown Leg"

    def parse(self, text: str, context: ParseContext) -> LegDraft:
        now = now_utc()
        return LegDraft(
            name=self.default_name,
            departure_instant=now,
            departure_location="",
            departure_timezone=context.default_timezone,
            arrival_instant=now,
            arrival_location="",
            arrival_timezone=context.default_timezone,
            carrier="",
            confirmation=None,
            trip_id=context.trip_id,
        )

    def _instant(
        self,
        zone: str,
        day: CalendarDate | None,
        clock: ClockTime | None,
        *,
        field: str,
    ) -> datetime:
        """Resolve a leg's wall clock in `zone`, or fall back to now when a piece is missing."""
        if day is None or clock is None:
            logger.debug("%s: no %s date/time found; using now", type(self).__name__, field)
            return now_utc()
        try:
            return resolve_to_utc(zone, day.year, day.month, day.day, clock.hour, clock.minute)
        except (OverflowError, ValueError):
            logger.debug("%s: %s %s out of range; using now", type(self).__name__, field, day)
            return now_utc()

    def _leg_zone(self, code: str, context: ParseContext) -> str:
        zone = lookup_zone(code)
        if zone is None:
            logger.debug("%s: no timezone known for %r; using %s", type(self).__name__, code, context.default_timezone)
            return context.default_timezone
        return zone


class DemoFlightParser(LegParser):
    """Synthetic one-liner: "Flight <carrier> ..."."""

    default_name = "Demo-Parsed"

    def parse(self, text: str, context: ParseContext) -> LegDraft:
        tokens = str(text).split()
        carrier = tokens[1] if len(tokens) >= 2 else ""
        return super().parse(text, context).model_copy(
            update={"name": self.default_name, "carrier": carrier, "confirmation": text}
        )


class GmailParser(LegParser):
    """Gmail flight card.

        United Airlines – UA 237
        Take-off
        Wed, Aug 6, 9:25 PM
        Landing
        Thu, Aug 7, 6:10 AM
        Confirmation number
        ABC123

    The card has no zone information; both legs use the context timezone and
    the year defaults to the current year there.
    """

    default_name = "Gmail-Parsed"

    _TAKE_OFF_RE = re.compile(r"^Take-off\b", re.IGNORECASE)
    _LANDING_RE = re.compile(r"^Landing\b", re.IGNORECASE)
    _CONFIRMATION_RE = re.compile(r"^Confirmation number\b", re.IGNORECASE)

    def parse(self, text: str, context: ParseContext) -> LegDraft:
        zone = context.default_timezone
        lines = content_lines(text)
        header = _line_at(lines, 0)

        carrier_match = GMAIL_HEADER_RE.search(header)
        carrier = normalize_whitespace(carrier_match.group(1)) if carrier_match else ""
        name = _DASH_RE.split(header, maxsplit=1)[0].strip()

        current_year = utc_to_local(zone, now_utc()).year
        departure = arrival = None
        confirmation = None
        for i, line in enumerate(lines[:-1]):
            following = lines[i + 1]
            if self._TAKE_OFF_RE.search(line):
                departure = month_day_time(following, current_year)
            elif self._LANDING_RE.search(line):
                arrival = month_day_time(following, current_year)
            elif self._CONFIRMATION_RE.search(line):
                confirmation = normalize_whitespace(following)

        if confirmation is None:
            logger.debug("GmailParser: no confirmation number found")

        return LegDraft(
            name=name or self.default_name,
            departure_instant=self._instant(zone, *(departure or (None, None)), field="departure"),
            departure_location="",
            departure_timezone=zone,
            arrival_instant=self._instant(zone, *(arrival or (None, None)), field="arrival"),
            arrival_location="",
            arrival_timezone=zone,
            carrier=carrier,
            confirmation=confirmation,
            trip_id=context.trip_id,
        )


class UnitedEmailParser(LegParser):
    """United confirmation email.

        Flight to Washington, DC
        Jul 29, 2025
        8:15 AM 10:33 AM
        MCO
        IAD
        Duration
        UA 1234

    One date is shared by both legs (today in the context timezone if missing).
    """

    default_name = "United-Parsed"

    _NAME_RE = re.compile(r"^Flight to\b")
    _DURATION_RE = re.compile(r"^Duration\b", re.IGNORECASE)

    def parse(self, text: str, context: ParseContext) -> LegDraft:
        zone = context.default_timezone
        lines = content_lines(text)

        idx_name = _index_after(lines, self._NAME_RE)
        name = _line_at(lines, idx_name) if idx_name >= 0 else ""

        shared_date = month_day_year(_line_at(lines, idx_name + 1)) if idx_name >= 0 else None
        if shared_date is None:
            today = utc_to_local(zone, now_utc())
            shared_date = CalendarDate(today.year, today.month, today.day)
            logger.debug("UnitedEmailParser: no date line; using today %s", shared_date)

        times_start = idx_name + 2 if idx_name >= 0 else 0
        idx_times, pair = -1, None
        for i in range(times_start, len(lines)):
            pair = find_clock_time_pair(lines[i])
            if pair:
                idx_times = i
                break
        depart_clock = match_clock_time(pair[0]) if pair else None
        arrive_clock = match_clock_time(pair[1]) if pair else None

        idx_dep = _index_after(lines, _AIRPORT_TOKEN_RE, idx_times + 1)
        idx_arr = _index_after(lines, _AIRPORT_TOKEN_RE, idx_dep + 1) if idx_dep >= 0 else -1

        idx_duration = _index_after(lines, self._DURATION_RE)
        carrier = _line_at(lines, idx_duration + 1) if idx_duration >= 0 else ""

        return LegDraft(
            name=name or self.default_name,
            departure_instant=self._instant(zone, shared_date, depart_clock, field="departure"),
            departure_location=_line_at(lines, idx_dep).upper() if idx_dep >= 0 else "",
            departure_timezone=zone,
            arrival_instant=self._instant(zone, shared_date, arrive_clock, field="arrival"),
            arrival_location=_line_at(lines, idx_arr).upper() if idx_arr >= 0 else "",
            arrival_timezone=zone,
            carrier=carrier,
            confirmation=None,
            trip_id=context.trip_id,
        )


class UnitedEmail2Parser(LegParser):
    """United "Flight n of m" email with two-column rows.

        Confirmation Number:
        ABC123
        Flight 1 of 2 UA 1234
        Tue, Aug 12, 2025          Tue, Aug 12, 2025
        8:15 AM                    10:33 AM
        Orlando, FL, US (MCO)      Washington, DC, US (IAD)
    """

    default_name = "United-Parsed"

    _CONFIRMATION_RE = re.compile(r"^Confirmation Number:?", re.IGNORECASE)

    def parse(self, text: str, context: ParseContext) -> LegDraft:
        lines = content_lines(text)

        idx_confirmation = _index_after(lines, self._CONFIRMATION_RE)
        confirmation = None
        if idx_confirmation >= 0 and idx_confirmation + 1 < len(lines):
            confirmation = normalize_whitespace(lines[idx_confirmation + 1])

        idx_header = _index_after(lines, UNITED_EMAIL_2_HEADER_RE)
        carrier = ""
        if idx_header >= 0:
            carrier = UNITED_EMAIL_2_HEADER_RE.search(lines[idx_header]).group(3).strip()

        def columns(offset: int) -> tuple[str, str]:
            if idx_header < 0:
                return "", ""
            return split_columns(_line_at(lines, idx_header + offset)) or ("", "")

        dep_date_raw, arr_date_raw = columns(1)
        dep_time_raw, arr_time_raw = columns(2)
        dep_place, arr_place = columns(3)

        dep_code = airport_code_parenthesized(dep_place)
        arr_code = airport_code_parenthesized(arr_place)
        dep_zone = self._leg_zone(dep_code, context)
        arr_zone = self._leg_zone(arr_code, context)

        return LegDraft(
            name=_route_name(_place_city(dep_place), _place_city(arr_place)) or self.default_name,
            departure_instant=self._instant(
                dep_zone, _any_date(dep_date_raw), match_clock_time(dep_time_raw), field="departure"
            ),
            departure_location=dep_code,
            departure_timezone=dep_zone,
            arrival_instant=self._instant(
                arr_zone, _any_date(arr_date_raw), match_clock_time(arr_time_raw), field="arrival"
            ),
            arrival_location=arr_code,
            arrival_timezone=arr_zone,
            carrier=carrier,
            confirmation=confirmation,
            trip_id=context.trip_id,
        )


class UnitedWebParser(LegParser):
    """united.com trip details page.

        Depart
        Tue, Aug 12, 2025
        8:15 AM
        M,C,OMCO
        Orlando, FL, US
        Arrive
        Tue, Aug 12, 2025
        10:33 AM
        I,A,DIAD
        Washington, DC, US
        Flight UA 1234
    """

    default_name = "United-Web-Parsed"

    _DEPART_RE = re.compile(r"^Depart\b", re.IGNORECASE)
    _ARRIVE_RE = re.compile(r"^Arrive\b", re.IGNORECASE)
    _FLIGHT_RE = re.compile(r"^Flight\b", re.IGNORECASE)
    _FLIGHT_INFO_RE = re.compile(r"^Flight Info\b", re.IGNORECASE)
    _FLIGHT_LABEL_RE = re.compile(r"^Flight\s*", re.IGNORECASE)

    def _block(
        self, lines: list[str], label: re.Pattern[str], context: ParseContext, field: str
    ) -> tuple[datetime, str, str, str]:
        idx = _index_after(lines, label)
        if idx < 0:
            logger.debug("UnitedWebParser: no %s block", field)
            return now_utc(), "", context.default_timezone, ""
        code = airport_code_from_csv_line(_line_at(lines, idx + 3))
        zone = self._leg_zone(code, context)
        instant = self._instant(
            zone,
            calendar_date(_line_at(lines, idx + 1)),
            match_clock_time(_line_at(lines, idx + 2)),
            field=field,
        )
        return instant, code, zone, city_description(_line_at(lines, idx + 4))

    def parse(self, text: str, context: ParseContext) -> LegDraft:
        lines = content_lines(text)

        dep_instant, dep_code, dep_zone, dep_city = self._block(lines, self._DEPART_RE, context, "departure")
        arr_instant, arr_code, arr_zone, arr_city = self._block(lines, self._ARRIVE_RE, context, "arrival")

        carrier = ""
        for line in lines:
            if self._FLIGHT_RE.search(line) and not self._FLIGHT_INFO_RE.search(line):
                carrier = self._FLIGHT_LABEL_RE.sub("", line, count=1).strip()
                break

        return LegDraft(
            name=_route_name(dep_city, arr_city) or self.default_name,
            departure_instant=dep_instant,
            departure_location=dep_code,
            departure_timezone=dep_zone,
            arrival_instant=arr_instant,
            arrival_location=arr_code,
            arrival_timezone=arr_zone,
            carrier=carrier,
            confirmation=None,
            trip_id=context.trip_id,
        )


def _any_date(token: str) -> CalendarDate | None:
    return calendar_date(token) or month_day_year(token)


def _route_name(departure_city: str, arrival_city: str) -> str:
    if not departure_city or not arrival_city:
        return ""
    return f"{departure_city} to {arrival_city}"


def _place_city(place: str) -> str:
    """City of an "Orlando, FL, US (MCO)" cell; a bare "(MCO)" has none."""
    return city_description(_TRAILING_CODE_RE.sub("", place))
