import logging
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from tripleg.core.time import now_utc, utc_to_local
from tripleg.domain.models import LegDraft, ParseContext
from tripleg.parsing.classifier import SourceFormat
from tripleg.parsing.interpreter import PARSERS, parse_leg_text
from tripleg.parsing.parsers import GmailParser

UTC = timezone.utc
NY = "America/New_York"

GMAIL_TEXT = (
    "United Airlines – UA 237\n"
    "Take-off\n"
    "Jun 15 2024, 6:30 AM\n"
    "Landing\n"
    "Jun 15 2024, 9:45 AM\n"
    "Confirmation number\n"
    "ABC123"
)

UNITED_EMAIL_TEXT = """
Flight to Washington, DC
Jul 29, 2025

8:15 AM 10:33 AM
MCO
IAD
Duration 2h 18m
UA 1234
"""

UNITED_EMAIL_2_TEXT = """
Confirmation Number:
ABC123
Flight 1 of 2 UA 1234
Tue, Aug 12, 2025          Tue, Aug 12, 2025
8:15 AM                    10:33 AM
Orlando, FL, US (MCO)      Denver, CO, US (DEN)
"""

UNITED_WEB_TEXT = """
Depart
Tue, Aug 12, 2025
8:15 AM
M,C,OMCO
Orlando, FL, US

Arrive
Tue, Aug 12, 2025
11:40 AM
S,F,OSFO
San Francisco, CA, US
Flight Info
Flight UA 1234
"""


def _is_now(instant: datetime, before: datetime) -> bool:
    return before <= instant <= now_utc() + timedelta(seconds=1)


@pytest.mark.parametrize(
    "text",
    [GMAIL_TEXT, GMAIL_TEXT.replace(" AM", "\u202fAM")],
    ids=["plain-space", "narrow-no-break-space"],
)
def test_gmail_example_resolves_in_default_timezone(text):
    draft = parse_leg_text(text, NY, "trip-1")

    assert draft.name == "United Airlines"
    assert draft.carrier == "UA 237"
    assert draft.confirmation == "ABC123"
    assert draft.departure_instant == datetime(2024, 6, 15, 10, 30, tzinfo=UTC)
    assert draft.arrival_instant == datetime(2024, 6, 15, 13, 45, tzinfo=UTC)
    assert draft.departure_timezone == NY
    assert draft.arrival_timezone == NY
    assert draft.departure_location == ""
    assert draft.arrival_location == ""
    assert draft.trip_id == "trip-1"


def test_gmail_year_defaults_to_current_year_and_missing_landing_is_now():
    before = now_utc()
    text = "Delta — DL 42\nTake-off\nWed, Aug 6, 9:25 PM\nConfirmation number\nXY 9 8"
    draft = parse_leg_text(text, NY, None)

    local = utc_to_local(NY, draft.departure_instant)
    assert (local.year, local.month, local.day, local.hour, local.minute) == (
        utc_to_local(NY, before).year,
        8,
        6,
        21,
        25,
    )
    assert _is_now(draft.arrival_instant, before)
    assert draft.confirmation == "XY 9 8"
    assert draft.carrier == "DL 42"


def test_united_email_shares_one_date_and_keeps_default_timezone():
    draft = parse_leg_text(UNITED_EMAIL_TEXT, NY, 7)

    assert draft.name == "Flight to Washington, DC"
    assert draft.departure_instant == datetime(2025, 7, 29, 12, 15, tzinfo=UTC)
    assert draft.arrival_instant == datetime(2025, 7, 29, 14, 33, tzinfo=UTC)
    assert draft.departure_location == "MCO"
    assert draft.arrival_location == "IAD"
    assert draft.departure_timezone == NY
    assert draft.arrival_timezone == NY
    assert draft.carrier == "UA 1234"
    assert draft.confirmation is None
    assert draft.trip_id == 7


def test_united_email_without_times_defaults_only_the_instants():
    before = now_utc()
    draft = parse_leg_text("Flight to Denver\nJul 29, 2025\nDEN\nMCO\nDuration\nUA 9", NY)

    assert _is_now(draft.departure_instant, before)
    assert _is_now(draft.arrival_instant, before)
    assert draft.departure_location == "DEN"
    assert draft.arrival_location == "MCO"
    assert draft.carrier == "UA 9"


def test_united_email_uppercases_airport_tokens():
    draft = parse_leg_text("Flight to Washington, DC\nJul 29, 2025\n8:15 AM 10:33 AM\nmco\niad\nDuration\nUA 1", NY)

    assert draft.departure_location == "MCO"
    assert draft.arrival_location == "IAD"


def test_united_email_2_uses_registry_timezones_per_leg():
    draft = parse_leg_text(UNITED_EMAIL_2_TEXT, NY, "t")

    assert draft.name == "Orlando to Denver"
    assert draft.carrier == "UA 1234"
    assert draft.confirmation == "ABC123"
    assert draft.departure_location == "MCO"
    assert draft.arrival_location == "DEN"
    assert draft.departure_timezone == "America/New_York"
    assert draft.arrival_timezone == "America/Denver"
    assert draft.departure_instant == datetime(2025, 8, 12, 12, 15, tzinfo=UTC)
    assert draft.arrival_instant == datetime(2025, 8, 12, 16, 33, tzinfo=UTC)


def test_united_email_2_unknown_airport_falls_back_to_default_timezone():
    text = UNITED_EMAIL_2_TEXT.replace("(DEN)", "(ZZZ)")
    draft = parse_leg_text(text, "Europe/London")

    assert draft.arrival_location == "ZZZ"
    assert draft.arrival_timezone == "Europe/London"
    # 10:33 BST is 09:33 UTC.
    assert draft.arrival_instant == datetime(2025, 8, 12, 9, 33, tzinfo=UTC)


def test_united_email_2_bare_code_cell_keeps_default_name():
    text = UNITED_EMAIL_2_TEXT.replace("Orlando, FL, US (MCO)", "(MCO)                ")
    draft = parse_leg_text(text, NY)

    assert draft.name == "United-Parsed"
    assert draft.departure_location == "MCO"
    assert draft.arrival_location == "DEN"


def test_united_web_extracts_both_blocks():
    draft = parse_leg_text(UNITED_WEB_TEXT, "Asia/Tokyo")

    assert draft.name == "Orlando to San Francisco"
    assert draft.carrier == "UA 1234"
    assert draft.departure_location == "MCO"
    assert draft.arrival_location == "SFO"
    assert draft.departure_timezone == "America/New_York"
    assert draft.arrival_timezone == "America/Los_Angeles"
    assert draft.departure_instant == datetime(2025, 8, 12, 12, 15, tzinfo=UTC)
    assert draft.arrival_instant == datetime(2025, 8, 12, 18, 40, tzinfo=UTC)
    assert draft.confirmation is None


def test_united_web_midnight_departure_is_not_treated_as_missing():
    draft = parse_leg_text(UNITED_WEB_TEXT.replace("8:15 AM", "12:10 AM"), NY)
    assert draft.departure_instant == datetime(2025, 8, 12, 4, 10, tzinfo=UTC)


def test_united_web_missing_arrive_block_defaults_only_arrival():
    before = now_utc()
    text = UNITED_WEB_TEXT.split("Arrive")[0] + "Flight UA 77"
    draft = parse_leg_text(text, "Asia/Tokyo")

    assert draft.departure_location == "MCO"
    assert draft.departure_instant == datetime(2025, 8, 12, 12, 15, tzinfo=UTC)
    assert draft.arrival_location == ""
    assert draft.arrival_timezone == "Asia/Tokyo"
    assert _is_now(draft.arrival_instant, before)
    assert draft.carrier == "UA 77"
    assert draft.name == "United-Web-Parsed"


def test_demo_flight_uses_second_token_and_raw_text():
    before = now_utc()
    draft = parse_leg_text("Flight AA100 to Boston", NY, "x")

    assert draft.name == "Demo-Parsed"
    assert draft.carrier == "AA100"
    assert draft.confirmation == "Flight AA100 to Boston"
    assert draft.departure_timezone == NY
    assert _is_now(draft.departure_instant, before)


def test_empty_input_yields_unknown_defaults():
    before = now_utc()
    draft = parse_leg_text("", NY, "trip-9")

    assert draft.name == "Unknown Leg"
    assert draft.departure_location == ""
    assert draft.arrival_location == ""
    assert draft.carrier == ""
    assert draft.confirmation is None
    assert draft.departure_timezone == NY
    assert draft.arrival_timezone == NY
    assert draft.trip_id == "trip-9"
    assert _is_now(draft.departure_instant, before)
    assert _is_now(draft.arrival_instant, before)


GARBLED = [
    "",
    "\x00\x01\x02",
    "Flight",
    "Flight to",
    "Flight 1 of 2",
    "Depart\nArrive",
    "Take-off\nLanding\nConfirmation number",
    "X – AB 1\nTake-off\nDec 31 9999, 11:59 PM\nLanding\nJan 1 0001, 12:00 AM",
    "Confirmation Number:\nFlight 3 of 1\n   \n(((\n",
    "Depart\nMon, Jan 1, 0001\n12:00 AM\nH,N,LHNL\n,,,",
    "—\n–\n—",
    "🛫 ✈️ 🛬" * 50,
]


@pytest.mark.parametrize("text", GARBLED)
@pytest.mark.parametrize("source_format", list(SourceFormat))
def test_every_parser_survives_garbled_text(source_format, text):
    context = ParseContext(default_timezone="Asia/Tokyo", trip_id="g")
    draft = PARSERS[source_format].parse(text, context)

    assert isinstance(draft, LegDraft)
    for field in ("name", "departure_location", "arrival_location", "carrier"):
        assert isinstance(getattr(draft, field), str)
    assert draft.departure_instant.utcoffset() == timedelta(0)
    assert draft.arrival_instant.utcoffset() == timedelta(0)
    assert draft.departure_timezone and draft.arrival_timezone
    assert draft.trip_id == "g"


@pytest.mark.parametrize("text", [GMAIL_TEXT, UNITED_EMAIL_TEXT, UNITED_EMAIL_2_TEXT, UNITED_WEB_TEXT])
def test_parse_is_idempotent_on_extracted_fields(text):
    first = parse_leg_text(text, NY, "t")
    second = parse_leg_text(text, NY, "t")

    for field in ("departure_location", "arrival_location", "carrier", "confirmation", "name"):
        assert getattr(first, field) == getattr(second, field)
    assert first.departure_instant == second.departure_instant


def test_non_string_input_is_treated_as_empty():
    draft = parse_leg_text(None, NY)
    assert draft.name == "Unknown Leg"


def test_missing_default_timezone_uses_configured_default(monkeypatch):
    from tripleg.config.settings import get_settings

    monkeypatch.delenv("TRIPLEG_DEFAULT_TIMEZONE", raising=False)
    monkeypatch.delenv("TRIPLEG_CONFIG_PATH", raising=False)
    get_settings.cache_clear()
    try:
        draft = parse_leg_text(GMAIL_TEXT)
    finally:
        get_settings.cache_clear()
    assert draft.departure_timezone == "America/New_York"
    assert draft.departure_instant == datetime(2024, 6, 15, 10, 30, tzinfo=UTC)


def test_unexpected_parser_failure_returns_unparsed_leg(monkeypatch):
    def boom(self, text, context):
        raise RuntimeError("parser bug")

    monkeypatch.setattr(GmailParser, "parse", boom)
    draft = parse_leg_text(GMAIL_TEXT, NY, "t")

    assert draft.name == "Unknown Leg"
    assert draft.trip_id == "t"


def test_leg_draft_rejects_naive_instants_and_normalizes_to_utc():
    tokyo_noon = datetime(2025, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=9)))
    draft = LegDraft(
        name="n",
        departure_instant=tokyo_noon,
        departure_timezone="Asia/Tokyo",
        arrival_instant=tokyo_noon,
        arrival_timezone="Asia/Tokyo",
    )
    assert draft.departure_instant == datetime(2025, 1, 1, 3, 0, tzinfo=UTC)
    assert draft.departure_instant.tzinfo == UTC

    with pytest.raises(ValidationError):
        LegDraft(
            name="n",
            departure_instant=datetime(2025, 1, 1, 12, 0),
            departure_timezone="UTC",
            arrival_instant=tokyo_noon,
            arrival_timezone="UTC",
        )


def test_to_record_uses_storage_field_names():
    record = parse_leg_text(GMAIL_TEXT, NY, "trip-1").to_record()

    assert record == {
        "name": "United Airlines",
        "departure_datetime": "2024-06-15T10:30:00.000Z",
        "departure_location": "",
        "departure_timezone": NY,
        "arrival_datetime": "2024-06-15T13:45:00.000Z",
        "arrival_location": "",
        "arrival_timezone": NY,
        "carrier": "UA 237",
        "confirmation": "ABC123",
        "trip_id": "trip-1",
    }


def test_missing_landing_block_logs_the_arrival_field(caplog):
    caplog.set_level(logging.DEBUG, logger="tripleg.parsing.parsers")
    text = "Delta – DL 42\nTake-off\nJun 15 2024, 6:30 AM\nConfirmation number\nXY1"

    parse_leg_text(text, NY)

    messages = [r.getMessage() for r in caplog.records if r.name == "tripleg.parsing.parsers"]
    assert any("arrival" in m for m in messages)
    assert not any("departure" in m for m in messages)
