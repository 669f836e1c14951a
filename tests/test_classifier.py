import pytest

from tripleg.parsing.classifier import SourceFormat, classify


@pytest.mark.parametrize(
    "text, expected",
    [
        ("United Airlines – UA 237\nTake-off\nJun 15 2024, 6:30 AM", SourceFormat.GMAIL),
        ("\n\n  Delta — DL 1024  \nTake-off", SourceFormat.GMAIL),
        ("Your trip\nFlight to Washington, DC\nJul 29, 2025", SourceFormat.UNITED_EMAIL),
        ("Confirmation Number:\nABC123\nFlight 1 of 2 UA 1234", SourceFormat.UNITED_EMAIL_2),
        ("Trip details\nDepart\nTue, Aug 12, 2025", SourceFormat.UNITED_WEB),
        ("DEPART\nTue, Aug 12, 2025", SourceFormat.UNITED_WEB),
        ("flight AA100 tomorrow", SourceFormat.DEMO_FLIGHT),
        ("Flight", SourceFormat.DEMO_FLIGHT),
    ],
)
def test_classify_known_formats(text, expected):
    assert classify(text) == expected


@pytest.mark.parametrize("text", ["", "   \n\t", None, 42, "hello world", "Departure lounge", "Flights are fun"])
def test_classify_falls_back_to_unknown(text):
    assert classify(text) == SourceFormat.UNKNOWN


def test_gmail_header_only_counts_on_first_line():
    assert classify("Itinerary\nUnited Airlines – UA 237") == SourceFormat.UNKNOWN


def test_specific_united_rules_win_over_generic_flight_token():
    # Starts with "Flight", so the DemoFlight rule would also match.
    text = "Flight 1 of 2 UA 1234\nTue, Aug 12, 2025    Tue, Aug 12, 2025"
    assert classify(text) == SourceFormat.UNITED_EMAIL_2
    assert classify("Flight to Denver\nJul 29, 2025") == SourceFormat.UNITED_EMAIL
    assert classify("Flight UA 1234\nDepart\nTue, Aug 12, 2025") == SourceFormat.UNITED_WEB


def test_gmail_rule_wins_over_united_rules():
    assert classify("United Airlines – UA 237\nFlight to Denver") == SourceFormat.GMAIL


def test_source_format_values_are_stable_tags():
    assert [f.value for f in SourceFormat] == [
        "Unknown",
        "DemoFlight",
        "Gmail",
        "UnitedEmail",
        "UnitedEmail2",
        "UnitedWeb",
    ]
