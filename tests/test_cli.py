import io
import json

from tripleg.cli import main
from tripleg.core.logging import configure_logging

UNITED_WEB_TEXT = """Depart
Tue, Aug 12, 2025
8:15 AM
M,C,OMCO
Orlando, FL, US
Arrive
Tue, Aug 12, 2025
11:40 AM
S,F,OSFO
San Francisco, CA, US
Flight UA 1234
"""


def test_cli_parse_json_from_file(tmp_path, capsys):
    path = tmp_path / "leg.txt"
    path.write_text(UNITED_WEB_TEXT, encoding="utf-8")

    rc = main(["parse", str(path), "--timezone", "America/Chicago", "--trip-id", "t-1", "--json"])

    assert rc == 0
    record = json.loads(capsys.readouterr().out)
    assert record["name"] == "Orlando to San Francisco"
    assert record["departure_datetime"] == "2025-08-12T12:15:00.000Z"
    assert record["arrival_timezone"] == "America/Los_Angeles"
    assert record["trip_id"] == "t-1"


def test_cli_parse_text_output_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(UNITED_WEB_TEXT))

    rc = main(["parse", "--timezone", "America/New_York"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "Format: UnitedWeb" in out
    assert "Carrier: UA 1234" in out
    assert "Tue, Aug 12 8:15am (ET)  MCO  [America/New_York]" in out
    assert "Tue, Aug 12 11:40am (PT)  SFO  [America/Los_Angeles]" in out


def test_cli_classify(tmp_path, capsys):
    path = tmp_path / "leg.txt"
    path.write_text("Flight AA100", encoding="utf-8")

    assert main(["classify", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "DemoFlight"


def test_cli_zone_reports_unknown_codes(capsys):
    rc = main(["zone", "mco", "zzz"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert rc == 1
    assert lines == ["MCO\tAmerica/New_York", "ZZZ\t-"]


def test_cli_log_level_debug_reports_field_misses(tmp_path, capsys):
    path = tmp_path / "leg.txt"
    path.write_text("Delta – DL 42\nTake-off\nJun 15 2024, 6:30 AM\n", encoding="utf-8")
    try:
        rc = main(["--log-level", "debug", "parse", str(path), "--timezone", "America/New_York"])
        err = capsys.readouterr().err
    finally:
        configure_logging()

    assert rc == 0
    assert "no arrival date/time found" in err
