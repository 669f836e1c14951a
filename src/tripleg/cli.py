"""
tripleg CLI entrypoint.

This CLI is intended for quick local checks of pasted itinerary text without the web UI.
It delegates all parsing to `tripleg.parsing.interpreter.parse_leg_text`.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from tripleg.config.settings import get_settings
from tripleg.core.formatting import format_short_date, format_time_with_zone
from tripleg.core.logging import configure_logging
from tripleg.locations.registry import lookup_zone
from tripleg.parsing.classifier import classify
from tripleg.parsing.interpreter import parse_leg_text


def _read_text(path: str | None) -> str:
    """Read pasted text from a file, or stdin when no path (or "-") is given."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the `parse` subcommand."""
    settings = get_settings()
    text = _read_text(args.file)
    draft = parse_leg_text(text, args.timezone or settings.app.default_timezone, args.trip_id)

    if args.json:
        print(json.dumps(draft.to_record(), ensure_ascii=False, indent=2))
        return 0

    print(f"Format: {classify(text).value}")
    print(f"Name: {draft.name}")
    print(f"Carrier: {draft.carrier or '-'}")
    print(f"Confirmation: {draft.confirmation or '-'}")
    for label, instant, location, zone in [
        ("Depart", draft.departure_instant, draft.departure_location, draft.departure_timezone),
        ("Arrive", draft.arrival_instant, draft.arrival_location, draft.arrival_timezone),
    ]:
        print(
            f"{label}: {format_short_date(instant, zone)} {format_time_with_zone(instant, zone)}"
            f"  {location or '-'}  [{zone}]"
        )
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    print(classify(_read_text(args.file)).value)
    return 0


def _cmd_zone(args: argparse.Namespace) -> int:
    """Print the registry timezone for each airport code; exit 1 if any is unknown."""
    missing = 0
    for code in args.codes:
        zone = lookup_zone(code)
        if zone is None:
            missing += 1
        print(f"{code.upper()}\t{zone or '-'}")
    return 1 if missing else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the tripleg CLI."""
    parser = argparse.ArgumentParser(prog="tripleg")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str,
        default=None,
        help="Log level, e.g. debug to see field extraction misses (default: from config).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Parse pasted itinerary text into a leg.")
    p.add_argument("file", nargs="?", default=None, help="Text file to read (default: stdin).")
    p.add_argument("--timezone", type=str, default=None, help="Default IANA timezone (default: from config).")
    p.add_argument("--trip-id", dest="trip_id", type=str, default=None)
    p.add_argument("--json", action="store_true", help="Output the leg record as JSON")
    p.set_defaults(func=_cmd_parse)

    c = sub.add_parser("classify", help="Print the detected source format.")
    c.add_argument("file", nargs="?", default=None)
    c.set_defaults(func=_cmd_classify)

    z = sub.add_parser("zone", help="Look up airport codes in the timezone registry.")
    z.add_argument("codes", nargs="+")
    z.set_defaults(func=_cmd_zone)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m tripleg.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
