"""
Source classifier: which known layout does a pasted itinerary use?

Classification is an ordered rule list; the first matching rule wins. Specific
layouts come first because the DemoFlight rule ("first token is Flight") would
otherwise swallow United texts that also start with a "Flight ..." line.

To support a new source: add a `SourceFormat` member, a rule here, and a parser
registered in `tripleg.parsing.interpreter.PARSERS`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum

from tripleg.parsing.tokens import content_lines

logger = logging.getLogger(__name__)


class SourceFormat(str, Enum):
    UNKNOWN = "Unknown"
    DEMO_FLIGHT = "DemoFlight"
    GMAIL = "Gmail"
    UNITED_EMAIL = "UnitedEmail"
    UNITED_EMAIL_2 = "UnitedEmail2"
    UNITED_WEB = "UnitedWeb"


GMAIL_HEADER_RE = re.compile(r"[–—]\s+([A-Za-z]{2,4}\s+\d{1,5})$")
UNITED_EMAIL_HEADER_RE = re.compile(r"^Flight to\b")
UNITED_EMAIL_2_HEADER_RE = re.compile(r"^Flight\s+(\d+)\s+of\s+(\d+)\b\s*(.*)$")
UNITED_WEB_DEPART_RE = re.compile(r"^Depart\b", re.IGNORECASE)


def _first_line_is_gmail_header(lines: list[str]) -> bool:
    return bool(lines) and GMAIL_HEADER_RE.search(lines[0]) is not None


def _any_line(pattern: re.Pattern[str]) -> Callable[[list[str]], bool]:
    def rule(lines: list[str]) -> bool:
        return any(pattern.search(line) for line in lines)

    return rule


def _first_token_is_flight(lines: list[str]) -> bool:
    return bool(lines) and lines[0].split()[0].lower() == "flight"


_RULES: tuple[tuple[SourceFormat, Callable[[list[str]], bool]], ...] = (
    (SourceFormat.GMAIL, _first_line_is_gmail_header),
    (SourceFormat.UNITED_EMAIL, _any_line(UNITED_EMAIL_HEADER_RE)),
    (SourceFormat.UNITED_EMAIL_2, _any_line(UNITED_EMAIL_2_HEADER_RE)),
    (SourceFormat.UNITED_WEB, _any_line(UNITED_WEB_DEPART_RE)),
    (SourceFormat.DEMO_FLIGHT, _first_token_is_flight),
)


def classify(text: object) -> SourceFormat:
    """Return the source format of `text`; anything unrecognized is `UNKNOWN`."""
    if not isinstance(text, str) or not text.strip():
        return SourceFormat.UNKNOWN

    lines = content_lines(text)
    for source_format, rule in _RULES:
        if rule(lines):
            logger.debug("Classified pasted text as %s", source_format.value)
            return source_format
    return SourceFormat.UNKNOWN
