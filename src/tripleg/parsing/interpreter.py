"""
Pasted leg text -> `LegDraft`.

This is the one entrypoint request handlers call: classify the text, dispatch to the
parser registered for that format, and hand the draft back. The caller owns
persistence (`LegDraft.to_record()`).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from tripleg.config.settings import get_settings
from tripleg.domain.models import LegDraft, ParseContext
from tripleg.parsing.classifier import SourceFormat, classify
from tripleg.parsing.parsers import (
    DemoFlightParser,
    GmailParser,
    LegParser,
    UnitedEmail2Parser,
    UnitedEmailParser,
    UnitedWebParser,
)

logger = logging.getLogger(__name__)

# Parsers are stateless, so one shared instance per format is enough.
PARSERS = MappingProxyType(
    {
        SourceFormat.UNKNOWN: LegParser(),
        SourceFormat.DEMO_FLIGHT: DemoFlightParser(),
        SourceFormat.GMAIL: GmailParser(),
        SourceFormat.UNITED_EMAIL: UnitedEmailParser(),
        SourceFormat.UNITED_EMAIL_2: UnitedEmail2Parser(),
        SourceFormat.UNITED_WEB: UnitedWebParser(),
    }
)


def parser_for(source_format: SourceFormat) -> LegParser:
    return PARSERS.get(source_format, PARSERS[SourceFormat.UNKNOWN])


def parse_leg_text(text: Any, default_timezone: str | None = None, trip_id: Any = None) -> LegDraft:
    """Parse one pasted itinerary block into a leg draft.

    `default_timezone` is the caller's current IANA zone; legs whose source carries no
    location-derived zone use it. When omitted, `app.default_timezone` from settings is used.
    """
    context = ParseContext(
        default_timezone=default_timezone or get_settings().app.default_timezone,
        trip_id=trip_id,
    )
    source_format = classify(text)
    parser = parser_for(source_format)
    raw = text if isinstance(text, str) else ""
    try:
        draft = parser.parse(raw, context)
    except Exception:
        logger.exception("%s parser failed; returning an unparsed leg", source_format.value)
        return PARSERS[SourceFormat.UNKNOWN].parse(raw, context)
    logger.debug("Parsed %s leg %r (carrier=%r)", source_format.value, draft.name, draft.carrier)
    return draft
