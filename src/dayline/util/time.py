"""
Timestamp parsing and display formatting for feed records.

Feed timestamps are rendered as `(h:mmAM | Ddd | D Mon, YYYY ZONE)`. The zone-aware
path converts the instant into the viewer's zone; the UTC path converts it to UTC and
omits the zone annotation. Both parse with arrow, so they accept the same inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import arrow
from tzlocal import get_localzone_name

logger = logging.getLogger(__name__)

# arrow tokens for the part of the label shared by both paths.
_ARROW_LAYOUT = "h:mmA | ddd | D MMM, YYYY"


def guess_timezone() -> str:
    """
    Best-effort IANA name of the machine's local timezone, "UTC" when undetermined.
    """
    try:
        name = get_localzone_name()
    except (KeyError, ValueError, OSError) as exc:
        logger.debug("Could not determine local timezone (%s); assuming UTC", exc)
        return "UTC"
    return name or "UTC"


def resolve_zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (TypeError, ValueError, ZoneInfoNotFoundError):
        logger.warning("Unknown timezone '%s'; falling back to UTC", name)
        return timezone.utc


def zone_label(moment: datetime) -> str:
    """
    Short display name for the zone of an aware datetime.

    Zones whose abbreviation is numeric (e.g. "+04") are shown as `GMT+4`.
    """
    name = moment.tzname() or ""
    if name.isalpha():
        return name
    offset = moment.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60
    if total_minutes == 0:
        return "GMT"
    sign = "+" if total_minutes > 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"GMT{sign}{hours}:{minutes:02d}"
    return f"GMT{sign}{hours}"


@dataclass(frozen=True)
class LocalTimeSupport:
    """
    Zone-aware timestamp formatting.

    Attributes:
        guess_zone: Returns the viewer's IANA zone name; swap it out to pin a zone.
    """
    guess_zone: Callable[[], str] = guess_timezone

    def format(self, value: str) -> str:
        zone = resolve_zone(self.guess_zone())
        moment = arrow.get(value).to(zone)
        stamp = moment.format(_ARROW_LAYOUT, locale="en_us")
        return f"({stamp} {zone_label(moment.datetime)})"


def format_utc_timestamp(value: str) -> str:
    """
    Format an ISO-8601 timestamp from its UTC components, without a zone suffix.
    """
    moment = arrow.get(value).to(timezone.utc)
    return f"({moment.format(_ARROW_LAYOUT, locale='en_us')})"


def format_feed_timestamp(value: str, local_time: Optional[LocalTimeSupport]) -> str:
    """
    Render a feed timestamp for display.

    Args:
        value: ISO-8601 timestamp; UTC is assumed when no offset is given.
        local_time: Zone-aware capability, or None to format in UTC without a zone.

    Raises:
        ValueError: If the value is not a parseable timestamp, or the instant cannot be
            represented once converted.
    """
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be a string, got {type(value).__name__}")
    try:
        if local_time is None:
            return format_utc_timestamp(value)
        return local_time.format(value)
    except OverflowError as exc:
        raise ValueError(f"Timestamp out of range: {value}") from exc
