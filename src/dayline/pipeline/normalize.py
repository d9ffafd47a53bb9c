"""
Normalize raw feed records before rendering.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..api import FeedRecord
from ..config import get_settings
from ..util import LocalTimeSupport, format_feed_timestamp, repair_escaped_newlines

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("body", "body1")


class _Unset:
    pass


_UNSET = _Unset()


def resolve_local_time() -> Optional[LocalTimeSupport]:
    """
    Pick the timestamp formatting capability from settings.

    Returns None (UTC, no zone suffix) when `DAYLINE_LOCAL_TIME` is off. A configured
    `DAYLINE_TIMEZONE` takes the place of the guessed local zone.
    """
    settings = get_settings()
    if not settings.local_time:
        return None
    if settings.timezone:
        zone_name = settings.timezone
        return LocalTimeSupport(guess_zone=lambda: zone_name)
    return LocalTimeSupport()


def format_data(
    record: FeedRecord,
    *,
    local_time: Union[Optional[LocalTimeSupport], _Unset] = _UNSET,
) -> None:
    """
    Prepare a feed record for display, in place.

    Literal `\\n` pairs in `body` and `body1` become real line breaks, and
    `updated_at` is rendered into `formattedDate`. No other key is added or changed.

    Args:
        record: Decoded feed object; mutated in place.
        local_time: Zone-aware formatter, or None for the UTC layout. Resolved from
            settings when omitted.
    """
    for key in TEXT_FIELDS:
        value = record.get(key)
        if isinstance(value, str):
            record[key] = repair_escaped_newlines(value)

    if record.get("updated_at") is None:
        return

    if isinstance(local_time, _Unset):
        local_time = resolve_local_time()

    try:
        record["formattedDate"] = format_feed_timestamp(record["updated_at"], local_time)
    except ValueError as exc:
        logger.warning("Ignoring unparseable updated_at %r: %s", record["updated_at"], exc)
