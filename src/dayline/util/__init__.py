"""
Shared utility helpers for filesystem writes, text repair, HTTP errors and timestamps.
"""

from .filesystem import SITE_LOCK_NAME, ensure_directory, site_lock, write_text_file
from .http import format_request_exception
from .text import repair_escaped_newlines
from .time import (
    LocalTimeSupport,
    format_feed_timestamp,
    format_utc_timestamp,
    guess_timezone,
    resolve_zone,
    zone_label,
)

__all__ = [
    "ensure_directory",
    "SITE_LOCK_NAME",
    "site_lock",
    "write_text_file",
    "format_request_exception",
    "repair_escaped_newlines",
    "LocalTimeSupport",
    "format_feed_timestamp",
    "format_utc_timestamp",
    "guess_timezone",
    "resolve_zone",
    "zone_label",
]
