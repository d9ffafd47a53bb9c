"""
Client for the Dayline feed API.
"""

from .feeds import (
    FEED_KINDS,
    FEED_PATHS,
    FeedFetchError,
    FeedKind,
    FeedRecord,
    feed_url,
    fetch_air_quality,
    fetch_edb,
    fetch_feed,
    fetch_news,
    fetch_weather,
)

__all__ = [
    "FEED_KINDS",
    "FEED_PATHS",
    "FeedFetchError",
    "FeedKind",
    "FeedRecord",
    "feed_url",
    "fetch_air_quality",
    "fetch_edb",
    "fetch_feed",
    "fetch_news",
    "fetch_weather",
]
