"""
Fetch weather, EDB, air-quality and news feeds from the Dayline API.

Each feed is a single GET returning one JSON object. There is no caching and no
retry: a failed request surfaces to the caller as `FeedFetchError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Literal, Optional

import requests

from ..config import get_settings
from ..util import format_request_exception

logger = logging.getLogger(__name__)

FeedKind = Literal["weather", "edb", "aqi", "news"]
FeedRecord = Dict[str, Any]

FEED_KINDS: tuple[FeedKind, ...] = ("weather", "edb", "aqi", "news")

FEED_PATHS: Dict[str, str] = {
    "weather": "weather",
    "edb": "edb",
    "aqi": "aqi",
    "news": "news",
}


class FeedFetchError(RuntimeError):
    """Raised when a feed cannot be retrieved or decoded."""

    def __init__(self, kind: str, url: str, message: str) -> None:
        super().__init__(f"{kind} feed unavailable ({url}): {message}")
        self.kind = kind
        self.url = url


def feed_url(kind: str, base_url: Optional[str] = None) -> str:
    """
    Build the request URL for a feed.

    Raises:
        ValueError: If `kind` is not a known feed.
    """
    try:
        path = FEED_PATHS[kind]
    except KeyError:
        raise ValueError(f"Unknown feed '{kind}'; expected one of {', '.join(FEED_KINDS)}") from None
    base = (base_url or get_settings().api_url).rstrip("/")
    return f"{base}/{path}"


def fetch_feed(kind: str, *, base_url: Optional[str] = None, timeout: Optional[float] = None) -> FeedRecord:
    """
    Retrieve one feed and return its parsed JSON body.

    Args:
        kind: Feed identifier ("weather", "edb", "aqi" or "news").
        base_url: Override for the configured API base URL.
        timeout: Override for the configured request timeout in seconds.

    Returns:
        The decoded JSON object, untouched.

    Raises:
        FeedFetchError: On network errors, non-2xx responses, invalid JSON or a non-object body.
    """
    url = feed_url(kind, base_url)
    if timeout is None:
        timeout = get_settings().request_timeout

    logger.debug("Fetching %s feed from %s", kind, url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        summary = format_request_exception(exc)
        logger.warning("Fetching %s feed failed: %s", kind, summary)
        raise FeedFetchError(kind, url, summary) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        logger.warning("The %s feed returned invalid JSON: %s", kind, exc)
        raise FeedFetchError(kind, url, "response body is not valid JSON") from exc

    if not isinstance(payload, dict):
        raise FeedFetchError(kind, url, f"expected a JSON object, got {type(payload).__name__}")
    return payload


def fetch_weather(**kwargs: Any) -> FeedRecord:
    return fetch_feed("weather", **kwargs)


def fetch_edb(**kwargs: Any) -> FeedRecord:
    return fetch_feed("edb", **kwargs)


def fetch_air_quality(**kwargs: Any) -> FeedRecord:
    return fetch_feed("aqi", **kwargs)


def fetch_news(**kwargs: Any) -> FeedRecord:
    return fetch_feed("news", **kwargs)
