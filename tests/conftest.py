from __future__ import annotations

from typing import Any, List

import pytest
from typer.testing import CliRunner

from dayline.config import get_settings

_SETTINGS_ENV = (
    "DAYLINE_API_URL",
    "DAYLINE_REQUEST_TIMEOUT",
    "DAYLINE_TIMEZONE",
    "DAYLINE_LOCAL_TIME",
    "DAYLINE_WEB_ROOT",
    "DAYLINE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Start each test from default settings, whatever the shell exports."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class FakeResponse:
    def __init__(self, payload: Any, url: str = "https://api.dayline.observer/", status_code: int = 200) -> None:
        self._payload = payload
        self.url = url
        self.status_code = status_code

    def raise_for_status(self) -> None:
        return None

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class RecordingGet:
    """Stand-in for `requests.get` that remembers every call."""

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        self.calls: List[tuple[tuple, dict]] = []

    def __call__(self, *args, **kwargs) -> FakeResponse:
        self.calls.append((args, kwargs))
        return FakeResponse(self.payload, url=args[0] if args else "")


FIXTURES = {
    "weather": {
        "title": "Cloudy with light rain",
        "body": "Temperature 18C\\nHumidity 85%",
        "body1": "Rain expected after 3pm",
        "updated_at": "2026-01-12T10:00:53Z",
    },
    "edb": {
        "id": "EDB-2026-0112",
        "body": "Monsoon signal issued\\nStay indoors",
        "updated_at": "2026-01-12T10:00:53Z",
    },
    "aqi": {
        "body": "Health risk: moderate",
        "body1": "PM2.5 32\\nPM10 48",
        "updated_at": "2026-01-12T10:00:53Z",
    },
    "news": {
        "title": "Morning briefing",
        "body": "### Top story\\n- **Ferries** resume\\n- Roads clear",
        "body1": "Read more at [the site](https://example.com/news)",
        "updated_at": "2026-01-12T10:00:53Z",
    },
}


@pytest.fixture
def feed_fixtures() -> dict:
    return {kind: dict(record) for kind, record in FIXTURES.items()}
