from datetime import datetime, timedelta, timezone

import pytest

from dayline.util import LocalTimeSupport, format_feed_timestamp, format_utc_timestamp, guess_timezone, resolve_zone, zone_label
from dayline.util import time as time_module

STAMP = "2026-01-12T10:00:53Z"


def _in_zone(name: str) -> str:
    return format_feed_timestamp(STAMP, LocalTimeSupport(guess_zone=lambda: name))


def test_utc_fallback_layout() -> None:
    assert format_feed_timestamp(STAMP, None) == "(10:00AM | Mon | 12 Jan, 2026)"


def test_utc_zone() -> None:
    assert _in_zone("UTC") == "(10:00AM | Mon | 12 Jan, 2026 UTC)"


def test_hong_kong_zone() -> None:
    assert _in_zone("Asia/Hong_Kong") in {
        "(6:00PM | Mon | 12 Jan, 2026 HKT)",
        "(6:00PM | Mon | 12 Jan, 2026 GMT+8)",
    }


def test_new_york_zone() -> None:
    assert _in_zone("America/New_York") in {
        "(5:00AM | Mon | 12 Jan, 2026 EST)",
        "(5:00AM | Mon | 12 Jan, 2026 GMT-5)",
    }


def test_conversion_can_cross_midnight() -> None:
    result = format_feed_timestamp("2026-01-11T23:30:00Z", LocalTimeSupport(guess_zone=lambda: "Asia/Tokyo"))
    assert result.startswith("(8:30AM | Mon | 12 Jan, 2026 ")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2026-01-12T00:05:00Z", "(12:05AM | Mon | 12 Jan, 2026)"),
        ("2026-01-12T12:00:00Z", "(12:00PM | Mon | 12 Jan, 2026)"),
        ("2026-03-01T23:59:59Z", "(11:59PM | Sun | 1 Mar, 2026)"),
    ],
)
def test_twelve_hour_clock_edges(value: str, expected: str) -> None:
    assert format_utc_timestamp(value) == expected


def test_explicit_offset_is_honoured_on_utc_path() -> None:
    assert format_utc_timestamp("2026-01-12T18:00:53+08:00") == "(10:00AM | Mon | 12 Jan, 2026)"


def test_naive_timestamp_is_treated_as_utc() -> None:
    assert format_utc_timestamp("2026-01-12T10:00:53") == "(10:00AM | Mon | 12 Jan, 2026)"
    assert _in_zone("UTC") == format_feed_timestamp("2026-01-12T10:00:53", LocalTimeSupport(guess_zone=lambda: "UTC"))


@pytest.mark.parametrize("value", ["", "not a date", "2026-13-45T99:00:00Z"])
def test_malformed_values_raise_value_error(value: str) -> None:
    with pytest.raises(ValueError):
        format_feed_timestamp(value, None)
    with pytest.raises(ValueError):
        format_feed_timestamp(value, LocalTimeSupport(guess_zone=lambda: "UTC"))


def test_non_string_value_raises_value_error() -> None:
    with pytest.raises(ValueError):
        format_feed_timestamp(1768212053, None)


def test_unknown_zone_falls_back_to_utc() -> None:
    assert resolve_zone("Mars/Olympus_Mons") is timezone.utc
    assert _in_zone("Mars/Olympus_Mons") == "(10:00AM | Mon | 12 Jan, 2026 UTC)"


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (timedelta(hours=4), "GMT+4"),
        (timedelta(hours=-3), "GMT-3"),
        (timedelta(hours=5, minutes=30), "GMT+5:30"),
        (timedelta(0), "GMT"),
    ],
)
def test_numeric_abbreviations_render_as_gmt_offset(offset: timedelta, expected: str) -> None:
    moment = datetime(2026, 1, 12, 10, 0, tzinfo=timezone(offset, "+xx"))
    assert zone_label(moment) == expected


def test_named_abbreviation_is_kept() -> None:
    moment = datetime(2026, 1, 12, 10, 0, tzinfo=timezone(timedelta(hours=8), "HKT"))
    assert zone_label(moment) == "HKT"


def test_guess_timezone_uses_platform_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time_module, "get_localzone_name", lambda: "Europe/Paris")
    assert guess_timezone() == "Europe/Paris"


def test_guess_timezone_defaults_to_utc(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom():
        raise ValueError("no zone configured")

    monkeypatch.setattr(time_module, "get_localzone_name", boom)
    assert guess_timezone() == "UTC"

    monkeypatch.setattr(time_module, "get_localzone_name", lambda: None)
    assert guess_timezone() == "UTC"


@pytest.mark.parametrize(
    ("value", "zone"),
    [
        ("9999-12-31T23:30:00Z", "Asia/Hong_Kong"),
        ("0001-01-01T00:30:00Z", "America/New_York"),
    ],
)
def test_out_of_range_conversion_raises_value_error(value: str, zone: str) -> None:
    with pytest.raises(ValueError):
        format_feed_timestamp(value, LocalTimeSupport(guess_zone=lambda: zone))


def test_out_of_range_utc_conversion_raises_value_error() -> None:
    with pytest.raises(ValueError):
        format_feed_timestamp("0001-01-01T00:30:00+01:00", None)


def test_extreme_but_representable_dates_still_format() -> None:
    assert format_feed_timestamp("9999-12-31T23:30:00Z", None) == "(11:30PM | Fri | 31 Dec, 9999)"


@pytest.mark.parametrize("value", ["2026-012T10:00:53Z", "2026-01-12T10:00:53.250+00:00", "2026-01-12"])
def test_both_paths_accept_the_same_inputs(value: str) -> None:
    utc = format_feed_timestamp(value, None)
    zoned = format_feed_timestamp(value, LocalTimeSupport(guess_zone=lambda: "UTC"))
    assert zoned == utc[:-1] + " UTC)"
