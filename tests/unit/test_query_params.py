from datetime import UTC, datetime, timedelta

import pytest

from app.utils.query_params import (
    normalize_period,
    parse_bool,
    parse_int,
    parse_positive_int,
    percent_change,
    period_start,
    reservation_period_start,
    round_half_up,
    time_filter_multiplier,
    time_filter_window,
    total_pages,
)

NOW = datetime(2026, 3, 14, 15, 30, tzinfo=UTC)


@pytest.mark.parametrize(
    "value, expected",
    [(None, 10), ("3", 3), (" 7 ", 7), ("0", 10), ("-2", 10), ("abc", 10), ("2.5", 10), ("", 10)],
)
def test_parse_positive_int_falls_back_to_default(value, expected):
    assert parse_positive_int(value, 10) == expected


def test_parse_int_and_bool_are_lenient():
    assert parse_int("4") == 4
    assert parse_int("four") is None
    assert parse_int("  ") is None
    assert parse_bool("true") is True
    assert parse_bool("FALSE") is False
    assert parse_bool("yes") is None
    assert parse_bool(None) is None


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(623.5) == 624
    assert round_half_up(374.1) == 374
    assert round_half_up(124.7) == 125


def test_time_filter_multiplier_defaults_to_week():
    assert time_filter_multiplier("hour") == 0.1
    assert time_filter_multiplier("today") == 0.3
    assert time_filter_multiplier("two_days") == 0.5
    assert time_filter_multiplier("week") == 1.0
    assert time_filter_multiplier("decade") == 1.0
    assert time_filter_multiplier(None) == 1.0


def test_time_filter_window():
    assert time_filter_window("hour", NOW) == (NOW - timedelta(hours=1), NOW)
    assert time_filter_window("today", NOW) == (datetime(2026, 3, 14, tzinfo=UTC), NOW)
    assert time_filter_window("bogus", NOW) == (NOW - timedelta(days=7), NOW)


def test_period_bounds():
    assert normalize_period("year") == "year"
    assert normalize_period("fortnight") == "month"
    assert period_start("week", NOW) == NOW - timedelta(days=7)
    assert period_start(None, NOW) == NOW - timedelta(days=30)
    assert period_start("year", NOW) == NOW - timedelta(days=365)
    assert period_start("all", NOW) is None


def test_reservation_period_defaults_to_week():
    assert reservation_period_start("today", NOW) == datetime(2026, 3, 14, tzinfo=UTC)
    assert reservation_period_start("month", NOW) == NOW - timedelta(days=30)
    assert reservation_period_start("year", NOW) == NOW - timedelta(days=7)


def test_total_pages_and_percent_change():
    assert total_pages(25, 10) == 3
    assert total_pages(20, 10) == 2
    assert total_pages(0, 10) == 0
    assert percent_change(110, 100) == 10.0
    assert percent_change(5, 0) == 100.0
    assert percent_change(0, 0) == 0.0
