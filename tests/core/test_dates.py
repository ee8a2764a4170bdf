"""Tests for date helpers — pure functions, no IO."""

from datetime import datetime, timezone

from exercise_tracker.core.dates import (
    INVALID_DATE, epoch_iso, parse_day, to_date_string, today_iso,
)


def test_to_date_string_renders_weekday_month_day_year():
    assert to_date_string("2024-01-01") == "Mon Jan 01 2024"
    assert to_date_string("1999-12-31") == "Fri Dec 31 1999"


def test_to_date_string_accepts_datetime_strings():
    assert to_date_string("2024-03-05T10:30:00") == "Tue Mar 05 2024"


def test_offset_datetime_resolves_to_utc_day():
    assert to_date_string("2024-03-05T23:30:00-05:00") == "Wed Mar 06 2024"
    assert to_date_string("2024-03-05T23:30:00Z") == "Tue Mar 05 2024"


def test_unparseable_dates_render_invalid():
    assert to_date_string("someday") == INVALID_DATE
    assert to_date_string("2024-13-40") == INVALID_DATE
    assert to_date_string("") == INVALID_DATE
    assert to_date_string(None) == INVALID_DATE


def test_parse_day_strips_whitespace():
    assert parse_day(" 2024-01-01 ").isoformat() == "2024-01-01"


def test_today_iso_is_utc_day():
    assert today_iso() == datetime.now(timezone.utc).date().isoformat()


def test_epoch_iso_sorts_before_any_real_date():
    assert epoch_iso() == "1970-01-01"
    assert epoch_iso() < "2000-01-01"
