from datetime import datetime, timedelta, timezone

import config
from ritm.time_basis import (
    app_now,
    elapsed_breakdown,
    elapsed_days,
    elapsed_millis,
    elapsed_seconds,
    step_target,
    to_app_time,
)


def test_same_instant_is_zero(origin):
    assert elapsed_days(origin, origin) == 0
    assert elapsed_seconds(origin, origin) == 0


def test_target_before_origin_clamps_to_zero(origin):
    earlier = origin - timedelta(days=3, hours=5)
    assert elapsed_days(origin, earlier) == 0
    assert elapsed_seconds(origin, earlier) == 0


def test_days_count_calendar_midnights():
    origin = datetime(1990, 1, 1, 23, 59)
    target = datetime(1990, 1, 2, 0, 1)
    assert elapsed_days(origin, target) == 1
    assert elapsed_seconds(origin, target) == 120


def test_days_ignore_time_of_day(origin):
    target = datetime(1990, 1, 11, 6, 0)
    assert elapsed_days(origin, target) == 10


def test_seconds_floor_fractions(origin):
    target = origin + timedelta(seconds=59, microseconds=999999)
    assert elapsed_seconds(origin, target) == 59


def test_stored_zone_is_discarded(origin):
    as_utc = origin.replace(tzinfo=timezone.utc)
    target = datetime(1990, 1, 1, 13, 0)
    assert elapsed_seconds(as_utc, target) == 3600
    assert to_app_time(as_utc).tzinfo == config.APP_TZ
    assert to_app_time(as_utc).hour == 12


def test_app_now_is_in_app_offset():
    now = app_now()
    assert now.utcoffset() == timedelta(hours=5)


def test_elapsed_millis_is_signed(origin):
    assert elapsed_millis(origin, origin - timedelta(seconds=1)) == -1000
    assert elapsed_millis(origin, origin + timedelta(milliseconds=1500)) == 1500


def test_breakdown(origin):
    target = origin + timedelta(days=1, hours=2, minutes=3, seconds=59)
    assert elapsed_breakdown(origin, target) == {"days": 1, "hours": 2, "minutes": 3}


def test_breakdown_before_origin_is_negative(origin):
    earlier = origin - timedelta(days=1, hours=2, minutes=3, seconds=30)
    assert elapsed_breakdown(origin, earlier) == {"days": -1, "hours": -2, "minutes": -4}
    assert elapsed_breakdown(origin, origin - timedelta(minutes=5)) == {"days": 0, "hours": 0, "minutes": -5}


def test_step_target_days_and_months():
    t = datetime(1990, 1, 31, 10, 0)
    assert step_target(t, months=1).date().isoformat() == "1990-02-28"
    assert step_target(t, days=1).date().isoformat() == "1990-02-01"
    assert step_target(t, days=-31).date().isoformat() == "1989-12-31"
    assert step_target(t, months=1).hour == 10
