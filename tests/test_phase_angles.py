from datetime import datetime, timedelta

import pytest

import config
from ritm.phase_angles import (
    day_of_year,
    days_in_year,
    earth_angle,
    map_angles,
    marker_angles,
    moon_angle,
    sun_angle,
)

FULL_MOON_LOCAL = datetime(1996, 1, 6, 21, 15)


def test_sun_angle():
    assert sun_angle(datetime(2020, 5, 1, 12, 40)) == 0
    assert sun_angle(datetime(2020, 5, 1, 0, 0)) == -190
    assert sun_angle(datetime(2020, 5, 1, 18, 40)) == 90
    assert sun_angle(datetime(2020, 5, 1, 12, 40, 30)) == pytest.approx(0.125)


def test_earth_angle():
    assert earth_angle(datetime(2026, 1, 15)) == 180
    assert earth_angle(datetime(2024, 12, 31)) == pytest.approx(351 * (360 / 366) + 180)


def test_calendar_helpers():
    assert days_in_year(2024) == 366
    assert days_in_year(1900) == 365
    assert days_in_year(2000) == 366
    assert day_of_year(datetime(2024, 12, 31)) == 366


def test_moon_zero_at_reference():
    assert moon_angle(FULL_MOON_LOCAL) == 0


def test_moon_quarter():
    t = FULL_MOON_LOCAL + timedelta(days=config.SYNODIC_MONTH_DAYS / 4)
    assert moon_angle(t) == pytest.approx(90, abs=1e-6)


def test_moon_range():
    t = datetime(1950, 1, 1)
    for _ in range(200):
        assert 0 <= moon_angle(t) < 360
        t += timedelta(days=137, hours=7, minutes=13)


def test_moon_periodic():
    t = datetime(2020, 5, 1, 10, 0)
    later = t + timedelta(days=config.SYNODIC_MONTH_DAYS)
    assert moon_angle(later) == pytest.approx(moon_angle(t), abs=1e-6)


def test_marker_angles_keys():
    assert set(marker_angles(datetime(2020, 5, 1))) == {"sun", "moon", "earth"}


def test_map_angles_baseline_and_offsets():
    assert map_angles(3, 0) == [90, 90, 90, 90]
    assert map_angles(0, 0) == [270, 270, 270, 270]
    assert map_angles(4, 0) == [270, 270, 270, 270]
    assert map_angles(8, 0) == [90, 90, 90, 90]


def test_map_angles_one_cell():
    angles = map_angles(3, 1)
    assert angles == pytest.approx([360 / 14 + 90, 360 / 28 + 90, 360 / 42 + 90, 360 / 49 + 90])
