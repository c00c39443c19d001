"""
Phase Angle Calculator — rotation angles for the 4-ring map and for the
sun / moon / earth markers.

All angles are in degrees. Sun and earth markers are read from the target's
wall-clock in the application offset; the moon is measured against a fixed
full moon in UTC.
"""
import math
from datetime import datetime, timezone

import config
from ritm.cycle_sampler import cell_index, resolve_scale
from ritm.tables import RhythmCategory
from ritm.time_basis import to_app_time

FULL_MOON_REF = datetime(*config.FULL_MOON_REFERENCE, tzinfo=timezone.utc)
LUNAR_PERIOD_MS = config.SYNODIC_MONTH_DAYS * 24 * 3600 * 1000

MAP_BASELINE = 90.0


def _millis(delta) -> float:
    return (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds / 1000


def minutes_since_midnight(target: datetime) -> float:
    t = to_app_time(target)
    return t.hour * 60 + t.minute + t.second / 60


def days_in_year(year: int) -> int:
    leap = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
    return 366 if leap else 365


def day_of_year(target: datetime) -> int:
    return to_app_time(target).timetuple().tm_yday


def sun_angle(target: datetime) -> float:
    """0° at 12:40 local; a quarter degree per minute."""
    return (minutes_since_midnight(target) - config.SUN_NOON_MINUTES) * 0.25


def earth_angle(target: datetime) -> float:
    t = to_app_time(target)
    return (day_of_year(t) - 15) * (360 / days_in_year(t.year)) + 180


def moon_angle(target: datetime) -> float:
    """
    Synodic phase in [0, 360): 0° at full moon.

    Phase is the millisecond offset from the reference full moon folded into
    one synodic month (works for targets before 1996 too).
    """
    diff = _millis(to_app_time(target) - FULL_MOON_REF)
    phase = math.fmod(math.fmod(diff, LUNAR_PERIOD_MS) + LUNAR_PERIOD_MS, LUNAR_PERIOD_MS)
    return (phase * 360) / LUNAR_PERIOD_MS


def marker_angles(target: datetime) -> dict:
    return {
        "sun": sun_angle(target),
        "moon": moon_angle(target),
        "earth": earth_angle(target),
    }


def map_angles(scale, elapsed: float) -> list:
    """
    Ring rotation per rhythm category for one time scale.

    Each ring has 360/L degrees per cell; the ring is turned to its current
    cell, shifted by the scale's phase offset, plus the 90° baseline.
    """
    scale = resolve_scale(scale)
    angles = []
    for rhythm in RhythmCategory:
        angle = (360 / rhythm.cells) * cell_index(scale, rhythm, elapsed)
        angles.append(angle + scale.angle_offset + MAP_BASELINE)
    return angles
