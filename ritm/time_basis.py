"""
Time Basis — elapsed counts between an origin (birth) and a target instant.

All instants are pinned to the application offset (UTC+5) before any
arithmetic, so the same pair of wall-clock values gives the same counts on
every machine regardless of the zone they were stored with.
"""
import math
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

import config

_SECOND = timedelta(seconds=1)
_MILLISECOND = timedelta(milliseconds=1)


# ── Zone handling ──────────────────────────────────────────────────────────────

def to_app_time(dt: datetime) -> datetime:
    """Keep the wall-clock of `dt` and attach the application offset."""
    return dt.replace(tzinfo=config.APP_TZ)


def app_now() -> datetime:
    """Current instant converted into the application offset."""
    return datetime.now(config.APP_TZ)


def start_of_day(dt: datetime) -> datetime:
    return to_app_time(dt).replace(hour=0, minute=0, second=0, microsecond=0)


# ── Elapsed counts ─────────────────────────────────────────────────────────────

def elapsed_days(origin: datetime, target: datetime) -> int:
    """
    Whole calendar days from origin to target, midnight to midnight.

    Birth time of day is ignored: 23:59 → 00:01 the next day counts as 1.
    Negative differences clamp to 0.
    """
    diff = (start_of_day(target) - start_of_day(origin)).days
    return diff if diff > 0 else 0


def elapsed_seconds(origin: datetime, target: datetime) -> int:
    """Floor of the raw second difference, clamped to 0."""
    diff = (to_app_time(target) - to_app_time(origin)) // _SECOND
    return diff if diff > 0 else 0


def elapsed_millis(origin: datetime, target: datetime) -> int:
    """Signed millisecond difference (not clamped; used by the activity cycles)."""
    return (to_app_time(target) - to_app_time(origin)) // _MILLISECOND


def elapsed_breakdown(origin: datetime, target: datetime) -> dict:
    """
    Time passed as {days, hours, minutes} for the "passed" caption.

    Signed: a target before the origin gives negative parts, with the minutes
    floored (1d 2h 3.5m before → -1, -2, -4).
    """
    delta = to_app_time(target) - to_app_time(origin)
    sign = -1 if delta < timedelta(0) else 1
    days, rest = divmod(abs(delta), timedelta(days=1))
    hours, rest = divmod(rest, timedelta(hours=1))
    return {
        "days": sign * days,
        "hours": sign * hours,
        "minutes": math.floor(sign * (rest / timedelta(minutes=1))),
    }


# ── Navigation ─────────────────────────────────────────────────────────────────

def step_target(target: datetime, days: int = 0, months: int = 0) -> datetime:
    """
    Move the target by whole days and/or months.

    Month steps clamp to the last day of a shorter month (Jan 31 + 1 month →
    Feb 28/29), matching calendar navigation in the dashboard.
    """
    return to_app_time(target) + relativedelta(months=months, days=days)
