"""
Snapshot — every indicator for one (origin, target) pair in a single call.

This is what the console report and the periodic "now" tick render.
"""
from datetime import datetime

from loguru import logger

from ritm.activity import activity_windows
from ritm.balance import balance_report
from ritm.cycle_sampler import elapsed_for
from ritm.phase_angles import map_angles, marker_angles
from ritm.risk import risk_marks, risk_score
from ritm.tables import TIME_SCALES
from ritm.time_basis import elapsed_breakdown, elapsed_days, elapsed_seconds, to_app_time


def build_snapshot(origin: datetime, target: datetime) -> dict:
    """
    Returns:
        {
          "origin": datetime, "target": datetime,
          "elapsed_days": int, "elapsed_seconds": int,
          "passed": {"days", "hours", "minutes"},
          "balance": {"full", "basic", "reactive", "level", "rhythms"},
          "risk": int, "risk_marks": int,
          "markers": {"sun", "moon", "earth"},
          "maps": {"MACRO 3.5": [4 angles], ...},
          "activities": {category: [ActivityWindow, ...]},
        }
    """
    origin = to_app_time(origin)
    target = to_app_time(target)
    days = elapsed_days(origin, target)
    risk = risk_score(days, target)

    snapshot = {
        "origin": origin,
        "target": target,
        "elapsed_days": days,
        "elapsed_seconds": elapsed_seconds(origin, target),
        "passed": elapsed_breakdown(origin, target),
        "balance": balance_report(days),
        "risk": risk,
        "risk_marks": risk_marks(risk),
        "markers": marker_angles(target),
        "maps": {
            scale.name: map_angles(scale, elapsed_for(scale, origin, target))
            for scale in TIME_SCALES
        },
        "activities": activity_windows(origin, target),
    }
    logger.debug(
        f"Snapshot {target.isoformat()} | day {days} | "
        f"full {snapshot['balance']['full']} ({snapshot['balance']['level']}) | risk {risk}"
    )
    return snapshot
