"""
Activity Scheduler — recurring windows for six activity categories.

Each category repeats on its own cycle counted from the origin instant. A
cycle is cut into 28 equal slots of the category's period and a fixed
selection of slots becomes that category's windows.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta

import config
from ritm.time_basis import elapsed_millis, to_app_time


@dataclass(frozen=True)
class ActivityWindow:
    category: str
    start: datetime
    end: datetime
    is_active: bool


def _slot_selected(category: str, n: int) -> bool:
    if category == "digestion":
        return n in config.DIGESTION_SLOTS
    if category == "sexual":
        return n == 1
    if category == "anaerobic":
        return n % 4 == 0
    return n % 2 == 0


def cycle_start(origin: datetime, target: datetime, cycle_ms: int) -> datetime:
    """Start of the cycle that contains `target`; may precede the origin."""
    millis = elapsed_millis(origin, target)
    return to_app_time(origin) + timedelta(milliseconds=(millis // cycle_ms) * cycle_ms)


def category_windows(category: str, origin: datetime, target: datetime) -> list:
    settings = config.ACTIVITY_CONFIG[category]
    period = timedelta(milliseconds=settings["period"])
    target = to_app_time(target)

    slot_start = cycle_start(origin, target, settings["cycle"])
    if category == "sexual":
        slot_start += period * config.SEXUAL_PERIOD_OFFSET

    windows = []
    for n in range(1, config.ACTIVITY_SLOTS + 1):
        if _slot_selected(category, n):
            end = slot_start + period
            windows.append(ActivityWindow(
                category=category,
                start=slot_start,
                end=end,
                is_active=slot_start <= target <= end,
            ))
        slot_start += period
    return windows


def activity_windows(origin: datetime, target: datetime) -> dict:
    """
    Windows of the current cycle for every category.

    Returns:
        {"digestion": [ActivityWindow, ...], "aerobic": [...], ...}
    """
    return {
        category: category_windows(category, origin, target)
        for category in config.ACTIVITY_CONFIG
    }


def active_activities(origin: datetime, target: datetime) -> list:
    """Categories with a window covering the target."""
    return [
        category
        for category, windows in activity_windows(origin, target).items()
        if any(w.is_active for w in windows)
    ]
