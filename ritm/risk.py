"""
Risk Assessor — additive score of cycle-boundary coincidences plus lunar and
seasonal windows.

For every rhythm category with L cells three nested cycles are checked
(daily, fortnight = 14 days per cell, macro = 196 days per cell). A cycle
sitting on its first or last cell adds that category's coefficient.
"""
from datetime import datetime

from loguru import logger

import config
from ritm.phase_angles import day_of_year, moon_angle
from ritm.tables import RhythmCategory

# (days per cell, coefficients) per nested cycle
_NESTED_CYCLES = (
    (1,   config.RISK_DAILY_COEFF),
    (14,  config.RISK_FORTNIGHT_COEFF),
    (196, config.RISK_MACRO_COEFF),
)


def category_risk(days: int, rhythm: RhythmCategory) -> int:
    cells = rhythm.cells
    last = cells - 1
    risk = 0
    for span, coeff in _NESTED_CYCLES:
        position = (days % (span * cells)) // span
        if position == 0 or position == last:
            risk += coeff[rhythm]
    return risk


def cycle_risk(days: int) -> int:
    return sum(category_risk(days, rhythm) for rhythm in RhythmCategory)


def moon_risk(angle: float) -> int:
    """MOON_RISK when the moon is within the orb of full, first or last quarter."""
    angle %= 360
    orb = config.MOON_RISK_ORB
    for center in config.MOON_RISK_ANGLES:
        if center - orb < angle < center + orb or center - orb < angle - 360 < center + orb:
            return config.MOON_RISK
    return 0


def seasonal_risk(target: datetime) -> int:
    ordinal = day_of_year(target)
    for first, last in config.SEASONAL_RISK_WINDOWS:
        if first <= ordinal <= last:
            return config.SEASONAL_RISK
    return 0


def risk_score(days: int, target: datetime) -> int:
    cycles = cycle_risk(days)
    moon = moon_risk(moon_angle(target))
    season = seasonal_risk(target)
    logger.debug(f"Risk @ day {days}: cycles={cycles} moon={moon} season={season}")
    return cycles + moon + season


def risk_marks(score: int) -> int:
    """Number of warning marks (0..3) shown for a risk score."""
    return sum(1 for threshold in config.RISK_MARK_THRESHOLDS if score >= threshold)
