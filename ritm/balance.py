"""
Balance Aggregator — combines the four macro scales into balance scores.

  full      = Σ_j (motor + physical + sensory + analytical)_j / divisor_j
  basic     = Σ_j (motor + physical)_j / divisor_j
  reactive  = Σ_j (sensory + analytical)_j / divisor_j

with divisor_j = (4 - j) * 2 → 8, 6, 4, 2, so MACRO 1 (the shortest period)
weighs the most. Scores are rounded half up and are NOT clamped to 0..100.
"""
import math
from functools import lru_cache

from loguru import logger

import config
from ritm.cycle_sampler import sample_cells
from ritm.tables import MACRO_SCALES, RhythmCategory

# Per-rhythm weights of the macro scales. 0.166 is the literal constant, not 1/6.
SCALE_WEIGHTS = (0.125, 0.166, 0.25, 0.5)


def round_half_up(value: float) -> int:
    """Round .5 towards +inf (not banker's rounding)."""
    return math.floor(value + 0.5)


def _divisor(scale_index: int) -> int:
    return (4 - scale_index) * 2


@lru_cache(maxsize=4096)
def macro_cells(days: int) -> tuple:
    """Energy cells of MACRO 3.5 .. MACRO 1 for an elapsed-day count."""
    return tuple(tuple(sample_cells(scale, days)) for scale in MACRO_SCALES)


def _weighted_sum(days: int, rhythms) -> float:
    total = 0
    for scale_index, cells in enumerate(macro_cells(days)):
        part = 0
        for rhythm in rhythms:
            part += cells[rhythm]
        total += part / _divisor(scale_index)
    return total


def full_balance(days: int) -> int:
    return round_half_up(_weighted_sum(days, tuple(RhythmCategory)))


def basic_balance(days: int) -> int:
    return round_half_up(_weighted_sum(days, (RhythmCategory.MOTOR, RhythmCategory.PHYSICAL)))


def reactive_balance(days: int) -> int:
    return round_half_up(_weighted_sum(days, (RhythmCategory.SENSORY, RhythmCategory.ANALYTICAL)))


def rhythm_breakdown(days: int) -> dict:
    """
    Per-rhythm level on a 0..~100 scale.

    Returns:
        {"motor": 72, "physical": 48, "sensory": 32, "analytical": 24}
    """
    cells = macro_cells(days)
    result = {}
    for rhythm in RhythmCategory:
        total = 0
        for scale_index, weight in enumerate(SCALE_WEIGHTS):
            total += cells[scale_index][rhythm] * weight
        result[rhythm.key] = round_half_up(total) * 4
    return result


def balance_level(score: float) -> str:
    for lower, level in config.BALANCE_LEVELS:
        if score >= lower:
            return level
    return config.BALANCE_LEVEL_FLOOR


def balance_report(days: int) -> dict:
    full = full_balance(days)
    report = {
        "full": full,
        "basic": basic_balance(days),
        "reactive": reactive_balance(days),
        "level": balance_level(full),
        "rhythms": rhythm_breakdown(days),
    }
    logger.debug(f"Balance @ day {days}: {report}")
    return report


def breakdown_window(days: int, width: int) -> list:
    """
    Rhythm breakdown for `width` consecutive days centred on `days`.

    Offsets run from -width//2. Days before the origin give empty cells unless
    the day is a whole multiple of a row period, where the truncated modulo
    lands on the first cell.

    Returns:
        [{"offset": -7, "day": 93, "motor": .., ...}, ...]
    """
    if width not in config.BREAKDOWN_WINDOW_DAYS:
        raise ValueError(f"Window width must be one of {config.BREAKDOWN_WINDOW_DAYS}, got {width}")
    rows = []
    for i in range(width):
        offset = i - width // 2
        day = days + offset
        rows.append({"offset": offset, "day": day, **rhythm_breakdown(day)})
    return rows
