"""
Cycle Sampler — reads one energy cell per rhythm category for a time scale.
"""
import math
from datetime import datetime
from typing import Union

from ritm.tables import RhythmCategory, TimeScale, get_scale
from ritm.time_basis import elapsed_days, elapsed_seconds

Scale = Union[TimeScale, int]


def resolve_scale(scale: Scale) -> TimeScale:
    return scale if isinstance(scale, TimeScale) else get_scale(scale)


def cell_index(scale: Scale, rhythm: RhythmCategory, elapsed: float) -> int:
    """
    Row position for `rhythm` at `elapsed` (days for macro, seconds otherwise).

    Uses truncated modulo: a negative elapsed value gives a negative position
    that falls outside the row, except for whole multiples of the row period,
    which give -0.0 and so position 0.
    """
    scale = resolve_scale(scale)
    cells = rhythm.cells
    if scale.is_micro:
        period = scale.base_period * scale.ritm_multiplier[rhythm]
        return math.floor(math.fmod(elapsed / period, 1) * cells)
    return math.floor(math.fmod(elapsed, scale.base_period * cells) / scale.base_period)


def sample_cells(scale: Scale, elapsed: float) -> list:
    """Energy cells [motor, physical, sensory, analytical]; 0 for positions off the row."""
    scale = resolve_scale(scale)
    table = scale.table
    energy = []
    for rhythm in RhythmCategory:
        idx = cell_index(scale, rhythm, elapsed)
        row = table[rhythm]
        energy.append(row[idx] if 0 <= idx < len(row) else 0)
    return energy


def elapsed_for(scale: Scale, origin: datetime, target: datetime) -> int:
    """Elapsed days for macro scales, elapsed seconds for zero/micro scales."""
    if resolve_scale(scale).is_micro:
        return elapsed_seconds(origin, target)
    return elapsed_days(origin, target)


def sample_for(scale: Scale, origin: datetime, target: datetime) -> list:
    return sample_cells(scale, elapsed_for(scale, origin, target))
