"""
Fractal lookup tables and time-scale descriptors.

Two fixed 4-row tables (row lengths 14, 28, 42, 49) hold the energy
waveform of each rhythm category. STANDARD is the base profile, SHIFTED_PHASE
is the same family rotated in phase. The literal values are a data contract:
scores are only comparable across implementations if they are reproduced
exactly.
"""
from dataclasses import dataclass
from enum import IntEnum


class RhythmCategory(IntEnum):
    MOTOR = 0
    PHYSICAL = 1
    SENSORY = 2
    ANALYTICAL = 3

    @property
    def cells(self) -> int:
        return CELL_COUNTS[self]

    @property
    def key(self) -> str:
        return self.name.lower()


CELL_COUNTS = (14, 28, 42, 49)

STANDARD = (
    (16, 8, 4, 0, 4, 8, 16, 24, 32, 40, 48, 40, 32, 24),
    (12, 10, 8, 6, 4, 2, 0, 0, 2, 4, 6, 8, 10, 12, 12, 14, 16, 18, 20, 22, 24, 24, 22, 20, 18, 16, 14, 12),
    (8, 7, 6, 5, 4, 3, 2, 1.5, 1, 0.5, 0, 0.5, 1, 1.5, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 13.5, 14, 14.5, 15, 15.5, 16, 15.5, 15, 14.5, 14, 13.5, 13, 12, 11, 10, 9),
    (6, 5.5, 5, 4.5, 4, 3.5, 3, 2.5, 2, 1.5, 1, 0.5, 0, 0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 4.5, 5, 5.5, 6, 6.5, 7, 7.5, 8, 8.5, 9, 9.5, 10, 10.5, 11, 11.5, 12, 11.5, 11, 10.5, 10, 9.5, 9, 8.5, 8, 7.5, 7, 6.5, 6),
)

SHIFTED_PHASE = (
    (24, 32, 40, 48, 40, 32, 24, 16, 8, 4, 0, 4, 8, 16),
    (12, 14, 16, 18, 20, 22, 24, 24, 22, 20, 18, 16, 14, 12, 12, 10, 8, 6, 4, 2, 0, 0, 2, 4, 6, 8, 10, 12),
    (9, 10, 11, 12, 13, 13.5, 14, 14.5, 15, 15.5, 16, 15.5, 15, 14.5, 14, 13.5, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1.5, 1, 0.5, 0, 0.5, 1, 1.5, 2, 3, 4, 5, 6, 7, 8),
    (6, 6.5, 7, 7.5, 8, 8.5, 9, 9.5, 10, 10.5, 11, 11.5, 12, 11.5, 11, 10.5, 10, 9.5, 9, 8.5, 8, 7.5, 7, 6.5, 6, 5.5, 5, 4.5, 4, 3.5, 3, 2.5, 2, 1.5, 1, 0.5, 0, 0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 4.5, 5, 5.5, 6),
)


# ── Time scales ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TimeScale:
    """
    One of the nine sampling periodicities.

    Macro scales count elapsed days and sample row position directly.
    Zero/micro scales count elapsed seconds and stretch the period of each
    rhythm row by `ritm_multiplier[rhythm_index]`.
    """
    index: int
    name: str
    kind: str                        # MACRO | ZERO | MICRO
    base_period: float
    uses_shifted_table: bool
    ritm_multiplier: tuple = (1, 1, 1, 1)
    angle_offset: float = 0.0

    @property
    def is_micro(self) -> bool:
        return self.kind != "MACRO"

    @property
    def table(self) -> tuple:
        return SHIFTED_PHASE if self.uses_shifted_table else STANDARD


_MICRO_MULT = (1, 2, 3, 3.5)

TIME_SCALES = (
    TimeScale(0, "MACRO 3.5", "MACRO", 1372,     True,  angle_offset=180.0),
    TimeScale(1, "MACRO 3",   "MACRO", 196,      False),
    TimeScale(2, "MACRO 2",   "MACRO", 14,       False),
    TimeScale(3, "MACRO 1",   "MACRO", 1,        False),
    TimeScale(4, "ZERO",      "ZERO",  86400,    True,  _MICRO_MULT, angle_offset=180.0),
    TimeScale(5, "MICRO 1",   "MICRO", 6171.428, False, _MICRO_MULT),
    TimeScale(6, "MICRO 2",   "MICRO", 440.816,  False, _MICRO_MULT),
    TimeScale(7, "MICRO 3",   "MICRO", 31.486,   False, _MICRO_MULT),
    TimeScale(8, "MICRO 3.5", "MICRO", 2.24,     True,  _MICRO_MULT),
)

MACRO_SCALES = TIME_SCALES[:4]


def get_scale(scale_index: int) -> TimeScale:
    if not 0 <= scale_index < len(TIME_SCALES):
        raise ValueError(f"Unknown time scale index: {scale_index}")
    return TIME_SCALES[scale_index]
