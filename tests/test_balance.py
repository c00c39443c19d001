import pytest

from ritm.balance import (
    balance_level,
    balance_report,
    basic_balance,
    breakdown_window,
    full_balance,
    reactive_balance,
    rhythm_breakdown,
    round_half_up,
)
from ritm.tables import MACRO_SCALES


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(44.875) == 45
    assert round_half_up(-0.5) == 0


def test_day_zero_matches_first_column_of_every_row():
    expected = 0
    for j, scale in enumerate(MACRO_SCALES):
        expected += sum(row[0] for row in scale.table) / ((4 - j) * 2)
    assert full_balance(0) == round_half_up(expected) == 45


def test_day_zero_regression_constants():
    assert basic_balance(0) == 30
    assert reactive_balance(0) == 15
    assert rhythm_breakdown(0) == {"motor": 72, "physical": 48, "sensory": 32, "analytical": 24}


def test_day_ten():
    assert full_balance(10) == 51
    assert basic_balance(10) == 43
    assert reactive_balance(10) == 8


@pytest.mark.parametrize("score,level", [
    (0, "CRITICAL"), (29, "CRITICAL"), (30, "LOW"), (44, "LOW"),
    (45, "OPTIMAL"), (59, "OPTIMAL"), (60, "HIGH"), (74, "HIGH"),
    (75, "SUPER_HIGH"), (130, "SUPER_HIGH"),
])
def test_balance_level(score, level):
    assert balance_level(score) == level


def test_report():
    report = balance_report(0)
    assert report["full"] == 45
    assert report["level"] == "OPTIMAL"
    assert report["rhythms"]["motor"] == 72


def test_deterministic():
    assert full_balance(9876) == full_balance(9876)
    assert rhythm_breakdown(9876) == rhythm_breakdown(9876)


def test_breakdown_window_centred():
    rows = breakdown_window(100, 14)
    assert len(rows) == 14
    assert rows[0]["offset"] == -7 and rows[-1]["offset"] == 6
    assert rows[7]["day"] == 100
    assert {k: rows[7][k] for k in ("motor", "physical", "sensory", "analytical")} == rhythm_breakdown(100)


def test_breakdown_window_before_origin():
    rows = breakdown_window(0, 28)
    assert rows[0]["day"] == -14
    # -14 is a whole MACRO 1 Motor period: truncated modulo lands on cell 0
    assert rows[0]["motor"] == 32
    assert rows[0]["physical"] == rows[0]["sensory"] == rows[0]["analytical"] == 0
    assert rows[1]["motor"] == 0


def test_breakdown_window_off_period_days_are_empty():
    rows = breakdown_window(0, 14)
    assert rows[0]["day"] == -7
    assert {k: rows[0][k] for k in ("motor", "physical", "sensory", "analytical")} == {
        "motor": 0, "physical": 0, "sensory": 0, "analytical": 0,
    }


def test_breakdown_window_rejects_odd_width():
    with pytest.raises(ValueError):
        breakdown_window(0, 10)
