from argparse import Namespace
from datetime import datetime

import main
from ritm.balance import breakdown_window
from ritm.compatibility import compatibility
from ritm.time_basis import to_app_time


def _args(**kw):
    base = {"birth": None, "profile": None, "target": None, "step_days": 0, "step_months": 0}
    base.update(kw)
    return Namespace(**base)


def test_resolve_target_without_step():
    target = main.resolve_target(_args(target="2026-03-20T09:00"))
    assert target == to_app_time(datetime(2026, 3, 20, 9, 0))


def test_resolve_target_steps_days_and_months():
    target = main.resolve_target(_args(target="2026-01-31T09:00", step_months=1, step_days=1))
    assert target == to_app_time(datetime(2026, 3, 1, 9, 0))
    back = main.resolve_target(_args(target="2026-03-20T09:00", step_days=-20))
    assert back.date().isoformat() == "2026-02-28"


def test_resolve_origin_from_birth():
    origin, title = main.resolve_origin(_args(birth="1990-01-01T12:00"))
    assert origin == to_app_time(datetime(1990, 1, 1, 12, 0))
    assert title == "1990-01-01T12:00"


def test_display_window_lists_every_day():
    rows = breakdown_window(0, 14)
    with main.console.capture() as capture:
        main.display_window(rows, 14)
    out = capture.get()
    assert "14 days" in out
    assert "-7" in out and "+6" in out


def test_display_compatibility_shows_band():
    target = datetime(2026, 3, 20)
    result = compatibility(datetime(1990, 1, 1), datetime(1990, 1, 8), target)
    assert result == {"index": 7, "band": "POLAR"}
    with main.console.capture() as capture:
        main.display_compatibility(result, "A", "B")
    out = capture.get()
    assert "index 7" in out
    assert "POLAR" in out
