from datetime import datetime

from ritm.snapshot import build_snapshot
from ritm.tables import TIME_SCALES


def test_snapshot_contents(origin):
    snap = build_snapshot(origin, origin)
    assert snap["elapsed_days"] == 0
    assert snap["elapsed_seconds"] == 0
    assert snap["balance"]["full"] == 45
    assert list(snap["maps"]) == [s.name for s in TIME_SCALES]
    assert snap["maps"]["MACRO 1"] == [90, 90, 90, 90]
    assert set(snap["activities"]) == {"digestion", "aerobic", "anaerobic", "sensory", "sexual", "analytic"}
    assert snap["risk"] >= 100


def test_snapshot_deterministic(origin):
    target = datetime(2026, 10, 19, 15, 30)
    assert build_snapshot(origin, target) == build_snapshot(origin, target)
