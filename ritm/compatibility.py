"""
Compatibility & ranking — compare profiles against a shared target instant.

  compatibility index = |elapsed_days(p1) - elapsed_days(p2)| mod 14

and the index falls into one of three bands (RESONANT / OPTIMAL / POLAR).
Ranking scores every profile (or every team, by member average) with one of
the balance scores and sorts descending.
"""
from collections import defaultdict
from datetime import datetime

from loguru import logger

import config
from ritm.balance import basic_balance, full_balance, reactive_balance, round_half_up
from ritm.time_basis import elapsed_days

_SCORERS = {
    "full": full_balance,
    "basic": basic_balance,
    "reactive": reactive_balance,
}


def compatibility_index(origin_a: datetime, origin_b: datetime, target: datetime) -> int:
    delta = elapsed_days(origin_a, target) - elapsed_days(origin_b, target)
    return abs(delta) % config.COMPATIBILITY_CYCLE


def compatibility_band(index: int) -> str:
    for band, residues in config.COMPATIBILITY_BANDS.items():
        if index in residues:
            return band
    raise ValueError(f"Compatibility index out of range: {index}")


def compatibility(origin_a: datetime, origin_b: datetime, target: datetime) -> dict:
    index = compatibility_index(origin_a, origin_b, target)
    return {"index": index, "band": compatibility_band(index)}


def _scorer(mode: str):
    if mode not in _SCORERS:
        raise ValueError(f"Unknown ranking mode '{mode}' (expected one of {config.RANKING_MODES})")
    return _SCORERS[mode]


def profile_score(profile, target: datetime, mode: str = "full") -> int:
    return _scorer(mode)(elapsed_days(profile.birth, target))


def rank_profiles(profiles: list, target: datetime, mode: str = "full") -> list:
    """
    Score every profile for `target` and sort descending (ties keep input order).

    Returns:
        [{"id": .., "name": .., "team": .., "score": 61}, ...]
    """
    scorer = _scorer(mode)
    rows = [
        {
            "id": p.id,
            "name": p.name,
            "team": p.team,
            "score": scorer(elapsed_days(p.birth, target)),
        }
        for p in profiles
    ]
    rows.sort(key=lambda r: r["score"], reverse=True)
    return rows


def rank_groups(profiles: list, target: datetime, mode: str = "full") -> list:
    """
    Rank teams by the mean member score (rounded half up).

    Profiles without a team are skipped.

    Returns:
        [{"team": "A", "members": 3, "score": 52}, ...]
    """
    members = defaultdict(list)
    for row in rank_profiles(profiles, target, mode):
        if row["team"]:
            members[row["team"]].append(row["score"])

    groups = [
        {"team": team, "members": len(scores), "score": round_half_up(sum(scores) / len(scores))}
        for team, scores in members.items()
    ]
    groups.sort(key=lambda g: g["score"], reverse=True)
    logger.debug(f"Ranked {len(groups)} groups by {mode} balance")
    return groups
