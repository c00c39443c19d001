"""
Profile records — read-only loader for the JSON profile list.

Storage and editing of profiles belong to the surrounding application; the
engine only needs each profile's birth instant and optional team.
"""
import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from dateutil.parser import parse as parse_date

from ritm.time_basis import to_app_time


@dataclass(frozen=True)
class Profile:
    id: str
    name: str
    birth: datetime
    team: Optional[str] = None
    is_master: bool = False


def parse_instant(value: str) -> datetime:
    """Parse an ISO-ish string and pin it to the application offset."""
    try:
        return to_app_time(parse_date(value))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date/time '{value}': {e}") from e


def profile_from_dict(raw: dict) -> Profile:
    if "birthDate" not in raw:
        raise ValueError(f"Profile {raw.get('name', raw.get('id', '?'))!r} has no birthDate")
    return Profile(
        id=str(raw.get("id", raw.get("name", ""))),
        name=raw.get("name", ""),
        birth=parse_instant(raw["birthDate"]),
        team=raw.get("teamName") or None,
        is_master=bool(raw.get("isMaster", False)),
    )


def load_profiles(path) -> list:
    with open(Path(path)) as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON list of profiles")
    return [profile_from_dict(item) for item in raw]


def find_profile(profiles: list, key: str = "") -> Profile:
    """Profile by id or name; with no key, the master profile (else the first)."""
    if key:
        for p in profiles:
            if key in (p.id, p.name):
                return p
        raise ValueError(f"Profile '{key}' not found")
    if not profiles:
        raise ValueError("Profile list is empty")
    return next((p for p in profiles if p.is_master), profiles[0])
