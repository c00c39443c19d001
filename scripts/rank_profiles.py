"""
Rank profiles — sort everyone in PROFILES_PATH by balance for one day.

Usage:
    python scripts/rank_profiles.py
    python scripts/rank_profiles.py --mode reactive --target 2026-03-20
    python scripts/rank_profiles.py --groups
"""
import argparse
import sys
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.table import Table
from rich import box

sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from ritm.compatibility import rank_groups, rank_profiles
from ritm.profiles import load_profiles, parse_instant
from ritm.time_basis import app_now

logger.remove()
logger.add(sys.stderr, level="WARNING")


def main():
    parser = argparse.ArgumentParser(description="Rank profiles by balance score")
    parser.add_argument("--mode", choices=config.RANKING_MODES, default="full")
    parser.add_argument("--target", type=str, default=None, help="Evaluation date/time (default: now)")
    parser.add_argument("--groups", action="store_true", help="Rank teams by member average")
    parser.add_argument("--profiles", type=str, default=config.PROFILES_PATH)
    args = parser.parse_args()

    try:
        profiles = load_profiles(args.profiles)
        target = parse_instant(args.target) if args.target else app_now()
    except (OSError, ValueError) as e:
        logger.error(f"Cannot rank: {e}")
        sys.exit(1)

    table = Table(box=box.SIMPLE, title=f"{args.mode.upper()} balance — {target:%Y-%m-%d}")
    table.add_column("#", justify="right")
    if args.groups:
        table.add_column("Team")
        table.add_column("Members", justify="right")
        table.add_column("Score", justify="right")
        for pos, g in enumerate(rank_groups(profiles, target, args.mode), 1):
            table.add_row(str(pos), g["team"], str(g["members"]), str(g["score"]))
    else:
        table.add_column("Name")
        table.add_column("Team")
        table.add_column("Score", justify="right")
        for pos, r in enumerate(rank_profiles(profiles, target, args.mode), 1):
            table.add_row(str(pos), r["name"], r["team"] or "", str(r["score"]))
    Console().print(table)


if __name__ == "__main__":
    main()
