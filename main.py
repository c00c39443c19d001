"""
Ritmxoid — console report.
Computes the rhythm snapshot for one profile and renders it; with --watch the
target follows the clock and the report refreshes on a fixed tick.

Run:
    python main.py --birth 1990-01-01T12:00
    python main.py --birth 1990-01-01T12:00 --target 2026-03-20T09:00
    python main.py --profile Alice --watch          # from PROFILES_PATH
    python main.py --birth 1990-01-01T12:00 --step-months -1 --window 28
    python main.py --birth 1990-01-01T12:00 --compare 1985-06-15T08:30
"""
import argparse
import os
import sys
from datetime import datetime

from apscheduler.schedulers.blocking import BlockingScheduler
from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

load_dotenv()

import config
from ritm.balance import breakdown_window
from ritm.compatibility import compatibility
from ritm.profiles import find_profile, load_profiles, parse_instant
from ritm.snapshot import build_snapshot
from ritm.time_basis import app_now, step_target

console = Console()


# ── Console display ────────────────────────────────────────────────────────────

def display_snapshot(snap: dict, title: str = ""):
    bal = snap["balance"]
    level = bal["level"]
    color = config.LEVEL_COLORS.get(level, "white")
    passed = snap["passed"]

    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Target",     snap["target"].strftime("%Y-%m-%d %H:%M (UTC+5)"))
    table.add_row("Passed",     f"{passed['days']}d {passed['hours']}h {passed['minutes']}m")
    table.add_row("Days",       str(snap["elapsed_days"]))
    table.add_row("Seconds",    f"{snap['elapsed_seconds']:,}")
    table.add_row("", "")
    table.add_row("Balance",    f"[{color}]{bal['full']}  {level}[/{color}]")
    table.add_row("Basic",      str(bal["basic"]))
    table.add_row("Reactive",   str(bal["reactive"]))
    rh = bal["rhythms"]
    table.add_row("Rhythms",    "  ".join(
        f"[{config.RHYTHM_COLORS[k]}]{k[0].upper()} {v}[/{config.RHYTHM_COLORS[k]}]" for k, v in rh.items()
    ))
    table.add_row("", "")
    marks = "⚡" * snap["risk_marks"] or "-"
    table.add_row("Risk",       f"{snap['risk']}  {marks}")
    mk = snap["markers"]
    table.add_row("Sun",        f"{mk['sun']:.2f}°")
    table.add_row("Moon",       f"{mk['moon']:.2f}°")
    table.add_row("Earth",      f"{mk['earth']:.2f}°")

    console.print(Panel(
        table,
        title=f"[bold]Ritmxoid — {title}[/bold]" if title else "[bold]Ritmxoid[/bold]",
        border_style=color,
        expand=False,
    ))

    maps = Table(box=box.SIMPLE, title="Map angles")
    maps.add_column("Scale")
    for name in ("Motor", "Physical", "Sensory", "Analytical"):
        maps.add_column(name, justify="right")
    for scale_name, angles in snap["maps"].items():
        maps.add_row(scale_name, *(f"{a:.2f}" for a in angles))
    console.print(maps)

    acts = Table(box=box.SIMPLE, title="Activities (current cycle)")
    acts.add_column("Activity")
    acts.add_column("Windows", justify="right")
    acts.add_column("Now / next")
    for category, windows in snap["activities"].items():
        name = config.ACTIVITY_CONFIG[category]["name"]
        active = next((w for w in windows if w.is_active), None)
        upcoming = next((w for w in windows if w.start > snap["target"]), None)
        if active:
            status = f"[green]ACTIVE until {active.end:%H:%M}[/green]"
        elif upcoming:
            status = f"next {upcoming.start:%d.%m %H:%M}"
        else:
            status = "[dim]cycle done[/dim]"
        acts.add_row(name, str(len(windows)), status)
    console.print(acts)


def display_window(rows: list, width: int):
    table = Table(box=box.SIMPLE, title=f"Rhythm breakdown — {width} days")
    table.add_column("Offset", justify="right")
    table.add_column("Day", justify="right")
    for key, color in config.RHYTHM_COLORS.items():
        table.add_column(key.capitalize(), justify="right", style=color)
    for row in rows:
        style = "bold" if row["offset"] == 0 else None
        table.add_row(
            f"{row['offset']:+d}",
            str(row["day"]),
            *(str(row[key]) for key in config.RHYTHM_COLORS),
            style=style,
        )
    console.print(table)


def display_compatibility(result: dict, title: str, other: str):
    color = config.BAND_COLORS.get(result["band"], "white")
    console.print(
        f"Compatibility {title} ↔ {other}: "
        f"index [bold]{result['index']}[/bold]  [{color}]{result['band']}[/{color}]"
    )


# ── Entry point ────────────────────────────────────────────────────────────────

def resolve_origin(args) -> tuple:
    if args.birth:
        return parse_instant(args.birth), args.birth
    profiles = load_profiles(config.PROFILES_PATH)
    profile = find_profile(profiles, args.profile or config.ACTIVE_PROFILE)
    return profile.birth, profile.name


def resolve_target(args) -> datetime:
    """--target (or now), moved by --step-days / --step-months."""
    target = parse_instant(args.target) if args.target else app_now()
    if args.step_days or args.step_months:
        target = step_target(target, days=args.step_days, months=args.step_months)
    return target


def main():
    parser = argparse.ArgumentParser(description="Rhythm snapshot for a birth instant")
    parser.add_argument("--birth", type=str, default=None, help="Birth date/time (wall-clock, UTC+5)")
    parser.add_argument("--profile", type=str, default=None, help="Profile id or name from PROFILES_PATH")
    parser.add_argument("--target", type=str, default=None, help="Evaluation date/time (default: now)")
    parser.add_argument("--step-days", type=int, default=0, help="Move the target by N days")
    parser.add_argument("--step-months", type=int, default=0, help="Move the target by N months")
    parser.add_argument("--window", type=int, default=None, choices=config.BREAKDOWN_WINDOW_DAYS,
                        help="Also print the rhythm breakdown for N days around the target")
    parser.add_argument("--compare", type=str, default=None, help="Second birth date/time for a compatibility index")
    parser.add_argument("--watch", action="store_true", help="Refresh every WATCH_INTERVAL_SECONDS")
    args = parser.parse_args()

    try:
        origin, title = resolve_origin(args)
        target = resolve_target(args)
        other = parse_instant(args.compare) if args.compare else None
    except (OSError, ValueError) as e:
        logger.error(f"Cannot start: {e}")
        sys.exit(1)

    logger.info(f"Origin {origin.isoformat()} ({title})")
    snap = build_snapshot(origin, target)
    display_snapshot(snap, title)
    if args.window:
        display_window(breakdown_window(snap["elapsed_days"], args.window), args.window)
    if other is not None:
        display_compatibility(compatibility(origin, other, target), title, args.compare)

    if not args.watch:
        return

    def tick():
        display_snapshot(build_snapshot(origin, app_now()), title)

    scheduler = BlockingScheduler(timezone="UTC")
    scheduler.add_job(
        tick,
        trigger="interval",
        seconds=config.WATCH_INTERVAL_SECONDS,
        id="ritm_now_tick",
        max_instances=1,
        coalesce=True,
    )
    logger.info(f"Watching — refresh every {config.WATCH_INTERVAL_SECONDS}s. Press Ctrl+C to stop.")

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Stopped by user.")


if __name__ == "__main__":
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=config.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    os.makedirs(config.LOG_DIR, exist_ok=True)
    logger.add(
        os.path.join(config.LOG_DIR, "ritm_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="30 days",
        level="DEBUG",
    )

    main()
