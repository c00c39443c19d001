"""
Year calendar — full balance and risk for every day of a year.

Usage:
    python scripts/year_calendar.py --birth 1990-01-01T12:00 --year 2026
    python scripts/year_calendar.py --birth 1990-01-01T12:00 --year 2026 --out logs/year_2026.csv

Prints a monthly summary; with --out the daily series is saved as CSV.
"""
import argparse
import sys
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.table import Table
from rich import box

sys.path.insert(0, str(Path(__file__).parent.parent))

from ritm.profiles import parse_instant
from ritm.yearly import monthly_summary, year_calendar

logger.remove()
logger.add(sys.stderr, level="WARNING")


def main():
    parser = argparse.ArgumentParser(description="Daily balance / risk series for a calendar year")
    parser.add_argument("--birth", type=str, required=True, help="Birth date/time (wall-clock, UTC+5)")
    parser.add_argument("--year", type=int, required=True, help="Calendar year")
    parser.add_argument("--out", type=str, default=None, help="CSV path for the daily series")
    args = parser.parse_args()

    try:
        origin = parse_instant(args.birth)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    frame = year_calendar(origin, args.year)
    summary = monthly_summary(frame)

    table = Table(box=box.SIMPLE, title=f"{args.year} — born {origin:%Y-%m-%d %H:%M}")
    table.add_column("Month", justify="right")
    table.add_column("Mean balance", justify="right")
    table.add_column("Max risk", justify="right")
    table.add_column("Marked days", justify="right")
    table.add_column("Risk index", justify="right")
    for month, row in summary.iterrows():
        table.add_row(
            str(month),
            f"{row['mean_balance']:.1f}",
            str(int(row["max_risk"])),
            str(int(row["marked_days"])),
            str(int(row["risk_index"])),
        )
    Console().print(table)

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(out)
        print(f"Saved {len(frame)} days to {out}")


if __name__ == "__main__":
    main()
