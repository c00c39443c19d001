"""
Yearly calendar — full balance and risk for every day of a calendar year.

One row per day at local midnight (application offset), the same series the
yearly calendar export colours and marks.
"""
from datetime import datetime

import numpy as np
import pandas as pd

from ritm.balance import balance_level, full_balance
from ritm.risk import risk_marks, risk_score
from ritm.time_basis import elapsed_days, to_app_time


def year_calendar(origin: datetime, year: int) -> pd.DataFrame:
    """
    Returns:
        DataFrame indexed by date with columns
        elapsed_days, full_balance, level, risk, risk_marks
    """
    rows = []
    for day in pd.date_range(f"{year}-01-01", f"{year}-12-31", freq="D"):
        current = to_app_time(day.to_pydatetime())
        dg = elapsed_days(origin, current)
        balance = full_balance(dg)
        risk = risk_score(dg, current)
        rows.append({
            "date": current.date(),
            "elapsed_days": dg,
            "full_balance": balance,
            "level": balance_level(balance),
            "risk": risk,
            "risk_marks": risk_marks(risk),
        })
    return pd.DataFrame(rows).set_index("date")


def monthly_summary(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Mean balance, peak risk, marked-day count and risk index per month.

    The risk index is the sum of the daily warning marks (3 / 2 / 1) over the month.
    """
    months = np.array([d.month for d in frame.index])
    return (
        frame.assign(month=months, marked=frame["risk_marks"] > 0)
        .groupby("month")
        .agg(
            mean_balance=("full_balance", "mean"),
            max_risk=("risk", "max"),
            marked_days=("marked", "sum"),
            risk_index=("risk_marks", "sum"),
        )
        .round({"mean_balance": 1})
    )
