from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def month_start(value) -> Optional[pd.Timestamp]:
    """Normalize a date-like value to the first day of its month (None stays None)."""
    if value is None:
        return None
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        return None
    return pd.Timestamp(year=ts.year, month=ts.month, day=1)


def add_months(month: pd.Timestamp, n_months: int) -> pd.Timestamp:
    return pd.Timestamp(pd.Timestamp(month) + relativedelta(months=n_months))


def whole_years_between(start: pd.Timestamp, end: pd.Timestamp) -> int:
    """Complete years from start to end (negative when end precedes start)."""
    return relativedelta(pd.Timestamp(end).to_pydatetime(), pd.Timestamp(start).to_pydatetime()).years


def month_label(month: pd.Timestamp, birth_month: pd.Timestamp) -> str:
    """Chart label "YYYY-MM (age)" for a projected month."""
    return f"{pd.Timestamp(month):%Y-%m} ({whole_years_between(birth_month, month)})"
