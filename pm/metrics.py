"""
Summary metrics over one projection.

Answers the questions a chart leaves implicit: how long the capital lasts,
where it peaks, and what is left at the horizon.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np
import pandas as pd

from core.utils import require_columns


def compute_projection_metrics(
    projection: pd.DataFrame,
    *,
    horizon: Optional[pd.Timestamp] = None,
    period_col: str = "period",
    date_col: str = "date",
) -> Dict:
    """
    Compute headline metrics from engine.projection.ProjectionResult.to_frame().

    Returns
    -------
    Dict with:
        months_projected, initial_capital, final_capital, peak_capital, peak_date,
        min_capital, depleted, depletion_date, depletion_age, final_date, final_age,
        reached_horizon

    horizon defaults to projection.attrs["horizon"] (set by to_frame()); without
    one, reached_horizon is False.
    """
    require_columns(projection, [period_col, date_col, "age", "end_capital"])
    if horizon is None:
        horizon = projection.attrs.get("horizon")
    if horizon is not None:
        horizon = pd.Timestamp(horizon)

    seed = projection.loc[projection[period_col] == 0, "end_capital"]
    initial_capital = float(seed.iloc[0]) if len(seed) else np.nan

    months = projection.loc[projection[period_col] >= 1].sort_values(period_col)
    if months.empty:
        return {
            "months_projected": 0,
            "initial_capital": initial_capital,
            "final_capital": initial_capital,
            "peak_capital": initial_capital,
            "peak_date": None,
            "min_capital": initial_capital,
            "depleted": False,
            "depletion_date": None,
            "depletion_age": None,
            "final_date": None,
            "final_age": None,
            "reached_horizon": False,
        }

    capital = months["end_capital"].to_numpy(dtype=float)
    dates = months[date_col].to_numpy()
    ages = months["age"].to_numpy()

    negative = np.flatnonzero(capital < 0)
    depleted = negative.size > 0
    i_peak = int(np.argmax(capital))

    return {
        "months_projected": int(len(months)),
        "initial_capital": initial_capital,
        "final_capital": float(capital[-1]),
        "peak_capital": float(capital[i_peak]),
        "peak_date": pd.Timestamp(dates[i_peak]),
        "min_capital": float(capital.min()),
        "depleted": bool(depleted),
        "depletion_date": pd.Timestamp(dates[negative[0]]) if depleted else None,
        "depletion_age": int(ages[negative[0]]) if depleted else None,
        "final_date": pd.Timestamp(dates[-1]),
        "final_age": int(ages[-1]),
        "reached_horizon": bool(
            not depleted and horizon is not None and pd.Timestamp(dates[-1]) == horizon
        ),
    }
