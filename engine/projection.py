"""
Deterministic monthly capital projection.

For every month from the one after the as-of month up to and including the
month of the subject's 100th birthday:

    capital[t] = (capital[t-1] + movement) * (1 + rate / 12 / 100)

where rate and movement come from the condition selected for that month
(see conditions.timeline.select_condition). The projection stops early right
after the first month whose capital is negative; that month is kept.

The engine is a pure function: no I/O, no logging, no state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import pandas as pd

from conditions.base import ZERO_CONDITION, Condition
from conditions.timeline import latest_effective
from core.schema import HORIZON_YEARS, MONTHS_PER_YEAR, PROJECTION_COLUMNS
from core.utils import add_months, month_label, month_start, whole_years_between


@dataclass
class ProjectionResult:
    """
    Output of project().

    values[0] is the seed (initial capital); values[k] for k >= 1 is the
    capital at the end of months[k-1], labelled labels[k-1]. Unpacks as
    (labels, values) so it can be fed straight to a chart.
    """

    birth_month: pd.Timestamp
    horizon: Optional[pd.Timestamp] = None
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    months: List[pd.Timestamp] = field(default_factory=list)
    ages: List[int] = field(default_factory=list)
    condition_ids: List[Optional[int]] = field(default_factory=list)
    rates: List[float] = field(default_factory=list)
    movements: List[float] = field(default_factory=list)
    stopped_negative: bool = False
    fallback_months: int = 0  # months governed by the no-effective-condition fallback

    def __iter__(self) -> Iterator[list]:
        yield self.labels
        yield self.values

    def __len__(self) -> int:
        return len(self.labels)

    def to_frame(self) -> pd.DataFrame:
        rows = [{
            "period": 0,
            "date": pd.NaT,
            "label": None,
            "age": None,
            "condition_id": None,
            "rate": None,
            "movement": None,
            "begin_capital": None,
            "end_capital": self.values[0] if self.values else None,
        }]
        for k, month in enumerate(self.months):
            rows.append({
                "period": k + 1,
                "date": month,
                "label": self.labels[k],
                "age": self.ages[k],
                "condition_id": self.condition_ids[k],
                "rate": self.rates[k],
                "movement": self.movements[k],
                "begin_capital": self.values[k],
                "end_capital": self.values[k + 1],
            })
        frame = pd.DataFrame(rows, columns=list(PROJECTION_COLUMNS))
        frame.attrs["horizon"] = self.horizon
        return frame


def project(
    conditions,
    birth_date,
    initial_capital: float,
    as_of_month,
    *,
    fallback_policy: str = "first",
    horizon_years: int = HORIZON_YEARS,
) -> ProjectionResult:
    """
    Project capital month by month until the horizon or until it turns negative.

    Parameters
    ----------
    conditions : iterable of Condition
        Non-empty; input order matters for tie-breaks and the fallback.
    birth_date : date-like
        Only year and month are used.
    initial_capital : float
        Seed value, returned unchanged as values[0].
    as_of_month : date-like
        "Now"; the first projected month is the one after it.
    fallback_policy : str
        "first" (default) or "zero"; see select_condition.
    horizon_years : int
        Years after the birth month at which the projection ends (inclusive).
    """
    conditions = tuple(conditions)
    if not conditions:
        raise ValueError("No conditions provided.")
    if fallback_policy not in ("first", "zero"):
        raise ValueError(f"Unknown fallback policy: {fallback_policy!r}")
    fallback = conditions[0] if fallback_policy == "first" else ZERO_CONDITION

    birth = month_start(birth_date)
    horizon = add_months(birth, horizon_years * MONTHS_PER_YEAR)
    start = month_start(as_of_month)

    result = ProjectionResult(birth_month=birth, horizon=horizon, values=[initial_capital])

    # at most one point per month of a full horizon, even if as-of precedes birth
    for t in range(1, horizon_years * MONTHS_PER_YEAR + 1):
        current = add_months(start, t)
        if current > horizon:
            break

        condition: Optional[Condition] = latest_effective(conditions, current)
        if condition is None:
            condition = fallback
            result.fallback_months += 1

        capital = condition.apply(result.values[-1])
        age = whole_years_between(birth, current)

        result.months.append(current)
        result.ages.append(age)
        result.labels.append(month_label(current, birth))
        result.condition_ids.append(None if condition is ZERO_CONDITION else condition.id)
        result.rates.append(condition.rate_or_zero)
        result.movements.append(condition.movement_or_zero)
        result.values.append(capital)

        if capital < 0:
            result.stopped_negative = True
            break

    return result
