"""
Projection configuration.
Conditions are passed separately (see conditions.timeline.ConditionTimeline).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

import pandas as pd

from .schema import DEFAULT_INITIAL_CAPITAL, HORIZON_YEARS, MONTHS_PER_YEAR
from .utils import add_months, month_start

FallbackPolicy = Literal["first", "zero"]


@dataclass(frozen=True)
class ProjectionConfig:
    birth_date: pd.Timestamp
    initial_capital: float = DEFAULT_INITIAL_CAPITAL

    # month the projection starts from; None means the current month
    as_of_date: Optional[pd.Timestamp] = None
    horizon_years: int = HORIZON_YEARS

    # what to apply when no condition is effective yet:
    #   "first" -> the first condition in input order, whatever its date
    #   "zero"  -> no rate, no movement
    fallback_policy: FallbackPolicy = "first"

    @property
    def birth_month(self) -> pd.Timestamp:
        return month_start(self.birth_date)

    @property
    def as_of_month(self) -> pd.Timestamp:
        if self.as_of_date is None:
            return month_start(pd.Timestamp.today())
        return month_start(self.as_of_date)

    @property
    def horizon(self) -> pd.Timestamp:
        return add_months(self.birth_month, self.horizon_years * MONTHS_PER_YEAR)
