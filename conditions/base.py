"""
Condition — a financial regime (rate + monthly movement) effective from a month onward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from core.schema import MONTHS_PER_YEAR
from core.utils import month_start


@dataclass(frozen=True)
class Condition:
    """
    One row of the condition timeline.

    effective_date is normalized to the first of its month; rate and movement
    may be left unset (None) for a row that is still being filled in, in which
    case they count as zero.

    rate is a nominal annual percentage: the monthly growth factor is
    1 + rate / 12 / 100. movement is added to capital before compounding in
    every month the condition is the one selected.
    """

    id: int
    effective_date: Optional[pd.Timestamp] = None
    rate: Optional[float] = None
    movement: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "effective_date", month_start(self.effective_date))

    @property
    def is_dated(self) -> bool:
        return self.effective_date is not None

    @property
    def rate_or_zero(self) -> float:
        return 0 if self.rate is None else self.rate

    @property
    def movement_or_zero(self) -> float:
        return 0 if self.movement is None else self.movement

    @property
    def monthly_factor(self) -> float:
        return 1 + self.rate_or_zero / MONTHS_PER_YEAR / 100

    def apply(self, capital: float) -> float:
        """Capital after one month under this condition."""
        return (capital + self.movement_or_zero) * self.monthly_factor


# Stand-in used by the "zero" fallback policy when nothing is effective yet.
ZERO_CONDITION = Condition(id=-1)
