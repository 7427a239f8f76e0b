from __future__ import annotations

from typing import Tuple

MONTHS_PER_YEAR: int = 12

# The projection always ends at the subject's 100th birthday.
HORIZON_YEARS: int = 100

# Columns of the per-month projection frame built by engine.projection.
# Period 0 is the seed row holding the initial capital.
PROJECTION_COLUMNS: Tuple[str, ...] = (
    "period",
    "date",
    "label",
    "age",
    "condition_id",
    "rate",
    "movement",
    "begin_capital",
    "end_capital",
)

# Default scenario shown to a new user: (years after as-of, rate %, movement).
DEFAULT_BIRTH_DATE: str = "1976-02"
DEFAULT_INITIAL_CAPITAL: int = 100_000
DEFAULT_CONDITIONS: Tuple[Tuple[int, float, float], ...] = (
    (0, 7, 500),
    (10, 7, -2000),
)
