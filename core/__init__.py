"""
Core package — constants, configuration, and shared month utilities.
No business logic lives here.
"""

from .schema import HORIZON_YEARS, MONTHS_PER_YEAR, PROJECTION_COLUMNS
from .config import FallbackPolicy, ProjectionConfig
from .utils import (
    require_columns,
    month_start,
    add_months,
    whole_years_between,
    month_label,
)

__all__ = [
    "HORIZON_YEARS",
    "MONTHS_PER_YEAR",
    "PROJECTION_COLUMNS",
    "FallbackPolicy",
    "ProjectionConfig",
    "require_columns",
    "month_start",
    "add_months",
    "whole_years_between",
    "month_label",
]
