"""
Sanity checks for a condition collection before it enters the engine.

Catches problems early:
- Empty collections and duplicate ids (blocking)
- Unset fields that will silently count as zero
- Timelines where nothing is effective at the first projected month
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from conditions.timeline import latest_effective
from core.utils import add_months, month_start


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a condition collection."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_conditions(
    conditions,
    *,
    as_of_month: Optional[pd.Timestamp] = None,
    fallback_policy: str = "first",
) -> ValidationResult:
    """
    Run all validation checks on a condition collection.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    conditions = list(conditions)
    fallback = (
        "the first condition" if fallback_policy == "first" else "a zero rate and movement"
    )

    if not conditions:
        result.errors.append("No conditions provided (at least one is required).")
        return result

    # --- Ids ---
    dupes = sorted(i for i, n in Counter(c.id for c in conditions).items() if n > 1)
    if dupes:
        result.errors.append(f"Duplicate condition ids: {dupes}.")

    # --- Dates ---
    undated = [c.id for c in conditions if not c.is_dated]
    if len(undated) == len(conditions):
        result.warnings.append(
            f"No condition has an effective date; {fallback} will govern every month."
        )
    elif undated:
        result.warnings.append(f"Conditions {undated} have no effective date and are never selected by date.")

    # --- Numeric fields ---
    no_rate = [c.id for c in conditions if c.rate is None]
    no_movement = [c.id for c in conditions if c.movement is None]
    if no_rate:
        result.warnings.append(f"Conditions {no_rate} have no rate (treated as 0%).")
    if no_movement:
        result.warnings.append(f"Conditions {no_movement} have no movement (treated as 0).")

    # --- Coverage of the first projected month ---
    if as_of_month is not None and len(undated) < len(conditions):
        first_month = add_months(month_start(as_of_month), 1)
        if latest_effective(conditions, first_month) is None:
            result.warnings.append(
                f"No condition is effective at {first_month:%Y-%m}; "
                f"months before the earliest effective date use {fallback}."
            )

    return result
