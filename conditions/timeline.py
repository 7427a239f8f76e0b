"""
ConditionTimeline — the ordered, caller-owned collection of conditions.

Editing operations never mutate: add/update/remove return a new timeline,
so a projection always sees a consistent snapshot.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import pandas as pd

from core.schema import DEFAULT_CONDITIONS, MONTHS_PER_YEAR
from core.utils import add_months, month_start

from .base import ZERO_CONDITION, Condition

EDITABLE_FIELDS = ("effective_date", "rate", "movement")


def latest_effective(conditions, month: pd.Timestamp) -> Optional[Condition]:
    """
    The condition with the greatest effective_date <= month, or None.

    Ties on effective_date go to the condition appearing later in the input.
    Undated conditions never qualify.
    """
    month = month_start(month)
    best: Optional[Condition] = None
    for cond in conditions:
        if cond.effective_date is None or cond.effective_date > month:
            continue
        if best is None or cond.effective_date >= best.effective_date:
            best = cond
    return best


def select_condition(conditions, month: pd.Timestamp, policy: str = "first") -> Condition:
    """
    Pick the condition governing `month`.

    When no condition is effective yet (all undated or in the future) the
    "first" policy returns the first condition in input order regardless of
    its date; the "zero" policy returns ZERO_CONDITION (no rate, no movement).
    """
    conditions = tuple(conditions)
    if not conditions:
        raise ValueError("No conditions provided.")
    if policy not in ("first", "zero"):
        raise ValueError(f"Unknown fallback policy: {policy!r}")

    best = latest_effective(conditions, month)
    if best is not None:
        return best
    return conditions[0] if policy == "first" else ZERO_CONDITION


@dataclass(frozen=True)
class ConditionTimeline:
    conditions: Tuple[Condition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))
        ids = [c.id for c in self.conditions]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"Duplicate condition ids: {dupes}")

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self) -> Iterator[Condition]:
        return iter(self.conditions)

    def __getitem__(self, index: int) -> Condition:
        return self.conditions[index]

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(c.id for c in self.conditions)

    def next_id(self) -> int:
        """max(existing ids) + 1, or 0 for an empty timeline."""
        return max(self.ids) + 1 if self.conditions else 0

    def add(self, effective_date=None, rate=None, movement=None) -> "ConditionTimeline":
        new = Condition(
            id=self.next_id(),
            effective_date=effective_date,
            rate=rate,
            movement=movement,
        )
        return ConditionTimeline(self.conditions + (new,))

    def update(self, index: int, **fields) -> "ConditionTimeline":
        unknown = [f for f in fields if f not in EDITABLE_FIELDS]
        if unknown:
            raise ValueError(f"Cannot edit condition fields: {unknown}")
        edited = dataclasses.replace(self.conditions[index], **fields)
        items = list(self.conditions)
        items[index] = edited
        return ConditionTimeline(items)

    def remove(self, index: int) -> "ConditionTimeline":
        items = list(self.conditions)
        del items[index]
        return ConditionTimeline(items)

    def select(self, month: pd.Timestamp, policy: str = "first") -> Condition:
        return select_condition(self.conditions, month, policy)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "id": c.id,
                    "effective_date": c.effective_date,
                    "rate": c.rate,
                    "movement": c.movement,
                }
                for c in self.conditions
            ],
            columns=["id", "effective_date", "rate", "movement"],
        )

    @classmethod
    def default(cls, as_of_date: pd.Timestamp) -> "ConditionTimeline":
        """Starter timeline: saving from now, drawing down ten years later."""
        start = month_start(as_of_date)
        timeline = cls()
        for years, rate, movement in DEFAULT_CONDITIONS:
            timeline = timeline.add(
                effective_date=add_months(start, years * MONTHS_PER_YEAR),
                rate=rate,
                movement=movement,
            )
        return timeline
