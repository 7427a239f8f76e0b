"""
Conditions — dated rate/movement regimes and the rule choosing which one governs a month.
"""

from .base import Condition, ZERO_CONDITION
from .timeline import ConditionTimeline, latest_effective, select_condition

__all__ = [
    "Condition",
    "ZERO_CONDITION",
    "ConditionTimeline",
    "latest_effective",
    "select_condition",
]
