"""
Text-to-value parsing for condition rows typed by a user.

Blank or unparseable input becomes None (an unset field) rather than an
error, so a half-edited row never blocks a projection.
"""

from __future__ import annotations

import datetime as _dt
import math
import re
from typing import Iterable, Mapping, Optional

import pandas as pd

from conditions.base import Condition
from conditions.timeline import ConditionTimeline
from core.utils import month_start

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_month(text) -> Optional[pd.Timestamp]:
    """Parse 'YYYY-MM' (or a full 'YYYY-MM-DD') to a month-start Timestamp; None where parsing fails."""
    if text is None:
        return None
    if isinstance(text, _dt.date):
        return month_start(text)
    s = str(text).strip()
    if not s:
        return None
    for fmt in ("%Y-%m", "%Y-%m-%d"):
        ts = pd.to_datetime(s, format=fmt, errors="coerce")
        if not pd.isna(ts):
            return month_start(ts)
    return None


def parse_amount(text) -> Optional[int]:
    """
    Leading-integer parse: '500' -> 500, ' -2000 EUR' -> -2000, '7.5' -> 7.
    Used for both rates and movements; None where no integer prefix exists.
    """
    if text is None or isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    if isinstance(text, float):
        return int(text) if math.isfinite(text) else None
    m = _LEADING_INT.match(str(text))
    return int(m.group(1)) if m else None


def timeline_from_rows(rows: Iterable[Mapping]) -> ConditionTimeline:
    """
    Build a timeline from editor rows with text fields 'date', 'rate', 'movement'
    (and optionally 'id'). Rows without an id get the next free one.
    """
    timeline = ConditionTimeline()
    for row in rows:
        fields = dict(
            effective_date=parse_month(row.get("date")),
            rate=parse_amount(row.get("rate")),
            movement=parse_amount(row.get("movement")),
        )
        row_id = parse_amount(row.get("id"))
        if row_id is None:
            timeline = timeline.add(**fields)
        else:
            timeline = ConditionTimeline(timeline.conditions + (Condition(id=row_id, **fields),))
    return timeline
