"""
Scenario files — JSON documents describing one projection:

    {
      "scenario": "Base case",
      "birth_date": "1976-02",
      "initial_capital": 100000,
      "as_of_date": "2026-10",          (optional, defaults to the current month)
      "fallback_policy": "first",       (optional)
      "conditions": [
        {"date": "2026-10", "rate": 7, "movement": 500},
        {"date": "2036-10", "rate": 7, "movement": -2000}
      ]
    }
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from conditions.base import Condition
from conditions.timeline import ConditionTimeline
from core.config import ProjectionConfig
from core.schema import DEFAULT_INITIAL_CAPITAL, HORIZON_YEARS

from .parsing import parse_month


class ConfigurationError(Exception):
    """Raised when a scenario file cannot be loaded or parsed."""


def _check_month(v: Optional[str]) -> Optional[str]:
    if v is not None and parse_month(v) is None:
        raise ValueError(f"Expected a month as YYYY-MM, got {v!r}")
    return v


class ConditionEntry(BaseModel):
    """One condition row as written in a scenario file."""

    id: Optional[int] = Field(None, description="Stable row id; assigned when omitted.")
    date: Optional[str] = Field(None, description="Effective month (YYYY-MM).")
    rate: Optional[float] = Field(None, description="Nominal annual rate in percent.")
    movement: Optional[float] = Field(
        None, description="Amount added each month the condition is active (negative = withdrawal)."
    )

    @field_validator("date")
    @classmethod
    def check_date(cls, v: Optional[str]) -> Optional[str]:
        return _check_month(v)


class ScenarioFile(BaseModel):
    """Top-level scenario document."""

    name: str = Field("DefaultScenario", alias="scenario")
    birth_date: str = Field(..., description="Birth month (YYYY-MM).")
    initial_capital: float = Field(DEFAULT_INITIAL_CAPITAL)
    as_of_date: Optional[str] = Field(None)
    horizon_years: int = Field(HORIZON_YEARS, gt=0)
    fallback_policy: Literal["first", "zero"] = Field("first")
    conditions: List[ConditionEntry] = Field([])

    model_config = {"validate_by_name": True}

    @field_validator("birth_date", "as_of_date")
    @classmethod
    def check_months(cls, v: Optional[str]) -> Optional[str]:
        return _check_month(v)

    def to_config(self) -> ProjectionConfig:
        return ProjectionConfig(
            birth_date=parse_month(self.birth_date),
            initial_capital=self.initial_capital,
            as_of_date=parse_month(self.as_of_date),
            horizon_years=self.horizon_years,
            fallback_policy=self.fallback_policy,
        )

    def to_timeline(self) -> ConditionTimeline:
        timeline = ConditionTimeline()
        for entry in self.conditions:
            fields = dict(
                effective_date=parse_month(entry.date),
                rate=entry.rate,
                movement=entry.movement,
            )
            if entry.id is None:
                timeline = timeline.add(**fields)
            else:
                timeline = ConditionTimeline(timeline.conditions + (Condition(id=entry.id, **fields),))
        return timeline


def parse_scenario(data: Dict[str, Any]) -> Tuple[ProjectionConfig, ConditionTimeline]:
    """Validate a scenario mapping and turn it into (config, timeline)."""
    try:
        scenario = ScenarioFile.model_validate(data)
        timeline = scenario.to_timeline()
    except ValueError as e:
        # pydantic.ValidationError is a ValueError; so are duplicate ids
        raise ConfigurationError(f"Invalid scenario: {e}") from e
    logger.debug(
        f"Parsed scenario '{scenario.name}': birth {scenario.birth_date}, "
        f"{len(timeline)} conditions"
    )
    return scenario.to_config(), timeline


def load_scenario(file_path: str) -> Tuple[ProjectionConfig, ConditionTimeline]:
    """Load a JSON scenario file and return (config, timeline)."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Scenario file not found at: {file_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Error parsing JSON file '{file_path}': {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Unexpected error reading scenario file '{file_path}': {e}") from e
    logger.debug(f"Loaded scenario file {file_path}")
    return parse_scenario(data)
