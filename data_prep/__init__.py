"""
Data preparation — scenario loading, text parsing, validation.
"""

from .parsing import parse_month, parse_amount, timeline_from_rows
from .loader import ConfigurationError, ScenarioFile, load_scenario, parse_scenario
from .validators import ValidationResult, validate_conditions

__all__ = [
    "parse_month",
    "parse_amount",
    "timeline_from_rows",
    "ConfigurationError",
    "ScenarioFile",
    "load_scenario",
    "parse_scenario",
    "ValidationResult",
    "validate_conditions",
]
