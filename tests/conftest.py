import os
import sys

import pandas as pd
import pytest

# Ensure project root is on sys.path before imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from conditions import Condition, ConditionTimeline  # noqa: E402
from core.config import ProjectionConfig  # noqa: E402


def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")


@pytest.fixture
def birth():
    return pd.Timestamp("1976-02-01")


@pytest.fixture
def as_of():
    # first projected month is 2026-10
    return pd.Timestamp("2026-09-01")


@pytest.fixture
def two_phase():
    """Save 500/month from the first projected month, withdraw 2000/month ten years later."""
    return ConditionTimeline(
        (
            Condition(id=0, effective_date="2026-10-01", rate=7, movement=500),
            Condition(id=1, effective_date="2036-10-01", rate=7, movement=-2000),
        )
    )


@pytest.fixture
def config(birth, as_of):
    return ProjectionConfig(birth_date=birth, initial_capital=100_000, as_of_date=as_of)
