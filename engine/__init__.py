"""
Capital projection engine — pure monthly compounding + runner.
"""

from .projection import ProjectionResult, project
from .runner import run_projection

__all__ = ["ProjectionResult", "project", "run_projection"]
