"""
PM outputs — summary metrics over a projection.
"""

from .metrics import compute_projection_metrics

__all__ = ["compute_projection_metrics"]
