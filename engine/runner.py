"""
Projection runner — validates inputs, runs the pure engine, and packages the output.

The engine itself (engine.projection.project) stays free of I/O and logging;
everything a caller needs around it (checks, logs, a tidy DataFrame and
headline metrics) is layered on here.
"""

from __future__ import annotations

from typing import Dict, Tuple

import pandas as pd
from loguru import logger

from core.config import ProjectionConfig
from data_prep.validators import validate_conditions
from pm.metrics import compute_projection_metrics

from .projection import ProjectionResult, project


def run_projection(
    config: ProjectionConfig,
    conditions,
    *,
    validate: bool = True,
) -> Tuple[pd.DataFrame, Dict]:
    """
    Run one capital projection.

    Parameters
    ----------
    config : ProjectionConfig
        Birth date, initial capital, as-of month, horizon and fallback policy
    conditions : iterable of Condition (e.g. a ConditionTimeline)
        The condition timeline, in input order
    validate : bool
        Run data_prep.validators first; errors raise, warnings are logged

    Returns
    -------
    (projection_df, summary)
    projection_df: one row per month (period 0 = seed), columns per core.schema.PROJECTION_COLUMNS
    summary: pm.metrics headline figures plus labels/values for charting
    """
    conditions = tuple(conditions)
    as_of = config.as_of_month

    if validate:
        check = validate_conditions(
            conditions, as_of_month=as_of, fallback_policy=config.fallback_policy
        )
        if not check.is_valid:
            raise ValueError(check.summary())
        for w in check.warnings:
            logger.warning(w)

    logger.info(
        f"Projecting from {as_of:%Y-%m} to {config.horizon:%Y-%m}: "
        f"initial capital {config.initial_capital:,.2f}, {len(conditions)} conditions, "
        f"fallback '{config.fallback_policy}'"
    )

    result: ProjectionResult = project(
        conditions,
        config.birth_month,
        config.initial_capital,
        as_of,
        fallback_policy=config.fallback_policy,
        horizon_years=config.horizon_years,
    )

    if result.fallback_months:
        logger.warning(
            f"{result.fallback_months} months had no effective condition "
            f"and used the '{config.fallback_policy}' fallback."
        )

    projection_df = result.to_frame()
    summary = compute_projection_metrics(projection_df, horizon=config.horizon)
    summary["labels"] = list(result.labels)
    summary["values"] = list(result.values)
    summary["fallback_months"] = result.fallback_months

    if summary["depleted"]:
        logger.info(
            f"Capital turns negative in {summary['depletion_date']:%Y-%m} "
            f"(age {summary['depletion_age']}) after {summary['months_projected']} months"
        )
    else:
        logger.info(
            f"Capital at horizon: {summary['final_capital']:,.2f} "
            f"after {summary['months_projected']} months"
        )

    return projection_df, summary
