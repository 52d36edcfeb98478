"""
Sweep runner: validates inputs, then drives the portfolio Monte Carlo over
each risk-model configuration.

Validation happens before any trial runs: an invalid portfolio produces an
exception and no partial results.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple, Union

import pandas as pd

from core.config import CreditCorrelatedHazardConfig, SimulationConfig, StaticHazardConfig
from core.errors import PortfolioValidationError
from core.schema import Portfolio, SimulationResult
from data_prep.validators import validate_portfolio
from pm.aggregator import results_frame, sweep

logger = logging.getLogger(__name__)


def run_sweep(
    portfolio: Portfolio,
    configs: Sequence[Union[StaticHazardConfig, CreditCorrelatedHazardConfig]],
    config: SimulationConfig,
) -> Tuple[pd.DataFrame, List[SimulationResult]]:
    """
    Run the foreclosure-rate sweep for a portfolio.

    Parameters
    ----------
    portfolio : Portfolio
        Loans to simulate
    configs : sequence of risk model configs
        One result is produced per config, in the same order
    config : SimulationConfig
        Trial count, seed, streams and worker settings

    Returns
    -------
    (results_df, results)
    results_df: one row per config (model_parameter, expected_return, ...)
    results: the SimulationResult objects behind the table
    """
    validation = validate_portfolio(portfolio)
    for warning in validation.warnings:
        logger.warning("Portfolio: %s", warning)
    if not validation.is_valid:
        raise PortfolioValidationError(validation)
    if not configs:
        raise ValueError("No risk model configurations to sweep.")

    logger.info(
        "Sweeping %d configurations over %d loans (%d trials, seed=%s, streams=%d)",
        len(configs),
        len(portfolio.loans),
        config.trial_count,
        config.seed,
        config.n_streams,
    )
    results = sweep(
        portfolio,
        configs,
        config.trial_count,
        seed=config.seed,
        n_streams=config.n_streams,
        max_workers=config.max_workers,
    )
    return results_frame(results), results
