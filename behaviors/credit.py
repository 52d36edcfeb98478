"""
CreditCorrelatedHazardModel: borrower-differentiated hazard with noisy
local house prices.

  hazard_month = base_annual_rate / 12 - (700 - FICO) / 700
  appreciation_month ~ U[-0.5, 0.5), drawn fresh per (trial, month)

The hazard is clamped to [0, 1] before use: with a 700 pivot the credit
factor dominates the base rate, so most scores land outside that range.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from core.config import CreditCorrelatedHazardConfig
from core.schema import Loan
from engine.valuation import AppreciationFn

from .base import RiskModel

logger = logging.getLogger(__name__)

CREDIT_PIVOT = 700
SHOCK_LOW = -0.5
SHOCK_HIGH = 0.5


def credit_factor(fico_score: int) -> float:
    return (CREDIT_PIVOT - fico_score) / CREDIT_PIVOT


@lru_cache(maxsize=None)
def _report_clamp(base_annual_rate: float, fico_score: int, p: float) -> None:
    # Once per (rate, score), not once per trial.
    logger.debug(
        "Clamping monthly foreclosure probability %.6f for FICO %d (base rate %.4f)",
        p,
        fico_score,
        base_annual_rate,
    )


@dataclass(frozen=True)
class CreditCorrelatedHazardModel(RiskModel):
    config: CreditCorrelatedHazardConfig

    @property
    def distress_sale_rate(self) -> float:
        return self.config.distress_sale_rate

    @property
    def model_parameter(self) -> float:
        return self.config.base_annual_foreclosure_rate

    def appreciation_fn(self, rng: np.random.Generator) -> AppreciationFn:
        # Ignores the month: every call is an independent shock.
        return lambda month: rng.uniform(SHOCK_LOW, SHOCK_HIGH)

    def monthly_foreclosure_probability(self, loan: Loan) -> float:
        p = self.config.base_annual_foreclosure_rate / 12.0 - credit_factor(loan.borrower.fico_score)
        if p < 0.0 or p > 1.0:
            _report_clamp(self.config.base_annual_foreclosure_rate, loan.borrower.fico_score, p)
        return p
