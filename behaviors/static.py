"""
StaticHazardModel, the pre-crisis view. Same foreclosure rate for every
borrower, home prices on a fixed trend.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import numpy as np

from core.config import StaticHazardConfig
from core.schema import Loan
from core.utils import to_decimal
from engine.valuation import AppreciationFn

from .base import RiskModel


@dataclass(frozen=True)
class StaticHazardModel(RiskModel):
    """
    Constant monthly hazard annual_foreclosure_rate / 12 and constant
    monthly appreciation annual_appreciation_rate / 12.
    """

    config: StaticHazardConfig

    @property
    def distress_sale_rate(self) -> float:
        return self.config.distress_sale_rate

    @property
    def model_parameter(self) -> float:
        return self.config.annual_foreclosure_rate

    @property
    def monthly_appreciation(self) -> Decimal:
        return to_decimal(self.config.annual_appreciation_rate) / 12

    def appreciation_fn(self, rng: np.random.Generator) -> AppreciationFn:
        rate = self.monthly_appreciation
        return lambda month: rate

    def monthly_foreclosure_probability(self, loan: Loan) -> float:
        return self.config.annual_foreclosure_rate / 12.0
