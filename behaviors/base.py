"""
RiskModel interface and the shared foreclosure / recovery algorithm.

A variant only decides two things: how collateral appreciates month to month
and what the per-month foreclosure probability of a loan is. Everything else
(the monthly Bernoulli scan, the distress-sale recovery) is common.
"""

from __future__ import annotations

import numpy as np

from core.errors import InvariantViolation
from core.schema import EquitySnapshot, Loan
from core.utils import clamp_probability, to_decimal
from engine.equity import equity_series
from engine.valuation import AppreciationFn

FULL_RETURN = 1.0


class RiskModel:
    """
    One-shot simulation of a single loan under one stochastic trial.

    Implementations must be stateless: every random draw comes from the
    generator passed to simulate().
    """

    @property
    def distress_sale_rate(self) -> float:
        raise NotImplementedError

    @property
    def model_parameter(self) -> float:
        raise NotImplementedError

    def appreciation_fn(self, rng: np.random.Generator) -> AppreciationFn:
        """Monthly appreciation function for one trial."""
        raise NotImplementedError

    def monthly_foreclosure_probability(self, loan: Loan) -> float:
        """Raw per-month hazard before clamping to [0, 1]."""
        raise NotImplementedError

    def simulate(self, loan: Loan, rng: np.random.Generator) -> float:
        """
        Realized return fraction of one loan for one trial.

        1.0 when the loan performs to term or the distressed sale covers the
        debt, otherwise distressed value / outstanding balance at the month
        of foreclosure.
        """
        p = clamp_probability(self.monthly_foreclosure_probability(loan))
        for snapshot in equity_series(loan, self.appreciation_fn(rng)):
            if rng.random() < p:
                return self.recovery(snapshot)
        return FULL_RETURN

    def recovery(self, snapshot: EquitySnapshot) -> float:
        """Return fraction recovered when foreclosure hits at this snapshot."""
        balance = snapshot.outstanding_balance
        if balance < 0:
            raise InvariantViolation(
                f"Negative outstanding balance {balance} at month {snapshot.month}"
            )
        if balance == 0:
            return FULL_RETURN
        distressed_value = snapshot.property_value * to_decimal(self.distress_sale_rate)
        if distressed_value - balance > 0:
            return FULL_RETURN
        return float(distressed_value / balance)

