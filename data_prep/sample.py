"""
Reference inputs: the five-loan sample portfolio and the foreclosure-rate
sweeps run against it.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Sequence

from core.config import CreditCorrelatedHazardConfig, StaticHazardConfig
from core.schema import Borrower, Collateral, Loan, Portfolio

SAMPLE_RATE = Decimal("0.06125")
SAMPLE_TERM = 360
SAMPLE_ZIP = "12345"

# (principal == origination value, FICO)
_SAMPLE_LOANS = (
    (Decimal("100000"), 720),
    (Decimal("250000"), 700),
    (Decimal("1000000"), 680),
    (Decimal("275000"), 660),
    (Decimal("230000"), 600),
)


def sample_portfolio() -> Portfolio:
    loans = [
        Loan(
            loan_id=f"L{i + 1}",
            collateral=Collateral(zip_code=SAMPLE_ZIP),
            borrower=Borrower(fico_score=fico),
            annual_interest_rate=SAMPLE_RATE,
            principal_amount=amount,
            origination_value=amount,
            term_months=SAMPLE_TERM,
        )
        for i, (amount, fico) in enumerate(_SAMPLE_LOANS)
    ]
    return Portfolio(loans=tuple(loans))


def foreclosure_rates(start_pct: int = 1, stop_pct: int = 10) -> List[float]:
    """Annual rates start_pct%..stop_pct% inclusive in 1% steps."""
    return [pct / 100 for pct in range(start_pct, stop_pct + 1)]


def static_sweep_configs(
    rates: Sequence[float],
    *,
    annual_appreciation_rate: float = -0.10,
    distress_sale_rate: float = 0.75,
) -> List[StaticHazardConfig]:
    return [
        StaticHazardConfig(
            annual_foreclosure_rate=rate,
            annual_appreciation_rate=annual_appreciation_rate,
            distress_sale_rate=distress_sale_rate,
        )
        for rate in rates
    ]


def credit_sweep_configs(
    rates: Sequence[float],
    *,
    distress_sale_rate: float = 0.70,
) -> List[CreditCorrelatedHazardConfig]:
    return [
        CreditCorrelatedHazardConfig(
            base_annual_foreclosure_rate=rate,
            distress_sale_rate=distress_sale_rate,
        )
        for rate in rates
    ]
