"""
Monthly equity series: amortization zipped with collateral valuation.
"""

from __future__ import annotations

from typing import Iterator

from core.schema import EquitySnapshot, Loan

from .amortization import amortization_schedule
from .valuation import AppreciationFn, value_path


def equity_series(loan: Loan, appreciation_fn: AppreciationFn) -> Iterator[EquitySnapshot]:
    """
    Lazily pair month m of the schedule with the collateral value at month m.

    Nothing is computed (and no appreciation draw is made) for months the
    caller never pulls, so a foreclosure scan can stop early.
    """
    for entry, value in zip(amortization_schedule(loan), value_path(loan, appreciation_fn)):
        yield EquitySnapshot(
            month=entry.month,
            property_value=value,
            outstanding_balance=entry.remaining_balance,
        )
