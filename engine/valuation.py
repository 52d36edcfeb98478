"""
Collateral value under a monthly appreciation function.

The appreciation function maps a month index (1-based) to a fractional
monthly rate. It may be deterministic (trend) or stochastic (one draw per
call), so value_path() calls it exactly once per month.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Iterator, Union

from core.schema import Loan
from core.utils import to_decimal

AppreciationFn = Callable[[int], Union[Decimal, float]]


def value_at(loan: Loan, month: int, appreciation_fn: AppreciationFn) -> Decimal:
    """origination_value * prod_{i=1..month} (1 + appreciation_fn(i))."""
    if month < 0:
        raise ValueError(f"month must be non-negative, got {month}")
    value = loan.origination_value
    for i in range(1, month + 1):
        value *= 1 + to_decimal(appreciation_fn(i))
    return value


def value_path(loan: Loan, appreciation_fn: AppreciationFn) -> Iterator[Decimal]:
    """Yield the collateral value for months 1..term_months (running product)."""
    value = loan.origination_value
    for month in range(1, loan.term_months + 1):
        value *= 1 + to_decimal(appreciation_fn(month))
        yield value
