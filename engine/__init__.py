"""
Deterministic loan maths: amortization, collateral valuation, equity series.

The sweep runner lives in engine.runner and is imported from there directly.
"""

from .amortization import amortization_schedule, level_payment, monthly_payment, schedule_frame
from .valuation import value_at, value_path
from .equity import equity_series

__all__ = [
    "amortization_schedule",
    "level_payment",
    "monthly_payment",
    "schedule_frame",
    "value_at",
    "value_path",
    "equity_series",
]
