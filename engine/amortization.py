"""
Level-payment amortization for fixed-rate loans.

All money is Decimal end to end. The payment uses an integer power of
(1 + J) so no float round trip happens; rounding to cents only happens in
schedule_frame(), i.e. at output level.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

import pandas as pd

from core.schema import AmortizationEntry, Loan
from core.utils import quantize_money


def level_payment(principal: Decimal, monthly_rate: Decimal, n_months: int) -> Decimal:
    """Standard fully-amortizing level payment (PMT) with a zero-rate guard."""
    if n_months <= 0:
        raise ValueError(f"n_months must be positive, got {n_months}")
    if monthly_rate == 0:
        return principal / n_months
    return principal * monthly_rate / (1 - (1 + monthly_rate) ** -n_months)


def monthly_payment(loan: Loan) -> Decimal:
    return level_payment(loan.principal_amount, loan.monthly_rate, loan.term_months)


def amortization_schedule(loan: Loan) -> Iterator[AmortizationEntry]:
    """
    Yield one AmortizationEntry per month, 1..term_months.

    Each call returns a fresh generator. The last month retires whatever
    balance is left, so the final remaining balance is exactly zero and the
    balance never goes negative.
    """
    rate = loan.monthly_rate
    payment = monthly_payment(loan)
    balance = loan.principal_amount
    term = loan.term_months

    for month in range(1, term + 1):
        interest = balance * rate
        principal = payment - interest
        if month == term or principal > balance:
            principal = balance
        remaining = balance - principal
        yield AmortizationEntry(
            month=month,
            interest_portion=interest,
            principal_portion=principal,
            remaining_balance=remaining,
        )
        balance = remaining


def schedule_frame(loan: Loan) -> pd.DataFrame:
    """Amortization table rounded to cents, one row per month."""
    payment = quantize_money(monthly_payment(loan))
    rows = [
        {
            "month": e.month,
            "payment": payment,
            "interest": quantize_money(e.interest_portion),
            "principal": quantize_money(e.principal_portion),
            "remaining_balance": quantize_money(e.remaining_balance),
        }
        for e in amortization_schedule(loan)
    ]
    return pd.DataFrame(rows, columns=["month", "payment", "interest", "principal", "remaining_balance"])
