"""
Build a Portfolio from a loan tape (one row per loan).
"""

from __future__ import annotations

from typing import Dict

import pandas as pd

from core.schema import LOAN_TAPE_COLUMNS, Borrower, Collateral, Loan, Portfolio
from core.utils import require_columns, to_decimal

_COLUMN_ALIASES: Dict[str, str] = {
    "LoanID": "Loan ID",
    "loan_id": "Loan ID",
    "Zip": "Property Zip",
    "zip": "Property Zip",
    "FICO": "Borrower FICO",
    "fico": "Borrower FICO",
    "Rate": "Interest Rate",
    "Current Interest Rate": "Interest Rate",
    "Amount": "Principal Amount",
    "Original Principal Balance": "Principal Amount",
    "Original Valuation Amount": "Origination Value",
    "Term": "Term Months",
    "Original Term": "Term Months",
}


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with common column name aliases normalized."""
    return df.rename(columns={c: _COLUMN_ALIASES.get(c, c) for c in df.columns})


def portfolio_from_tape(tape: pd.DataFrame) -> Portfolio:
    """
    Turn a loan tape into a Portfolio, preserving row order.
    Raises ValueError on missing columns or any invalid row.
    """
    df = canonicalize_columns(tape)
    require_columns(df, LOAN_TAPE_COLUMNS)

    loans = []
    for row in df.to_dict(orient="records"):
        loans.append(
            Loan(
                loan_id=str(row["Loan ID"]),
                collateral=Collateral(zip_code=str(row["Property Zip"])),
                borrower=Borrower(fico_score=int(row["Borrower FICO"])),
                annual_interest_rate=to_decimal(row["Interest Rate"]),
                principal_amount=to_decimal(row["Principal Amount"]),
                origination_value=to_decimal(row["Origination Value"]),
                term_months=int(row["Term Months"]),
            )
        )
    return Portfolio(loans=tuple(loans))


def load_portfolio_csv(path: str) -> Portfolio:
    """Load a loan tape CSV. Everything is read as text so zip codes keep
    leading zeros and amounts reach Decimal without a float detour."""
    tape = pd.read_csv(path, dtype=str)
    return portfolio_from_tape(tape)
