"""
Portfolio validation before it enters the engine.

Field-level problems (non-positive principal, negative rate, FICO outside
300-850, ...) are rejected when a Loan is built. What is left here are the
checks across loans and the plausibility warnings:
- Empty portfolio
- Duplicate loan ids
- Rates that look like percents instead of decimals
- LTV outside plausible bounds
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from core.schema import Portfolio


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a portfolio."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_portfolio(portfolio: Portfolio) -> ValidationResult:
    """
    Run all portfolio-level checks.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    n = len(portfolio.loans)
    if n == 0:
        result.errors.append("Portfolio is empty (0 loans).")
        return result

    # --- Loan IDs ---
    ids = [loan.loan_id for loan in portfolio.loans if loan.loan_id is not None]
    n_dup = sum(count - 1 for count in Counter(ids).values() if count > 1)
    if n_dup > 0:
        result.warnings.append(f"{n_dup} duplicate Loan IDs found.")

    # --- Interest Rate ---
    # Rates should be in decimal form (e.g. 0.06 not 6.0)
    n_high = sum(1 for loan in portfolio.loans if loan.annual_interest_rate > 1)
    if n_high > 0:
        result.warnings.append(
            f"{n_high} loans have interest rate > 1.0: check if rates are in "
            f"percent vs decimal form."
        )

    # --- LTV bounds ---
    ltvs = [loan.loan_to_value for loan in portfolio.loans]
    n_over = sum(1 for ltv in ltvs if ltv > 2)  # >200% LTV is suspicious
    if n_over > 0:
        result.warnings.append(f"{n_over} loans have LTV > 2.0 (200%): verify units.")
    n_underwater = sum(1 for ltv in ltvs if Decimal(1) < ltv <= 2)
    if n_underwater > 0:
        result.warnings.append(
            f"{n_underwater} loans have principal above origination value (LTV > 100%)."
        )

    return result
