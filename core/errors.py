"""
Exception types raised by the simulator.

Field-level input problems surface as pydantic ``ValidationError`` when a
Loan / Borrower / risk config is constructed. Everything here is for the
checks that only make sense once the pieces are put together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from data_prep.validators import ValidationResult


class PortfolioValidationError(ValueError):
    """Portfolio failed validation; raised before any simulation work starts."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        super().__init__(result.summary())


class InvariantViolation(ArithmeticError):
    """
    A numeric invariant of the engine was broken (negative balance at
    foreclosure, non-finite trial outcome, ...). Never recovered from.
    """
