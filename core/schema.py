"""
Data model: collateral, borrower, loan, portfolio and the per-month records
the engine produces.

Inputs are frozen pydantic models so that bad values fail at construction,
long before a simulation starts. Engine outputs are plain frozen dataclasses;
they are created in the hot loop and never validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

FICO_MIN = 300
FICO_MAX = 850

# Columns a loan tape must carry to be turned into a Portfolio.
LOAN_TAPE_COLUMNS: Tuple[str, ...] = (
    "Loan ID",
    "Property Zip",
    "Borrower FICO",
    "Interest Rate",
    "Principal Amount",
    "Origination Value",
    "Term Months",
)


class Collateral(BaseModel):
    """Asset backing a loan, identified by its location."""

    model_config = ConfigDict(frozen=True)

    zip_code: str


class Borrower(BaseModel):
    model_config = ConfigDict(frozen=True)

    fico_score: int = Field(ge=FICO_MIN, le=FICO_MAX)


class Loan(BaseModel):
    """
    Fixed-rate, fully amortizing mortgage.

    annual_interest_rate is a decimal fraction (0.06125 for 6.125%).
    Payment and schedules are pure functions of these fields, see
    engine.amortization.
    """

    model_config = ConfigDict(frozen=True)

    collateral: Collateral
    borrower: Borrower
    annual_interest_rate: Decimal = Field(ge=0)
    principal_amount: Decimal = Field(gt=0)
    origination_value: Decimal = Field(gt=0)
    term_months: int = Field(gt=0)
    loan_id: Optional[str] = None

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_interest_rate / 12

    @property
    def loan_to_value(self) -> Decimal:
        return self.principal_amount / self.origination_value


class Portfolio(BaseModel):
    """Ordered collection of loans. Results are weighted by principal."""

    model_config = ConfigDict(frozen=True)

    loans: Tuple[Loan, ...] = ()

    def __len__(self) -> int:
        return len(self.loans)

    @property
    def total_principal(self) -> Decimal:
        return sum((loan.principal_amount for loan in self.loans), Decimal(0))


@dataclass(frozen=True)
class AmortizationEntry:
    """One month of a level-payment schedule."""

    month: int
    interest_portion: Decimal
    principal_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class EquitySnapshot:
    month: int
    property_value: Decimal
    outstanding_balance: Decimal

    @property
    def equity(self) -> Decimal:
        return self.property_value - self.outstanding_balance


@dataclass(frozen=True)
class SimulationResult:
    """
    Expected portfolio return for one risk-model configuration.

    model_parameter is the swept value (annual foreclosure rate).
    The trial statistics describe the distribution of per-trial
    capital-weighted returns behind the mean.
    """

    model_parameter: float
    expected_return_fraction: float
    trial_count: int = 0
    std_dev: float = 0.0
    standard_error: float = 0.0
    ci_low: float = 0.0
    ci_high: float = 0.0
