"""Shared fixtures and loan builders for the test suite."""

from decimal import Decimal
from typing import Optional

import pytest

from core.schema import Borrower, Collateral, Loan, Portfolio
from data_prep.sample import sample_portfolio


def make_loan(
    principal: str = "100000",
    rate: str = "0.06125",
    term: int = 360,
    fico: int = 700,
    value: Optional[str] = None,
    loan_id: Optional[str] = None,
) -> Loan:
    """Build a loan; origination value defaults to the principal (LTV 100%)."""
    return Loan(
        loan_id=loan_id,
        collateral=Collateral(zip_code="12345"),
        borrower=Borrower(fico_score=fico),
        annual_interest_rate=Decimal(rate),
        principal_amount=Decimal(principal),
        origination_value=Decimal(value if value is not None else principal),
        term_months=term,
    )


@pytest.fixture
def loan_builder():
    return make_loan


@pytest.fixture
def thirty_year_loan() -> Loan:
    return make_loan()


@pytest.fixture
def short_loan() -> Loan:
    """Five-year loan, keeps stochastic tests fast."""
    return make_loan(principal="200000", rate="0.06", term=60)


@pytest.fixture
def reference_portfolio() -> Portfolio:
    return sample_portfolio()


@pytest.fixture
def short_portfolio() -> Portfolio:
    return Portfolio(
        loans=[
            make_loan(principal="100000", rate="0.06", term=60, fico=720, loan_id="A"),
            make_loan(principal="250000", rate="0.06", term=60, fico=700, loan_id="B"),
            make_loan(principal="400000", rate="0.05", term=60, fico=650, loan_id="C"),
        ]
    )
