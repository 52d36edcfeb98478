"""
Core package: data model, configuration, errors and shared utilities.
No simulation logic lives here.
"""

from .schema import (
    LOAN_TAPE_COLUMNS,
    AmortizationEntry,
    Borrower,
    Collateral,
    EquitySnapshot,
    Loan,
    Portfolio,
    SimulationResult,
)
from .config import (
    CreditCorrelatedHazardConfig,
    RiskModelConfig,
    SimulationConfig,
    StaticHazardConfig,
    parse_risk_model_config,
)
from .errors import InvariantViolation, PortfolioValidationError
from .utils import clamp_probability, quantize_money, require_columns, to_decimal

__all__ = [
    "LOAN_TAPE_COLUMNS",
    "AmortizationEntry",
    "Borrower",
    "Collateral",
    "EquitySnapshot",
    "Loan",
    "Portfolio",
    "SimulationResult",
    "CreditCorrelatedHazardConfig",
    "RiskModelConfig",
    "SimulationConfig",
    "StaticHazardConfig",
    "parse_risk_model_config",
    "InvariantViolation",
    "PortfolioValidationError",
    "clamp_probability",
    "quantize_money",
    "require_columns",
    "to_decimal",
]
