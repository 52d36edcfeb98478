"""
Data preparation: loan tapes, portfolio validation, reference inputs.
"""

from .loader import canonicalize_columns, load_portfolio_csv, portfolio_from_tape
from .validators import ValidationResult, validate_portfolio
from .sample import (
    credit_sweep_configs,
    foreclosure_rates,
    sample_portfolio,
    static_sweep_configs,
)

__all__ = [
    "canonicalize_columns",
    "load_portfolio_csv",
    "portfolio_from_tape",
    "ValidationResult",
    "validate_portfolio",
    "credit_sweep_configs",
    "foreclosure_rates",
    "sample_portfolio",
    "static_sweep_configs",
]
