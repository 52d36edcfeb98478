"""
PM (Portfolio Manager) outputs: portfolio trials, sweeps and trial metrics.
"""

from .metrics import TrialSummary, summarize_trials
from .aggregator import estimate_portfolio_return, portfolio_trial, results_frame, sweep

__all__ = [
    "TrialSummary",
    "summarize_trials",
    "estimate_portfolio_return",
    "portfolio_trial",
    "results_frame",
    "sweep",
]
