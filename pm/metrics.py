"""
Summary statistics over Monte Carlo trial outcomes.

The mean is the estimate we report; the spread tells how far to trust it:
  standard error  = std / sqrt(n)
  confidence band = mean +/- t_{(1+c)/2, n-1} * standard error
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np
import pandas as pd
from scipy import stats


@dataclass(frozen=True)
class TrialSummary:
    n_trials: int
    mean: float
    std_dev: float
    standard_error: float
    ci_low: float
    ci_high: float
    confidence: float
    percentiles: Dict[str, float] = field(default_factory=dict)

    def to_dataframe(self) -> pd.DataFrame:
        row = {
            "Trials": self.n_trials,
            "Mean": self.mean,
            "Std Dev": self.std_dev,
            "Std Error": self.standard_error,
            f"CI{int(self.confidence * 100)} Low": self.ci_low,
            f"CI{int(self.confidence * 100)} High": self.ci_high,
        }
        row.update(self.percentiles)
        return pd.DataFrame([row])


def summarize_trials(
    outcomes: np.ndarray,
    *,
    confidence: float = 0.95,
    percentiles: Tuple[float, ...] = (0.01, 0.05, 0.50, 0.95, 0.99),
) -> TrialSummary:
    """Mean, dispersion, t-based confidence interval and percentiles of outcomes."""
    values = np.asarray(outcomes, dtype=float)
    n = len(values)
    if n == 0:
        raise ValueError("No trial outcomes to summarize.")
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")

    mean = float(np.mean(values))
    if n > 1:
        std = float(np.std(values, ddof=1))
        se = std / np.sqrt(n)
        half_width = float(stats.t.ppf((1.0 + confidence) / 2.0, df=n - 1)) * se
    else:
        std = se = half_width = 0.0

    pcts = {f"P{int(p * 100):02d}": float(np.percentile(values, p * 100)) for p in percentiles}

    return TrialSummary(
        n_trials=n,
        mean=mean,
        std_dev=std,
        standard_error=float(se),
        ci_low=mean - half_width,
        ci_high=mean + half_width,
        confidence=confidence,
        percentiles=pcts,
    )
