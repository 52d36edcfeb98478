"""Tests for trial summary statistics."""

import numpy as np
import pytest
from scipy import stats

from pm.metrics import summarize_trials


class TestSummarizeTrials:
    def test_constant_outcomes(self):
        s = summarize_trials(np.ones(20))
        assert s.mean == 1.0
        assert s.std_dev == 0.0
        assert s.ci_low == s.ci_high == 1.0

    def test_known_spread(self):
        values = np.array([0.0, 1.0] * 50)
        s = summarize_trials(values, confidence=0.95)
        std = np.std(values, ddof=1)
        se = std / np.sqrt(100)
        half = stats.t.ppf(0.975, df=99) * se
        assert s.mean == pytest.approx(0.5)
        assert s.std_dev == pytest.approx(std)
        assert s.standard_error == pytest.approx(se)
        assert s.ci_low == pytest.approx(0.5 - half)
        assert s.ci_high == pytest.approx(0.5 + half)

    def test_percentiles(self):
        s = summarize_trials(np.arange(101, dtype=float), percentiles=(0.05, 0.50))
        assert s.percentiles == {"P05": pytest.approx(5.0), "P50": pytest.approx(50.0)}

    def test_single_trial(self):
        s = summarize_trials(np.array([0.8]))
        assert s.n_trials == 1
        assert s.ci_low == s.ci_high == 0.8

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            summarize_trials(np.array([]))

    @pytest.mark.parametrize("confidence", [0.0, 1.0, 1.5])
    def test_bad_confidence(self, confidence):
        with pytest.raises(ValueError):
            summarize_trials(np.ones(3), confidence=confidence)

    def test_to_dataframe(self):
        df = summarize_trials(np.linspace(0, 1, 11)).to_dataframe()
        assert len(df) == 1
        assert {"Trials", "Mean", "Std Dev", "Std Error", "CI95 Low", "CI95 High", "P50"} <= set(df.columns)
