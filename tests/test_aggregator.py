"""Tests for portfolio trials, expected portfolio return and sweeps."""

import numpy as np
import pytest

from behaviors import RiskModel
from core.config import CreditCorrelatedHazardConfig, StaticHazardConfig
from core.schema import Portfolio
from data_prep.sample import credit_sweep_configs, static_sweep_configs
from pm.aggregator import estimate_portfolio_return, portfolio_trial, results_frame, sweep

from conftest import make_loan


class FixedReturnModel(RiskModel):
    """Returns a preset outcome per loan id and records every call."""

    def __init__(self, outcomes):
        self.outcomes = outcomes
        self.calls = []

    def simulate(self, loan, rng):
        self.calls.append(loan.loan_id)
        return self.outcomes[loan.loan_id]


class TestPortfolioTrial:
    def test_capital_weighted(self):
        portfolio = Portfolio(
            loans=[
                make_loan(principal="100", term=12, loan_id="small"),
                make_loan(principal="300", term=12, loan_id="big"),
            ]
        )
        model = FixedReturnModel({"small": 1.0, "big": 0.0})
        assert portfolio_trial(portfolio, model, np.random.default_rng(0)) == pytest.approx(0.25)

    def test_one_draw_per_loan(self, short_portfolio):
        model = FixedReturnModel({"A": 1.0, "B": 0.5, "C": 0.9})
        estimate_portfolio_return(short_portfolio, model, 10, seed=0, max_workers=1)
        assert len(model.calls) == 30
        assert model.calls[:3] == ["A", "B", "C"]

    def test_empty_portfolio(self):
        with pytest.raises(ValueError):
            portfolio_trial(Portfolio(loans=[]), FixedReturnModel({}), np.random.default_rng(0))

    def test_loan_order_irrelevant(self, short_portfolio):
        outcomes = {"A": 0.2, "B": 0.7, "C": 1.0}
        reversed_portfolio = Portfolio(loans=tuple(reversed(short_portfolio.loans)))
        rng = np.random.default_rng(0)
        assert portfolio_trial(short_portfolio, FixedReturnModel(outcomes), rng) == pytest.approx(
            portfolio_trial(reversed_portfolio, FixedReturnModel(outcomes), rng)
        )

    def test_loan_order_irrelevant_under_stochastic_model(self, short_portfolio):
        """Reordering loans reassigns random draws but not the expected return."""
        config = CreditCorrelatedHazardConfig(base_annual_foreclosure_rate=0.05, distress_sale_rate=0.7)
        reversed_portfolio = Portfolio(loans=tuple(reversed(short_portfolio.loans)))
        (forward,) = sweep(short_portfolio, [config], 1500, seed=31)
        (backward,) = sweep(reversed_portfolio, [config], 1500, seed=32)
        tolerance = 5 * np.hypot(forward.standard_error, backward.standard_error) + 1e-3
        assert forward.expected_return_fraction == pytest.approx(backward.expected_return_fraction, abs=tolerance)


class TestEstimatePortfolioReturn:
    def test_zero_hazard_is_one(self, short_portfolio):
        config = StaticHazardConfig(annual_foreclosure_rate=0.0, annual_appreciation_rate=-0.2, distress_sale_rate=0.1)
        assert estimate_portfolio_return(short_portfolio, config, 25, seed=3) == 1.0

    def test_reproducible_with_seed(self, short_portfolio):
        config = CreditCorrelatedHazardConfig(base_annual_foreclosure_rate=0.05, distress_sale_rate=0.7)
        a = estimate_portfolio_return(short_portfolio, config, 50, seed=21)
        b = estimate_portfolio_return(short_portfolio, config, 50, seed=21, max_workers=2)
        assert a == b

    def test_seed_sequence_argument_is_reusable(self, short_portfolio):
        config = CreditCorrelatedHazardConfig(base_annual_foreclosure_rate=0.05, distress_sale_rate=0.7)
        ss = np.random.SeedSequence(5)
        a = estimate_portfolio_return(short_portfolio, config, 40, seed=ss)
        b = estimate_portfolio_return(short_portfolio, config, 40, seed=ss)
        assert a == b
        assert a == estimate_portfolio_return(short_portfolio, config, 40, seed=5)

    def test_reference_portfolio_credit_model(self, reference_portfolio):
        """Five-loan reference book, base 5%, distress 70%: stable estimate in [0, 1]."""
        config = CreditCorrelatedHazardConfig(base_annual_foreclosure_rate=0.05, distress_sale_rate=0.70)
        first = estimate_portfolio_return(reference_portfolio, config, 1000, seed=2024)
        second = estimate_portfolio_return(reference_portfolio, config, 1000, seed=7)
        assert 0.0 <= first <= 1.0
        assert 0.0 <= second <= 1.0
        assert first == pytest.approx(second, abs=0.02)


class TestSweep:
    def test_order_and_parameters(self, short_portfolio):
        rates = [0.03, 0.01, 0.02]
        results = sweep(short_portfolio, credit_sweep_configs(rates), 20, seed=1)
        assert [r.model_parameter for r in results] == rates
        assert all(0.0 <= r.expected_return_fraction <= 1.0 for r in results)
        assert all(r.trial_count == 20 for r in results)
        assert all(r.ci_low <= r.expected_return_fraction <= r.ci_high for r in results)

    def test_empty_configs(self, short_portfolio):
        assert sweep(short_portfolio, [], 10) == []

    def test_reproducible(self, short_portfolio):
        configs = static_sweep_configs([0.05, 0.10])
        a = sweep(short_portfolio, configs, 30, seed=99)
        b = sweep(short_portfolio, configs, 30, seed=99)
        assert a == b

    def test_seed_sequence_argument_is_reusable(self, short_portfolio):
        configs = credit_sweep_configs([0.02, 0.05])
        ss = np.random.SeedSequence(99)
        assert sweep(short_portfolio, configs, 20, seed=ss) == sweep(short_portfolio, configs, 20, seed=ss)

    def test_appending_configs_keeps_earlier_results(self, short_portfolio):
        a = sweep(short_portfolio, static_sweep_configs([0.5]), 30, seed=5)
        b = sweep(short_portfolio, static_sweep_configs([0.5, 1.0]), 30, seed=5)
        assert a[0] == b[0]

    def test_return_falls_as_foreclosure_rate_rises(self, short_portfolio):
        results = sweep(short_portfolio, static_sweep_configs([0.0, 0.6, 2.4]), 300, seed=11)
        returns = [r.expected_return_fraction for r in results]
        assert returns[0] == 1.0
        assert returns[0] >= returns[1] >= returns[2]
        assert returns[2] < 1.0

    def test_results_frame(self, short_portfolio):
        results = sweep(short_portfolio, credit_sweep_configs([0.01, 0.02]), 10, seed=0)
        df = results_frame(results)
        assert list(df["model_parameter"]) == [0.01, 0.02]
        assert list(df.columns) == [
            "model_parameter", "expected_return", "std_dev", "standard_error", "ci_low", "ci_high", "trials",
        ]
