"""
Console report for the foreclosure-rate sweep.

    mortgage-mc --model static --trials 1000 --seed 7
    mortgage-mc --model credit --tape loans.csv --workers 4
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from core.config import SimulationConfig
from core.errors import PortfolioValidationError
from core.schema import SimulationResult
from data_prep.loader import load_portfolio_csv
from data_prep.sample import (
    credit_sweep_configs,
    foreclosure_rates,
    sample_portfolio,
    static_sweep_configs,
)
from engine.runner import run_sweep

logger = logging.getLogger(__name__)

MODEL_TITLES = {
    "static": "Pre-bubble model (static foreclosure rate, -10% appreciation, 75% distress sale)",
    "credit": "Credit-correlated model (FICO-adjusted hazard, random-walk prices, 70% distress sale)",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mortgage-mc",
        description="Distribution of mortgage portfolio returns across foreclosure rates.",
    )
    parser.add_argument("--model", choices=["static", "credit", "both"], default="static")
    parser.add_argument("--trials", type=int, default=1000, help="Monte Carlo trials per rate")
    parser.add_argument("--seed", type=int, default=None, help="master seed (omit for fresh entropy)")
    parser.add_argument("--streams", type=int, default=16, help="independent random streams")
    parser.add_argument("--workers", type=int, default=None, help="worker threads")
    parser.add_argument("--tape", default=None, help="loan tape CSV (default: sample portfolio)")
    parser.add_argument("--min-rate", type=int, default=1, help="lowest annual foreclosure rate, %%")
    parser.add_argument("--max-rate", type=int, default=10, help="highest annual foreclosure rate, %%")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def format_result(result: SimulationResult) -> str:
    return (
        f"At {int(round(result.model_parameter * 100))}% annual foreclosure rate, "
        f"expected return is {int(result.expected_return_fraction * 100)} cents on the dollar"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = SimulationConfig(
            trial_count=args.trials,
            seed=args.seed,
            n_streams=args.streams,
            max_workers=args.workers,
        )
        portfolio = load_portfolio_csv(args.tape) if args.tape else sample_portfolio()
        rates = foreclosure_rates(args.min_rate, args.max_rate)
        sweeps = {
            "static": static_sweep_configs(rates),
            "credit": credit_sweep_configs(rates),
        }
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    models: List[str] = ["static", "credit"] if args.model == "both" else [args.model]

    for name in models:
        configs = sweeps[name]
        try:
            _, results = run_sweep(portfolio, configs, config)
        except PortfolioValidationError as exc:
            print(f"error: invalid portfolio\n{exc}", file=sys.stderr)
            return 2
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        print(MODEL_TITLES[name])
        print("Distribution of returns given various foreclosure rates")
        for result in results:
            print(format_result(result))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
