"""
Monte Carlo Sampler: runs independent trials of a stochastic function and
reduces them.

A trial is any callable taking a numpy Generator and returning a float
(one loan outcome, one portfolio outcome, ...). Trials are split into
contiguous chunks, one random stream per chunk, and the chunks are run on a
thread pool:

  trials:   [0 ......... 249][250 ........ 499][500 ... ]
  streams:   rng_0             rng_1             rng_2 ...
  workers:   any free thread picks up any chunk

Chunks are reassembled in chunk order, so for a fixed (seed, n_streams) the
outcome array is identical whatever max_workers is and whichever chunk
finishes first.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

import numpy as np

from behaviors.base import RiskModel
from core.config import SimulationConfig
from core.errors import InvariantViolation
from core.schema import Loan

from .streams import SeedLike, describe, fresh_seed, seed_sequence, spawn_generators, split_trials

logger = logging.getLogger(__name__)

TrialFn = Callable[[np.random.Generator], float]


def _run_chunk(trial_fn: TrialFn, rng: np.random.Generator, n_trials: int) -> np.ndarray:
    out = np.empty(n_trials, dtype=float)
    for i in range(n_trials):
        out[i] = trial_fn(rng)
    return out


class MonteCarloSampler:
    """
    Draws trial_count independent outcomes of a trial function.

    Usage:
        sampler = MonteCarloSampler(trial_count=1000, seed=42)
        mean = sampler.estimate_return(loan, model)
        outcomes = sampler.run(lambda rng: model.simulate(loan, rng))
    """

    def __init__(
        self,
        trial_count: int = 1000,
        seed: SeedLike = None,
        n_streams: int = 16,
        max_workers: Optional[int] = None,
    ):
        if trial_count <= 0:
            raise ValueError(f"trial_count must be positive, got {trial_count}")
        self.trial_count = trial_count
        self.seed = seed_sequence(seed)
        self.n_streams = n_streams
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, config: SimulationConfig, seed: SeedLike = None) -> "MonteCarloSampler":
        """seed overrides config.seed (used to hand out per-job child seeds)."""
        return cls(
            trial_count=config.trial_count,
            seed=config.seed if seed is None else seed,
            n_streams=config.n_streams,
            max_workers=config.max_workers,
        )

    def run(self, trial_fn: TrialFn) -> np.ndarray:
        """
        Outcomes of all trials, shape (trial_count,).

        Each call spawns fresh streams, so repeated calls on one sampler are
        independent of each other yet reproducible as a sequence.
        """
        sizes = split_trials(self.trial_count, self.n_streams)
        generators = spawn_generators(self.seed, len(sizes))
        logger.debug(
            "Running %d trials on %d streams (%s)",
            self.trial_count,
            len(sizes),
            describe(self.seed),
        )

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            chunks = list(pool.map(_run_chunk, [trial_fn] * len(sizes), generators, sizes))

        outcomes = np.concatenate(chunks)
        if not np.all(np.isfinite(outcomes)):
            raise InvariantViolation("Non-finite trial outcome produced by simulation")
        return outcomes

    def estimate_return(self, loan: Loan, model: RiskModel) -> float:
        """Mean realized return of one loan over trial_count trials."""
        outcomes = self.run(lambda rng: model.simulate(loan, rng))
        return float(np.mean(outcomes))


def estimate_return(
    loan: Loan,
    model: RiskModel,
    trial_count: int,
    *,
    seed: SeedLike = None,
    n_streams: int = 16,
    max_workers: Optional[int] = None,
) -> float:
    sampler = MonteCarloSampler(
        trial_count=trial_count,
        seed=fresh_seed(seed),
        n_streams=n_streams,
        max_workers=max_workers,
    )
    return sampler.estimate_return(loan, model)
