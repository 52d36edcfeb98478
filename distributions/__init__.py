"""
Distributions package: random streams and Monte Carlo trial sampling.

  1. streams.py: split one master seed into independent per-worker generators
  2. sampler.py: run N independent trials on a thread pool and reduce them
"""

from .streams import child_seeds, fresh_seed, seed_sequence, spawn_generators, split_trials
from .sampler import MonteCarloSampler, estimate_return

__all__ = [
    "child_seeds",
    "fresh_seed",
    "seed_sequence",
    "spawn_generators",
    "split_trials",
    "MonteCarloSampler",
    "estimate_return",
]
