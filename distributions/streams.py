"""
Independent random streams from one master seed.

Every unit of parallel work gets its own numpy Generator seeded from a child
of a single SeedSequence (SeedSequence.spawn). No generator is ever shared
between threads and nothing is reseeded from the clock per call; a None seed
only means the master sequence draws its entropy from the OS once.
"""

from __future__ import annotations

from typing import List, Optional, Union

import numpy as np

SeedLike = Union[None, int, np.random.SeedSequence]


def seed_sequence(seed: SeedLike) -> np.random.SeedSequence:
    if isinstance(seed, np.random.SeedSequence):
        return seed
    return np.random.SeedSequence(seed)


def fresh_seed(seed: SeedLike) -> SeedLike:
    """Copy of a caller-owned SeedSequence; spawn() mutates the one it is called on."""
    if isinstance(seed, np.random.SeedSequence):
        return np.random.SeedSequence(
            seed.entropy,
            spawn_key=seed.spawn_key,
            pool_size=seed.pool_size,
            n_children_spawned=seed.n_children_spawned,
        )
    return seed


def spawn_generators(seed: SeedLike, n: int) -> List[np.random.Generator]:
    """n statistically independent generators derived from seed."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return [np.random.default_rng(child) for child in seed_sequence(seed).spawn(n)]


def split_trials(trial_count: int, n_streams: int) -> List[int]:
    """
    Contiguous chunk sizes for trial_count trials over at most n_streams
    streams. Sizes differ by at most one; empty chunks are dropped.
    """
    if trial_count <= 0:
        raise ValueError(f"trial_count must be positive, got {trial_count}")
    if n_streams <= 0:
        raise ValueError(f"n_streams must be positive, got {n_streams}")
    n = min(trial_count, n_streams)
    base, extra = divmod(trial_count, n)
    return [base + 1 if i < extra else base for i in range(n)]


def child_seeds(seed: SeedLike, n: int) -> List[np.random.SeedSequence]:
    """One child SeedSequence per independent job (e.g. per sweep config)."""
    return seed_sequence(seed).spawn(n)


def describe(seed: SeedLike) -> Optional[str]:
    """Short printable form of a seed for logging."""
    if seed is None:
        return None
    ss = seed_sequence(seed)
    return f"entropy={ss.entropy} spawn_key={ss.spawn_key}"
