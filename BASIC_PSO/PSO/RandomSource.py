# File: BASIC_PSO/PSO/RandomSource.py
# Injectable uniform random source. The swarm never touches np.random's global state.

from typing import Optional, Protocol, Tuple, Union

import numpy as np


class UniformRandomSource(Protocol):
    """Anything that yields uniform draws in [0, 1) with the given shape."""

    def random(self, size: Union[int, Tuple[int, ...]]) -> np.ndarray:
        ...


def make_random_source(seed: Optional[Union[int, np.random.SeedSequence]] = None) -> np.random.Generator:
    """
    Returns a NumPy Generator to drive one optimizer run.

    Two sources built from the same seed produce identical draw sequences,
    which makes whole runs bit-reproducible.
    """
    return np.random.default_rng(seed)


def resolve_random_source(rng=None) -> UniformRandomSource:
    """Accepts an existing source, a seed, or None (fresh entropy)."""
    if rng is None or isinstance(rng, (int, np.integer, np.random.SeedSequence)):
        return make_random_source(rng)
    if not callable(getattr(rng, "random", None)):
        raise TypeError(f"Random source {rng!r} has no random(size) method.")
    return rng
