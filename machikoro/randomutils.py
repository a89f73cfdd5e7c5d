"""Random number helpers used by dice and shuffling."""

import random

_rng = random.Random()


def get_int(low: int, high: int) -> int:
    """Return a random integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _rng.randint(low, high)


def get_double(low: float, high: float) -> float:
    """Return a random float in the half-open range [low, high)."""
    return low + (high - low) * _rng.random()