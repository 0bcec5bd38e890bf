"""Shared random number source for computer players."""

from __future__ import annotations

import random

_generator = random.Random()


def random_int(low: int, high: int) -> int:
    """Return a uniformly chosen integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _generator.randint(low, high)


def seed(value: int | None) -> None:
    """Reseed the shared generator; None reseeds from system entropy."""
    _generator.seed(value)