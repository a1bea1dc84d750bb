"""
Pluggable source of uniform random numbers.

Matrix.randomize() draws from a numpy Generator. Callers either pass
their own (or an integer seed) or fall back to a process-wide default
that can be re-seeded here.

Usage:
    from pymatrix.core.compute import random

    random.seed(42)
    m = Matrix(3, 3).randomize()              # reproducible default
    m.randomize(rng=np.random.default_rng(7)) # explicit generator
    m.randomize(rng=7)                        # same as above
"""

from __future__ import annotations

import numbers

import numpy as np

from pymatrix.core.exceptions import ValidationError

_default: np.random.Generator = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Return the shared default generator."""
    return _default


def seed(value: int | None = None) -> np.random.Generator:
    """
    Replace the shared default generator.

    Args:
        value: Seed for numpy.random.default_rng. None draws fresh
            entropy from the OS.

    Returns:
        The new default generator
    """
    global _default
    _default = np.random.default_rng(value)
    return _default


def resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    """
    Map a random source argument to a Generator.

    Args:
        rng: None for the shared default, an int seed for a fresh
            generator, or a Generator used as-is

    Raises:
        ValidationError: For any other type or a negative seed
    """
    if rng is None:
        return _default
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, numbers.Integral) and not isinstance(rng, bool):
        if rng < 0:
            raise ValidationError(f"rng: seed must be >= 0, got {rng}")
        return np.random.default_rng(int(rng))
    raise ValidationError(
        f"rng: expected None, an int seed or numpy.random.Generator, "
        f"got {type(rng).__name__}"
    )
