"""Helpers for turning seeds into numpy random generators."""

from __future__ import annotations

from typing import TypeAlias

import numpy as np


RandomState: TypeAlias = int | np.random.SeedSequence | np.random.Generator | None
"""Anything :func:`as_generator` accepts: a seed, a seed sequence, a generator or ``None``."""


__all__ = ["RandomState", "as_generator"]


def as_generator(random_state: RandomState = None) -> np.random.Generator:
    """Return a :class:`numpy.random.Generator` for ``random_state``.

    Existing generators are returned unchanged, so draws made by the callee
    advance the caller's stream. Seeds and seed sequences build a fresh PCG64
    generator via :func:`numpy.random.default_rng`; ``None`` seeds it from OS
    entropy.

    Args:
        random_state: Seed, seed sequence, generator or ``None``.

    Returns:
        Generator to draw from.

    Raises:
        TypeError: If ``random_state`` is of an unsupported type.
    """
    if isinstance(random_state, np.random.Generator):
        return random_state
    # bool is an int subclass but never a meaningful seed
    if isinstance(random_state, bool):
        raise TypeError("random_state must not be a bool")
    if random_state is None or isinstance(random_state, int | np.integer | np.random.SeedSequence):
        return np.random.default_rng(random_state)
    raise TypeError(
        f"random_state must be None, an int seed, a SeedSequence or a numpy Generator, got {type(random_state).__name__}",
    )
