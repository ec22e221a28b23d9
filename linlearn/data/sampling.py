"""Uniform random subsets of ``0, ..., n - 1`` without replacement."""

from __future__ import annotations

import numpy as np

from linlearn.errors import InvalidArgumentError
from linlearn.utils.random import RandomState, as_generator


__all__ = ["random_subset"]


def random_subset(rng: RandomState, n: int, k: int, shuffle: bool = False) -> np.ndarray:
    """Sample ``k`` distinct indices uniformly from ``0, ..., n - 1``.

    Uses selection sampling (Knuth's Algorithm S): the candidates are visited
    in order and candidate ``i`` is accepted with probability
    ``(k - picked) / (n - i)``. Each decision draws one bounded integer
    ``u = rng.integers(n - i)`` and accepts iff ``u < k - picked``, so the
    acceptance probability is exact and the call consumes exactly ``n`` draws.
    Every size-``k`` subset is equally likely.

    Args:
        rng: Generator (or seed) to draw from. A generator is advanced in place.
        n: Population size, i.e. sample from ``0, ..., n - 1``.
        k: Number of indices to select, ``0 <= k <= n``.
        shuffle: If ``True``, permute the selected indices uniformly with a
            Fisher-Yates shuffle, consuming ``k`` additional draws. Otherwise
            the indices are returned in ascending order.

    Returns:
        Integer array of length ``k``.

    Raises:
        InvalidArgumentError: If ``n < 0``, ``k < 0`` or ``k > n``.
    """
    if n < 0:
        raise InvalidArgumentError("n must be nonnegative")
    if k < 0:
        raise InvalidArgumentError("k must be nonnegative")
    if k > n:
        raise InvalidArgumentError("k must be <= n")
    rng = as_generator(rng)

    ixs = np.empty(k, dtype=np.intp)
    n_picked = 0
    for i in range(n):
        # one draw per candidate, even after all k are picked
        if rng.integers(n - i) < k - n_picked:
            ixs[n_picked] = i
            n_picked += 1

    if shuffle:
        for i in range(k):
            j = rng.integers(i + 1)
            ixs[i], ixs[j] = ixs[j], ixs[i]
    return ixs
