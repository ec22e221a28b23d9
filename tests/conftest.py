"""Test configuration for linlearn."""

from pathlib import Path
import sys

import numpy as np
import pytest


# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def small_X() -> np.ndarray:
    """Four rows with five features each."""
    return np.array(
        [
            [0, 1, 2, 3, 1],
            [2, 0, 1, 2, 1],
            [0, 1, 2, 0, 0],
            [3, 1, 2, 3, 3],
        ],
        dtype=float,
    )


@pytest.fixture
def small_y() -> np.ndarray:
    """Labels that go with ``small_X``."""
    return np.array([0.2, 0.1, 0.1, 0.3])


@pytest.fixture
def numbered_data() -> tuple[np.ndarray, np.ndarray]:
    """50 rows whose features and label encode the row number, for tracing rows through a split."""
    n_rows = 50
    rows = np.arange(n_rows, dtype=float)
    X = np.column_stack([rows, rows * 10, -rows])
    y = rows + 0.5
    return X, y


def selection_oracle(seed: int, n: int, k: int) -> list[int]:
    """Replay selection sampling draw by draw on a fresh ``default_rng(seed)``."""
    rng = np.random.default_rng(seed)
    picked: list[int] = []
    for i in range(n):
        if rng.integers(n - i) < k - len(picked):
            picked.append(i)
    return picked


@pytest.fixture
def oracle():
    """Expose :func:`selection_oracle` to tests."""
    return selection_oracle
