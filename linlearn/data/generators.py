"""Synthetic feature matrices and target rules for classification and regression.

References:
    [1] T. Hastie, R. Tibshirani and J. Friedman, The Elements of Statistical
        Learning, 2nd ed., Springer, 2009. Example 10.2.
    [2] J. Friedman, Multivariate adaptive regression splines, The Annals of
        Statistics 19 (1), pages 1-67, 1991.
    [3] L. Breiman, Bagging predictors, Machine Learning 24, pages 123-140, 1996.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from linlearn.errors import InvalidArgumentError
from linlearn.utils.random import RandomState, as_generator


if TYPE_CHECKING:
    from numpy.typing import ArrayLike


__all__ = [
    "HASTIE_THRESHOLD",
    "cls_hastie_targets",
    "gaussian_matrix",
    "make_classification_data",
    "make_regression_data",
    "reg_friedman1_targets",
    "uniform_matrix",
]


HASTIE_THRESHOLD = 9.34
"""Median of a chi-squared variable with 10 degrees of freedom (rounded)."""

FRIEDMAN1_MIN_COLS = 5


def _check_shape(n_rows: int, n_cols: int) -> None:
    if n_rows <= 0:
        raise InvalidArgumentError("n_rows must be positive")
    if n_cols <= 0:
        raise InvalidArgumentError("n_cols must be positive")


def _check_matrix(X: ArrayLike | None) -> np.ndarray:
    if X is None:
        raise InvalidArgumentError("X is None")
    try:
        X = np.asarray(X, dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError("X must be a rectangular array of numbers") from err
    if X.ndim != 2:  # noqa: PLR2004
        raise InvalidArgumentError("X must be two-dimensional")
    if X.shape[0] == 0:
        raise InvalidArgumentError("X must have positive length")
    if X.shape[1] == 0:
        raise InvalidArgumentError("X must have positive dimension")
    return X


def gaussian_matrix(n_rows: int, n_cols: int, rng: RandomState = None) -> np.ndarray:
    """Create a matrix of i.i.d. standard normal entries.

    Args:
        n_rows: Number of rows in the matrix.
        n_cols: Number of columns in the matrix.
        rng: Generator or seed. ``None`` seeds from OS entropy.

    Returns:
        Float matrix with shape ``(n_rows, n_cols)``.
    """
    _check_shape(n_rows, n_cols)
    return as_generator(rng).standard_normal((n_rows, n_cols))


def uniform_matrix(n_rows: int, n_cols: int, rng: RandomState = None) -> np.ndarray:
    """Create a matrix of i.i.d. entries drawn uniformly from ``[0, 1)``.

    Args:
        n_rows: Number of rows in the matrix.
        n_cols: Number of columns in the matrix.
        rng: Generator or seed. ``None`` seeds from OS entropy.

    Returns:
        Float matrix with shape ``(n_rows, n_cols)``.
    """
    _check_shape(n_rows, n_cols)
    return as_generator(rng).random((n_rows, n_cols))


def cls_hastie_targets(X: ArrayLike) -> np.ndarray:
    r"""Binary classification targets following Hastie et al. [1], Example 10.2.

    :math:`y_i = 1` if :math:`\sum_j X_{ij}^2 > 9.34` and :math:`-1` otherwise.
    Intended for standard Gaussian inputs, where the two classes are roughly
    balanced for 10 features.

    Args:
        X: Input matrix, shape ``(n_rows, n_cols)``.

    Returns:
        Vector of length ``n_rows`` with values in ``{-1, 1}``.
    """
    X = _check_matrix(X)
    return np.where(np.square(X).sum(axis=1) > HASTIE_THRESHOLD, 1.0, -1.0)


def reg_friedman1_targets(X: ArrayLike, noise: float = 0.0, rng: RandomState = None) -> np.ndarray:
    r"""Regression targets for the Friedman #1 problem [2], [3].

    :math:`y = 10 \sin(\pi x_0 x_1) + 20 (x_2 - 0.5)^2 + 10 x_3 + 5 x_4 + \sigma \epsilon`
    with :math:`\epsilon \sim N(0, 1)`. Columns beyond the fifth do not
    influence the target. Intended for inputs uniform on ``[0, 1]``.

    Args:
        X: Input matrix, shape ``(n_rows, n_cols)`` with ``n_cols >= 5``.
        noise: Standard deviation :math:`\sigma` of the Gaussian noise.
        rng: Generator or seed for the noise; only drawn from when ``noise > 0``.

    Returns:
        Vector of regression targets, length ``n_rows``.
    """
    X = _check_matrix(X)
    if X.shape[1] < FRIEDMAN1_MIN_COLS:
        raise InvalidArgumentError(f"X must have at least {FRIEDMAN1_MIN_COLS} features")
    if noise < 0:
        raise InvalidArgumentError("noise must be nonnegative")

    y = (
        10 * np.sin(np.pi * X[:, 0] * X[:, 1])
        + 20 * (X[:, 2] - 0.5) ** 2
        + 10 * X[:, 3]
        + 5 * X[:, 4]
    )
    if noise > 0:
        y = y + noise * as_generator(rng).standard_normal(X.shape[0])
    return y


def make_classification_data(
    n_rows: int,
    n_cols: int = 10,
    rng: RandomState = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Gaussian features with Hastie targets, drawn from one generator."""
    X = gaussian_matrix(n_rows, n_cols, as_generator(rng))
    return X, cls_hastie_targets(X)


def make_regression_data(
    n_rows: int,
    n_cols: int = 10,
    noise: float = 1.0,
    rng: RandomState = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Uniform features with Friedman #1 targets, drawn from one generator.

    Features are drawn first and the target noise second, so a fixed seed
    reproduces both.
    """
    rng = as_generator(rng)
    X = uniform_matrix(n_rows, n_cols, rng)
    return X, reg_friedman1_targets(X, noise=noise, rng=rng)
