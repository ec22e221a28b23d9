"""Reproducible train/validation splits of a labeled dataset."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from sklearn.preprocessing import StandardScaler

from linlearn.errors import InsufficientDataError, InvalidArgumentError
from linlearn.utils.config import DEFAULT_SPLIT_CFG
from linlearn.utils.random import RandomState, as_generator

from .sampling import random_subset
from .views import Subset


if TYPE_CHECKING:
    import pandas as pd
    from numpy.typing import ArrayLike


logger = logging.getLogger(__name__)


__all__ = ["Dataset", "split"]


def _as_float_array(values: ArrayLike | None, name: str, ndim: int) -> np.ndarray:
    if values is None:
        raise InvalidArgumentError(f"{name} is None")
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(f"{name} must be a rectangular array of numbers") from err
    if arr.ndim != ndim:
        raise InvalidArgumentError(f"{name} must be {ndim}-dimensional, got {arr.ndim} dimension(s)")
    return arr


def _complement(indices: np.ndarray, n_total: int) -> np.ndarray:
    """Return the ascending indices in ``0, ..., n_total - 1`` not in ``indices``.

    ``indices`` must be ascending, so membership is checked with a single
    pointer that advances through it.
    """
    n_skip = len(indices)
    out = np.empty(n_total - n_skip, dtype=np.intp)
    ci_skip = 0
    ci_out = 0
    for i in range(n_total):
        if ci_skip < n_skip and i == indices[ci_skip]:
            ci_skip += 1
        else:
            out[ci_out] = i
            ci_out += 1
    return out


@dataclass(frozen=True)
class Dataset:
    """Labeled data split into disjoint training and validation subsets.

    Every source row lands in exactly one subset, unchanged, and rows keep
    their source order within each subset. All arrays are read-only copies
    owned by the dataset, so the caller's inputs can be mutated or discarded
    afterwards.

    Example:
        >>> import numpy as np
        >>> X = np.arange(20.0).reshape(10, 2)
        >>> y = np.arange(10.0)
        >>> data = Dataset.from_arrays(X, y, rng=np.random.default_rng(0), val_fraction=0.3)
        >>> data.n_train, data.n_val, data.n_dims
        (7, 3, 2)
    """

    train: Subset
    val: Subset

    def __post_init__(self) -> None:
        """Check that the subsets share a width and partition the source rows."""
        if self.train.n_dims != self.val.n_dims:
            raise InvalidArgumentError(
                f"train and val must have the same number of features. Got train: {self.train.n_dims}, val: {self.val.n_dims}",
            )
        if self.n_dims == 0:
            raise InvalidArgumentError("features must have positive dimension")
        if self.val.n_rows == 0:
            raise InsufficientDataError("val must contain at least one row")
        all_indices = np.sort(np.concatenate([self.train.indices, self.val.indices]))
        if not np.array_equal(all_indices, np.arange(self.n_total)):
            raise InvalidArgumentError("train and val indices must partition 0, ..., n_total - 1")
        for name, subset in (("train", self.train), ("val", self.val)):
            if np.any(np.diff(subset.indices) <= 0):
                raise InvalidArgumentError(f"{name} indices must be strictly ascending")

    @classmethod
    def from_arrays(
        cls,
        features: ArrayLike,
        labels: ArrayLike,
        rng: RandomState = None,
        val_fraction: float = DEFAULT_SPLIT_CFG.val_fraction,
    ) -> Dataset:
        """Split ``features``/``labels`` into training and validation subsets.

        ``floor(val_fraction * n_total)`` rows are drawn for validation with
        :func:`~linlearn.data.sampling.random_subset`; the remaining rows form
        the training subset.

        Args:
            features: Feature matrix, shape ``(n_total, n_dims)``.
            labels: Label vector, shape ``(n_total,)``.
            rng: Generator or seed driving the split. ``None`` seeds a fresh
                generator from OS entropy.
            val_fraction: Fraction of rows used for validation, in ``(0, 1)``.

        Returns:
            The split dataset.

        Raises:
            InvalidArgumentError: If the inputs are missing, misshapen or
                empty, or if ``val_fraction`` is outside ``(0, 1)``.
            InsufficientDataError: If the validation subset would be empty.
        """
        X = _as_float_array(features, "features", ndim=2)
        y = _as_float_array(labels, "labels", ndim=1)
        if X.shape[0] != y.shape[0]:
            raise InvalidArgumentError(
                f"features and labels must have the same number of rows. Got features: {X.shape[0]}, labels: {y.shape[0]}",
            )
        if X.shape[0] == 0:
            raise InvalidArgumentError("features, labels must have nonzero length")
        if X.shape[1] == 0:
            raise InvalidArgumentError("features must have positive dimension")
        if not 0 < val_fraction < 1:
            raise InvalidArgumentError("val_fraction must be in (0, 1)")

        n_total = X.shape[0]
        n_val = math.floor(val_fraction * n_total)
        if n_val == 0:
            raise InsufficientDataError(
                "Not enough validation points. Please increase the value of val_fraction or use a larger data set.",
            )

        val_indices = random_subset(as_generator(rng), n_total, n_val)
        train_indices = _complement(val_indices, n_total)
        dataset = cls(
            train=Subset.take(X, y, train_indices),
            val=Subset.take(X, y, val_indices),
        )
        logger.debug("Split %d rows into %d training and %d validation rows", n_total, dataset.n_train, dataset.n_val)
        return dataset

    def __str__(self) -> str:
        return f"Dataset(n_train = {self.n_train}, n_val = {self.n_val}, n_dims = {self.n_dims})"

    @property
    def n_total(self) -> int:
        """Total number of rows across both subsets."""
        return self.n_train + self.n_val

    @property
    def n_train(self) -> int:
        return self.train.n_rows

    @property
    def n_val(self) -> int:
        return self.val.n_rows

    @property
    def n_dims(self) -> int:
        """Number of feature columns, shared by both subsets."""
        return self.train.n_dims

    @property
    def train_features(self) -> np.ndarray:
        return self.train.features

    @property
    def val_features(self) -> np.ndarray:
        return self.val.features

    @property
    def train_labels(self) -> np.ndarray:
        return self.train.labels

    @property
    def val_labels(self) -> np.ndarray:
        return self.val.labels

    @property
    def train_indices(self) -> np.ndarray:
        """Source row indices of the training rows, ascending."""
        return self.train.indices

    @property
    def val_indices(self) -> np.ndarray:
        """Source row indices of the validation rows, ascending."""
        return self.val.indices

    def to_frames(self, columns: Sequence[str] | None = None) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Return ``(train_df, val_df)`` indexed by source row.

        Args:
            columns: Optional feature column names (defaults to ``x0, x1, ...``).

        Returns:
            Training and validation DataFrames, each with a ``target`` column.
        """
        return self.train.frame(columns), self.val.frame(columns)

    def standardized(self) -> Dataset:
        """Return a copy with features scaled by [sklearn's StandardScaler](https://scikit-learn.org/stable/modules/generated/sklearn.preprocessing.StandardScaler.html).

        The scaler is fitted on the training subset only and then applied to
        both subsets, so no validation statistics leak into training. Labels
        and indices are unchanged.

        Returns:
            New Dataset with standardized features.
        """
        scaler = StandardScaler().fit(self.train.features)
        subsets = []
        for subset in (self.train, self.val):
            scaled = scaler.transform(subset.features)
            subsets.append(Subset(features=scaled, labels=subset.labels, indices=subset.indices))
        return Dataset(train=subsets[0], val=subsets[1])


def split(
    features: ArrayLike,
    labels: ArrayLike,
    rng: RandomState = None,
    val_fraction: float = DEFAULT_SPLIT_CFG.val_fraction,
) -> Dataset:
    """Split a labeled dataset into training and validation subsets.

    Thin wrapper around :meth:`Dataset.from_arrays`.
    """
    return Dataset.from_arrays(features, labels, rng=rng, val_fraction=val_fraction)
