"""Read-only views over one side of a train/validation split."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from linlearn.errors import InvalidArgumentError


TARGET_COL = "target"


def _locked(values: np.ndarray, dtype: type) -> np.ndarray:
    """Copy ``values`` and return a read-only view whose base is read-only too.

    A view of a locked base cannot have its ``writeable`` flag switched back on.
    """
    base = np.array(values, dtype=dtype)
    base.setflags(write=False)
    return base.view()


@dataclass(frozen=True)
class Subset:
    """Immutable snapshot of the rows assigned to one subset.

    Attributes:
        features: Feature matrix, shape ``(n_rows, n_dims)``.
        labels: Label vector, shape ``(n_rows,)``.
        indices: Ascending row indices of these rows in the source data.
    """

    features: np.ndarray
    """Feature matrix, shape ``(n_rows, n_dims)``."""
    labels: np.ndarray
    """Label vector, shape ``(n_rows,)``."""
    indices: np.ndarray
    """Ascending row indices of these rows in the source data."""

    def __post_init__(self) -> None:
        """Take locked copies of the arrays and check that their shapes agree."""
        features = _locked(self.features, np.float64)
        labels = _locked(self.labels, np.float64)
        indices = _locked(self.indices, np.intp)
        if features.ndim != 2 or labels.ndim != 1 or indices.ndim != 1:  # noqa: PLR2004
            raise InvalidArgumentError("features must be 2-dimensional, labels and indices 1-dimensional")
        if not features.shape[0] == labels.shape[0] == indices.shape[0]:
            raise InvalidArgumentError(
                f"features, labels and indices must have the same length. Got {features.shape[0]}, {labels.shape[0]}, {indices.shape[0]}",
            )
        object.__setattr__(self, "features", features)
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "indices", indices)

    @classmethod
    def take(cls, features: np.ndarray, labels: np.ndarray, indices: np.ndarray) -> Subset:
        """Copy the rows at ``indices`` (in order) into a new read-only subset."""
        indices = np.asarray(indices, dtype=np.intp)
        return cls(features=features[indices], labels=labels[indices], indices=indices)

    @property
    def n_rows(self) -> int:
        """Number of rows in the subset."""
        return int(self.features.shape[0])

    @property
    def n_dims(self) -> int:
        """Number of feature columns."""
        return int(self.features.shape[1])

    def frame(self, columns: Sequence[str] | None = None) -> pd.DataFrame:
        """Return features and labels as a DataFrame indexed by source row.

        Args:
            columns: Optional feature column names. Defaults to ``x0, x1, ...``.

        Returns:
            DataFrame with one column per feature plus a ``target`` column.
        """
        if columns is None:
            columns = [f"x{j}" for j in range(self.n_dims)]
        elif len(columns) != self.n_dims:
            raise InvalidArgumentError(f"Expected {self.n_dims} column names, got {len(columns)}")
        df = pd.DataFrame(self.features.copy(), columns=list(columns), index=pd.Index(self.indices, name="row"))
        df[TARGET_COL] = self.labels
        return df
