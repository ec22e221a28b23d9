"""Reproducible train/validation splitting with synthetic data generators and loss functions."""

from .data import Dataset, Subset, random_subset, split
from .errors import InsufficientDataError, InvalidArgumentError, LinlearnError
from .losses import Loss


__version__ = "0.1.0"

__all__ = [
    "Dataset",
    "InsufficientDataError",
    "InvalidArgumentError",
    "LinlearnError",
    "Loss",
    "Subset",
    "random_subset",
    "split",
]
