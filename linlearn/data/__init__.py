"""Data module: sampling, splitting and synthetic data generation."""

from .dataset import Dataset, split
from .generators import (
    cls_hastie_targets,
    gaussian_matrix,
    make_classification_data,
    make_regression_data,
    reg_friedman1_targets,
    uniform_matrix,
)
from .sampling import random_subset
from .views import Subset


__all__ = [
    "Dataset",
    "Subset",
    "cls_hastie_targets",
    "gaussian_matrix",
    "make_classification_data",
    "make_regression_data",
    "random_subset",
    "reg_friedman1_targets",
    "split",
    "uniform_matrix",
]
