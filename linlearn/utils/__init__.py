from .config import DEFAULT_SPLIT_CFG, SplitConfig
from .random import RandomState, as_generator


__all__ = [
    "DEFAULT_SPLIT_CFG",
    "RandomState",
    "SplitConfig",
    "as_generator",
]
