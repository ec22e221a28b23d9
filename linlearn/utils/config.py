"""Shared split configuration (validation fraction, seed, preview size)."""

from __future__ import annotations

from dataclasses import dataclass, replace

from linlearn.errors import InvalidArgumentError


@dataclass(frozen=True)
class SplitConfig:
    """Reusable settings for building train/validation splits.

    Attributes:
        val_fraction: Fraction of rows reserved for validation, in ``(0, 1)``.
        seed: Optional seed for reproducible splits. ``None`` seeds from OS entropy.
        standardize: Scale features with statistics fitted on the training subset.
        preview_rows: Number of rows shown per subset when printing previews.
    """

    val_fraction: float = 0.2
    seed: int | None = None
    standardize: bool = False
    preview_rows: int = 5

    def __post_init__(self) -> None:
        """Validate field ranges."""
        if not 0 < self.val_fraction < 1:
            raise InvalidArgumentError("val_fraction must be in (0, 1)")
        if self.seed is not None and self.seed < 0:
            raise InvalidArgumentError("seed must be nonnegative")
        if self.preview_rows < 0:
            raise InvalidArgumentError("preview_rows must be nonnegative")

    def with_overrides(self, **changes: object) -> SplitConfig:
        """Return a copy with ``changes`` applied, skipping ``None`` values.

        Example:
            >>> cfg = DEFAULT_SPLIT_CFG.with_overrides(val_fraction=0.5, seed=None)
            >>> cfg.val_fraction, cfg.seed
            (0.5, None)
        """
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


# Default configuration used by split() and the CLI
DEFAULT_SPLIT_CFG = SplitConfig()


__all__ = ["DEFAULT_SPLIT_CFG", "SplitConfig"]
