"""Pointwise loss functions for regression and binary classification."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from linlearn.errors import InvalidArgumentError


if TYPE_CHECKING:
    from numpy.typing import ArrayLike


HUBER_DELTA = 1.0


class Loss(StrEnum):
    """Known loss functions, each evaluated with :meth:`evaluate`.

    Regression losses (``SQUARED_ERROR``, ``HUBER``) compare a target with a
    prediction. Classification losses (``HINGE``, ``MODIFIED_HUBER``) expect
    labels in ``{-1, 1}`` and act on the margin ``y * y_hat``.

    Example:
        >>> Loss.SQUARED_ERROR.evaluate(3, 5)
        4.0
        >>> Loss.from_name("Huber").evaluate(0, 2)
        1.5
    """

    SQUARED_ERROR = "squared_error"
    HINGE = "hinge"
    HUBER = "huber"
    MODIFIED_HUBER = "modified_huber"

    @classmethod
    def from_name(cls, name: str) -> Loss:
        """Look up a loss by name, ignoring case and surrounding whitespace."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise InvalidArgumentError(f"Unknown loss '{name}'. Use one of: {known}") from None

    @property
    def is_classification(self) -> bool:
        """Whether the loss acts on a classification margin."""
        return self in {Loss.HINGE, Loss.MODIFIED_HUBER}

    def evaluate(self, y: ArrayLike, y_hat: ArrayLike) -> float | np.ndarray:
        """Evaluate the loss on target ``y`` and prediction ``y_hat``.

        Args:
            y: True value(s).
            y_hat: Predicted value(s), broadcastable against ``y``.

        Returns:
            ``float`` for scalar inputs, otherwise the elementwise losses.
        """
        y_arr = np.asarray(y, dtype=np.float64)
        y_hat_arr = np.asarray(y_hat, dtype=np.float64)
        match self:
            case Loss.SQUARED_ERROR:
                out = np.square(y_arr - y_hat_arr)
            case Loss.HINGE:
                out = np.maximum(0.0, 1.0 - y_arr * y_hat_arr)
            case Loss.HUBER:
                # quadratic within delta of the target, linear outside
                abs_diff = np.abs(y_arr - y_hat_arr)
                out = np.where(
                    abs_diff <= HUBER_DELTA,
                    0.5 * np.square(abs_diff),
                    HUBER_DELTA * (abs_diff - 0.5 * HUBER_DELTA),
                )
            case Loss.MODIFIED_HUBER:
                # squared hinge for margins >= -1, linear below
                margin = y_arr * y_hat_arr
                out = np.where(margin >= -1.0, np.square(np.maximum(0.0, 1.0 - margin)), -4.0 * margin)
        if np.ndim(out) == 0:
            return float(out)
        return out

    def mean(self, y: ArrayLike, y_hat: ArrayLike) -> float:
        """Average loss over all (broadcast) pairs of ``y`` and ``y_hat``."""
        return float(np.mean(self.evaluate(y, y_hat)))


__all__ = ["HUBER_DELTA", "Loss"]
