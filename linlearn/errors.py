"""Exception types raised by linlearn."""


class LinlearnError(Exception):
    """Base class for all errors raised by linlearn."""


class InvalidArgumentError(LinlearnError, ValueError):
    """Raised for malformed shapes, out-of-range fractions or sample sizes."""


class InsufficientDataError(LinlearnError, ValueError):
    """Raised when a split would leave the validation subset empty."""


__all__ = ["InsufficientDataError", "InvalidArgumentError", "LinlearnError"]
