"""Exception hierarchy shared by descriptors and path generators."""

from __future__ import annotations

__all__ = ["ValidationError", "PreconditionError", "NumericalError"]


class ValidationError(ValueError):
    """A process descriptor (or simulation config) was built from bad values."""


class PreconditionError(ValueError):
    """A generator was called with arguments it cannot work with."""


class NumericalError(RuntimeError):
    """A numerical routine failed, e.g. a covariance matrix is not positive-definite."""
