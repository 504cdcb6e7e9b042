"""
Process descriptors
===================
Immutable parameter records consumed by the path generators.

* :class:`FBM` – time grid ``t`` (starting at 0, strictly increasing), its
  length ``n`` and the Hurst index ``h``.
* :class:`FGN` – standard deviation ``sigma`` and Hurst index ``h``.

All checks happen at construction; the generators assume a descriptor they
receive is valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Union

import numpy as np
import pandas as pd

from ..errors import ValidationError
from .autocov import fgn_autocov

__all__ = [
    "FBM",
    "FGN",
    "fbm_batch",
    "fbm_replicates",
    "fbm_regular_replicates",
]

TimeGrid = Union[Sequence[float], Iterable[float], np.ndarray, pd.Series, range]


def _check_hurst(h: float) -> float:
    h = float(h)
    if not 0.0 < h < 1.0:
        raise ValidationError(f"Hurst index must be between 0 and 1, got {h}")
    return h


def _coerce_grid(t: TimeGrid) -> np.ndarray:
    if isinstance(t, pd.Series):
        arr = t.astype(float).to_numpy(copy=True)
    elif isinstance(t, (int, float, np.number)):
        arr = np.array([t], dtype=float)
    else:
        try:
            arr = np.array(t, dtype=float)
        except (TypeError, ValueError):
            arr = np.array(list(t), dtype=float)
    if arr.ndim != 1:
        raise ValidationError("The time grid must be one-dimensional")
    return arr


# ---------------------------------------------------------------------------
@dataclass(frozen=True, eq=False)
class FBM:
    """Fractional Brownian motion sampled on the time grid ``t``.

    Parameters
    ----------
    t : array-like
        Time points; ``t[0]`` must be ``0`` and the grid strictly increasing.
    h : float
        Hurst index in ``(0, 1)``.
    n : int, optional
        Number of time points.  Defaults to ``len(t)``; when given it must
        agree with the grid.
    """

    t: np.ndarray
    h: float
    n: int = field(default=-1)

    def __post_init__(self) -> None:
        t = _coerce_grid(self.t)
        if not np.all(np.isfinite(t)):
            raise ValidationError("The time points must be finite")
        if t.size == 0 or t[0] != 0.0:
            raise ValidationError("Starting time point must be equal to 0.0")
        if np.any(np.diff(t) <= 0.0):
            raise ValidationError("The time points must be strictly sorted")
        n = t.size if self.n == -1 else int(self.n)
        if n != t.size:
            raise ValidationError(
                "Number of time points must be equal to the length of the time grid"
            )
        t.setflags(write=False)
        object.__setattr__(self, "t", t)
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "h", _check_hurst(self.h))

    # ------------------------------------------------------------------
    @classmethod
    def regular(cls, T: float, n: int, h: float) -> "FBM":
        """``n`` equally spaced points on ``[0, T]``."""
        if n < 1:
            raise ValidationError(f"Number of time points must be positive, got {n}")
        if n > 1 and not T > 0:
            raise ValidationError(f"Time horizon must be positive, got {T}")
        return cls(np.linspace(0.0, float(T), int(n)), h)

    @classmethod
    def point(cls, t: float, h: float) -> "FBM":
        """Single-point descriptor; the only valid point is the origin."""
        return cls([t], h, n=1)

    @classmethod
    def wiener(cls, t: TimeGrid) -> "FBM":
        """Standard Brownian motion, i.e. ``h = 0.5``."""
        return cls(t, 0.5)

    # ------------------------------------------------------------------
    @property
    def step(self) -> float:
        """Spacing of the first grid interval (0 for a single point)."""
        return float(self.t[1] - self.t[0]) if self.n > 1 else 0.0

    @property
    def is_regular(self) -> bool:
        if self.n < 3:
            return True
        return bool(np.allclose(np.diff(self.t), self.step, rtol=1e-9, atol=0.0))

    def __repr__(self) -> str:
        return f"FBM(n={self.n}, h={self.h}, T={self.t[-1]})"


# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FGN:
    """Fractional Gaussian noise with standard deviation ``sigma``."""

    h: float
    sigma: float = 1.0

    def __post_init__(self) -> None:
        if not float(self.sigma) > 0.0:
            raise ValidationError(f"Standard deviation must be positive, got {self.sigma}")
        object.__setattr__(self, "sigma", float(self.sigma))
        object.__setattr__(self, "h", _check_hurst(self.h))

    def autocov(self, lags) -> np.ndarray:
        """Autocovariance at the integer ``lags``."""
        return fgn_autocov(self.sigma, self.h, lags)


# ---------------------------------------------------------------------------
def fbm_batch(T: np.ndarray, h: float) -> List[FBM]:
    """One descriptor per column of the 2-D array of time grids ``T``."""

    grids = np.asarray(T, dtype=float)
    if grids.ndim != 2:
        raise ValidationError("Time grids must be given as a 2-D array (one grid per column)")
    return [FBM(grids[:, i], h) for i in range(grids.shape[1])]


def fbm_replicates(t: TimeGrid, count: int, h: float) -> List[FBM]:
    """``count`` descriptors sharing the grid ``t``."""

    if count < 1:
        raise ValidationError(f"Replicate count must be positive, got {count}")
    proto = FBM(t, h)
    return [proto] * int(count)


def fbm_regular_replicates(T: float, n: int, count: int, h: float) -> List[FBM]:
    """``count`` descriptors on the regular ``n``-point grid over ``[0, T]``."""

    if count < 1:
        raise ValidationError(f"Replicate count must be positive, got {count}")
    return [FBM.regular(T, n, h)] * int(count)
