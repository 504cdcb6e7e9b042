r"""
Autocovariance engine
=====================
Closed-form covariances used by the path generators.

FGN at integer lag ``k``

.. math:: γ(k) = \tfrac12 σ^2 (|k+1|^{2H} + |k-1|^{2H} - 2|k|^{2H})

FBM between times ``s`` and ``t``

.. math:: \operatorname{Cov}(B_s, B_t) = \tfrac12 (s^{2H} + t^{2H} - |t-s|^{2H})

References
----------
Dieker (2004), *Simulation of fractional Brownian motion*, ch. 1.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "fgn_autocov",
    "fbm_autocov",
    "fbm_covariance_matrix",
    "fbm_variance",
]


def fgn_autocov(sigma: float, h: float, lags: ArrayLike) -> np.ndarray:
    """Autocovariance of fractional Gaussian noise at the integer ``lags``."""

    k = np.abs(np.asarray(lags, dtype=float))
    twoh = 2.0 * h
    return 0.5 * sigma**2 * (
        np.abs(k + 1.0) ** twoh + np.abs(k - 1.0) ** twoh - 2.0 * k**twoh
    )


def fbm_autocov(t: ArrayLike, h: float, i: int, j: int) -> float:
    """Covariance of the FBM values at ``t[i]`` and ``t[j]``."""

    t = np.asarray(t, dtype=float)
    twoh = 2.0 * h
    ti, tj = t[i], t[j]
    return float(0.5 * (ti**twoh + tj**twoh - abs(ti - tj) ** twoh))


def fbm_covariance_matrix(t: ArrayLike, h: float) -> np.ndarray:
    """Covariance matrix of the FBM values at ``t[1:]``.

    The lower triangle is evaluated once and copied into the upper triangle,
    so the result is symmetric bit for bit, which the Cholesky factorisation
    relies on.
    """

    s = np.asarray(t, dtype=float)[1:]
    m = s.size
    twoh = 2.0 * h

    rows, cols = np.tril_indices(m)
    si, sj = s[rows], s[cols]
    lower = 0.5 * (si**twoh + sj**twoh - np.abs(si - sj) ** twoh)

    cov = np.empty((m, m), dtype=float)
    cov[rows, cols] = lower
    cov[cols, rows] = lower
    return cov


def fbm_variance(t: ArrayLike, h: float) -> np.ndarray:
    """Marginal variance ``t^{2H}`` of FBM."""
    return np.asarray(t, dtype=float) ** (2.0 * h)
