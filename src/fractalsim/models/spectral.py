"""
Spectral (Davies–Harte) path generator
======================================
Exact FGN/FBM sampling on a regular grid in O(N log N).

The Toeplitz covariance of ``N`` FGN increments is embedded in a circulant
matrix of size ``2N``; its eigenvalues are the FFT of the first row, and a
Hermitian-symmetric complex Gaussian vector scaled by their square roots is
mapped back with an inverse FFT.  ``N`` is the smallest power of two that is
at least the number of requested increments; only the first ``n - 1`` output
values are kept.

Returns either:
• FBM **levels**  (length n, starting at 0)
• cumulated FGN without the fixed origin (length n - 1)

References
----------
Davies & Harte (1987), Tests for Hurst effect, Biometrika 74, 95–102;
Dieker (2004), §2.1.3.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from ..errors import PreconditionError
from ..random import NormalSource, RandomLike, as_source
from .autocov import fgn_autocov
from .process import FBM, FGN

__all__ = ["circulant_sqrt_eigenvalues", "rand_fft", "rand_fgn"]

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------ #
def circulant_sqrt_eigenvalues(h: float, N: int) -> np.ndarray:
    """Square roots of the eigenvalues of the ``2N`` circulant embedding."""

    c = fgn_autocov(1.0, h, np.arange(N + 1))
    first_row = np.concatenate([c, c[-2:0:-1]])
    eigs = np.fft.fft(first_row).real
    if eigs.min() < -1e-10 * max(eigs.max(), 1.0):
        logger.warning(
            "Circulant embedding has eigenvalue %.3e (h=%.4f, N=%d); clamping to 0",
            eigs.min(), h, N,
        )
    eigs = np.clip(eigs, a_min=0.0, a_max=None)      # round-off
    return np.sqrt(eigs)


def _davies_harte(h: float, m: int, source: NormalSource) -> np.ndarray:
    """Unit-step FGN of length *m*."""
    N = 1 << int(np.ceil(np.log2(m)))
    twoN = 2 * N
    lsqrt = circulant_sqrt_eigenvalues(h, N)
    z = source.standard_normal(twoN)

    k = np.arange(1, N)
    x = np.sqrt(0.5) * lsqrt[1:N] * (z[2 * k - 1] + 1j * z[2 * k])

    y = np.empty(twoN, dtype=complex)
    y[0] = lsqrt[0] * z[0]
    y[1:N] = x
    y[N] = lsqrt[N] * z[twoN - 1]
    y[N + 1 :] = np.conj(x[::-1])

    # unnormalised inverse DFT divided by sqrt(2N)
    w = np.fft.ifft(y, norm="ortho").real[:m]
    logger.debug("Davies-Harte FGN: m=%d, N=%d, h=%.4f", m, N, h)
    return w


def _increment_count(p: FBM) -> int:
    m = p.n - 1
    if m <= 0:
        raise PreconditionError(
            f"Spectral generation needs at least two time points, got n={p.n}"
        )
    if not p.is_regular:
        logger.warning(
            "Time grid is not regular; spectral FBM uses the first step %.6g", p.step
        )
    return m


# ------------------------------------------------------------------ #
def rand_fgn(
    p: Union[FBM, FGN],
    rng: RandomLike = None,
    *,
    n: Optional[int] = None,
) -> np.ndarray:
    """
    Fractional Gaussian noise.

    Parameters
    ----------
    p : FBM or FGN
        For an FBM descriptor the ``n - 1`` increments over its grid are
        returned.  For an FGN descriptor ``n`` unit-step values scaled by
        ``sigma`` are returned and ``n`` is required.
    rng : int, SeedSequence or NormalSource, optional
        Source of standard normal variates.
    """
    source = as_source(rng)
    if isinstance(p, FGN):
        if n is None or n <= 0 or not float(n).is_integer():
            raise PreconditionError(f"Sample count must be a positive integer, got {n}")
        return p.sigma * _davies_harte(p.h, int(n), source)

    m = _increment_count(p)
    return _davies_harte(p.h, m, source) * p.step**p.h


def rand_fft(p: FBM, as_fbm: bool = True, rng: RandomLike = None) -> np.ndarray:
    """
    Parameters
    ----------
    p : FBM
        Descriptor on a regular grid; ``t[1] - t[0]`` sets the step.
    as_fbm : bool, default True
        ``True`` returns the FBM path (length ``n``, first value 0).
        ``False`` returns the running sum of the FGN increments without the
        leading 0 (length ``n - 1``); it is the same realisation.
    rng : int, SeedSequence or NormalSource, optional
        Source of standard normal variates.
    """
    fgn = rand_fgn(p, rng)
    path = np.cumsum(fgn)
    if as_fbm:
        return np.concatenate([[0.0], path])
    return path
