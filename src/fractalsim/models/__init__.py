"""
Public API re‑exports for ``fractalsim.models``.
"""

from __future__ import annotations

# ── process descriptors ─────────────────────────────────────────────────
from .process import FBM, FGN, fbm_batch, fbm_regular_replicates, fbm_replicates

# ── autocovariance engine ───────────────────────────────────────────────
from .autocov import fbm_autocov, fbm_covariance_matrix, fbm_variance, fgn_autocov

# ── path generators ─────────────────────────────────────────────────────
from .cholesky import cholesky_factor, rand_cholesky
from .spectral import circulant_sqrt_eigenvalues, rand_fft, rand_fgn

# ---------------------------------------------------------------------
__all__ = [
    # descriptors
    "FBM",
    "FGN",
    "fbm_batch",
    "fbm_replicates",
    "fbm_regular_replicates",
    # autocovariance
    "fgn_autocov",
    "fbm_autocov",
    "fbm_covariance_matrix",
    "fbm_variance",
    # generators
    "cholesky_factor",
    "rand_cholesky",
    "circulant_sqrt_eigenvalues",
    "rand_fft",
    "rand_fgn",
]
