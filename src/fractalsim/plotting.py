"""Utility helpers for plotting simulated FBM paths.

The plotting functions default to saving output under an ``analysis_outputs``
folder in the working directory. If the caller specifies a custom path the
required parent directories are created automatically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from fractalsim.models import FBM, fbm_variance, rand_cholesky, rand_fft

__all__ = [
    "plot_fbm",
    "plot_paths",
    "DEFAULT_OUTPUT_DIR",
]

DEFAULT_OUTPUT_DIR = Path("analysis_outputs")

SeriesLike = Union[Sequence[float], Iterable[float], np.ndarray]


def _prepare_path(path: Union[str, Path]) -> Path:
    """Create parent directories for *path* and return it as a :class:`Path`."""

    save_path = Path(path).expanduser()
    if save_path.parent == Path('.'):
        DEFAULT_OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        save_path = DEFAULT_OUTPUT_DIR / save_path.name
    else:
        save_path.parent.mkdir(parents=True, exist_ok=True)
    return save_path


def _coerce_series(series: SeriesLike | None, *, name: str) -> np.ndarray | None:
    if series is None:
        return None
    try:
        arr = np.asarray(series, dtype=float)
    except (TypeError, ValueError):
        arr = np.asarray(list(series), dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional")
    return arr


def plot_paths(
    paths: np.ndarray,
    t: SeriesLike | None = None,
    path: Union[str, Path] = DEFAULT_OUTPUT_DIR / "fbm_paths.png",
    *,
    H: float | None = None,
    title: str = "Fractional Brownian Motion",
) -> str:
    """Plot one path per column of *paths*; with ``H`` add the ±2σ envelope."""

    data = np.asarray(paths, dtype=float)
    if data.ndim == 1:
        data = data[:, None]
    grid = _coerce_series(t, name="t")
    if grid is None:
        grid = np.arange(data.shape[0], dtype=float)
    if grid.size != data.shape[0]:
        raise ValueError("t must have one entry per row of paths")

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(grid, data, lw=0.8, alpha=0.8 if data.shape[1] > 1 else 1.0)
    if H is not None:
        band = 2.0 * np.sqrt(fbm_variance(grid, H))
        ax.plot(grid, band, "k--", lw=1)
        ax.plot(grid, -band, "k--", lw=1)
    ax.set_title(title)
    ax.set_xlabel("t")
    fig.tight_layout()
    save_path = _prepare_path(path)
    fig.savefig(save_path)
    plt.close(fig)
    return str(save_path)


def plot_fbm(
    path: Union[str, Path] = DEFAULT_OUTPUT_DIR / "fbm.png",
    H: float = 0.7,
    n: int = 1025,
    *,
    method: str = "fft",
    seed: int | None = 0,
    series: SeriesLike | None = None,
    title: str = "Fractional Brownian Motion",
) -> str:
    """Plot a simulated fractional Brownian motion path or a user-supplied series."""

    data = _coerce_series(series, name="series")
    if data is not None:
        return plot_paths(data, path=path, title=title)

    p = FBM.regular(1.0, n, H)
    if method == "cholesky":
        data = rand_cholesky(p, rng=seed)
    elif method == "fft":
        data = rand_fft(p, rng=seed)
    else:
        raise ValueError("method must be 'cholesky' or 'fft'")
    return plot_paths(data, p.t, path=path, H=H, title=f"{title} (H={H})")
