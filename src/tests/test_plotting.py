import numpy as np
import pytest
from pathlib import Path

from fractalsim import plotting


def test_plot_fbm_accepts_external_series(tmp_path):
    path = tmp_path / "fbm.png"
    custom = np.linspace(0.0, 1.0, num=32)
    result = plotting.plot_fbm(path, series=custom, title="Custom series")
    assert Path(result) == path
    assert path.exists()


@pytest.mark.parametrize("method", ["cholesky", "fft"])
def test_plot_fbm_simulates(tmp_path, method):
    path = tmp_path / f"fbm_{method}.png"
    result = plotting.plot_fbm(path, H=0.3, n=65, method=method)
    assert Path(result) == path
    assert path.exists()


def test_plot_fbm_rejects_unknown_method(tmp_path):
    with pytest.raises(ValueError, match="method"):
        plotting.plot_fbm(tmp_path / "x.png", method="hosking")


def test_plot_paths_with_envelope(tmp_path):
    t = np.linspace(0.0, 1.0, 9)
    paths = np.cumsum(np.random.default_rng(0).standard_normal((9, 4)), axis=0)
    result = plotting.plot_paths(paths, t, tmp_path / "paths.png", H=0.5)
    assert Path(result).exists()


def test_plot_paths_grid_mismatch(tmp_path):
    with pytest.raises(ValueError, match="one entry per row"):
        plotting.plot_paths(np.zeros((5, 2)), [0.0, 1.0], tmp_path / "bad.png")
