import logging

import numpy as np
import pytest

from fractalsim.errors import PreconditionError
from fractalsim.models import (
    FBM,
    FGN,
    circulant_sqrt_eigenvalues,
    fbm_variance,
    fgn_autocov,
    rand_fft,
    rand_fgn,
)


class RecordingSource:
    """Normal source that remembers the requested sizes."""

    def __init__(self, seed=0):
        self.sizes = []
        self._rng = np.random.default_rng(seed)

    def standard_normal(self, size):
        self.sizes.append(size)
        return self._rng.standard_normal(size)


@pytest.mark.parametrize("n", [2, 3, 17, 100, 129, 1025])
def test_output_lengths(n):
    p = FBM.regular(1.0, n, 0.35)
    path = rand_fft(p, rng=0)
    assert path.shape == (n,)
    assert path[0] == 0.0
    assert rand_fft(p, as_fbm=False, rng=0).shape == (n - 1,)
    assert rand_fgn(p, rng=0).shape == (n - 1,)


def test_both_modes_are_the_same_realisation():
    p = FBM.regular(1.0, 50, 0.7)
    full = rand_fft(p, as_fbm=True, rng=8)
    summed = rand_fft(p, as_fbm=False, rng=8)
    np.testing.assert_array_equal(full[1:], summed)
    np.testing.assert_allclose(np.diff(full), rand_fgn(p, rng=8), atol=1e-12)


def test_same_seed_same_path():
    p = FBM.regular(1.0, 64, 0.2)
    np.testing.assert_array_equal(rand_fft(p, rng=3), rand_fft(p, rng=3))
    assert not np.array_equal(rand_fft(p, rng=3), rand_fft(p, rng=4))


@pytest.mark.parametrize("n, N", [(2, 1), (3, 2), (17, 16), (18, 32), (100, 128)])
def test_power_of_two_embedding_size(n, N):
    src = RecordingSource()
    rand_fft(FBM(np.arange(n, dtype=float), 0.4), rng=src)
    assert src.sizes == [2 * N]


def test_too_few_points_rejected():
    with pytest.raises(PreconditionError):
        rand_fft(FBM.point(0.0, 0.5), rng=0)
    with pytest.raises(PreconditionError):
        rand_fgn(FGN(0.5), rng=0)
    with pytest.raises(PreconditionError):
        rand_fgn(FGN(0.5), n=0, rng=0)


@pytest.mark.parametrize("h", [0.05, 0.3, 0.5, 0.7, 0.95])
def test_eigenvalues_non_negative(h):
    lsqrt = circulant_sqrt_eigenvalues(h, 256)
    assert lsqrt.shape == (512,)
    assert np.all(np.isfinite(lsqrt))
    assert np.all(lsqrt >= 0.0)


def test_eigenvalues_of_white_noise_are_flat():
    np.testing.assert_allclose(circulant_sqrt_eigenvalues(0.5, 8), 1.0)


def test_fgn_sigma_scaling():
    a = rand_fgn(FGN(0.6), n=40, rng=12)
    b = rand_fgn(FGN(0.6, sigma=3.0), n=40, rng=12)
    np.testing.assert_allclose(b, 3.0 * a)


def test_irregular_grid_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="fractalsim.models.spectral"):
        rand_fft(FBM([0.0, 0.1, 0.5, 0.6], 0.5), rng=0)
    assert "not regular" in caplog.text


@pytest.mark.parametrize("h", [0.2, 0.5, 0.8])
def test_marginal_variance_matches_theory(h):
    num = 4000
    p = FBM.regular(1.0, 33, h)
    rng = np.random.default_rng(2024)
    x = np.column_stack([rand_fft(p, rng=rng) for _ in range(num)])
    emp = x[1:].var(axis=1)
    theo = fbm_variance(p.t[1:], h)
    assert np.all(np.abs(emp / theo - 1.0) < 5.0 * np.sqrt(2.0 / num))


@pytest.mark.parametrize("h", [0.25, 0.75])
def test_fgn_autocorrelation_matches_theory(h):
    rng = np.random.default_rng(99)
    p = FBM(np.arange(257, dtype=float), h)
    w = np.stack([rand_fgn(p, rng=rng) for _ in range(400)])
    for lag in (1, 2, 5):
        emp = np.mean(w[:, :-lag] * w[:, lag:])
        theo = fgn_autocov(1.0, h, [lag])[0]
        assert emp == pytest.approx(theo, abs=0.03)
    assert np.mean(w**2) == pytest.approx(1.0, abs=0.03)


def test_fgn_rejects_fractional_sample_count():
    with pytest.raises(PreconditionError, match="positive integer"):
        rand_fgn(FGN(0.5), n=2.5, rng=0)
    assert rand_fgn(FGN(0.5), n=4.0, rng=0).shape == (4,)
