import numpy as np
import pytest

from fractalsim.models.autocov import (
    fbm_autocov,
    fbm_covariance_matrix,
    fbm_variance,
    fgn_autocov,
)


@pytest.mark.parametrize("h", [0.1, 0.5, 0.9])
@pytest.mark.parametrize("sigma", [1.0, 2.5])
def test_fgn_autocov_lag_zero_is_variance(h, sigma):
    assert fgn_autocov(sigma, h, [0])[0] == pytest.approx(sigma**2)


@pytest.mark.parametrize("h", [0.2, 0.5, 0.75])
def test_fgn_autocov_is_symmetric(h):
    lags = np.arange(1, 20)
    np.testing.assert_array_equal(fgn_autocov(1.0, h, lags), fgn_autocov(1.0, h, -lags))


def test_fgn_autocov_white_noise_for_half():
    cov = fgn_autocov(1.5, 0.5, np.arange(10))
    assert cov[0] == pytest.approx(2.25)
    np.testing.assert_allclose(cov[1:], 0.0, atol=1e-12)


def test_fgn_autocov_sign_follows_hurst():
    assert np.all(fgn_autocov(1.0, 0.8, np.arange(1, 50)) > 0)
    assert np.all(fgn_autocov(1.0, 0.2, np.arange(1, 50)) < 0)


def test_fbm_autocov_brownian_is_min():
    t = [0.0, 1.0, 2.0, 3.0, 4.0]
    assert fbm_autocov(t, 0.5, 2, 3) == 2.0
    for i in range(len(t)):
        for j in range(len(t)):
            assert fbm_autocov(t, 0.5, i, j) == pytest.approx(min(t[i], t[j]))


def test_fbm_autocov_irregular_brownian_is_min():
    t = np.array([0.0, 0.13, 0.5, 0.51, 2.7])
    for i in range(t.size):
        for j in range(t.size):
            assert fbm_autocov(t, 0.5, i, j) == pytest.approx(min(t[i], t[j]))


def test_covariance_matrix_exactly_symmetric():
    rng = np.random.default_rng(3)
    t = np.concatenate([[0.0], np.cumsum(rng.uniform(0.01, 1.0, size=40))])
    cov = fbm_covariance_matrix(t, 0.37)
    assert cov.shape == (40, 40)
    assert np.array_equal(cov, cov.T)


def test_covariance_matrix_matches_pairwise_formula():
    t = np.linspace(0.0, 2.0, 7)
    h = 0.3
    cov = fbm_covariance_matrix(t, h)
    for i in range(6):
        for j in range(i + 1):
            assert cov[i, j] == pytest.approx(fbm_autocov(t, h, i + 1, j + 1))
    np.testing.assert_allclose(np.diag(cov), fbm_variance(t[1:], h))


def test_covariance_matrix_of_single_point_is_empty():
    assert fbm_covariance_matrix([0.0], 0.4).shape == (0, 0)
