"""
Tests for ndkernels.factors.
"""

import numpy as np
import pytest

from ndkernels import factors


def test_gaussian_1d_default_length_and_normalization():
    g = factors.gaussian_1d(1.5)
    assert g.shape == (9,)
    assert g.ranges == ((-4, 4),)
    assert g.sum() == pytest.approx(1.0)
    assert g[-2] == pytest.approx(g[2])
    assert np.argmax(np.asarray(g)) == 4


def test_gaussian_1d_explicit_length_and_errors():
    assert factors.gaussian_1d(1.0, 7).ranges == ((-3, 3),)
    with pytest.raises(ValueError):
        factors.gaussian_1d(1.0, 6)
    with pytest.raises(ValueError):
        factors.gaussian_1d(-1.0)


def test_gaussian_1d_zero_sigma_is_impulse():
    g = factors.gaussian_1d(0.0)
    assert g.ranges == ((0, 0),)
    assert g[0] == 1.0


def test_gaussian_factors_are_laid_along_their_axis():
    f0, f1 = factors.gaussian((1.0, 2.0))
    assert f0.shape == (5, 1) and f0.ranges == ((-2, 2), (0, 0))
    assert f1.shape == (1, 9) and f1.ranges == ((0, 0), (-4, 4))
    with pytest.raises(ValueError):
        factors.gaussian((1.0, 2.0), (5,))


def test_sobel_factor_pairs():
    (d, s), (s2, d2) = factors.sobel()
    np.testing.assert_allclose(np.asarray(d).ravel(), [-0.5, 0.0, 0.5])
    np.testing.assert_allclose(np.asarray(s).ravel(), [0.25, 0.5, 0.25])
    assert d.shape == (3, 1) and s.shape == (1, 3)
    assert s2.shape == (3, 1) and d2.shape == (1, 3)


def test_extended_factors_collapse_singleton_dimensions():
    f0, f1 = factors.prewitt((True, False), 0)
    assert f0.shape == (3, 1)
    assert f1.shape == (1, 1) and f1[0, 0] == 1.0

    f0, f1 = factors.prewitt((False, True), 0)
    assert f0.shape == (1, 1) and f0[0, 0] == 0.0


def test_extended_factors_validate_arguments():
    with pytest.raises(ValueError):
        factors.ando3((True, True), 2)
    with pytest.raises(ValueError):
        factors.ando3((True, True, True), 0)
    with pytest.raises(ValueError):
        factors.sobel((True, True))
