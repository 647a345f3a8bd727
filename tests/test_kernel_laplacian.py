# tests/test_kernel_laplacian.py
import numpy as np
import pytest

from ndkernels.kernel import Laplacian, densify


def test_default_is_2d():
    L = Laplacian()
    assert L.flags == (True, True)
    assert L.offsets == ((1, 0), (0, 1))
    assert L == Laplacian((True, True))


def test_from_dims_matches_flags():
    assert Laplacian.from_dims([0, 1], 2).offsets == Laplacian((True, True)).offsets
    L = Laplacian.from_dims([2, 0], 4)
    assert L.flags == (True, False, True, False)
    assert L.offsets == ((1, 0, 0, 0), (0, 0, 1, 0))
    with pytest.raises(ValueError):
        Laplacian.from_dims([3], 3)


def test_ranges_and_emptiness():
    L = Laplacian((True, False, True))
    assert L.ndim == 3
    assert L.axes == (range(-1, 2), range(0, 1), range(-1, 2))
    assert L.shape == (3, 1, 3)
    assert not L.isempty()
    assert bool(Laplacian(()))
    assert not Laplacian((False, False)).isempty()


def test_densify_2d_stencil():
    A = densify(Laplacian((True, True)))
    assert A.ranges == ((-1, 1), (-1, 1))
    assert A[0, 0] == -4
    for I in [(1, 0), (-1, 0), (0, 1), (0, -1)]:
        assert A[I] == 1
    for I in [(1, 1), (-1, -1), (1, -1), (-1, 1)]:
        assert A[I] == 0
    assert A.sum() == 0


def test_densify_partial_and_degenerate():
    A = densify(Laplacian((False, True, False)))
    assert A.shape == (1, 3, 1)
    np.testing.assert_array_equal(np.asarray(A).ravel(), [1, -2, 1])

    A = densify(Laplacian((False, False)))
    assert A.shape == (1, 1) and A[0, 0] == 0

    A = densify(Laplacian(()))
    assert A.ndim == 0 and A[()] == 0


def test_densify_is_fresh_and_leaves_source_untouched():
    L = Laplacian.from_dims([0, 1, 2], 3)
    A = densify(L)
    B = L.to_array()
    assert A == B and A is not B
    A[0, 0, 0] = 99
    assert densify(L)[0, 0, 0] == -6
    assert L.offsets == ((1, 0, 0), (0, 1, 0), (0, 0, 1))
    assert np.asarray(L).sum() == 0


def test_laplacian_is_immutable():
    L = Laplacian()
    with pytest.raises(AttributeError):
        L.flags = (True,)
