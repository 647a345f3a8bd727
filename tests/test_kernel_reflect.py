# tests/test_kernel_reflect.py
import numpy as np
import pytest
from scipy import ndimage

from ndkernels.core import CenteredArray, array_equal
from ndkernels.kernel import reflect, sobel, gaussian, LoG, Laplacian, densify


@pytest.mark.parametrize(
    "kernel",
    [
        gaussian((1.0, 2.0)),
        sobel()[0],
        densify(Laplacian((True, False, True))),
        LoG(1.0),
        CenteredArray(np.arange(6.0).reshape(2, 3), (-1, 0)),
    ],
)
def test_reflect_is_an_involution(kernel):
    assert array_equal(reflect(reflect(kernel)), kernel)


def test_reflect_negates_indices():
    k = CenteredArray(np.arange(6.0).reshape(2, 3), (-1, 0))
    r = reflect(k)
    assert r.ranges == ((0, 1), (-2, 0))
    for I in k.indices():
        assert r[tuple(-i for i in I)] == k[I]


def test_reflect_sobel_flips_sign():
    diff1, diff2 = sobel()
    assert array_equal(reflect(diff1), -diff1)
    assert array_equal(reflect(diff2), -diff2)


def test_reflect_plain_array_is_zero_based():
    r = reflect(np.array([1.0, 2.0, 3.0]))
    assert r.ranges == ((-2, 0),)
    assert r[-2] == 3.0 and r[0] == 1.0


def test_reflect_laplacian_densifies():
    assert array_equal(reflect(Laplacian()), densify(Laplacian()))


def test_correlating_with_reflection_is_convolution(image):
    kernel, _ = sobel()
    corr = ndimage.correlate(image, np.asarray(reflect(kernel)), mode="constant")
    conv = ndimage.convolve(image, np.asarray(kernel), mode="constant")
    np.testing.assert_allclose(corr, conv, rtol=1e-12, atol=1e-12)
