"""
Tests for ndkernels.kernel.parse.
"""

import pytest

from ndkernels.core import array_equal
from ndkernels.kernel import (
    kernel_from_spec,
    gaussian,
    DoG,
    LoG,
    Laplacian,
    sobel,
    ando4,
)


def test_gaussian_specs():
    assert array_equal(kernel_from_spec("gaussian:sigma=2.0"), gaussian(2.0))
    k = kernel_from_spec("gaussian:σ=1;3,length=7;13")
    assert array_equal(k, gaussian((1.0, 3.0), (7, 13)))


def test_difference_and_log_specs():
    assert array_equal(kernel_from_spec("dog:sigma=1.5"), DoG(1.5))
    assert array_equal(kernel_from_spec("log: sigma = 2"), LoG(2.0))


def test_laplacian_specs():
    assert kernel_from_spec("laplacian") == Laplacian()
    assert kernel_from_spec("laplacian:dims=0;2,ndim=4") == Laplacian.from_dims([0, 2], 4)
    assert kernel_from_spec("laplacian:flags=1;0;1") == Laplacian((True, False, True))


def test_gradient_specs():
    diff1, diff2 = kernel_from_spec("SOBEL")
    assert array_equal(diff1, sobel()[0])
    (k,) = kernel_from_spec("ando4:axis=1")
    assert array_equal(k, ando4()[1])
    with pytest.raises(ValueError, match="all dimensions must be extended"):
        kernel_from_spec("ando4:extended=1;0,axis=0")


@pytest.mark.parametrize(
    "spec",
    ["", "median:size=3", "gaussian", "gaussian:sigma", "log:length=5"],
)
def test_invalid_specs(spec):
    with pytest.raises(ValueError):
        kernel_from_spec(spec)


def test_single_length_applies_to_both_axes():
    k = kernel_from_spec("gaussian:sigma=2,length=9")
    assert array_equal(k, gaussian((2.0, 2.0), (9, 9)))
    k = kernel_from_spec("dog:sigma=1.5,length=9")
    assert k.ranges == ((-4, 4), (-4, 4))
    assert array_equal(k, DoG((1.5, 1.5), length=(9, 9)))


def test_trailing_separator_requests_1d_kernels():
    assert array_equal(kernel_from_spec("gaussian:sigma=2;"), gaussian((2.0,)))
    assert kernel_from_spec("gaussian:sigma=2;,length=7;").ranges == ((-3, 3),)
    assert kernel_from_spec("log:sigma=2;").ranges == ((-8, 8),)
    assert array_equal(kernel_from_spec("dog:sigma=1;"), DoG((1.0,)))
    assert kernel_from_spec("laplacian:dims=1") == Laplacian.from_dims([1], 2)
