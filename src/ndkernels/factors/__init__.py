"""
ndkernels.factors
=================

1D kernel factors, reshaped to lie along one axis of an N-D space. The
full-dimensional builders in :mod:`ndkernels.kernel` combine them.

Submodules
----------
- :mod:`ndkernels.factors.gradients` : Sobel, Prewitt and Ando3 factor pairs.
- :mod:`ndkernels.factors.gaussian`  : Sampled, normalized Gaussian factors.
"""

from .gradients import (
    kernelfactors,
    reshape_along,
    sobel,
    prewitt,
    ando3,
)
from .gaussian import (
    DEFAULT_GAUSSIAN_TRUNCATION,
    default_length,
    gaussian_1d,
    gaussian,
)

__all__ = [
    # reshaping
    "kernelfactors",
    "reshape_along",
    # gradients
    "sobel",
    "prewitt",
    "ando3",
    # gaussian
    "DEFAULT_GAUSSIAN_TRUNCATION",
    "default_length",
    "gaussian_1d",
    "gaussian",
]
