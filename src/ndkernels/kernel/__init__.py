"""
ndkernels.kernel
================

Filtering kernels of full dimensionality.

Submodules
----------
- :mod:`ndkernels.kernel.gradients` : Sobel, Prewitt, Ando3/4/5 gradient pairs.
- :mod:`ndkernels.kernel.gaussian`  : Gaussian, DoG and LoG kernels.
- :mod:`ndkernels.kernel.laplacian` : Sparse N-D Laplacian and its dense form.
- :mod:`ndkernels.kernel.reflect`   : Correlation <-> convolution reflection.
- :mod:`ndkernels.kernel.parse`     : Kernels from text specs.

See also: :mod:`ndkernels.factors`.
"""

from .gradients import (
    product2d,
    sobel,
    prewitt,
    ando3,
    ando4,
    ando5,
)
from .gaussian import (
    gaussian,
    DoG,
    LoG,
)
from .laplacian import Laplacian, densify
from .reflect import reflect
from .parse import kernel_from_spec

__all__ = [
    # gradients
    "product2d",
    "sobel",
    "prewitt",
    "ando3",
    "ando4",
    "ando5",
    # gaussian family
    "gaussian",
    "DoG",
    "LoG",
    # laplacian
    "Laplacian",
    "densify",
    # utilities
    "reflect",
    "kernel_from_spec",
]
