# src/ndkernels/kernel/reflect.py
"""Point reflection of kernels (correlation <-> convolution)."""
from __future__ import annotations

import numpy as np

from ..core.centered import CenteredArray, as_centered
from .laplacian import Laplacian, densify

__all__ = ["reflect"]


def reflect(kernel) -> CenteredArray:
    """
    Reflect ``kernel`` through the zero index: ``out[-I] = kernel[I]``.

    Correlating with the reflected kernel performs convolution with the
    original one. Applying ``reflect`` twice returns an equal kernel.

    Parameters
    ----------
    kernel : CenteredArray | Laplacian | array_like
        A plain array is treated as zero-based (indices ``0..n-1``), so its
        reflection covers ``-(n-1)..0``.
    """
    if isinstance(kernel, Laplacian):
        kernel = densify(kernel)
    kernel = as_centered(kernel)
    origin = tuple(-hi for _, hi in kernel.ranges)
    return CenteredArray(np.flip(kernel.data), origin)
