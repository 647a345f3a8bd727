# src/ndkernels/kernel/gradients.py
"""Full 2D gradient kernels: Sobel, Prewitt and the Ando family."""
from __future__ import annotations

import operator
from functools import reduce
from typing import Optional, Sequence, Tuple

import numpy as np

from ..core.centered import CenteredArray, centered
from .. import factors as _factors

__all__ = [
    "product2d",
    "sobel",
    "prewitt",
    "ando3",
    "ando4",
    "ando5",
]


KernelPair = Tuple[CenteredArray, CenteredArray]

# Ando, IEEE Trans. Pat. Anal. Mach. Int. 22(3), 2000.
# Rows run along axis 0; these stencils differentiate along axis 1.
ANDO4 = np.array(
    [
        [-0.022116, -0.025526, 0.025526, 0.022116],
        [-0.098381, -0.112984, 0.112984, 0.098381],
        [-0.098381, -0.112984, 0.112984, 0.098381],
        [-0.022116, -0.025526, 0.025526, 0.022116],
    ],
    dtype=np.float64,
)

ANDO5 = np.array(
    [
        [-0.003776, -0.010199, 0.0, 0.010199, 0.003776],
        [-0.026786, -0.070844, 0.0, 0.070844, 0.026786],
        [-0.046548, -0.122572, 0.0, 0.122572, 0.046548],
        [-0.026786, -0.070844, 0.0, 0.070844, 0.026786],
        [-0.003776, -0.010199, 0.0, 0.010199, 0.003776],
    ],
    dtype=np.float64,
)


# ---------------------------------------------------------------------------
# Separable gradients
# ---------------------------------------------------------------------------

def product2d(factor_pairs) -> KernelPair:
    """
    Assemble two 2D kernels from two pairs of reshaped 1D factors.

    Parameters
    ----------
    factor_pairs : ((a1, b1), (a2, b2))
        Each factor is laid along its own axis, so ``a * b`` is the outer
        product.

    Returns
    -------
    (a1 * b1, a2 * b2)
    """
    k1, k2 = factor_pairs
    return k1[0] * k1[1], k2[0] * k2[1]


def _single(factors) -> Tuple[CenteredArray]:
    return (reduce(operator.mul, factors),)


def sobel(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """
    Sobel gradient kernels.

    ``diff1, diff2 = sobel()`` returns 3x3 kernels; ``diff1`` computes the
    gradient along axis 0 (y) and ``diff2`` along axis 1 (x).

    ``(k,) = sobel(extended, axis)`` returns only the kernel for ``axis``,
    with non-extended dimensions collapsed to length 1.
    """
    if extended is None and axis is None:
        return product2d(_factors.sobel())
    return _single(_factors.sobel(extended, axis))


def prewitt(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """Prewitt gradient kernels. See :func:`sobel`."""
    if extended is None and axis is None:
        return product2d(_factors.prewitt())
    return _single(_factors.prewitt(extended, axis))


def ando3(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """Optimal 3x3 Ando gradient kernels. See :func:`sobel`."""
    if extended is None and axis is None:
        return product2d(_factors.ando3())
    return _single(_factors.ando3(extended, axis))


# ---------------------------------------------------------------------------
# Fixed stencils
# ---------------------------------------------------------------------------

def _fixed_pair(stencil: np.ndarray) -> KernelPair:
    f = centered(stencil)
    return f.T, f


def _fixed_single(pair: KernelPair, extended, axis) -> Tuple[CenteredArray]:
    if extended is None or axis is None:
        raise ValueError("extended and axis must be given together")
    extended = tuple(bool(e) for e in extended)
    if len(extended) != 2:
        raise ValueError(f"extended must have two entries, got {extended!r}")
    if not all(extended):
        raise ValueError("all dimensions must be extended")
    axis = operator.index(axis)
    if axis not in (0, 1):
        raise ValueError(f"axis must be 0 or 1, got {axis!r}")
    return (pair[axis],)


def ando4(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """
    Optimal 4x4 Ando gradient kernels.

    ``diff1, diff2 = ando4()``; ``diff1`` differentiates along axis 0 and is
    the transpose of ``diff2``. ``ando4(extended, axis)`` requires both
    dimensions to be extended.
    """
    pair = _fixed_pair(ANDO4)
    if extended is None and axis is None:
        return pair
    return _fixed_single(pair, extended, axis)


def ando5(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """Optimal 5x5 Ando gradient kernels. See :func:`ando4`."""
    pair = _fixed_pair(ANDO5)
    if extended is None and axis is None:
        return pair
    return _fixed_single(pair, extended, axis)
