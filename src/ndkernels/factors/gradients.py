# src/ndkernels/factors/gradients.py
"""1D derivative and smoothing factors for Sobel, Prewitt and Ando3 gradients."""
from __future__ import annotations

import logging
import operator
from typing import Optional, Sequence, Tuple

import numpy as np

from ..core.centered import CenteredArray, centered

__all__ = [
    "kernelfactors",
    "reshape_along",
    "sobel",
    "prewitt",
    "ando3",
]

logger = logging.getLogger(__name__)


Factors = Tuple[CenteredArray, ...]

DERIVATIVE = (-0.5, 0.0, 0.5)
SOBEL_SMOOTHING = (0.25, 0.5, 0.25)
PREWITT_SMOOTHING = (1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0)
# Ando, IEEE Trans. Pat. Anal. Mach. Int. 22(3), 2000
ANDO3_SMOOTHING = (2 * 0.112737, 2 * 0.274526, 2 * 0.112737)


# ---------------------------------------------------------------------------
# Reshaping 1D factors into N-D space
# ---------------------------------------------------------------------------

def reshape_along(factor, axis: int, ndim: int) -> CenteredArray:
    """
    Lay a 1D centered factor along ``axis`` of an ``ndim``-dimensional space.

    Every other axis gets length 1 and the index range ``0..0``, so that
    multiplying factors laid along different axes yields their outer product.
    """
    if not isinstance(factor, CenteredArray):
        factor = centered(np.asarray(factor, dtype=np.float64))
    if factor.ndim != 1:
        raise ValueError(f"factor must be 1D, got shape {factor.shape}")
    if not 0 <= axis < ndim:
        raise ValueError(f"axis {axis!r} out of range for {ndim} dimensions")

    shape = [1] * ndim
    shape[axis] = factor.shape[0]
    origin = [0] * ndim
    origin[axis] = factor.origin[0]
    return CenteredArray(np.reshape(factor.data, shape), origin)


def kernelfactors(factors: Sequence) -> Factors:
    """Reshape the ``d``-th 1D factor to lie along axis ``d``."""
    n = len(factors)
    return tuple(reshape_along(f, d, n) for d, f in enumerate(factors))


# ---------------------------------------------------------------------------
# Gradient families
# ---------------------------------------------------------------------------

def _pair(derivative, smoothing) -> Tuple[Factors, Factors]:
    d = centered(np.asarray(derivative, dtype=np.float64))
    s = centered(np.asarray(smoothing, dtype=np.float64))
    return kernelfactors((d, s)), kernelfactors((s, d))


def _extended(extended, axis, derivative, smoothing) -> Factors:
    extended = tuple(bool(e) for e in extended)
    if len(extended) != 2:
        raise ValueError(f"extended must have two entries, got {extended!r}")
    axis = operator.index(axis)
    if axis not in (0, 1):
        raise ValueError(f"axis must be 0 or 1, got {axis!r}")

    factors = []
    for d, ext in enumerate(extended):
        if ext:
            w = derivative if d == axis else smoothing
        else:
            # a singleton dimension has no variation to differentiate
            w = (0.0,) if d == axis else (1.0,)
        factors.append(centered(np.asarray(w, dtype=np.float64)))
    return kernelfactors(factors)


def _dispatch(name: str, extended, axis, derivative, smoothing):
    if extended is None and axis is None:
        logger.debug("%s factors for both axes", name)
        return _pair(derivative, smoothing)
    if extended is None or axis is None:
        raise ValueError(f"{name}: extended and axis must be given together")
    logger.debug("%s factors along axis %d, extended=%r", name, axis, extended)
    return _extended(extended, axis, derivative, smoothing)


def sobel(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """
    Sobel gradient factors.

    Returns
    -------
    (f1, f2)
        Without arguments: ``f1`` differentiates along axis 0 and ``f2``
        along axis 1, each a pair of reshaped 1D factors.
    f
        With ``extended`` and ``axis``: the factor pair for ``axis`` only.
    """
    return _dispatch("sobel", extended, axis, DERIVATIVE, SOBEL_SMOOTHING)


def prewitt(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """Prewitt gradient factors. See :func:`sobel`."""
    return _dispatch("prewitt", extended, axis, DERIVATIVE, PREWITT_SMOOTHING)


def ando3(extended: Optional[Sequence[bool]] = None, axis: Optional[int] = None):
    """Ando 3x3 optimal gradient factors. See :func:`sobel`."""
    return _dispatch("ando3", extended, axis, DERIVATIVE, ANDO3_SMOOTHING)
