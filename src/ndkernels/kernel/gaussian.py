# src/ndkernels/kernel/gaussian.py
"""N-D Gaussian, Difference-of-Gaussian and Laplacian-of-Gaussian kernels."""
from __future__ import annotations

import logging
import math
import operator
from functools import reduce
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from ..core.centered import CenteredArray
from ..core.grids import centered_grid
from .. import factors as _factors

__all__ = [
    "LOG_SUPPORT_FACTOR",
    "gaussian",
    "DoG",
    "LoG",
]

logger = logging.getLogger(__name__)


# LoG half-width is ceil(LOG_SUPPORT_FACTOR * sigma) // 2 per axis
LOG_SUPPORT_FACTOR = 8.5

Sigma = Union[float, Sequence[float]]
Length = Union[int, Sequence[int], None]


def _normalize_args(sigma: Sigma, length: Length = None) -> Tuple[Tuple[float, ...], Optional[Tuple[int, ...]]]:
    """
    Resolve scalar / sequence arguments to matching tuples.

    A scalar sigma stands for the symmetric 2D case ``(sigma, sigma)``; a
    scalar length is then expanded the same way.
    """
    if np.ndim(sigma) == 0:
        sigma = (sigma, sigma)
        if length is not None and np.ndim(length) == 0:
            length = (length, length)
    sigmas = tuple(float(s) for s in sigma)

    if length is None:
        return sigmas, None
    if np.ndim(length) == 0:
        raise ValueError(f"length must be a sequence for sigma {sigmas!r}, got {length!r}")
    lengths = tuple(operator.index(n) for n in length)
    if len(lengths) != len(sigmas):
        raise ValueError(f"got {len(sigmas)} sigmas but {len(lengths)} lengths")
    return sigmas, lengths


# ---------------------------------------------------------------------------
# Gaussian
# ---------------------------------------------------------------------------

def gaussian(sigma: Sigma, length: Length = None) -> CenteredArray:
    """
    Multidimensional Gaussian kernel.

    Parameters
    ----------
    sigma : float | sequence of float
        Standard deviation per dimension. A single number builds a symmetric
        2D kernel.
    length : int | sequence of int | None
        Kernel length per dimension (odd). If None, each factor uses the
        default length ``4*ceil(sigma)+1``.

    Returns
    -------
    g : CenteredArray
        Centered along every axis and normalized to sum 1. With zero
        dimensions this is a 0-d array holding 1.
    """
    sigmas, lengths = _normalize_args(sigma, length)
    n = len(sigmas)
    if n == 0:
        return CenteredArray(np.ones((), dtype=np.float64))
    if n == 1:
        return _factors.gaussian_1d(sigmas[0], None if lengths is None else lengths[0])
    return reduce(operator.mul, _factors.gaussian(sigmas, lengths))


# ---------------------------------------------------------------------------
# Difference of Gaussians
# ---------------------------------------------------------------------------

def DoG(  # noqa: N802
    sigma_plus: Sigma,
    sigma_minus: Optional[Sigma] = None,
    length: Length = None,
) -> CenteredArray:
    """
    Difference-of-Gaussian kernel ``gaussian(sigma_plus, l) - gaussian(sigma_minus, l)``.

    When only ``sigma_plus`` is given, ``sigma_minus = sqrt(2) * sigma_plus``.
    The wider "minus" Gaussian is then built first and its support sets the
    length shared by both kernels. When both sigmas are given without a
    length, each dimension uses the default length of the larger sigma.

    A single number for ``sigma_plus`` builds a symmetric 2D kernel.
    """
    plus, lengths = _normalize_args(sigma_plus, length)

    if sigma_minus is None:
        minus = tuple(s * math.sqrt(2) for s in plus)
        neg = gaussian(minus, lengths)
        lengths = neg.shape
        logger.debug("DoG sigma+=%r sigma-=%r length=%r", plus, minus, lengths)
        return gaussian(plus, lengths) - neg

    minus, _ = _normalize_args(sigma_minus)
    if len(minus) != len(plus):
        raise ValueError(
            f"sigma_plus {plus!r} and sigma_minus {minus!r} differ in dimension"
        )
    if lengths is None:
        lengths = tuple(
            _factors.default_length(max(p, m)) for p, m in zip(plus, minus)
        )
    logger.debug("DoG sigma+=%r sigma-=%r length=%r", plus, minus, lengths)
    return gaussian(plus, lengths) - gaussian(minus, lengths)


# ---------------------------------------------------------------------------
# Laplacian of Gaussian
# ---------------------------------------------------------------------------

def LoG(sigma: Sigma) -> CenteredArray:  # noqa: N802
    """
    Laplacian-of-Gaussian kernel.

    Evaluated pointwise over ``[-w_d, w_d]`` with
    ``w_d = ceil(8.5 * sigma_d) // 2``; the kernel is not separable.

    Parameters
    ----------
    sigma : float | sequence of float
        Gaussian width per dimension. A single number builds a symmetric
        2D kernel.
    """
    sigmas, _ = _normalize_args(sigma)
    if any(s <= 0 for s in sigmas):
        raise ValueError(f"sigma must be positive, got {sigmas!r}")

    n = len(sigmas)
    half = tuple(math.ceil(LOG_SUPPORT_FACTOR * s) >> 1 for s in sigmas)
    logger.debug("LoG sigma=%r half-width=%r", sigmas, half)

    s2 = np.asarray(sigmas, dtype=np.float64) ** 2
    C = 1.0 / (float(np.prod(sigmas)) * (2 * math.pi) ** (n / 2))

    shape = tuple(2 * w + 1 for w in half)
    curvature = np.full(shape, -np.sum(1.0 / s2))
    spread = np.zeros(shape, dtype=np.float64)
    for x, v in zip(centered_grid(half), s2):
        xs = x ** 2 / v
        curvature += xs / v
        spread += xs

    values = C * curvature * np.exp(-spread / 2)
    return CenteredArray(values, tuple(-w for w in half))
