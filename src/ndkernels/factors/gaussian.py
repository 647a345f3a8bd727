# src/ndkernels/factors/gaussian.py
"""Sampled 1D Gaussian factors."""
from __future__ import annotations

import logging
import math
import operator
from typing import Optional, Sequence, Tuple

import numpy as np

from ..core.centered import CenteredArray, centered
from .gradients import kernelfactors

__all__ = [
    "DEFAULT_GAUSSIAN_TRUNCATION",
    "default_length",
    "gaussian_1d",
    "gaussian",
]

logger = logging.getLogger(__name__)


# Default support reaches this many (ceiled) sigmas on each side of zero.
DEFAULT_GAUSSIAN_TRUNCATION = 2


def default_length(sigma: float) -> int:
    """Default kernel length for ``sigma``: ``4*ceil(sigma) + 1``."""
    return 2 * DEFAULT_GAUSSIAN_TRUNCATION * math.ceil(sigma) + 1


def gaussian_1d(sigma: float, length: Optional[int] = None) -> CenteredArray:
    """
    Centered 1D Gaussian kernel.

    Parameters
    ----------
    sigma : float
        Standard deviation. ``0`` gives a unit impulse.
    length : int | None
        Number of taps; must be odd. If None, :func:`default_length` is used.

    Returns
    -------
    g : CenteredArray, indices ``-w..w`` with ``w = length // 2``
        Normalized to sum 1.
    """
    if sigma < 0:
        raise ValueError(f"sigma must be non-negative, got {sigma!r}")
    if length is None:
        length = default_length(sigma)
    length = operator.index(length)
    if length <= 0 or length % 2 == 0:
        raise ValueError(f"length must be a positive odd integer, got {length!r}")

    w = length // 2
    if sigma == 0:
        g = np.zeros(length, dtype=np.float64)
        g[w] = 1.0
        return centered(g)

    x = np.arange(-w, w + 1, dtype=np.float64)
    g = np.exp(-0.5 * (x / sigma) ** 2)
    g /= g.sum()
    return centered(g)


def gaussian(
    sigmas: Sequence[float],
    lengths: Optional[Sequence[int]] = None,
) -> Tuple[CenteredArray, ...]:
    """
    One Gaussian factor per dimension, factor ``d`` laid along axis ``d``.

    ``lengths`` (if given) must have one entry per sigma.
    """
    sigmas = tuple(sigmas)
    if lengths is None:
        lengths = (None,) * len(sigmas)
    lengths = tuple(lengths)
    if len(lengths) != len(sigmas):
        raise ValueError(
            f"got {len(sigmas)} sigmas but {len(lengths)} lengths"
        )
    logger.debug("gaussian factors sigma=%r length=%r", sigmas, lengths)
    return kernelfactors([gaussian_1d(s, l) for s, l in zip(sigmas, lengths)])
