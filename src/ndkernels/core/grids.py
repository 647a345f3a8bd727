# src/ndkernels/core/grids.py
"""Signed coordinate grids over centered kernel supports."""
from __future__ import annotations

import operator
from typing import List, Sequence, Tuple

import numpy as np

__all__ = [
    "centered_ranges",
    "centered_grid",
]


def centered_ranges(half_widths: Sequence[int]) -> Tuple[Tuple[int, int], ...]:
    """
    Inclusive index ranges ``(-w, w)`` for each half-width ``w``.

    Raises
    ------
    ValueError
        For negative half-widths.
    """
    widths = tuple(operator.index(w) for w in half_widths)
    if any(w < 0 for w in widths):
        raise ValueError(f"half-widths must be non-negative, got {widths!r}")
    return tuple((-w, w) for w in widths)


def centered_grid(half_widths: Sequence[int]) -> List[np.ndarray]:
    """
    Return integer coordinate arrays ``(x_1, ..., x_N)`` over the hyper-rectangle
    ``[-w, w]`` of every axis, zero at the center.

    Parameters
    ----------
    half_widths : sequence of int
        Half-width ``w_d`` per axis.

    Returns
    -------
    coords : list of ndarray, each of shape (2*w_1+1, ..., 2*w_N+1)
        ``coords[d][i_1, ..., i_N]`` is the signed coordinate along axis ``d``.
        Empty for zero dimensions.
    """
    ranges = centered_ranges(half_widths)
    if not ranges:
        return []
    axes = [np.arange(lo, hi + 1, dtype=int) for lo, hi in ranges]
    return np.meshgrid(*axes, indexing="ij")
