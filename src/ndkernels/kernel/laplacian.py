# src/ndkernels/kernel/laplacian.py
"""Sparse discrete Laplacian over a chosen subset of dimensions."""
from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterable, Tuple

import numpy as np

from ..core.centered import CenteredArray, zeros

__all__ = [
    "Laplacian",
    "densify",
]


Index = Tuple[int, ...]


@dataclass(frozen=True)
class Laplacian:
    """
    Laplacian kernel in ``N = len(flags)`` dimensions, differentiating along
    the dimensions flagged ``True``.

    Only the positive unit offsets are stored; the stencil is even, so the
    value at ``-I`` equals the value at ``I``. Use :func:`densify` (or
    ``np.asarray(L)``) for the dense array.

    ``Laplacian()`` is the 2D Laplacian, ``Laplacian((True, True))``.
    """

    flags: Tuple[bool, ...] = (True, True)
    offsets: Tuple[Index, ...] = field(init=False)

    def __post_init__(self) -> None:
        flags = tuple(bool(f) for f in self.flags)
        n = len(flags)
        offsets = tuple(
            tuple(1 if d == i else 0 for d in range(n))
            for i, active in enumerate(flags)
            if active
        )
        object.__setattr__(self, "flags", flags)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def from_dims(cls, dims: Iterable[int], ndim: int) -> "Laplacian":
        """Laplacian in ``ndim`` dimensions along the (0-based) axes ``dims``."""
        ndim = operator.index(ndim)
        flags = [False] * ndim
        for d in dims:
            d = operator.index(d)
            if not 0 <= d < ndim:
                raise ValueError(f"dimension {d!r} out of range for {ndim} dimensions")
            flags[d] = True
        return cls(tuple(flags))

    @property
    def ndim(self) -> int:
        return len(self.flags)

    @property
    def ranges(self) -> Tuple[Tuple[int, int], ...]:
        return tuple((-1, 1) if f else (0, 0) for f in self.flags)

    @property
    def axes(self) -> Tuple[range, ...]:
        return tuple(range(lo, hi + 1) for lo, hi in self.ranges)

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(3 if f else 1 for f in self.flags)

    def isempty(self) -> bool:
        # even the 0-d or all-False Laplacian is a (degenerate) kernel
        return False

    def __bool__(self) -> bool:
        return True

    def to_array(self) -> CenteredArray:
        return densify(self)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.asarray(densify(self), dtype=dtype)


def densify(laplacian: Laplacian) -> CenteredArray:
    """
    Dense integer stencil of ``laplacian``.

    ``1`` at every ``+offset`` and ``-offset``, ``-2 * len(offsets)`` at the
    center, zero elsewhere. A fresh array is allocated on every call.
    """
    A = zeros(laplacian.ranges, dtype=np.int64)
    for I in laplacian.offsets:
        A[I] = 1
        A[tuple(-i for i in I)] = 1
    A[(0,) * laplacian.ndim] = -2 * len(laplacian.offsets)
    return A
