# src/ndkernels/core/centered.py
"""Arrays addressed by signed integer indices with an arbitrary origin per axis."""
from __future__ import annotations

import operator
from itertools import product
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

__all__ = [
    "CenteredArray",
    "centered",
    "zeros",
    "as_centered",
    "negate_ranges",
    "array_equal",
    "allclose",
]


Range = Tuple[int, int]


def negate_ranges(ranges: Sequence[Range]) -> Tuple[Range, ...]:
    """
    Mirror inclusive index ranges about zero: ``lo..hi`` becomes ``-hi..-lo``.
    """
    return tuple((-hi, -lo) for lo, hi in ranges)


class CenteredArray:
    """
    N-D array whose axes are indexed by signed integers.

    Axis ``d`` covers the indices ``origin[d] .. origin[d] + shape[d] - 1``.
    A kernel built with :func:`centered` has ranges symmetric about 0, so
    ``k[0, 0]`` is the center tap of a 3x3 kernel and ``k[-1, 1]`` its
    top-right corner.

    Parameters
    ----------
    data : array_like
        Values. Copied on construction.
    origin : sequence of int | None
        Index of the first element along each axis. If None, the array is
        zero-based (ranges ``0 .. n-1``), matching plain ndarray indexing.

    Notes
    -----
    Arithmetic between two arrays requires matching index ranges, except that
    a length-1 axis broadcasts against any range. Anything else raises
    ``ValueError``. ``==`` compares ranges and values and returns a bool.
    """

    __slots__ = ("_data", "_origin")

    # let ndarray binops defer to ours instead of treating us as an object array
    __array_ufunc__ = None

    def __init__(self, data, origin: Optional[Sequence[int]] = None) -> None:
        arr = np.array(data)
        if origin is None:
            origin = (0,) * arr.ndim
        origin = tuple(operator.index(o) for o in origin)
        if len(origin) != arr.ndim:
            raise ValueError(
                f"origin {origin!r} does not match array of dimension {arr.ndim}"
            )
        self._data = arr
        self._origin = origin

    @classmethod
    def _wrap(cls, data: np.ndarray, origin: Tuple[int, ...]) -> "CenteredArray":
        obj = cls.__new__(cls)
        obj._data = data
        obj._origin = tuple(origin)
        return obj

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def origin(self) -> Tuple[int, ...]:
        return self._origin

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._data.shape

    @property
    def ndim(self) -> int:
        return self._data.ndim

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def ranges(self) -> Tuple[Range, ...]:
        """Inclusive ``(lo, hi)`` index range of every axis."""
        return tuple((o, o + n - 1) for o, n in zip(self._origin, self._data.shape))

    @property
    def axes(self) -> Tuple[range, ...]:
        """Index range of every axis as a ``range`` object."""
        return tuple(range(o, o + n) for o, n in zip(self._origin, self._data.shape))

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the underlying values (zero-based)."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def reflected_axes(self) -> Tuple[range, ...]:
        """Axes of the point reflection of this array about the zero index."""
        return tuple(range(lo, hi + 1) for lo, hi in negate_ranges(self.ranges))

    def indices(self) -> Iterator[Tuple[int, ...]]:
        """Iterate over every signed index, last axis fastest."""
        return product(*self.axes)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _locate(self, index) -> Tuple[int, ...]:
        if not isinstance(index, tuple):
            index = (index,)
        if len(index) != self.ndim:
            raise IndexError(
                f"expected {self.ndim} indices, got {len(index)} ({index!r})"
            )
        pos = []
        for i, o, n in zip(index, self._origin, self._data.shape):
            j = operator.index(i) - o
            if not 0 <= j < n:
                raise IndexError(f"index {index!r} outside of ranges {self.ranges!r}")
            pos.append(j)
        return tuple(pos)

    def __getitem__(self, index):
        return self._data[self._locate(index)]

    def __setitem__(self, index, value) -> None:
        self._data[self._locate(index)] = value

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _broadcast_origin(self, other: "CenteredArray") -> Tuple[int, ...]:
        if other.ndim != self.ndim:
            raise ValueError(
                f"cannot combine arrays of dimension {self.ndim} and {other.ndim}"
            )
        origin = []
        for (lo_a, hi_a), (lo_b, hi_b) in zip(self.ranges, other.ranges):
            if (lo_a, hi_a) == (lo_b, hi_b):
                origin.append(lo_a)
            elif lo_a == hi_a:
                origin.append(lo_b)
            elif lo_b == hi_b:
                origin.append(lo_a)
            else:
                raise ValueError(
                    f"index ranges {self.ranges!r} and {other.ranges!r} "
                    "cannot be broadcast together"
                )
        return tuple(origin)

    def _binary(self, other, op) -> "CenteredArray":
        if isinstance(other, CenteredArray):
            origin = self._broadcast_origin(other)
            return CenteredArray._wrap(op(self._data, other._data), origin)
        if np.ndim(other) == 0:
            return CenteredArray._wrap(op(self._data, other), self._origin)
        return NotImplemented

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._binary(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        return self._binary(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._binary(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __neg__(self) -> "CenteredArray":
        return CenteredArray._wrap(-self._data, self._origin)

    # ------------------------------------------------------------------
    # Whole-array operations
    # ------------------------------------------------------------------

    def transpose(self) -> "CenteredArray":
        """Reverse the axes (and their ranges). Returns an independent copy."""
        return CenteredArray._wrap(self._data.T.copy(), self._origin[::-1])

    @property
    def T(self) -> "CenteredArray":
        return self.transpose()

    def copy(self) -> "CenteredArray":
        return CenteredArray._wrap(self._data.copy(), self._origin)

    def sum(self):
        return self._data.sum()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CenteredArray):
            return NotImplemented
        return array_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CenteredArray({self._data.tolist()!r}, origin={self._origin!r})"


def centered(data) -> CenteredArray:
    """
    Wrap ``data`` so that every axis is centered on index 0.

    An axis of odd length ``2w+1`` gets the range ``-w..w``; an even length
    ``n`` gets ``-(n//2) .. n//2 - 1``.
    """
    arr = np.asarray(data)
    return CenteredArray(arr, tuple(-(n // 2) for n in arr.shape))


def zeros(ranges: Sequence[Range], dtype=np.float64) -> CenteredArray:
    """Zero-filled array over explicit inclusive ``(lo, hi)`` ranges."""
    ranges = tuple((operator.index(lo), operator.index(hi)) for lo, hi in ranges)
    shape = tuple(hi - lo + 1 for lo, hi in ranges)
    if any(n < 0 for n in shape):
        raise ValueError(f"invalid index ranges {ranges!r}")
    return CenteredArray._wrap(np.zeros(shape, dtype=dtype), tuple(lo for lo, _ in ranges))


def as_centered(obj) -> CenteredArray:
    """Return ``obj`` if it already is a CenteredArray, else wrap it zero-based."""
    if isinstance(obj, CenteredArray):
        return obj
    return CenteredArray(np.asarray(obj))


def array_equal(a: CenteredArray, b: CenteredArray) -> bool:
    """True when both arrays cover the same ranges with identical values."""
    return a.ranges == b.ranges and bool(np.array_equal(a._data, b._data))


def allclose(a: CenteredArray, b: CenteredArray, rtol: float = 1e-7, atol: float = 0.0) -> bool:
    """True when both arrays cover the same ranges with values within tolerance."""
    return a.ranges == b.ranges and bool(np.allclose(a._data, b._data, rtol=rtol, atol=atol))
