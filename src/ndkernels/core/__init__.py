"""
ndkernels.core
==============

Low-level array primitives shared by every kernel builder.

Submodules
----------
- :mod:`ndkernels.core.centered` : Signed, centered indexing for N-D arrays.
- :mod:`ndkernels.core.grids`    : Coordinate grids over centered supports.
"""

from .centered import (
    CenteredArray,
    centered,
    zeros,
    as_centered,
    negate_ranges,
    array_equal,
    allclose,
)
from .grids import (
    centered_ranges,
    centered_grid,
)

__all__ = [
    # centered arrays
    "CenteredArray",
    "centered",
    "zeros",
    "as_centered",
    "negate_ranges",
    "array_equal",
    "allclose",
    # grids
    "centered_ranges",
    "centered_grid",
]
