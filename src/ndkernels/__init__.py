"""
ndkernels
Multidimensional filtering kernels with centered indexing.
"""

import logging

# Robust version detection that works even when not installed
try:
    from importlib import metadata as _metadata
except Exception:
    _metadata = None  # type: ignore

try:
    __version__ = _metadata.version("ndkernels") if _metadata else "0.0.0.dev0"
except Exception:
    # Not installed (dev mode) or no metadata available
    __version__ = "0.0.0.dev0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import core, factors, kernel  # noqa: E402
from .core import CenteredArray, centered  # noqa: E402

__all__ = ["core", "factors", "kernel", "CenteredArray", "centered", "__version__"]
