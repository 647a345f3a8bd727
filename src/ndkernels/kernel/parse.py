# src/ndkernels/kernel/parse.py
"""Build kernels from short text specs such as ``"log:sigma=2"``."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from .gaussian import gaussian, DoG, LoG
from .gradients import sobel, prewitt, ando3, ando4, ando5
from .laplacian import Laplacian

__all__ = ["kernel_from_spec", "KERNEL_KINDS"]

logger = logging.getLogger(__name__)


_GRADIENTS: Dict[str, Callable] = {
    "sobel": sobel,
    "prewitt": prewitt,
    "ando3": ando3,
    "ando4": ando4,
    "ando5": ando5,
}

KERNEL_KINDS = ("gaussian", "dog", "log", "laplacian") + tuple(_GRADIENTS)


def _split_params(param_str: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for item in param_str.split(","):
        item = item.strip()
        if not item:
            continue
        key, eq, val = item.partition("=")
        if not eq:
            raise ValueError(f"Malformed kernel parameter {item!r}; expected key=value.")
        key = key.strip().lower()
        # allow unicode sigma
        key = key.replace("σ", "sigma")
        params[key] = val.strip()
    return params


def _numbers(text: str, cast):
    """
    Read ``a`` as a scalar and ``a;b;...`` as a tuple. A trailing ``;``
    (``a;``) forces a 1-tuple.
    """
    parts = [v.strip() for v in text.split(";")]
    values = tuple(cast(v) for v in parts if v)
    if len(values) == 1 and len(parts) == 1:
        return values[0]
    return values


def _floats(text: str):
    return _numbers(text, float)


def _ints(text: str):
    return _numbers(text, int)


def _bools(text: str) -> Tuple[bool, ...]:
    out = []
    for v in text.split(";"):
        v = v.strip().lower()
        if v in ("1", "true", "yes"):
            out.append(True)
        elif v in ("0", "false", "no"):
            out.append(False)
        elif v:
            raise ValueError(f"Cannot read {v!r} as a boolean flag.")
    return tuple(out)


def _require(params: Dict[str, str], key: str, kind: str) -> str:
    value = params.get(key)
    if value is None:
        raise ValueError(f"{kind} kernel requires {key!r} (e.g. '{kind}:{key}=2.0').")
    return value


def kernel_from_spec(spec: str):
    """
    Parse strings like::

        "gaussian:sigma=2.0"
        "gaussian:σ=1;3,length=7;13"
        "dog:sigma=1.5"
        "log:sigma=2"
        "laplacian"
        "laplacian:dims=0;2,ndim=3"
        "sobel"
        "sobel:extended=1;1,axis=0"

    and build the corresponding kernel. A single sigma value builds the
    symmetric 2D kernel (a single length then applies to both axes);
    ``;`` separates per-dimension values, and a trailing ``;`` as in
    ``"log:sigma=2;"`` requests a 1D kernel.

    Gradient kinds return their kernel pair, or a 1-tuple when ``axis`` is
    given. ``laplacian`` returns the sparse :class:`Laplacian` value.
    """
    if not spec or not spec.strip():
        raise ValueError("Empty kernel spec.")

    kind, _, param_str = spec.partition(":")
    kind = kind.strip().lower()
    params = _split_params(param_str) if param_str else {}
    logger.debug("kernel spec %r -> kind=%s params=%r", spec, kind, params)

    if kind == "gaussian":
        sigma = _floats(_require(params, "sigma", kind))
        length = params.get("length")
        return gaussian(sigma, None if length is None else _ints(length))

    if kind == "dog":
        sigma = _floats(_require(params, "sigma", kind))
        minus = params.get("sigma_minus")
        length = params.get("length")
        return DoG(
            sigma,
            None if minus is None else _floats(minus),
            None if length is None else _ints(length),
        )

    if kind == "log":
        return LoG(_floats(_require(params, "sigma", kind)))

    if kind == "laplacian":
        if "dims" in params:
            dims = tuple(int(v) for v in params["dims"].split(";") if v.strip())
            ndim = int(params.get("ndim", max(dims, default=-1) + 1))
            return Laplacian.from_dims(dims, ndim)
        if "flags" in params:
            return Laplacian(_bools(params["flags"]))
        return Laplacian()

    if kind in _GRADIENTS:
        build = _GRADIENTS[kind]
        if "axis" not in params and "extended" not in params:
            return build()
        extended = _bools(params.get("extended", "1;1"))
        axis = int(_require(params, "axis", kind))
        return build(extended, axis)

    raise ValueError(
        f"Unsupported kernel kind {kind!r}; expected one of {', '.join(KERNEL_KINDS)}."
    )
