"""
Command-line entry for the ndkernels package.

Usage
-----
$ python -m ndkernels
"""

import numpy as np

from .core import array_equal
from .kernel import sobel, ando4, gaussian, DoG, LoG, Laplacian, densify, reflect
from . import __version__


def _diagnostics():
    print(f"ndkernels multidimensional filter kernels v{__version__}\n")

    print("Gradient kernels:")
    d1, d2 = sobel()
    print(f"  sobel ranges: {d1.ranges}, diff2 == diff1.T: {array_equal(d2, d1.T)}")
    a1, a2 = ando4()
    print(f"  ando4 ranges: {a1.ranges}, diff2 == diff1.T: {array_equal(a2, a1.T)}")

    print("\nGaussian family:")
    g = gaussian(2.0)
    print(f"  gaussian(2.0): ranges {g.ranges}, sum {g.sum():.6f}")
    dog = DoG(2.0)
    print(f"  DoG(2.0): ranges {dog.ranges}, sum {dog.sum():.2e}")
    log = LoG(2.0)
    print(f"  LoG(2.0): ranges {log.ranges}, sum {log.sum():.2e}")

    print("\nLaplacian:")
    L = densify(Laplacian())
    for row in np.asarray(L):
        print("  " + " ".join(f"{v:3d}" for v in row))

    print("\nReflection:")
    print(f"  reflect(reflect(k)) == k for sobel: {array_equal(reflect(reflect(d1)), d1)}")

    print("\nAll checks done ✅")


if __name__ == "__main__":
    _diagnostics()
