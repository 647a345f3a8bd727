# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

# Root of repo: tests/.. = project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"

# Allow running the tests from a checkout without installing the package
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0)


@pytest.fixture
def image(rng) -> np.ndarray:
    """Random grayscale "image"."""
    return rng.random((32, 24), dtype=np.float64)
