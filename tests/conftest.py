import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def padded_buffer() -> tuple[bytearray, int, int, int]:
    """Return a 5x3 BGRA buffer with 4 bytes of row padding filled with 0xEE."""

    width, height, stride = 5, 3, 24
    rng = np.random.default_rng(1234)
    surface = np.full((height, stride), 0xEE, dtype=np.uint8)
    surface[:, : width * 4] = rng.integers(0, 256, size=(height, width * 4), dtype=np.uint8)
    return bytearray(surface.tobytes()), width, height, stride


@pytest.fixture
def random_buffer() -> tuple[bytearray, int, int, int]:
    """Return a tightly packed 32x16 BGRA buffer of random pixels."""

    width, height = 32, 16
    rng = np.random.default_rng(42)
    data = rng.integers(0, 256, size=width * height * 4, dtype=np.uint8)
    return bytearray(data.tobytes()), width, height, width * 4
