import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def split_tile_image():
    """16x16 image, 2x2 grid of 8x8 tiles: top-left tile is 0 | 255, the rest 128."""
    img = np.full((16, 16), 128, dtype=np.uint8)
    img[0:8, 0:4] = 0
    img[0:8, 4:8] = 255
    return img


@pytest.fixture
def textured_image():
    """Low-contrast gradient with noise, 64x64 uint8."""
    rng = np.random.default_rng(0)
    yy, xx = np.mgrid[0:64, 0:64]
    base = 90 + 0.3 * xx + 0.2 * yy
    noise = rng.normal(0, 3, size=base.shape)
    return np.clip(base + noise, 0, 255).astype(np.uint8)
