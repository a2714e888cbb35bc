# --- file: localcontrast/filters/interpolate.py ---
"""
Bilinear reconstruction from per-tile CDF lookup tables.

Each pixel is mapped into tile-center coordinates, the two nearest tile
columns/rows are picked (clamped to the grid so border pixels reuse the edge
pair), and the four CDF values at the pixel's intensity are blended.
"""

from __future__ import annotations
from typing import Tuple

import numpy as np

__all__ = ["tile_pairs", "interpolate_tiles"]


def tile_pairs(n_pixels: int, tile_size: int, n_tiles: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Neighbouring tile indices and blend weights along one axis.

    Parameters
    ----------
    n_pixels : int
        Image extent along the axis (W or H), including uncovered pixels.
    tile_size : int
        Tile extent along the axis (tileW or tileH).
    n_tiles : int
        Number of tiles along the axis.

    Returns
    -------
    i0, i1 : np.ndarray
        int64 indices of the lower/upper tile per pixel.
    w : np.ndarray
        float64 weight of the upper tile, clamped to [0, 1].
    """
    f = np.arange(n_pixels, dtype=np.float64) / tile_size - 0.5
    i0 = np.clip(np.floor(f).astype(np.int64), 0, max(n_tiles - 2, 0))
    # a single tile along the axis blends with itself
    i1 = np.minimum(i0 + 1, n_tiles - 1)
    w = np.clip(f - i0, 0.0, 1.0)
    return i0, i1, w


def interpolate_tiles(img: np.ndarray, cdfs: np.ndarray, tile_h: int, tile_w: int) -> np.ndarray:
    """
    Remap every pixel through the bilinear blend of its four nearest tile CDFs.

    Parameters
    ----------
    img : np.ndarray
        2D uint8 image (H, W). Only read.
    cdfs : np.ndarray
        uint8 table (tilesY, tilesX, 256) from `build_cdf_table`.
    tile_h, tile_w : int
        Tile size in pixels.

    Returns
    -------
    np.ndarray
        New uint8 image (H, W); values are truncated toward zero and
        clamped to [0, 255].
    """
    a = np.asarray(img)
    if a.ndim != 2:
        raise ValueError(f"Expected 2D image, got shape {a.shape}.")
    if cdfs.ndim != 3 or cdfs.shape[2] != 256:
        raise ValueError(f"Expected CDF table of shape (gy, gx, 256), got {cdfs.shape}.")
    H, W = a.shape
    gy, gx = cdfs.shape[:2]

    ty0, ty1, ay = tile_pairs(H, tile_h, gy)
    tx0, tx1, ax = tile_pairs(W, tile_w, gx)

    lut = cdfs.astype(np.float64)
    Y0, Y1 = ty0[:, None], ty1[:, None]
    X0, X1 = tx0[None, :], tx1[None, :]
    v00 = lut[Y0, X0, a]
    v01 = lut[Y0, X1, a]
    v10 = lut[Y1, X0, a]
    v11 = lut[Y1, X1, a]

    wx = ax[None, :]
    wy = ay[:, None]
    top = v00 * (1.0 - wx) + v01 * wx
    bottom = v10 * (1.0 - wx) + v11 * wx
    value = top * (1.0 - wy) + bottom * wy

    return np.clip(value, 0.0, 255.0).astype(np.uint8)
