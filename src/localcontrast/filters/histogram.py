# --- file: localcontrast/filters/histogram.py ---
"""
Per-tile histogram, clip-and-redistribute and CDF lookup tables.

Stages
------
1. `tile_histogram`   : 256-bin intensity counts of one tile.
2. `clip_histogram`   : cap bins at `clip` and spread the excess over all bins.
3. `histogram_cdf`    : cumulative sum rescaled to a uint8 lookup table.
`build_cdf_table` runs the three stages over a (tilesY, tilesX) grid.

Notes
-----
- Tiles have a uniform integer size (H // tilesY, W // tilesX); trailing
  rows/columns that do not fill a whole tile are never counted.
- All counts are int64, the LUT is uint8.
"""

from __future__ import annotations
from typing import Tuple

import numpy as np

__all__ = [
    "NUM_BINS",
    "tile_histogram",
    "clip_count",
    "clip_histogram",
    "histogram_cdf",
    "build_cdf_table",
]

NUM_BINS = 256


def tile_histogram(tile: np.ndarray) -> np.ndarray:
    """Count every intensity of a uint8 tile into 256 bins (int64)."""
    t = np.asarray(tile)
    if t.dtype != np.uint8:
        raise TypeError(f"tile_histogram expects uint8 data, got {t.dtype}.")
    return np.bincount(t.ravel(), minlength=NUM_BINS).astype(np.int64, copy=False)


def clip_count(clip_limit: float, tile_w: int, tile_h: int) -> int:
    """Absolute per-bin cap: max(1, floor(clip_limit * tile_w * tile_h / 256))."""
    return max(1, int(clip_limit * (tile_w * tile_h) / NUM_BINS))


def clip_histogram(hist: np.ndarray, clip: int) -> np.ndarray:
    """
    Clip a histogram at `clip` and redistribute the excess.

    Parameters
    ----------
    hist : np.ndarray
        256 non-negative bin counts. Not modified.
    clip : int
        Maximum count allowed in a bin before redistribution.

    Returns
    -------
    np.ndarray
        New int64 histogram with the same total count. Every bin gets
        ``excess // 256``; the remainder ``r`` adds one unit at each index
        ``i * 256 // r`` for ``i in range(r)``.
    """
    h = np.asarray(hist, dtype=np.int64)
    if h.shape != (NUM_BINS,):
        raise ValueError(f"Expected a {NUM_BINS}-bin histogram, got shape {h.shape}.")

    over = h > clip
    excess = int((h[over] - clip).sum())
    out = np.where(over, np.int64(clip), h)

    increment, remainder = divmod(excess, NUM_BINS)
    out += increment
    if remainder > 0:
        idx = np.arange(remainder, dtype=np.int64) * NUM_BINS // remainder
        np.add.at(out, idx, 1)  # indices may repeat
    return out


def histogram_cdf(hist: np.ndarray, n_pixels: int) -> np.ndarray:
    """Cumulative distribution mapped to [0, 255]: min(255, cumsum*255 // n_pixels)."""
    if n_pixels <= 0:
        raise ValueError(f"n_pixels must be positive, got {n_pixels}.")
    cum = np.cumsum(np.asarray(hist, dtype=np.int64))
    return np.minimum(255, cum * 255 // n_pixels).astype(np.uint8)


def build_cdf_table(
    img: np.ndarray,
    tiles: Tuple[int, int] = (8, 8),
    clip_limit: float = 2.0,
) -> np.ndarray:
    """
    Build the clipped CDF lookup table of every tile.

    Parameters
    ----------
    img : np.ndarray
        2D uint8 image (H, W).
    tiles : (int, int)
        Number of tiles along (y, x).
    clip_limit : float
        Clip multiplier relative to a flat histogram (2.0 = twice the mean bin).

    Returns
    -------
    np.ndarray
        uint8 table of shape (tilesY, tilesX, 256).

    Raises
    ------
    ValueError
        If the image is not 2D or the grid yields zero-size tiles.
    """
    a = np.asarray(img)
    if a.ndim != 2:
        raise ValueError(f"Expected 2D image, got shape {a.shape}.")
    H, W = a.shape
    gy, gx = int(tiles[0]), int(tiles[1])
    if gy <= 0 or gx <= 0:
        raise ValueError(f"Tile counts must be positive, got tiles={tiles}.")
    tile_h, tile_w = H // gy, W // gx
    if tile_h <= 0 or tile_w <= 0:
        raise ValueError(f"Grid {tiles} yields empty tiles for image shape {a.shape}.")

    n_pixels = tile_h * tile_w
    clip = clip_count(clip_limit, tile_w, tile_h)

    cdfs = np.empty((gy, gx, NUM_BINS), dtype=np.uint8)
    for ty in range(gy):
        y0 = ty * tile_h
        for tx in range(gx):
            x0 = tx * tile_w
            hist = tile_histogram(a[y0:y0 + tile_h, x0:x0 + tile_w])
            cdfs[ty, tx] = histogram_cdf(clip_histogram(hist, clip), n_pixels)
    return cdfs
