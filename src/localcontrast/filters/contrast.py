# --- file: localcontrast/filters/contrast.py ---
"""
Local contrast enhancement (CLAHE) for grayscale images.

Typical usage
-------------
>>> from localcontrast.filters import apply_clahe, clahe_u8
>>> apply_clahe(buf, width, height, tiles_x=8, tiles_y=8, clip_limit=2.0)  # in place
>>> enhanced = clahe_u8(gray, clip_limit=2.0, tiles=(8, 8))                  # new array

Notes
-----
- `apply_clahe` works on a caller-owned row-major byte buffer. Invalid
  parameters are a silent no-op: the buffer is left byte-identical and nothing
  is allocated.
- `clahe_u8` / `clahe_stack` are array front-ends for notebooks and pipelines.
"""

from __future__ import annotations
import math
import sys
import warnings
from typing import Tuple

import numpy as np

from .histogram import build_cdf_table
from .interpolate import interpolate_tiles

__all__ = ["apply_clahe", "clahe_u8", "clahe_stack"]


def _as_byte_array(data) -> np.ndarray:
    """Writable uint8 numpy view over a bytearray / memoryview / ndarray."""
    if isinstance(data, np.ndarray):
        arr = data
    else:
        mv = memoryview(data)
        if mv.format not in ("B", "c"):
            raise TypeError(f"Expected a byte buffer, got memoryview format {mv.format!r}.")
        arr = np.frombuffer(mv, dtype=np.uint8)
    if arr.dtype != np.uint8:
        raise TypeError(f"Expected a uint8 buffer, got dtype {arr.dtype}.")
    if not arr.flags.writeable:
        raise TypeError("Buffer is read-only; apply_clahe works in place.")
    return arr


def _enhance(img: np.ndarray, tiles: Tuple[int, int], clip_limit: float) -> np.ndarray:
    """CDF table + bilinear reconstruction; `img` must already be validated."""
    H, W = img.shape
    tile_h, tile_w = H // tiles[0], W // tiles[1]
    cdfs = build_cdf_table(img, tiles=tiles, clip_limit=clip_limit)
    return interpolate_tiles(img, cdfs, tile_h, tile_w)


def apply_clahe(
    data,
    width: int,
    height: int,
    tiles_x: int = 8,
    tiles_y: int = 8,
    clip_limit: float = 2.0,
) -> None:
    """
    Contrast-limited adaptive histogram equalization, in place.

    Parameters
    ----------
    data : bytearray | memoryview | np.ndarray | None
        Row-major grayscale buffer of ``width * height`` uint8 samples.
        Rewritten in place on success.
    width, height : int
        Image size in pixels.
    tiles_x, tiles_y : int
        Number of tiles along x and y. Tile size is ``width // tiles_x`` by
        ``height // tiles_y``.
    clip_limit : float
        Clip multiplier; the per-bin cap is
        ``max(1, floor(clip_limit * tileW * tileH / 256))``.

    Returns
    -------
    None
        A null buffer, non-positive sizes or tile counts, zero-size tiles, a
        non-finite clip limit or a buffer whose length is not
        ``width * height`` leave `data` untouched.

    Raises
    ------
    TypeError
        If `data` is read-only, not uint8, or a memoryview of non-byte items.
    """
    if data is None or width <= 0 or height <= 0:
        return
    if tiles_x <= 0 or tiles_y <= 0:
        return
    if width // tiles_x <= 0 or height // tiles_y <= 0:
        return
    if not math.isfinite(clip_limit):
        return

    buf = _as_byte_array(data)
    if buf.size != width * height:
        return

    img = np.ascontiguousarray(buf).reshape(height, width)
    out = _enhance(img, (tiles_y, tiles_x), clip_limit)
    buf[...] = out.reshape(buf.shape)


def clahe_u8(
    img: np.ndarray,
    clip_limit: float = 2.0,
    tiles: Tuple[int, int] = (8, 8),
    *,
    verbose: bool = False,
) -> np.ndarray:
    """
    CLAHE on a single 2D image (expects float [0,1] or uint8).
    Returns a new uint8 array; the input is not modified.

    `tiles` is the grid size along (y, x). A grid too fine for the image
    returns the uint8 input unchanged.
    """
    im = np.asarray(img)
    if im.ndim != 2:
        raise ValueError(f"Expected 2D image, got shape {im.shape}.")
    if len(tiles) != 2:
        raise ValueError(f"tiles must be (tiles_y, tiles_x), got {tiles!r}.")

    if im.dtype != np.uint8:
        f = im.astype(np.float32)
        if np.nanmin(f) < 0 or np.nanmax(f) > 1:
            warnings.warn("clahe_u8: float input outside [0, 1] is clipped.", RuntimeWarning)
        f = np.clip(np.nan_to_num(f), 0, 1)
        im = (f * 255).astype(np.uint8)

    out = np.array(im, dtype=np.uint8, order="C", copy=True)
    H, W = out.shape
    apply_clahe(out, W, H, tiles_x=int(tiles[1]), tiles_y=int(tiles[0]), clip_limit=float(clip_limit))
    if verbose:
        print(f"[clahe] {H}x{W} tiles={tuple(tiles)} clip={clip_limit} "
              f"range {int(im.min())}..{int(im.max())} -> {int(out.min())}..{int(out.max())}")
    return out


def clahe_stack(
    movie: np.ndarray,
    clip_limit: float = 2.0,
    tiles: Tuple[int, int] = (8, 8),
    *,
    progress: bool = True,
) -> np.ndarray:
    """
    Apply `clahe_u8` independently to every frame.

    Parameters
    ----------
    movie : np.ndarray
        Stack (T, Y, X) or single frame (Y, X); uint8 or float in [0, 1].
    clip_limit : float
        Clip multiplier passed to `clahe_u8`.
    tiles : (int, int)
        Grid size along (y, x).
    progress : bool
        Show a tqdm progress bar over frames. Ignored for a single 2D frame.

    Returns
    -------
    np.ndarray
        uint8 array with the same shape as `movie`.
    """
    a = np.asarray(movie)
    if a.ndim == 2:
        return clahe_u8(a, clip_limit=clip_limit, tiles=tiles)
    if a.ndim != 3:
        raise ValueError(f"Expected 2D or 3D array, got shape {a.shape}.")

    out = np.empty(a.shape, dtype=np.uint8)
    rng = range(a.shape[0])
    if progress:
        from tqdm import tqdm
        rng = tqdm(rng, desc="CLAHE", file=sys.stdout)
    for t in rng:
        out[t] = clahe_u8(a[t], clip_limit=clip_limit, tiles=tiles)
    return out
