# --- file: localcontrast/summary/qc_maps.py ---

from __future__ import annotations
import numpy as np
from scipy.ndimage import uniform_filter

__all__ = [
    "local_contrast_map",
    "contrast_gain",
]


def _as_YX(img: np.ndarray) -> np.ndarray:
    """Return a contiguous float32 2D copy; do not mutate input."""
    a = np.asarray(img, dtype=np.float32, order="C")
    if a.ndim != 2:
        raise ValueError(f"Expected 2D image, got shape {a.shape}.")
    return a


def local_contrast_map(
    img: np.ndarray,
    *,
    size: int = 15,
    mode: str = "reflect",
) -> np.ndarray:
    """
    Compute a *local standard deviation* map.

    For each pixel, the mean and mean-of-squares over a ``size x size``
    window are taken with a box filter; the map is
    ``sqrt(max(E[x^2] - E[x]^2, 0))``.

    Parameters
    ----------
    img : np.ndarray
        2D image (H, W), any numeric dtype. Intensities are used as-is.
    size : int, optional
        Window side in pixels. Must be >= 1.
    mode : str, optional
        Border handling passed to `scipy.ndimage.uniform_filter`.

    Returns
    -------
    np.ndarray
        Local contrast image of shape (H, W), dtype float32.
    """
    if size < 1:
        raise ValueError("size must be >= 1")
    x = _as_YX(img)
    mu = uniform_filter(x, size=size, mode=mode)
    mu2 = uniform_filter(x * x, size=size, mode=mode)
    var = np.maximum(mu2 - mu * mu, 0.0)
    return np.sqrt(var).astype(np.float32, copy=False)


def contrast_gain(
    before: np.ndarray,
    after: np.ndarray,
    *,
    size: int = 15,
    eps: float = 1e-8,
) -> float:
    """
    Mean local contrast of `after` divided by that of `before`.

    Values above 1 mean the enhancement increased local contrast. A flat
    `before` image (zero local contrast) is guarded by `eps`.
    """
    if np.shape(before) != np.shape(after):
        raise ValueError(f"Shape mismatch: {np.shape(before)} vs {np.shape(after)}.")
    c0 = float(local_contrast_map(before, size=size).mean())
    c1 = float(local_contrast_map(after, size=size).mean())
    return c1 / max(c0, eps)
