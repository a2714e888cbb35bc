# --- file: localcontrast/summary/viz.py ---
"""
Reusable visualization helpers for QC and reports.
All functions return the Matplotlib figure handle for further customization/saving.
"""

from __future__ import annotations
from typing import Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from .qc_maps import local_contrast_map


def _draw_tile_grid(ax, shape_hw: Tuple[int, int], tiles: Tuple[int, int], color: str = "yellow"):
    """Overlay the uniform tile boundaries (H // gy, W // gx) on an axis."""
    H, W = shape_hw
    gy, gx = tiles
    th, tw = H // gy, W // gx
    if th <= 0 or tw <= 0:
        return
    for i in range(1, gy + 1):
        ax.axhline(i * th - 0.5, color=color, lw=0.6, alpha=0.7)
    for j in range(1, gx + 1):
        ax.axvline(j * tw - 0.5, color=color, lw=0.6, alpha=0.7)


def grid_before_after(
    img_before: np.ndarray,
    img_after: np.ndarray,
    *,
    tiles: Optional[Tuple[int, int]] = None,
    titles: Sequence[str] = ("Before", "After"),
    suptitle: Optional[str] = None,
):
    """
    Show two uint8 images side by side on a fixed [0, 255] gray scale.

    If `tiles` (gy, gx) is given, the tile boundaries are drawn on both
    panels; the last line marks the end of the tile-covered region.
    """
    if np.ndim(img_before) != 2 or np.ndim(img_after) != 2:
        raise ValueError("grid_before_after expects 2D images.")

    fig, axs = plt.subplots(1, 2, figsize=(10, 4))
    for ax, im, title in zip(axs, (img_before, img_after), titles):
        ax.imshow(im, cmap="gray", vmin=0, vmax=255)
        ax.set_title(title); ax.axis("off")
        if tiles is not None:
            _draw_tile_grid(ax, np.shape(im), tiles)
    if suptitle is not None:
        fig.suptitle(suptitle, y=0.98)
    plt.tight_layout()
    return fig


def show_contrast_maps(img_before: np.ndarray, img_after: np.ndarray, size: int = 15):
    """Two-panel QC figure: local contrast before and after, shared color scale."""
    c0 = local_contrast_map(img_before, size=size)
    c1 = local_contrast_map(img_after, size=size)
    vmax = float(max(c0.max(), c1.max(), 1e-6))

    fig, axs = plt.subplots(1, 2, figsize=(10, 4))
    im0 = axs[0].imshow(c0, vmin=0, vmax=vmax, cmap="magma")
    axs[0].set_title(f"Local std before (mean {c0.mean():.1f})"); axs[0].axis("off")
    axs[1].imshow(c1, vmin=0, vmax=vmax, cmap="magma")
    axs[1].set_title(f"Local std after (mean {c1.mean():.1f})"); axs[1].axis("off")
    fig.colorbar(im0, ax=list(axs), fraction=0.046)
    return fig
