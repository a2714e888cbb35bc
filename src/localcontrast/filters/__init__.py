"""
localcontrast.filters
=====================

Contrast-limited adaptive histogram equalization (CLAHE) for single-channel
8-bit images, typically applied before pattern/code detection under uneven
illumination.

Modules
-------
histogram   : Per-tile histogram, clip-and-redistribute, CDF lookup tables.
interpolate : Bilinear blending of the four nearest tile CDFs per pixel.
contrast    : In-place buffer entry point and array front-ends.

Design
------
- Stages 1-3 (histogram, clip, CDF) are independent per tile; the
  reconstruction reads the complete CDF table and writes a separate output
  that is copied back only once every pixel is done.
- Border pixels outside the tile-covered region reuse the nearest edge tile
  pair instead of extrapolating.

Typical defaults
----------------
- CLAHE: clip_limit = 2.0, 8×8 tiles.
"""

# Short imports for public API
from .histogram import (
    NUM_BINS,
    tile_histogram,
    clip_count,
    clip_histogram,
    histogram_cdf,
    build_cdf_table,
)
from .interpolate import tile_pairs, interpolate_tiles
from .contrast import apply_clahe, clahe_u8, clahe_stack

# Modules export (histogram, interpolate, contrast)
import importlib as _importlib
histogram = _importlib.import_module(".histogram", __name__)
interpolate = _importlib.import_module(".interpolate", __name__)
contrast = _importlib.import_module(".contrast", __name__)

__all__ = [
    # constants
    "NUM_BINS",
    # functions
    "tile_histogram",
    "clip_count",
    "clip_histogram",
    "histogram_cdf",
    "build_cdf_table",
    "tile_pairs",
    "interpolate_tiles",
    "apply_clahe",
    "clahe_u8",
    "clahe_stack",
    # modules
    "histogram",
    "interpolate",
    "contrast",
]
