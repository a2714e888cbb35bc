"""
localcontrast.summary
=====================

Quality-control maps and lightweight visualizations for inspection.

Modules
-------
qc_maps : Local contrast (windowed standard deviation) map and contrast gain.
viz     : Before/after panels with tile-grid overlay, local contrast panels.

Guidelines
----------
- Summary products are for QC/visualization; they never modify the images
  they are given.
"""

# Re-exports for short imports like:
#   from localcontrast.summary import local_contrast_map, contrast_gain
#   from localcontrast.summary import grid_before_after, show_contrast_maps
from .qc_maps import local_contrast_map, contrast_gain
from .viz import grid_before_after, show_contrast_maps

import importlib as _importlib
qc_maps = _importlib.import_module(".qc_maps", __name__)
viz = _importlib.import_module(".viz", __name__)

__all__ = [
    # functions
    "local_contrast_map",
    "contrast_gain",
    "grid_before_after",
    "show_contrast_maps",
    # modules
    "qc_maps",
    "viz",
]
