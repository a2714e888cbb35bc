# --- file: localcontrast/__init__.py ---
from .filters import apply_clahe, clahe_u8, clahe_stack

__all__ = [
    "filters",
    "summary",
    "apply_clahe",
    "clahe_u8",
    "clahe_stack",
]

__version__ = "0.1.0"
