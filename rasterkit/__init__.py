"""Image processing routines for NumPy arrays: morphology, suppression, pixel blending and geometry."""

__version__ = "0.1.0"

__all__ = [
    "morphology",
    "open_close",
    "pixelops",
    "point",
    "rect",
    "suppress",
    "union_find",
]