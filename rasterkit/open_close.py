"""Morphological opening and closing of grayscale images."""

from __future__ import annotations

import numpy as np

from rasterkit.morphology import Norm, dilate_inplace, erode_inplace


def opening_inplace(image: np.ndarray, norm: Norm, k: int) -> None:
    """Erosion followed by dilation, in place."""
    erode_inplace(image, norm, k)
    dilate_inplace(image, norm, k)


def opening(image, norm: Norm, k: int) -> np.ndarray:
    """Returns the erosion followed by dilation of a copy of image."""
    out = np.array(image, dtype=np.uint8, copy=True)
    opening_inplace(out, norm, k)
    return out


def closing_inplace(image: np.ndarray, norm: Norm, k: int) -> None:
    """Dilation followed by erosion, in place."""
    dilate_inplace(image, norm, k)
    erode_inplace(image, norm, k)


def closing(image, norm: Norm, k: int) -> np.ndarray:
    """Returns the dilation followed by erosion of a copy of image."""
    out = np.array(image, dtype=np.uint8, copy=True)
    closing_inplace(out, norm, k)
    return out