"""Dilation and erosion of grayscale images using distance transforms."""

from __future__ import annotations

from enum import Enum

import numpy as np

_MAX_DISTANCE = 255


class Norm(Enum):
    """Norm used to measure distances between pixels."""

    L1 = "l1"
    L2 = "l2"
    LINF = "linf"


def _column_distances(mask: np.ndarray) -> np.ndarray:
    """Distance from each pixel to the nearest source pixel in its column."""
    height = mask.shape[0]
    ys = np.arange(height, dtype=float)[:, None]
    previous = np.maximum.accumulate(np.where(mask, ys, -np.inf), axis=0)
    following = np.minimum.accumulate(np.where(mask, ys, np.inf)[::-1], axis=0)[::-1]
    return np.minimum(ys - previous, following - ys)


def _distances(mask: np.ndarray, norm: Norm) -> np.ndarray:
    """Distance from each pixel to the nearest source pixel, capped at 255.

    L2 distances are rounded up to the next integer.
    """
    height, width = mask.shape
    out = np.full((height, width), _MAX_DISTANCE, dtype=np.uint8)
    if height == 0 or width == 0 or not mask.any():
        return out

    columns = _column_distances(mask)
    xs = np.arange(width, dtype=float)
    dx = np.abs(xs[:, None] - xs[None, :])
    if norm is Norm.L2:
        dx = dx * dx

    for y, col in enumerate(columns):
        if norm is Norm.L1:
            row = (dx + col[None, :]).min(axis=1)
        elif norm is Norm.L2:
            row = np.ceil(np.sqrt((dx + (col * col)[None, :]).min(axis=1)))
        else:
            row = np.maximum(dx, col[None, :]).min(axis=1)
        out[y] = np.minimum(row, _MAX_DISTANCE).astype(np.uint8)
    return out


def _check(image: np.ndarray, norm: Norm, k: int) -> None:
    if image.ndim != 2:
        raise ValueError("expected a single-channel 2d image")
    if not isinstance(norm, Norm):
        raise TypeError("norm must be a Norm")
    if not 0 <= k <= 255:
        raise ValueError("k must be in the range 0..255")


def dilate_inplace(image: np.ndarray, norm: Norm, k: int) -> None:
    """Sets all pixels within distance k of a non-zero pixel to 255, others to 0."""
    _check(image, norm, k)
    dist = _distances(image != 0, norm)
    image[...] = np.where(dist <= k, 255, 0)


def dilate(image, norm: Norm, k: int) -> np.ndarray:
    """Returns a copy of image dilated by distance k under the given norm."""
    out = np.array(image, dtype=np.uint8, copy=True)
    dilate_inplace(out, norm, k)
    return out


def erode_inplace(image: np.ndarray, norm: Norm, k: int) -> None:
    """Sets all pixels within distance k of a zero pixel to 0, others to 255."""
    _check(image, norm, k)
    dist = _distances(image == 0, norm)
    image[...] = np.where(dist <= k, 0, 255)


def erode(image, norm: Norm, k: int) -> np.ndarray:
    """Returns a copy of image eroded by distance k under the given norm."""
    out = np.array(image, dtype=np.uint8, copy=True)
    erode_inplace(out, norm, k)
    return out