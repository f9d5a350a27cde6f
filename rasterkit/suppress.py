"""Suppression of non-maximal values in images and point sets."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar

import numpy as np


class Scored(Protocol):
    """An item with integer coordinates and a score."""

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...

    @property
    def score(self) -> float: ...


S = TypeVar("S", bound=Scored)


def _contains_greater_value(
    px: list[list[Any]],
    x: int,
    y: int,
    v: Any,
    y_lower: int,
    y_upper: int,
    x_lower: int,
    x_upper: int,
) -> bool:
    """True if the block holds a larger value, or an equal one at a lexicographically
    lesser (x, y)."""
    for cy in range(y_lower, y_upper):
        row = px[cy]
        for cx in range(x_lower, x_upper):
            ci = row[cx]
            if ci < v:
                continue
            if ci > v or (cx, cy) < (x, y):
                return True
    return False


def suppress_non_maximum(image: Any, radius: int) -> np.ndarray:
    """Zeroes every pixel that is not the greatest in the (2 * radius + 1) square
    block centred on it. Ties are resolved lexicographically on (x, y).
    """
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ValueError("expected a single-channel 2d image")
    if radius < 0:
        raise ValueError("radius must be non-negative")
    height, width = arr.shape
    out = np.zeros_like(arr)
    if width == 0 or height == 0:
        return out

    px = arr.tolist()
    step = radius + 1

    # Only the maximum of each (r + 1) x (r + 1) grid cell can be a local maximum,
    # so the full neighbourhood search is done once per cell.
    for y in range(0, height, step):
        for x in range(0, width, step):
            best_x, best_y = x, y
            mi = px[y][x]
            for cy in range(y, min(height, y + step)):
                row = px[cy]
                for cx in range(x, min(width, x + step)):
                    ci = row[cx]
                    if ci < mi:
                        continue
                    if ci > mi or (cx, cy) < (best_x, best_y):
                        best_x, best_y = cx, cy
                        mi = ci

            x0 = max(0, best_x - radius)
            x1 = x
            x2 = min(width, x + step)
            x3 = min(width, best_x + step)

            y0 = max(0, best_y - radius)
            y1 = y
            y2 = min(height, y + step)
            y3 = min(height, best_y + step)

            failed = (
                _contains_greater_value(px, best_x, best_y, mi, y0, y1, x0, x3)
                or _contains_greater_value(px, best_x, best_y, mi, y1, y2, x0, x1)
                or _contains_greater_value(px, best_x, best_y, mi, y1, y2, x2, x3)
                or _contains_greater_value(px, best_x, best_y, mi, y2, y3, x0, x3)
            )
            if not failed:
                out[best_y, best_x] = mi

    return out


def _is_local_max(
    t: Scored, rows: list[list[Scored]], radius: int, height: int
) -> bool:
    cx, cy, cs = t.x, t.y, t.score
    row_lower = max(0, cy - radius)
    row_upper = min(height, cy + radius + 1)
    for y in range(row_lower, row_upper):
        for c in rows[y]:
            if c.x + radius < cx:
                continue
            if c.x > cx + radius:
                break
            if c.score > cs:
                return False
            if c.score < cs:
                continue
            if (c.y, c.x) < (cy, cx):
                return False
    return True


def local_maxima(ts: Sequence[S], radius: int) -> list[S]:
    """Returns the items with the highest score in the (2 * radius + 1) square
    block centred on them, ordered by (y, x). Ties are resolved lexicographically.
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")
    ordered = sorted(ts, key=lambda c: (c.y, c.x))
    height = ordered[-1].y if ordered else 0

    rows: list[list[Scored]] = [[] for _ in range(height + 1)]
    for t in ordered:
        rows[t.y].append(t)

    return [t for t in ordered if _is_local_max(t, rows, radius, height)]