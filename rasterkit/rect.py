"""Axis-aligned rectangles of non-zero width and height."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangular region with top-left corner (left, top) and positive size.

    Build one with ``Rect.at(x, y).of_size(width, height)``.
    """

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("width must be strictly positive")
        if self.height <= 0:
            raise ValueError("height must be strictly positive")

    @classmethod
    def at(cls, x: int, y: int) -> RectPosition:
        """Starts building a rectangle whose top-left corner is (x, y)."""
        return RectPosition(left=x, top=y)

    def right(self) -> int:
        """Greatest x-coordinate reached by the rectangle."""
        return self.left + self.width - 1

    def bottom(self) -> int:
        """Greatest y-coordinate reached by the rectangle."""
        return self.top + self.height - 1

    def intersect(self, other: Rect) -> Rect | None:
        """Returns the intersection of the two rectangles, or None if they are disjoint."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right(), other.right())
        bottom = min(self.bottom(), other.bottom())
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left + 1, bottom - top + 1)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point (x, y) lies within the rectangle, edges included."""
        return self.left <= x <= self.right() and self.top <= y <= self.bottom()


@dataclass(frozen=True)
class RectPosition:
    """Position of the top-left corner of a rectangle under construction."""

    left: int
    top: int

    def of_size(self, width: int, height: int) -> Rect:
        """Builds a rectangle at this position; width and height must be positive."""
        return Rect(self.left, self.top, width, height)