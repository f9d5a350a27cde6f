"""A 2d point type together with rotations and lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass(frozen=True)
class Point(Generic[T]):
    """A 2d point."""

    x: T
    y: T

    def __add__(self, other: Point[T]) -> Point[T]:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point[T]) -> Point[T]:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def rotate(self, rotation: Rotation) -> Point[float]:
        """Rotates this point by the given rotation."""
        x = self.x * rotation.cos_theta + self.y * rotation.sin_theta
        y = self.y * rotation.cos_theta - self.x * rotation.sin_theta
        return Point(x, y)

    def invert_rotation(self, rotation: Rotation) -> Point[float]:
        """Applies the inverse of the given rotation to this point."""
        x = self.x * rotation.cos_theta - self.y * rotation.sin_theta
        y = self.y * rotation.cos_theta + self.x * rotation.sin_theta
        return Point(x, y)


def distance_sq(p: Point, q: Point) -> float:
    """Returns the square of the Euclidean distance between two points."""
    return (float(p.x) - float(q.x)) ** 2 + (float(p.y) - float(q.y)) ** 2


def distance(p: Point, q: Point) -> float:
    """Returns the Euclidean distance between two points."""
    return math.sqrt(distance_sq(p, q))


@dataclass(frozen=True)
class Rotation:
    """A fixed rotation, caching the sine and cosine of its angle."""

    sin_theta: float
    cos_theta: float

    @classmethod
    def from_angle(cls, theta: float) -> Rotation:
        """A rotation of `theta` radians."""
        return cls(math.sin(theta), math.cos(theta))


@dataclass(frozen=True)
class Line:
    """A line of the form ax + by + c = 0."""

    a: float
    b: float
    c: float

    @classmethod
    def from_points(cls, p: Point, q: Point) -> Line:
        """Returns the line passing through p and q."""
        a = p.y - q.y
        b = q.x - p.x
        c = p.x * q.y - q.x * p.y
        return cls(float(a), float(b), float(c))

    def distance_from_point(self, point: Point) -> float:
        """Shortest distance from this line to the given point."""
        numerator = abs(self.a * point.x + self.b * point.y + self.c)
        return numerator / math.sqrt(self.a**2 + self.b**2)