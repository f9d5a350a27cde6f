import math

import pytest

from rasterkit.point import Line, Point, Rotation, distance, distance_sq


def test_line_from_points():
    p = Point(5.0, 7.0)
    q = Point(10.0, 3.0)
    assert Line.from_points(p, q) == Line(4.0, 5.0, -55.0)


def test_distance_between_line_and_point():
    line = Line(8.0, 7.0, 5.0)
    assert line.distance_from_point(Point(2.0, 3.0)) == pytest.approx(
        3.9510276472, abs=1e-10
    )


def test_point_addition_and_subtraction():
    assert Point(1, 2) + Point(3, 5) == Point(4, 7)
    assert Point(1, 2) - Point(3, 5) == Point(-2, -3)


def test_augmented_addition():
    p = Point(1, 1)
    p += Point(2, 3)
    assert p == Point(3, 4)


def test_distance_and_distance_sq():
    assert distance_sq(Point(0, 0), Point(3, 4)) == 25.0
    assert distance(Point(0, 0), Point(3, 4)) == 5.0


def test_rotation_by_quarter_turn():
    rotation = Rotation.from_angle(math.pi / 2)
    rotated = Point(1.0, 0.0).rotate(rotation)
    assert rotated.x == pytest.approx(0.0, abs=1e-12)
    assert rotated.y == pytest.approx(-1.0)


def test_invert_rotation_round_trip():
    rotation = Rotation.from_angle(0.7)
    p = Point(3.5, -2.25)
    back = p.rotate(rotation).invert_rotation(rotation)
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)