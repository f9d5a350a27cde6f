import pytest

from rasterkit.pixelops import interpolate, weighted_sum


@pytest.mark.parametrize(
    "left, right, lw, rw, expected",
    [
        (10, 20, 0.5, 0.5, 15),
        (10, 20, 0.9, 0.1, 11),
        (150, 150, 1.8, 0.8, 255),
    ],
)
def test_weighted_channel_sum(left, right, lw, rw, expected):
    assert weighted_sum((left,), (right,), lw, rw) == (expected,)


def test_weighted_sum_rgb():
    assert weighted_sum((10, 20, 30), (100, 80, 60), 0.7, 0.3) == (37, 38, 39)


def test_interpolate_rgb():
    assert interpolate((10, 20, 30), (100, 80, 60), 0.7) == (37, 38, 39)


def test_negative_result_is_clamped_to_zero():
    assert weighted_sum((10,), (20,), -1.0, 0.1) == (0,)


def test_mismatched_channel_counts_rejected():
    with pytest.raises(ValueError):
        weighted_sum((1, 2), (1, 2, 3), 0.5, 0.5)