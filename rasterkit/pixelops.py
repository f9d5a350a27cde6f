"""Pixel manipulations on 8-bit pixels."""

from __future__ import annotations

from typing import Sequence


def _clamp_u8(value: float) -> int:
    return max(0, min(255, round(value)))


def _weighted_channel_sum(
    left: float, right: float, left_weight: float, right_weight: float
) -> int:
    return _clamp_u8(left * left_weight + right * right_weight)


def weighted_sum(
    left: Sequence[int],
    right: Sequence[int],
    left_weight: float,
    right_weight: float,
) -> tuple[int, ...]:
    """Adds two pixels channel by channel with the given weights, clamping to 0..255."""
    if len(left) != len(right):
        raise ValueError("pixels have different channel counts")
    return tuple(
        _weighted_channel_sum(p, q, left_weight, right_weight)
        for p, q in zip(left, right)
    )


def interpolate(
    left: Sequence[int], right: Sequence[int], left_weight: float
) -> tuple[int, ...]:
    """Equivalent to weighted_sum(left, right, left_weight, 1 - left_weight)."""
    return weighted_sum(left, right, left_weight, 1.0 - left_weight)