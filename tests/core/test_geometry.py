"""終点計算（0° = +X、時計回り / y 下向き）のテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from unsvg.core.geometry import end_point, normalize_direction, walk


@pytest.mark.parametrize(
    ("direction", "expected"),
    [(0, 0.0), (360, 0.0), (450, 90.0), (-90, 270.0), (-720, 0.0), (359, 359.0)],
)
def test_normalize_direction(direction: int, expected: float) -> None:
    assert normalize_direction(direction) == expected


def test_zero_degrees_points_along_positive_x() -> None:
    assert end_point(10.0, 10.0, 0, 100.0) == (110.0, 10.0)


def test_ninety_degrees_points_down_the_screen() -> None:
    x, y = end_point(110.0, 10.0, 90, 50.0)
    assert x == pytest.approx(110.0, abs=1e-9)
    assert y == pytest.approx(60.0, abs=1e-9)


@pytest.mark.parametrize("direction", [0, 30, 45, 90, 135, 180, 225, 270, 315, -45, 720])
@pytest.mark.parametrize("length", [0.0, 1.0, 37.5, -12.0])
def test_end_point_matches_trig_projection(direction: int, length: float) -> None:
    x0, y0 = 3.25, -7.5
    x1, y1 = end_point(x0, y0, direction, length)
    theta = direction * math.pi / 180.0
    assert x1 == pytest.approx(x0 + length * math.cos(theta), abs=1e-6)
    assert y1 == pytest.approx(y0 + length * math.sin(theta), abs=1e-6)


def test_negative_length_goes_the_opposite_way() -> None:
    forward = end_point(0.0, 0.0, 180, 10.0)
    backward = end_point(0.0, 0.0, 0, -10.0)
    assert backward == pytest.approx(forward, abs=1e-9)
    assert backward[0] == pytest.approx(-10.0)


def test_walk_returns_pen_positions_including_start() -> None:
    points = walk(0.0, 0.0, [(0, 10.0), (90, 10.0), (180, 10.0), (270, 10.0)])
    assert points.shape == (5, 2)
    assert points.dtype == np.float64
    np.testing.assert_allclose(
        points,
        [[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0]],
        atol=1e-9,
    )


def test_walk_with_no_moves_is_just_the_start() -> None:
    points = walk(4.0, 5.0, [])
    assert points.tolist() == [[4.0, 5.0]]


def test_walk_rejects_malformed_moves() -> None:
    with pytest.raises(ValueError):
        walk(0.0, 0.0, [(0, 1.0, 2.0)])  # type: ignore[list-item]
