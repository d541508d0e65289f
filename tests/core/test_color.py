"""Color と固定パレット COLORS のテスト。"""

from __future__ import annotations

import dataclasses

import pytest

from unsvg.core.color import COLORS, Color, as_color
from unsvg.core.errors import InvalidColorError


def test_palette_has_sixteen_fixed_colors() -> None:
    assert len(COLORS) == 16
    assert COLORS[0] == Color(0, 0, 0)
    assert COLORS[1] == Color(0, 0, 255)
    assert COLORS[7] == Color(255, 255, 255)
    assert COLORS[15] == Color(128, 128, 128)


def test_palette_index_out_of_range_is_index_error() -> None:
    with pytest.raises(IndexError):
        _ = COLORS[16]


def test_palette_is_immutable() -> None:
    assert isinstance(COLORS, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        COLORS[0].red = 10  # type: ignore[misc]


def test_hex_is_uppercase_rrggbb() -> None:
    assert Color(255, 165, 0).hex == "#FFA500"
    assert Color(0, 0, 0).hex == "#000000"
    assert Color(10, 11, 12).rgb == (10, 11, 12)


@pytest.mark.parametrize(
    "rgb",
    [
        (256, 0, 0),
        (0, -1, 0),
        (0, 0, 1.5),
        (True, 0, 0),
        ("1", 0, 0),
    ],
)
def test_color_rejects_invalid_channels(rgb) -> None:
    with pytest.raises(InvalidColorError):
        Color(*rgb)


def test_as_color_accepts_sequences_and_passes_colors_through() -> None:
    assert as_color((1, 2, 3)) == Color(1, 2, 3)
    assert as_color([255, 255, 255]) == COLORS[7]
    assert as_color(COLORS[4]) is COLORS[4]


@pytest.mark.parametrize("value", [(1, 2), (1, 2, 3, 4), "red", None, 5])
def test_as_color_rejects_non_triples(value) -> None:
    with pytest.raises(InvalidColorError):
        as_color(value)  # type: ignore[arg-type]


def test_invalid_color_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Color(300, 0, 0)
