"""
どこで: `src/unsvg/core/color.py`。
何を: RGB255 の Color 型と、固定 16 色のパレット `COLORS` を定義する。
なぜ: 線色を検証済みの値として扱い、添字で選べる既定色を共有するため。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from unsvg.core.errors import InvalidColorError


def _check_channel(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise InvalidColorError(f"{name} は整数である必要がある: got={value!r}")
    try:
        iv = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise InvalidColorError(f"{name} は整数である必要がある: got={value!r}") from exc
    if iv != value:
        raise InvalidColorError(f"{name} は整数である必要がある: got={value!r}")
    if iv < 0 or iv > 255:
        raise InvalidColorError(f"{name} は 0..255 の範囲である必要がある: got={value!r}")
    return iv


@dataclass(frozen=True, slots=True)
class Color:
    """0..255 の RGB 色。"""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        # frozen のため object.__setattr__ で正規化済みの int を書き戻す。
        object.__setattr__(self, "red", _check_channel("red", self.red))
        object.__setattr__(self, "green", _check_channel("green", self.green))
        object.__setattr__(self, "blue", _check_channel("blue", self.blue))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    @property
    def hex(self) -> str:
        """`#RRGGBB`（大文字）を返す。"""

        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


def as_color(value: Color | Sequence[int]) -> Color:
    """Color または `(r, g, b)` シーケンスを Color に正規化して返す。

    Raises
    ------
    InvalidColorError
        長さ 3 のシーケンスでない場合、またはチャンネルが 0..255 の整数でない場合。
    """

    if isinstance(value, Color):
        return value
    if isinstance(value, (str, bytes)):
        raise InvalidColorError(f"color は (r, g, b) である必要がある: got={value!r}")
    try:
        r, g, b = value
    except (TypeError, ValueError) as exc:
        raise InvalidColorError(f"color は (r, g, b) である必要がある: got={value!r}") from exc
    return Color(r, g, b)


# Logo の 16 色。添字は固定（並べ替え・追加をしない）。
COLORS: tuple[Color, ...] = (
    Color(0, 0, 0),  # black
    Color(0, 0, 255),  # blue
    Color(0, 255, 255),  # cyan
    Color(0, 255, 0),  # green
    Color(255, 0, 0),  # red
    Color(255, 0, 255),  # magenta
    Color(255, 255, 0),  # yellow
    Color(255, 255, 255),  # white
    Color(165, 42, 42),  # brown
    Color(210, 180, 140),  # tan
    Color(34, 139, 34),  # forest
    Color(127, 255, 212),  # aqua
    Color(250, 128, 114),  # salmon
    Color(128, 0, 128),  # purple
    Color(255, 165, 0),  # orange
    Color(128, 128, 128),  # grey
)


__all__ = ["COLORS", "Color", "as_color"]
