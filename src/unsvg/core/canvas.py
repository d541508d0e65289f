"""
どこで: `src/unsvg/core/canvas.py`。
何を: 固定サイズのキャンバスと、描画順どおりの図形履歴を保持する Canvas を定義する。
なぜ: 描画 API（入力検証 + 追記）とシリアライズ（読み取り専用）を分離するため。
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

import numpy as np

from unsvg.core.color import Color, as_color
from unsvg.core.geometry import end_point, walk
from unsvg.core.shapes import Line, Shape

ColorLike = Color | Sequence[int]
Point = tuple[float, float]


def _check_size(name: str, value: object) -> int:
    """キャンバス寸法を 0 以上の整数として検証して返す。"""

    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} は整数である必要がある: got={value!r}")
    iv = int(value)
    if iv < 0:
        raise ValueError(f"{name} は 0 以上である必要がある: got={value!r}")
    return iv


class Canvas:
    """width x height ピクセルのキャンバス。

    Notes
    -----
    - 座標はクリップしない。キャンバス外の座標も記録し、SVG 上で viewport 外に描かれる。
    - 図形は追記のみで、個別削除（undo）はない。履歴を消すには Canvas を作り直す。
    - 内部ロックは持たない。複数スレッドから描く場合は呼び出し側で排他する。
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: ColorLike | None = None,
    ) -> None:
        w = _check_size("width", width)
        h = _check_size("height", height)
        self._width = w
        self._height = h
        self._background = None if background is None else as_color(background)
        self._shapes: list[Shape] = []

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height}, shapes={len(self._shapes)})"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dimensions(self) -> tuple[int, int]:
        """(width, height) を返す。"""

        return self._width, self._height

    @property
    def background(self) -> Color | None:
        return self._background

    def shapes(self) -> tuple[Shape, ...]:
        """描画順（= 重ね順）の図形レコードを返す。"""

        return tuple(self._shapes)

    def draw_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        color: ColorLike,
    ) -> Point:
        """(x0, y0) から (x1, y1) への線分を追加し、終点を返す。

        長さ 0 の線分やキャンバス外の座標もそのまま記録する。

        Raises
        ------
        InvalidColorError
            color が不正な場合。Canvas は変更しない。
        """

        line = Line(float(x0), float(y0), float(x1), float(y1), as_color(color))
        self._shapes.append(line)
        return line.end

    def draw_simple_line(
        self,
        x: float,
        y: float,
        direction: float,
        length: float,
        color: ColorLike,
    ) -> Point:
        """(x, y) から direction [deg] 方向へ length の線分を追加し、終点を返す。

        0° で +X、時計回り（90° で +Y = 画面下）。負の length は逆向きに描く。
        """

        rgb = as_color(color)
        x1, y1 = end_point(x, y, direction, length)
        return self.draw_line(x, y, x1, y1, rgb)

    def draw_path(
        self,
        x: float,
        y: float,
        moves: Iterable[tuple[float, float]],
        color: ColorLike,
    ) -> Point:
        """(direction, length) の移動列を連続した線分として追加し、最後のペン位置を返す。

        moves が空なら何も追加せず (x, y) を返す。
        """

        rgb = as_color(color)
        points = walk(x, y, moves)
        self._extend_polyline(points, rgb)
        last = points[-1]
        return float(last[0]), float(last[1])

    def draw_polyline(
        self,
        points: Sequence[Sequence[float]] | np.ndarray,
        color: ColorLike,
    ) -> Point | None:
        """点列を順に結ぶ線分を追加し、最後の点を返す。

        点が 1 個なら線分は追加しない。空なら None を返す。

        Raises
        ------
        ValueError
            points が shape (N, 2) でない場合。
        """

        rgb = as_color(color)
        arr = np.asarray(points, dtype=np.float64)
        if arr.size == 0:
            return None
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"points は shape (N, 2) である必要がある: shape={arr.shape}")
        self._extend_polyline(arr, rgb)
        return float(arr[-1, 0]), float(arr[-1, 1])

    def _extend_polyline(self, points: np.ndarray, color: Color) -> None:
        for (x0, y0), (x1, y1) in zip(points[:-1], points[1:]):
            self._shapes.append(Line(float(x0), float(y0), float(x1), float(y1), color))

    def to_svg(self) -> str:
        """SVG 文字列を返す（`unsvg.export.svg.render_svg`）。"""

        from unsvg.export.svg import render_svg

        return render_svg(self)

    def save_svg(self, path: str | Path | None = None) -> Path:
        """SVG として保存する（`unsvg.export.svg.save_svg`）。"""

        from unsvg.export.svg import save_svg

        return save_svg(self, path)

    def save_png(
        self,
        path: str | Path | None = None,
        *,
        background: ColorLike | None = None,
    ) -> Path:
        """PNG として保存する（`unsvg.export.image.save_png`）。"""

        from unsvg.export.image import save_png

        return save_png(self, path, background=background)


__all__ = ["Canvas", "ColorLike", "Point"]
