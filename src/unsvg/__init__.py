# どこで: `src/unsvg/__init__.py`。
# 何を: ルート `unsvg` パッケージの公開 API を定義する。
# なぜ: `from unsvg import Canvas, COLORS` だけで描画から保存まで扱えるようにするため。

from __future__ import annotations

from unsvg.core.canvas import Canvas
from unsvg.core.color import COLORS, Color
from unsvg.core.errors import InvalidColorError, UnsvgError, UnsvgIOError
from unsvg.core.geometry import end_point, normalize_direction
from unsvg.core.shapes import Line, Shape
from unsvg.export.image import save_png
from unsvg.export.svg import render_svg, save_svg

__all__ = [
    "COLORS",
    "Canvas",
    "Color",
    "InvalidColorError",
    "Line",
    "Shape",
    "UnsvgError",
    "UnsvgIOError",
    "end_point",
    "normalize_direction",
    "render_svg",
    "save_png",
    "save_svg",
]
