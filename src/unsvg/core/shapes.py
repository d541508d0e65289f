"""
どこで: `src/unsvg/core/shapes.py`。
何を: Canvas に積まれる図形レコード（現状は Line のみ）を定義する。
なぜ: 描画履歴を不変な値として保持し、シリアライザへそのまま渡すため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from unsvg.core.color import Color


@dataclass(frozen=True, slots=True)
class Line:
    """始点 (x0, y0) から終点 (x1, y1) への線分。"""

    x0: float
    y0: float
    x1: float
    y1: float
    color: Color

    @property
    def start(self) -> tuple[float, float]:
        return self.x0, self.y0

    @property
    def end(self) -> tuple[float, float]:
        return self.x1, self.y1


Shape: TypeAlias = Line


__all__ = ["Line", "Shape"]
