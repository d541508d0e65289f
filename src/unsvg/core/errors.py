# どこで: `src/unsvg/core/errors.py`。
# 何を: unsvg が送出する例外の型を定義する。
# なぜ: 色の不正と保存失敗を呼び出し側で型で区別できるようにするため。

from __future__ import annotations


class UnsvgError(Exception):
    """unsvg の基底例外。"""


class InvalidColorError(UnsvgError, ValueError):
    """色チャンネルが 0..255 の整数でない。"""


class UnsvgIOError(UnsvgError, OSError):
    """書き出し（SVG 保存 / PNG ラスタライズ）に失敗した。

    元の例外は常に `__cause__` に保持する。
    """


__all__ = ["InvalidColorError", "UnsvgError", "UnsvgIOError"]
