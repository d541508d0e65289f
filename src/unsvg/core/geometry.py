"""
どこで: `src/unsvg/core/geometry.py`。
何を: 始点・方向・長さから線分の終点を求める関数を提供する。
なぜ: 「向き + 長さ」で描く線と、連続した移動列の座標計算を 1 か所にまとめるため。

Notes
-----
角度の規約はスクリーン座標系（y 下向き）に合わせる。
0° で +X 方向、角度が増えると時計回りに回り、90° で +Y（画面下）方向を向く。
入力に NaN / inf を渡した場合の挙動は未定義（呼び出し側の前提条件）。
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np


def normalize_direction(direction: float) -> float:
    """方向 [deg] を [0, 360) に正規化して返す。"""

    normalized = float(direction) % 360.0
    # -1e-17 % 360 は 360.0 に丸まるため畳み込む。
    if normalized >= 360.0:
        return 0.0
    return normalized


def end_point(
    x: float,
    y: float,
    direction: float,
    length: float,
) -> tuple[float, float]:
    """始点 (x, y) から direction 方向に length 進んだ終点を返す。

    Parameters
    ----------
    x, y : float
        始点。
    direction : float
        方向 [deg]。0° で +X、時計回り（y 下向き）。
    length : float
        長さ。負なら逆向き、0 なら始点と同じ点になる。

    Returns
    -------
    tuple[float, float]
        終点 (x1, y1)。
    """

    theta = math.radians(normalize_direction(direction))
    length_f = float(length)
    return (
        float(x) + length_f * math.cos(theta),
        float(y) + length_f * math.sin(theta),
    )


def walk(
    x: float,
    y: float,
    moves: Iterable[tuple[float, float]],
) -> np.ndarray:
    """(direction, length) の移動列を辿ったペン位置列を返す。

    Returns
    -------
    np.ndarray
        shape (len(moves) + 1, 2) の float64 配列。先頭は始点。

    Raises
    ------
    ValueError
        moves が (direction, length) の列でない場合。
    """

    arr = np.asarray(list(moves), dtype=np.float64)
    if arr.size == 0:
        return np.array([[float(x), float(y)]], dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"moves は (direction, length) の列である必要がある: shape={arr.shape}")

    theta = np.deg2rad(np.mod(arr[:, 0], 360.0))
    length = arr[:, 1]
    steps = np.stack([length * np.cos(theta), length * np.sin(theta)], axis=1)

    start = np.array([[float(x), float(y)]], dtype=np.float64)
    return np.concatenate([start, start + np.cumsum(steps, axis=0)], axis=0)


__all__ = ["end_point", "normalize_direction", "walk"]
