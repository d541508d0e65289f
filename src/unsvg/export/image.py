"""
どこで: `src/unsvg/export/image.py`。
何を: SVG を外部ラスタライザ（resvg）で PNG に変換して保存する関数を提供する。
なぜ: SVG を正（ソース）として保存し、PNG は任意の倍率で再生成できる導線を用意するため。
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from unsvg.core.canvas import Canvas, ColorLike
from unsvg.core.color import Color, as_color
from unsvg.core.errors import UnsvgIOError
from unsvg.core.output_paths import default_output_path
from unsvg.core.runtime_config import runtime_config
from unsvg.export.svg import save_svg

_logger = logging.getLogger(__name__)


def png_output_size(canvas_size: tuple[int, int]) -> tuple[int, int]:
    """canvas_size を基準に PNG 出力ピクセルサイズを返す。"""

    canvas_w, canvas_h = canvas_size
    if int(canvas_w) <= 0 or int(canvas_h) <= 0:
        raise ValueError("PNG 出力には正の (width, height) が必要")
    scale = float(runtime_config().png_scale)
    return max(1, int(int(canvas_w) * scale)), max(1, int(int(canvas_h) * scale))


def _resvg_command(
    *,
    input_svg: Path,
    output_png: Path,
    output_size: tuple[int, int],
    background: Color | None,
) -> list[str]:
    out_w, out_h = output_size
    cmd = ["resvg", "--width", str(int(out_w)), "--height", str(int(out_h))]
    if background is not None:
        cmd += ["--background", background.hex]
    cmd += [str(input_svg), str(output_png)]
    return cmd


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background: Color | None = None,
) -> Path:
    """SVG を PNG として保存する。

    Parameters
    ----------
    svg_path : str or Path
        入力 SVG パス。
    png_path : str or Path
        出力 PNG パス。
    output_size : tuple[int, int]
        出力 PNG の (width, height) ピクセルサイズ。
    background : Color or None
        背景色。None なら透過。

    Returns
    -------
    Path
        出力 PNG パス。

    Raises
    ------
    UnsvgIOError
        resvg が見つからない、またはラスタライズに失敗した場合。
    """

    _svg_path = Path(svg_path)
    _png_path = Path(png_path)

    cmd = _resvg_command(
        input_svg=_svg_path,
        output_png=_png_path,
        output_size=output_size,
        background=background,
    )
    try:
        _png_path.parent.mkdir(parents=True, exist_ok=True)
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise UnsvgIOError(
            "resvg が見つかりません（`resvg` をインストールして PATH を通してください）"
        ) from e
    except OSError as e:
        raise UnsvgIOError(f"PNG を保存できませんでした: {_png_path}: {e}") from e

    if proc.returncode != 0:
        details = (proc.stderr or proc.stdout or "").strip()
        raise UnsvgIOError(f"resvg が失敗しました (code={proc.returncode}). {details}".strip())

    _logger.debug("PNG を保存しました: %s (%dx%d)", _png_path, *output_size)
    return _png_path


def save_png(
    canvas: Canvas,
    path: str | Path | None = None,
    *,
    background: ColorLike | None = None,
) -> Path:
    """Canvas を PNG として保存する。

    Notes
    -----
    SVG を `path` と同じ場所に `.svg` で保存し、resvg でラスタライズする。
    background が None なら Canvas の background を使う。

    Raises
    ------
    ValueError
        幅または高さが 0 の場合。
    InvalidColorError
        background が不正な場合（何も書き出さない）。
    UnsvgIOError
        SVG 保存またはラスタライズに失敗した場合。
    """

    fill = canvas.background if background is None else as_color(background)
    _path = Path(path) if path is not None else default_output_path(kind="png", ext="png")
    if _path.suffix.lower() != ".png":
        raise ValueError(f"PNG の出力パスは .png である必要がある: {_path}")

    output_size = png_output_size(canvas.dimensions)
    svg_path = save_svg(canvas, _path.with_suffix(".svg"))
    return rasterize_svg_to_png(
        svg_path,
        _path,
        output_size=output_size,
        background=fill,
    )


__all__ = ["png_output_size", "rasterize_svg_to_png", "save_png"]
