"""
どこで: `src/unsvg/export/svg.py`。
何を: Canvas の図形履歴を SVG 文字列へ変換し、保存する関数を提供する。
なぜ: 描画結果を決定的なテキストとして書き出し、外部レンダラで再利用できるようにするため。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from unsvg.core.canvas import Canvas
from unsvg.core.errors import UnsvgIOError
from unsvg.core.output_paths import default_output_path
from unsvg.core.runtime_config import runtime_config
from unsvg.core.shapes import Line, Shape

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"

Writer = Callable[[Path, str], None]


def _fmt(value: float, *, decimals: int | None) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。

    decimals が None なら最短の往復可能表記（`repr`）を使い、読み戻すと元の float に一致する。
    """

    if decimals is None:
        text = repr(float(value))
    else:
        text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-") and float(text) == 0.0:
        return text[1:]
    return text


def _line_element(line: Line, *, stroke_width: str, decimals: int | None) -> str:
    return (
        f'<line x1="{_fmt(line.x0, decimals=decimals)}" y1="{_fmt(line.y0, decimals=decimals)}" '
        f'x2="{_fmt(line.x1, decimals=decimals)}" y2="{_fmt(line.y1, decimals=decimals)}" '
        f'stroke="{line.color.hex}" stroke-width="{stroke_width}" />'
    )


def _shape_element(shape: Shape, *, stroke_width: str, decimals: int | None) -> str:
    if isinstance(shape, Line):
        return _line_element(shape, stroke_width=stroke_width, decimals=decimals)
    raise TypeError(f"未対応の図形レコード: {type(shape).__name__}")


def render_svg(
    canvas: Canvas,
    *,
    stroke_width: float | None = None,
    decimals: int | None = None,
) -> str:
    """Canvas を SVG 文字列として返す。

    Parameters
    ----------
    canvas : Canvas
        描画済みのキャンバス。変更しない。
    stroke_width : float or None, optional
        線幅。None なら `export.svg.stroke_width`。
    decimals : int or None, optional
        座標の小数桁数。None なら `export.svg.decimals`（既定 null = 丸めない）。

    Returns
    -------
    str
        SVG 文書。図形は描画順に 1 要素ずつ並ぶ（後の要素が上に重なる）。

    Raises
    ------
    TypeError
        未対応の図形レコードを含む場合。
    """

    if stroke_width is None or decimals is None:
        cfg = runtime_config()
        if stroke_width is None:
            stroke_width = cfg.svg_stroke_width
        if decimals is None:
            decimals = cfg.svg_decimals
    if float(stroke_width) <= 0:
        raise ValueError(f"stroke_width は正の値である必要がある: got={stroke_width}")
    if decimals is not None:
        decimals = int(decimals)
        if decimals < 0:
            raise ValueError(f"decimals は 0 以上である必要がある: got={decimals}")

    width, height = canvas.dimensions
    stroke_width_text = _fmt(stroke_width, decimals=decimals)

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {width} {height}" '
            f'width="{width}" height="{height}">'
        )
    )

    background = canvas.background
    if background is not None:
        lines.append(
            f'  <rect x="0" y="0" width="{width}" height="{height}" fill="{background.hex}" />'
        )

    for shape in canvas.shapes():
        element = _shape_element(shape, stroke_width=stroke_width_text, decimals=decimals)
        lines.append(f"  {element}")

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_text(path: Path, text: str) -> None:
    """text を UTF-8（改行 LF）で path に書き込む。親ディレクトリは作成する。"""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def save_svg(
    canvas: Canvas,
    path: str | Path | None = None,
    *,
    writer: Writer | None = None,
) -> Path:
    """Canvas を SVG として保存する。

    Parameters
    ----------
    canvas : Canvas
        保存対象。変更しない。
    path : str or Path or None, optional
        出力先パス。None なら `{output_dir}/svg/drawing.svg`。
    writer : Callable[[Path, str], None] or None, optional
        書き込み処理。None なら `write_text`。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    UnsvgIOError
        書き込みが OSError で失敗した場合（元の例外を `__cause__` に保持する）。
        再試行はしない。
    """

    _path = Path(path) if path is not None else default_output_path(kind="svg", ext="svg")
    text = render_svg(canvas)
    _writer = writer if writer is not None else write_text

    try:
        _writer(_path, text)
    except OSError as exc:
        raise UnsvgIOError(f"SVG を保存できませんでした: {_path}: {exc}") from exc

    _logger.debug("SVG を保存しました: %s (%d shapes)", _path, len(canvas.shapes()))
    return _path


__all__ = ["Writer", "render_svg", "save_svg", "write_text"]
