from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from unsvg.core.canvas import Canvas
from unsvg.core.color import COLORS
from unsvg.core.errors import InvalidColorError, UnsvgIOError
from unsvg.core.runtime_config import set_config_path
from unsvg.export import image
from unsvg.export.svg import render_svg


# `unsvg.export.image`（SVG→PNG / resvg）をテストする。

@pytest.fixture(autouse=True)
def _reset_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


def _canvas() -> Canvas:
    canvas = Canvas(200, 100)
    canvas.draw_simple_line(10.0, 10.0, 0, 100.0, COLORS[1])
    return canvas


def test_png_output_size_scales_canvas_by_png_scale(tmp_path: Path) -> None:
    assert image.png_output_size((300, 200)) == (300, 200)

    config = tmp_path / "config.yaml"
    config.write_text("export:\n  png:\n    scale: 4\n", encoding="utf-8")
    set_config_path(config)
    assert image.png_output_size((300, 200)) == (1200, 800)


def test_png_output_size_rejects_degenerate_canvas() -> None:
    with pytest.raises(ValueError):
        image.png_output_size((0, 100))


def test_save_png_writes_svg_and_invokes_resvg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    out_png = tmp_path / "out" / "drawing.png"
    canvas = _canvas()
    calls: list[list[str]] = []

    def fake_run(cmd, *, capture_output: bool, text: bool, check: bool):
        assert capture_output is True
        assert text is True
        assert check is False
        calls.append(list(cmd))
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    returned = image.save_png(canvas, out_png)

    assert returned == out_png
    svg_path = out_png.with_suffix(".svg")
    assert svg_path.read_text(encoding="utf-8") == render_svg(canvas)

    assert len(calls) == 1
    cmd = calls[0]
    assert cmd[0] == "resvg"
    assert cmd[cmd.index("--width") + 1] == "200"
    assert cmd[cmd.index("--height") + 1] == "100"
    assert "--background" not in cmd
    assert Path(cmd[-2]) == svg_path
    assert Path(cmd[-1]) == out_png


def test_save_png_uses_canvas_background(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    canvas = Canvas(10, 10, background=COLORS[0])
    seen: list[list[str]] = []

    def fake_run(cmd, **kwargs):
        seen.append(list(cmd))
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    canvas.save_png(tmp_path / "bg.png")

    cmd = seen[0]
    assert cmd[cmd.index("--background") + 1] == "#000000"


def test_save_png_reports_missing_resvg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    with pytest.raises(UnsvgIOError) as excinfo:
        image.save_png(_canvas(), tmp_path / "out.png")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_save_png_reports_resvg_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(args=cmd, returncode=1, stdout="", stderr="bad svg")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    with pytest.raises(UnsvgIOError, match="bad svg"):
        image.save_png(_canvas(), tmp_path / "out.png")


def test_save_png_rejects_non_png_suffix(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        image.save_png(_canvas(), tmp_path / "out.jpg")


def test_save_png_rejects_empty_canvas(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        image.save_png(Canvas(0, 10), tmp_path / "out.png")


def test_save_png_accepts_raw_rgb_background(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[list[str]] = []

    def fake_run(cmd, **kwargs):
        seen.append(list(cmd))
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    image.save_png(Canvas(10, 10), tmp_path / "raw.png", background=(10, 20, 30))
    Canvas(10, 10).save_png(tmp_path / "method.png", background=COLORS[4])

    assert seen[0][seen[0].index("--background") + 1] == "#0A141E"
    assert seen[1][seen[1].index("--background") + 1] == "#FF0000"


def test_save_png_rejects_invalid_background_before_writing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fake_run(cmd, **kwargs):
        raise AssertionError("resvg must not be invoked")

    monkeypatch.setattr(image.subprocess, "run", fake_run)
    out_png = tmp_path / "bad.png"

    with pytest.raises(InvalidColorError):
        image.save_png(_canvas(), out_png, background=(300, 0, 0))

    assert not out_png.with_suffix(".svg").exists()
    assert not out_png.exists()
