# どこで: `src/unsvg/core/output_paths.py`。
# 何を: 保存先が未指定のときの既定出力パスを決める。
# なぜ: `output_root/{kind}/` 配下に種類ごとに整理して保存するため。

from __future__ import annotations

import re
from pathlib import Path

from unsvg.core.runtime_config import output_root_dir

DEFAULT_STEM = "drawing"


def _sanitize_stem(stem: str) -> str:
    """ファイル名の一部として使える形に正規化して返す。"""

    return re.sub(r"[^A-Za-z0-9._-]+", "_", str(stem)).strip("_")


def default_output_path(*, kind: str, ext: str, stem: str = DEFAULT_STEM) -> Path:
    """`output_root/{kind}/{stem}.{ext}` を返す。

    Raises
    ------
    ValueError
        ext が空の場合。
    """

    ext_norm = str(ext).lstrip(".").strip()
    if not ext_norm:
        raise ValueError("ext は空でない必要がある")
    stem_norm = _sanitize_stem(stem) or DEFAULT_STEM
    return output_root_dir() / str(kind) / f"{stem_norm}.{ext_norm}"


__all__ = ["DEFAULT_STEM", "default_output_path"]
