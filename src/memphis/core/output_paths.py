# どこで: `src/memphis/core/output_paths.py`。
# 何を: CLI が保存する画像ファイルのパスを決める。
# なぜ: `output/{kind}/` 配下へ、キャンバス寸法と run_id をファイル名に含めて整理するため。

from __future__ import annotations

import re
from pathlib import Path

from memphis.core.runtime_config import runtime_config

_STEM = "memphis"


def _sanitize_run_id(run_id: str) -> str:
    """run_id をファイル名の一部として使える形に正規化して返す。"""

    return re.sub(r"[^A-Za-z0-9._-]+", "_", str(run_id))


def _run_id_suffix(run_id: str | None) -> str:
    """run_id の接尾辞（例: `_v1`）を返す。未指定なら空文字を返す。"""

    if run_id is None:
        return ""
    s = str(run_id).strip()
    if not s:
        return ""
    sanitized = _sanitize_run_id(s)
    if not sanitized:
        return ""
    return f"_{sanitized}"


def _fmt_canvas_dim_for_filename(value: float | int) -> str:
    """canvas の寸法をファイル名に埋め込むための短い表現にして返す。"""

    v = float(value)
    if v <= 0:
        raise ValueError("canvas_size は正の値である必要がある")
    if abs(v - round(v)) < 1e-9:
        return str(int(round(v)))

    s = f"{v:.3f}".rstrip("0").rstrip(".")
    return s if s else "0"


def _canvas_size_suffix(canvas_size: tuple[float | int, float | int] | None) -> str:
    """canvas_size の接尾辞（例: `_800x800`）を返す。未指定なら空文字を返す。"""

    if canvas_size is None:
        return ""
    w, h = canvas_size
    return f"_{_fmt_canvas_dim_for_filename(w)}x{_fmt_canvas_dim_for_filename(h)}"


def output_path_for_render(
    *,
    kind: str,
    ext: str,
    canvas_size: tuple[float | int, float | int] | None = None,
    run_id: str | None = None,
    output_dir: Path | None = None,
) -> Path:
    """出力ファイルの保存先パスを返す。

    Notes
    -----
    - `<output_dir>/{kind}/memphis[_WxH][_run_id].{ext}` 形式。
    - `output_dir` が None の場合は `runtime_config().render.output_dir` を使う。
    """

    ext_norm = str(ext).lstrip(".").strip()
    if not ext_norm:
        raise ValueError("ext は空でない必要がある")

    out_root = runtime_config().render.output_dir if output_dir is None else Path(output_dir)
    filename = f"{_STEM}{_canvas_size_suffix(canvas_size)}{_run_id_suffix(run_id)}.{ext_norm}"
    return out_root / str(kind) / filename


__all__ = ["output_path_for_render"]
