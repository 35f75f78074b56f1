# どこで: `src/memphis/core/surface.py`。
# 何を: コアが描画先に要求する能力（色・線幅・パス・矩形・円弧・アフィン変換）を Protocol として定義する。
# なぜ: 構図ロジックを特定の描画バックエンドから切り離し、記録用/ラスタ用を差し替え可能にするため。

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from memphis.core import affine
from memphis.core.palette import Color


@runtime_checkable
class Surface(Protocol):
    """2D ベクタ描画面の能力契約。

    Notes
    -----
    - 変換は canvas と同じく「現在行列の右から合成」する。
      `translate()` → `rotate()` の順で呼ぶと、回転後のローカル座標系が平行移動先に置かれる。
    - パス座標は呼び出し時点の変換で解釈される。
    """

    def set_fill_color(self, color: Color) -> None: ...

    def set_stroke_color(self, color: Color) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def set_transform(
        self, a: float, b: float, c: float, d: float, e: float, f: float
    ) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, radians: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...


class TransformStateSurface:
    """色・線幅・変換行列の状態だけを持つ Surface 実装の土台。

    描画命令（パス構築と確定）はサブクラスが実装する。
    """

    def __init__(self) -> None:
        self.matrix: np.ndarray = affine.identity()
        self.fill_color: Color = "#000000"
        self.stroke_color: Color = "#000000"
        self.line_width: float = 1.0

    def set_fill_color(self, color: Color) -> None:
        self.fill_color = color

    def set_stroke_color(self, color: Color) -> None:
        self.stroke_color = color

    def set_line_width(self, width: float) -> None:
        self.line_width = float(width)

    def set_transform(
        self, a: float, b: float, c: float, d: float, e: float, f: float
    ) -> None:
        self.matrix = affine.from_canvas(a, b, c, d, e, f)

    def translate(self, x: float, y: float) -> None:
        self.matrix = self.matrix @ affine.translation(x, y)

    def rotate(self, radians: float) -> None:
        self.matrix = self.matrix @ affine.rotation(radians)

    def scale(self, sx: float, sy: float) -> None:
        self.matrix = self.matrix @ affine.scaling(sx, sy)


__all__ = ["Surface", "TransformStateSurface"]
