"""
どこで: `src/memphis/core/motifs/base.py`。
何を: 5 種のモチーフが共有する生成時サンプリングと fill / stroke の手順を定義する。
なぜ: 種別ごとの実装をローカル座標での図形定義だけに絞り、座標系の管理をドライバへ委ねるため。
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from memphis.core.config import MotifConfig
from memphis.core.motif_kind import MotifKind
from memphis.core.palette import Color
from memphis.core.point import Point
from memphis.core.surface import Surface

if TYPE_CHECKING:
    from memphis.core.composition import MemphisApp

Polyline = Sequence[tuple[float, float]]


class Motif:
    """格子点 1 つに置かれるモチーフ 1 個。

    Parameters
    ----------
    app : MemphisApp
        描画面・設定・乱数源・座標系プロトコルの提供元。
    grid_point : Point
        配置先の格子点（ローカル座標系の原点になる）。

    Notes
    -----
    - 生成時に accent フラグ → 回転 → ジッタの順で 1 回だけサンプルし、以後は変えない。
    - `fill_origin` は乱数を使わない再中心化、`stroke_origin` はそれにジッタを足したもの。
      塗りと線が少しずれて手描き風になる。
    - サブクラスは `recenter_origin` / `sample_rotation` / `fill_shape` /
      `stroke_outline` / `stroke_accent` を実装する。
    """

    kind: ClassVar[MotifKind]

    def __init__(self, app: MemphisApp, grid_point: Point) -> None:
        if getattr(type(self), "kind", None) is None:
            raise TypeError(
                f"{type(self).__name__} は @motif で登録したサブクラスから生成してください"
            )
        self.app = app
        self.surface: Surface = app.surface
        self.config: MotifConfig = app.config.motif(self.kind)
        self.grid_point = grid_point

        rng = app.rng
        self.accented = bool(rng.random() < self.config.accent_chance)
        self.rotation = float(self.sample_rotation(rng))
        self.fill_origin = self.recenter_origin()
        self.stroke_origin = self.fill_origin.tessellate(rng=rng)
        self._fill_color: Color | None = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(grid_point={self.grid_point!r},"
            f" rotation={self.rotation:.3f}, accented={self.accented})"
        )

    # --- 種別ごとのフック ---

    def sample_rotation(self, rng: np.random.Generator) -> float:
        """回転角 [rad] を返す。既定は [0, π) の一様乱数。"""
        return float(rng.random() * math.pi)

    def recenter_origin(self) -> Point:
        raise NotImplementedError

    def fill_shape(self, color: Color) -> None:
        raise NotImplementedError

    def stroke_outline(self) -> None:
        raise NotImplementedError

    def stroke_accent(self) -> None:
        raise NotImplementedError

    # --- 共通手順 ---

    @property
    def fill_color(self) -> Color:
        """塗り色。初回参照時にドライバから受け取り、以後は同じ色を返す。"""
        if self._fill_color is None:
            self._fill_color = self.app.fill_color_for(self.config)
        return self._fill_color

    def fill(self) -> Motif:
        """ローカル座標系で内部を塗る。"""

        color = self.fill_color
        with self.app.local_frame(self.grid_point, self.rotation):
            self.fill_shape(color)
        return self

    def stroke(self) -> Motif:
        """ローカル座標系で輪郭（accent 版なら装飾パターン）を描く。"""

        with self.app.local_frame(self.grid_point, self.rotation):
            self.surface.set_stroke_color(self.config.stroke_color)
            self.surface.set_line_width(self.config.line_width)
            if self.accented:
                self.stroke_accent()
            else:
                self.stroke_outline()
        return self

    # --- 描画ヘルパ ---

    def _trace(self, polylines: Sequence[Polyline]) -> None:
        """折れ線群を 1 パスとして積む（確定はしない）。"""

        self.surface.begin_path()
        for line in polylines:
            (x0, y0), *rest = line
            self.surface.move_to(x0, y0)
            for x, y in rest:
                self.surface.line_to(x, y)

    def _stroke_polylines(self, polylines: Sequence[Polyline]) -> None:
        self._trace(polylines)
        self.surface.stroke()


__all__ = ["Motif", "Polyline"]
