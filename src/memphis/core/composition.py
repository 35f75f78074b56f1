"""
どこで: `src/memphis/core/composition.py`。
何を: 描画面の初期化（device scale・白背景）、格子生成 → モチーフ選択 → fill/stroke のパイプライン、
      およびモチーフが依存する座標系プロトコルを提供する。
なぜ: モチーフ側が絶対位置や変換行列の後始末を一切考えずに、ローカル座標だけで描けるようにするため。
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np

from memphis.core.builtins import ensure_builtin_motifs_registered
from memphis.core.config import DEFAULT_CONFIG, GlobalConfig, MotifConfig
from memphis.core.lattice import Grid
from memphis.core.motif_registry import motif_registry, select_motif_kind
from memphis.core.motifs.base import Motif
from memphis.core.palette import BACKGROUND_COLOR, Color, random_fill_color
from memphis.core.point import Point
from memphis.core.rng import shared_rng
from memphis.core.surface import Surface

logger = logging.getLogger(__name__)

RESET_MATRIX = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
"""恒等変換（canvas 形式の 6 要素）。"""


class MemphisApp:
    """構図 1 枚分の描画ドライバ。

    Parameters
    ----------
    surface : Surface
        描画面。寸法の確保はホスト側の責務で、画素寸法は `width * dpr` x `height * dpr` を想定する。
    dpr : float
        論理単位 → 画素の倍率（device scale）。
    width, height : float
        論理寸法。
    config : GlobalConfig, optional
        構図設定。
    rng : numpy.random.Generator or None, optional
        乱数源。None の場合は共有 Generator。格子・選択・全モチーフが同じものを使う。

    Notes
    -----
    生成時に白背景を塗り、基準座標系（恒等変換 + device scale）を設定する。
    """

    def __init__(
        self,
        surface: Surface,
        dpr: float,
        width: float,
        height: float,
        config: GlobalConfig = DEFAULT_CONFIG,
        *,
        rng: np.random.Generator | None = None,
    ) -> None:
        ensure_builtin_motifs_registered()

        self.surface = surface
        self.dpr = float(dpr)
        self.width = float(width)
        self.height = float(height)
        self.config = config
        self.rng = shared_rng() if rng is None else rng
        self.grid = Grid(self.width, self.height, self.config, rng=self.rng)

        self._paint_background()
        self.restore_context()

    def _paint_background(self) -> None:
        self.surface.set_transform(*RESET_MATRIX)
        self.surface.set_fill_color(BACKGROUND_COLOR)
        self.surface.fill_rect(0.0, 0.0, self.width * self.dpr, self.height * self.dpr)

    def generate(self) -> None:
        """格子点ごとにモチーフを 1 つ選び、塗り → 線の順で描く。

        Notes
        -----
        1 モチーフの fill と stroke を終えてから次の格子点へ進む。
        後の格子点のモチーフほど上に重なる。
        """

        points = self.grid.generate_points()
        counts: Counter[str] = Counter()
        for point in points:
            shape = self.shape_selector(point)
            shape.fill()
            shape.stroke()
            counts[shape.kind.value] += 1

        logger.debug(
            "構図を生成しました: points=%d columns=%d rows=%d kinds=%s",
            len(points),
            self.grid.columns,
            self.grid.rows,
            dict(counts),
        )

    def preview_grid(self) -> list[Point]:
        """モチーフの代わりに格子点だけを描く（配置の確認用）。"""

        self.restore_context()
        return self.grid.preview_grid(self.surface)

    def restore_context(self) -> None:
        """基準座標系（恒等変換 → device scale）へ戻す。"""

        self.surface.set_transform(*RESET_MATRIX)
        self.surface.scale(self.dpr, self.dpr)

    def adjust_context(self, point: Point, rotation: float) -> None:
        """point へ平行移動し、rotation [rad] だけ回転したローカル座標系を合成する。"""

        self.surface.translate(point.x, point.y)
        self.surface.rotate(rotation)

    @contextmanager
    def local_frame(self, point: Point, rotation: float) -> Iterator[Surface]:
        """ローカル座標系を設定して描画面を渡し、抜けるときに必ず基準座標系へ戻す。

        Notes
        -----
        例外で抜けた場合も基準座標系へ戻してから再送出する。
        """

        self.adjust_context(point, rotation)
        try:
            yield self.surface
        finally:
            self.restore_context()

    def random_color(self) -> Color:
        """black 以外のパレット色を一様ランダムに返す。"""

        return random_fill_color(self.rng)

    def fill_color_for(self, config: MotifConfig) -> Color:
        """モチーフの塗り色を決める。`random_fill=False` なら種別の既定色。"""

        if self.config.random_fill:
            return self.random_color()
        return config.fill_color

    def shape_selector(self, point: Point) -> Motif:
        """乱数 1 回で種別を選び、point に置くモチーフを生成して返す。"""

        kind = select_motif_kind(float(self.rng.random()))
        return motif_registry.get(kind)(self, point)


__all__ = ["MemphisApp", "RESET_MATRIX"]
