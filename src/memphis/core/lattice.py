# どこで: `src/memphis/core/lattice.py`。
# 何を: 描画面を覆うジッタ付き格子点列（基本格子 + 半ピッチずらした格子）を生成する。
# なぜ: 一様でないレンガ状の配置でモチーフを置き、端まで確実に覆うため。

from __future__ import annotations

import math

import numpy as np

from memphis.core.config import GlobalConfig
from memphis.core.palette import PALETTE
from memphis.core.point import Point
from memphis.core.rng import shared_rng
from memphis.core.surface import Surface

PREVIEW_DOT_RADIUS = 10.0


class Grid:
    """ジッタ付き格子の生成器。

    Parameters
    ----------
    pixel_width, pixel_height : float
        覆う領域の論理寸法。
    config : GlobalConfig
        `grid_size` を参照する。
    rng : numpy.random.Generator or None, optional
        ジッタ用の乱数源。None の場合は共有 Generator。
    """

    def __init__(
        self,
        pixel_width: float,
        pixel_height: float,
        config: GlobalConfig,
        *,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.width = float(pixel_width)
        self.height = float(pixel_height)
        self.config = config
        self.grid_size = float(config.grid_size)
        self.rng = shared_rng() if rng is None else rng

    @property
    def columns(self) -> int:
        return int(math.floor(self.width / self.grid_size)) + 1

    @property
    def rows(self) -> int:
        return int(math.floor(self.height / self.grid_size)) + 1

    def __len__(self) -> int:
        """`generate_points()` が返す点数 `2 * (columns + 1) * (rows + 1)`。"""
        return 2 * (self.columns + 1) * (self.rows + 1)

    def generate_points(self) -> list[Point]:
        """格子点列を生成して返す。

        Returns
        -------
        list[Point]
            `0 <= i <= columns`, `0 <= j <= rows`（両端を含む）の各 (i, j) について、
            base 点 → alt 点の順で並べた点列。i が外側、j が内側のループ。

        Notes
        -----
        範囲の上端を含めるのは、端に空白を残さないための 1 列/1 行のはみ出し。
        """

        points: list[Point] = []
        for i in range(self.columns + 1):
            for j in range(self.rows + 1):
                points.extend(self.construct_points(i, j))
        return points

    def construct_points(self, column: int, row: int) -> tuple[Point, Point]:
        """(column, row) の base 点と、半ピッチ戻した alt 点をジッタ付きで返す。"""

        base_x = self.grid_size * column
        base_y = self.grid_size * row
        alt_x = base_x - self.grid_size / 2
        alt_y = base_y - self.grid_size / 2
        return (
            Point(base_x, base_y).tessellate(rng=self.rng),
            Point(alt_x, alt_y).tessellate(rng=self.rng),
        )

    def preview_grid(self, surface: Surface) -> list[Point]:
        """生成した格子点にピンクの点を打って配置を確認する。

        描画は呼び出し時点の変換で行う。描いた点列を返す。
        """

        points = self.generate_points()
        surface.set_fill_color(PALETTE["pink"])
        for point in points:
            surface.begin_path()
            surface.arc(point.x, point.y, PREVIEW_DOT_RADIUS, 0.0, 2.0 * math.pi)
            surface.fill()
        return points


__all__ = ["Grid", "PREVIEW_DOT_RADIUS"]
