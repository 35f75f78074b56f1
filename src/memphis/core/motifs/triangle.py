"""二等辺三角形モチーフ。accent 版は底辺から頂点へ向かう 4 本の横桟。"""

from __future__ import annotations

from memphis.core.motif_kind import MotifKind
from memphis.core.motif_registry import motif
from memphis.core.motifs.base import Motif
from memphis.core.palette import Color
from memphis.core.point import Point

RUNG_COUNT = 4
# 横桟を描き終えたペン位置（頂点の少し手前）。
_PEN_REST = (15 / 32, 15 / 16)


@motif(MotifKind.TRIANGLE)
class Triangle(Motif):
    """底辺幅 `size`、高さ `size` の三角形。頂点は上向き、[0, π) で回転する。"""

    @property
    def base_width(self) -> float:
        return self.config.size

    def recenter_origin(self) -> Point:
        shift = self.base_width / 2
        return Point(-shift, shift)

    def outline(self, origin: Point) -> list[tuple[float, float]]:
        """底辺左 → 底辺右 → 頂点 の 3 頂点を返す。"""

        bw = self.base_width
        return [
            (origin.x, origin.y),
            (origin.x + bw, origin.y),
            (origin.x + bw / 2, origin.y - bw),
        ]

    def rungs(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """accent 用の横桟（左端, 右端）を下から順に返す。

        k 段目（0 始まり）は高さ `k/4 * bw`、幅 `(8 - 2k)/8 * bw` で中央に揃える。
        """

        bw = self.base_width
        ox, oy = self.stroke_origin.x, self.stroke_origin.y
        out = []
        for k in range(RUNG_COUNT):
            y = oy - bw * k / RUNG_COUNT
            out.append(((ox + bw * k / 8, y), (ox + bw * (8 - k) / 8, y)))
        return out

    def fill_shape(self, color: Color) -> None:
        self.surface.set_fill_color(color)
        self.surface.set_line_width(self.config.line_width)
        self._trace([self.outline(self.fill_origin)])
        self.surface.fill()

    def stroke_outline(self) -> None:
        self._trace([self.outline(self.stroke_origin)])
        self.surface.close_path()
        self.surface.stroke()

    def stroke_accent(self) -> None:
        self._trace(self.rungs())
        # 輪郭には閉じず、頂点付近へペンを移して終える。
        bw = self.base_width
        self.surface.move_to(
            self.stroke_origin.x + bw * _PEN_REST[0],
            self.stroke_origin.y - bw * _PEN_REST[1],
        )
        self.surface.close_path()
        self.surface.stroke()
