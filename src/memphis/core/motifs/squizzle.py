"""階段状のジグザグ（squizzle）モチーフ。閉じた面を持たない線画。"""

from __future__ import annotations

from memphis.core.motif_kind import MotifKind
from memphis.core.motif_registry import motif
from memphis.core.motifs.base import Motif
from memphis.core.palette import Color
from memphis.core.point import Point

STEP = 20.0
STAIRS = 4


def staircase(origin: Point) -> list[tuple[float, float]]:
    """origin から右下へ降りる 4 段の階段の頂点列を返す（80 x 60 に収まる）。"""

    points = [(origin.x, origin.y)]
    for k in range(STAIRS):
        x_end = origin.x + STEP * (k + 1)
        y = origin.y + STEP * k
        points.append((x_end, y))
        if k < STAIRS - 1:
            points.append((x_end, y + STEP))
    return points


@motif(MotifKind.SQUIZZLE)
class Squizzle(Motif):
    """原点を `(-shift, -shift)` に置いた階段。[0, π) で回転する。

    塗りは面ではなく、ランダム色で同じ階段を線として描く。
    """

    @property
    def shift(self) -> float:
        return self.config.size

    def recenter_origin(self) -> Point:
        return Point(-self.shift, -self.shift)

    def fill_shape(self, color: Color) -> None:
        self.surface.set_stroke_color(color)
        self.surface.set_line_width(self.config.line_width)
        self._stroke_polylines([staircase(self.fill_origin)])

    def stroke_outline(self) -> None:
        self._stroke_polylines([staircase(self.stroke_origin)])

    def stroke_accent(self) -> None:
        # 縦の繋ぎを省き、水平の踏み面 4 本だけを描く。
        pts = staircase(self.stroke_origin)
        treads = [(pts[i], pts[i + 1]) for i in range(0, len(pts) - 1, 2)]
        self._stroke_polylines(treads)
