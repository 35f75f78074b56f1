"""平行な 3 本の縦線（slats）モチーフ。"""

from __future__ import annotations

from memphis.core.motif_kind import MotifKind
from memphis.core.motif_registry import motif
from memphis.core.motifs.base import Motif, Polyline
from memphis.core.palette import Color
from memphis.core.point import Point

SIDE_OFFSET = 15.0
RIGHT_START = 8.0
LEFT_START = 16.0


@motif(MotifKind.SLATS)
class Slats(Motif):
    """長さ `size` の中央線と、開始位置と長さをずらした左右の線。[0, π) で回転する。

    塗りは面ではなく、ランダム色で同じ 3 本を線として描く。
    """

    @property
    def length(self) -> float:
        return self.config.size

    def recenter_origin(self) -> Point:
        return Point(-self.length / 2, -self.length / 2)

    def side_slats(self, origin: Point) -> list[Polyline]:
        length = self.length
        right_x = origin.x + SIDE_OFFSET
        left_x = origin.x - SIDE_OFFSET
        return [
            [(right_x, origin.y + RIGHT_START), (right_x, origin.y + length * 3 / 4 + RIGHT_START)],
            [(left_x, origin.y + LEFT_START), (left_x, origin.y + length * 1 / 2 + LEFT_START)],
        ]

    def slats(self, origin: Point) -> list[Polyline]:
        center = [(origin.x, origin.y), (origin.x, origin.y + self.length)]
        return [center, *self.side_slats(origin)]

    def fill_shape(self, color: Color) -> None:
        self.surface.set_stroke_color(color)
        self.surface.set_line_width(self.config.line_width)
        self._stroke_polylines(self.slats(self.fill_origin))

    def stroke_outline(self) -> None:
        self._stroke_polylines(self.slats(self.stroke_origin))

    def stroke_accent(self) -> None:
        # 中央線の中間 1/3 を抜く。
        o = self.stroke_origin
        length = self.length
        center_parts: list[Polyline] = [
            [(o.x, o.y), (o.x, o.y + length * 1 / 3)],
            [(o.x, o.y + length * 2 / 3), (o.x, o.y + length)],
        ]
        self._stroke_polylines([*center_parts, *self.side_slats(o)])
