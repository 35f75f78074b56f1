"""正方形モチーフ。accent 版は 4 段のジグザグで内部を往復する。"""

from __future__ import annotations

import math

import numpy as np

from memphis.core.motif_kind import MotifKind
from memphis.core.motif_registry import motif
from memphis.core.motifs.base import Motif
from memphis.core.palette import Color
from memphis.core.point import Point

ACCENT_STEPS = 4


@motif(MotifKind.SQUARE)
class Square(Motif):
    """一辺 `size` の正方形。格子点を中心に置き、[0, 2π) で回転する。"""

    @property
    def width(self) -> float:
        return self.config.size

    def sample_rotation(self, rng: np.random.Generator) -> float:
        return float(rng.random() * (2.0 * math.pi))

    def recenter_origin(self) -> Point:
        shift = self.width / 2
        return Point(-shift, -shift)

    def fill_shape(self, color: Color) -> None:
        self.surface.set_fill_color(color)
        self.surface.fill_rect(self.fill_origin.x, self.fill_origin.y, self.width, self.width)

    def stroke_outline(self) -> None:
        self.surface.stroke_rect(
            self.stroke_origin.x, self.stroke_origin.y, self.width, self.width
        )

    def accent_path(self) -> list[tuple[float, float]]:
        """ジグザグの頂点列を返す。

        高さ `width / 4` の帯を左右交互に折り返す。最初と最後の水平線だけ、
        角が欠けないよう線幅の半分だけ外へ伸ばす。
        """

        step = self.width / ACCENT_STEPS
        overhang = self.config.line_width / 2
        left = self.stroke_origin.x
        right = self.stroke_origin.x + self.width
        depths = [self.stroke_origin.y + k * step for k in range(ACCENT_STEPS + 1)]

        points = [(left - overhang, depths[0]), (right, depths[0])]
        at_right = True
        for depth in depths[1:]:
            near, far = (right, left) if at_right else (left, right)
            points.append((near, depth))
            points.append((far, depth))
            at_right = not at_right
        x_end, y_end = points[-1]
        points[-1] = (x_end + overhang, y_end)
        return points

    def stroke_accent(self) -> None:
        self._stroke_polylines([self.accent_path()])
