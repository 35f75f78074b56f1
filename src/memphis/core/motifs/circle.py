"""円モチーフ。accent 版は同心円を 2 本足す。"""

from __future__ import annotations

import math

import numpy as np

from memphis.core.motif_kind import MotifKind
from memphis.core.motif_registry import motif
from memphis.core.motifs.base import Motif
from memphis.core.palette import Color
from memphis.core.point import Point

ACCENT_RADIUS_DIVISORS = (1.5, 3.0)


@motif(MotifKind.CIRCLE)
class Circle(Motif):
    """半径 `size` の円。回転は見た目に影響しないため常に 0。"""

    @property
    def radius(self) -> float:
        return self.config.size

    def sample_rotation(self, rng: np.random.Generator) -> float:
        return 0.0

    def recenter_origin(self) -> Point:
        return Point(0.0, 0.0)

    def _circle(self, center: Point, radius: float) -> None:
        self.surface.begin_path()
        self.surface.arc(center.x, center.y, radius, 0.0, 2.0 * math.pi)

    def fill_shape(self, color: Color) -> None:
        self.surface.set_fill_color(color)
        self.surface.set_line_width(self.config.line_width)
        self._circle(self.fill_origin, self.radius)
        self.surface.fill()

    def stroke_outline(self) -> None:
        self._circle(self.stroke_origin, self.radius)
        self.surface.stroke()

    def stroke_accent(self) -> None:
        self.stroke_outline()
        for divisor in ACCENT_RADIUS_DIVISORS:
            self._circle(self.stroke_origin, self.radius / divisor)
            self.surface.stroke()
