"""
どこで: `src/memphis/surfaces/image.py`。
何を: Pillow の画像へラスタライズする Surface 実装を提供する。
なぜ: ブラウザ canvas を持たない環境でも、構図をそのままビットマップとして得られるようにするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np
from PIL import Image, ImageDraw

from memphis.core import affine
from memphis.core.palette import BACKGROUND_COLOR
from memphis.core.surface import TransformStateSurface

# 全周を近似する折れ線の分割数。
_ARC_SEGMENTS_FULL = 96


@dataclass(slots=True)
class _Subpath:
    points: list[tuple[float, float]] = field(default_factory=list)
    closed: bool = False


def _stroke_polyline(
    points: list[tuple[float, float]], *, closed: bool
) -> list[tuple[float, float]]:
    """`ImageDraw.line` へ渡す頂点列を返す。

    閉じた輪郭（close_path 済み、または始点へ戻る全周円弧）は先頭 2 点を末尾へ足し、
    継ぎ目を端点ではなく内部の joint として描かせる。
    """

    pts = list(points)
    if len(pts) > 2 and math.dist(pts[0], pts[-1]) < 1e-6:
        pts.pop()
        closed = True
    if not closed:
        return pts
    return pts + pts[:2]


class ImageSurface(TransformStateSurface):
    """`PIL.Image` へ描く Surface。

    Parameters
    ----------
    image : PIL.Image.Image
        描画先。RGB / RGBA を想定する。

    Notes
    -----
    - パス座標は呼び出し時点の変換で描画面座標へ変換して保持する。
    - 円弧は折れ線で近似する。
    - 線幅は変換行列の等方スケール相当量を掛けた整数ピクセルで描く。
    """

    def __init__(self, image: Image.Image) -> None:
        super().__init__()
        self.image = image
        self._draw = ImageDraw.Draw(image)
        self._subpaths: list[_Subpath] = []

    @classmethod
    def for_canvas(
        cls,
        width: float,
        height: float,
        *,
        device_scale: float = 1.0,
    ) -> ImageSurface:
        """論理寸法 (width, height) と device scale から描画面を作る。

        画素寸法は `ceil(width * device_scale) x ceil(height * device_scale)`。
        """

        size = (
            max(1, int(math.ceil(float(width) * float(device_scale)))),
            max(1, int(math.ceil(float(height) * float(device_scale)))),
        )
        return cls(Image.new("RGB", size, BACKGROUND_COLOR))

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def _to_device(self, x: float, y: float) -> tuple[float, float]:
        out = affine.apply(self.matrix, np.array([[x, y]], dtype=np.float64))
        return (float(out[0, 0]), float(out[0, 1]))

    def _current(self) -> _Subpath | None:
        if not self._subpaths:
            return None
        return self._subpaths[-1]

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(_Subpath(points=[self._to_device(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        current = self._current()
        if current is None or current.closed:
            # 現在点が無い line_to は move_to と同じ扱い。
            self.move_to(x, y)
            return
        current.points.append(self._to_device(x, y))

    def close_path(self) -> None:
        current = self._current()
        if current is None or not current.points:
            return
        current.closed = True
        # 閉じた後は始点から新しいサブパスを始める。
        self._subpaths.append(_Subpath(points=[current.points[0]]))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        sweep = min(abs(float(end_angle) - float(start_angle)), 2.0 * math.pi)
        n = max(4, int(math.ceil(_ARC_SEGMENTS_FULL * sweep / (2.0 * math.pi))))
        angles = np.linspace(float(start_angle), float(end_angle), num=n + 1, dtype=np.float64)
        local = np.stack(
            [x + radius * np.cos(angles), y + radius * np.sin(angles)],
            axis=1,
        )
        device = [(float(px), float(py)) for px, py in affine.apply(self.matrix, local)]

        current = self._current()
        if current is None or current.closed:
            self._subpaths.append(_Subpath(points=device))
            return
        # 既存サブパスへは円弧の始点まで直線で繋ぐ。
        current.points.extend(device)

    def _stroke_width_px(self) -> int:
        return max(1, int(round(self.line_width * affine.linear_scale(self.matrix))))

    def fill(self) -> None:
        for sub in self._subpaths:
            if len(sub.points) >= 3:
                self._draw.polygon(sub.points, fill=self.fill_color)

    def stroke(self) -> None:
        width = self._stroke_width_px()
        for sub in self._subpaths:
            if len(sub.points) < 2:
                continue
            pts = _stroke_polyline(sub.points, closed=sub.closed)
            self._draw.line(pts, fill=self.stroke_color, width=width, joint="curve")

    def _rect_points(
        self, x: float, y: float, width: float, height: float
    ) -> list[tuple[float, float]]:
        local = np.array(
            [[x, y], [x + width, y], [x + width, y + height], [x, y + height]],
            dtype=np.float64,
        )
        return [(float(px), float(py)) for px, py in affine.apply(self.matrix, local)]

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._draw.polygon(self._rect_points(x, y, width, height), fill=self.fill_color)

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        pts = self._rect_points(x, y, width, height)
        self._draw.line(
            _stroke_polyline(pts, closed=True),
            fill=self.stroke_color,
            width=self._stroke_width_px(),
            joint="curve",
        )


__all__ = ["ImageSurface"]
