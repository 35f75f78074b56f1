# どこで: `src/memphis/surfaces/recording.py`。
# 何を: 受けた描画命令を、その時点の変換行列と一緒に記録するだけの Surface を提供する。
# なぜ: ラスタライズせずに「何を・どの座標系で・どの順に描いたか」を検査できるようにするため。

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from memphis.core import affine
from memphis.core.palette import Color
from memphis.core.surface import TransformStateSurface

PATH_OPS = frozenset({"move_to", "line_to", "close_path", "arc"})
COMMIT_OPS = frozenset({"fill", "stroke", "fill_rect", "stroke_rect"})


@dataclass(frozen=True, slots=True)
class SurfaceCall:
    """記録された描画命令 1 件。

    Attributes
    ----------
    name:
        メソッド名（`"move_to"` など）。
    args:
        呼び出し引数（ローカル座標のまま）。
    transform:
        呼び出し時点の 3x3 変換行列（コピー）。
    """

    name: str
    args: tuple[float | str, ...]
    transform: np.ndarray


@dataclass(frozen=True, slots=True)
class RecordedPath:
    """確定（fill / stroke）された 1 パス。

    `segments` は確定までに積まれたパス命令列。`fill_rect` / `stroke_rect` の場合は
    その呼び出し 1 件だけを持つ。
    """

    op: str
    segments: tuple[SurfaceCall, ...]
    color: Color
    line_width: float
    transform: np.ndarray

    @property
    def is_fill(self) -> bool:
        return self.op in {"fill", "fill_rect"}

    def local_points(self) -> list[tuple[float, float]]:
        """move_to / line_to の座標列（ローカル座標）を返す。"""

        return [
            (float(c.args[0]), float(c.args[1]))
            for c in self.segments
            if c.name in {"move_to", "line_to"}
        ]


class RecordingSurface(TransformStateSurface):
    """描画命令を `calls` に積むだけの Surface。"""

    def __init__(self, width: float = 0.0, height: float = 0.0) -> None:
        super().__init__()
        self.width = float(width)
        self.height = float(height)
        self.calls: list[SurfaceCall] = []
        self._pending: list[SurfaceCall] = []
        self.paths: list[RecordedPath] = []

    def _record(self, name: str, *args: float | str) -> SurfaceCall:
        call = SurfaceCall(name=name, args=tuple(args), transform=self.matrix.copy())
        self.calls.append(call)
        return call

    def _commit(self, op: str, segments: tuple[SurfaceCall, ...]) -> None:
        is_fill = op in {"fill", "fill_rect"}
        self.paths.append(
            RecordedPath(
                op=op,
                segments=segments,
                color=self.fill_color if is_fill else self.stroke_color,
                line_width=self.line_width,
                transform=self.matrix.copy(),
            )
        )

    def set_fill_color(self, color: Color) -> None:
        super().set_fill_color(color)
        self._record("set_fill_color", color)

    def set_stroke_color(self, color: Color) -> None:
        super().set_stroke_color(color)
        self._record("set_stroke_color", color)

    def set_line_width(self, width: float) -> None:
        super().set_line_width(width)
        self._record("set_line_width", float(width))

    def set_transform(
        self, a: float, b: float, c: float, d: float, e: float, f: float
    ) -> None:
        super().set_transform(a, b, c, d, e, f)
        self._record("set_transform", a, b, c, d, e, f)

    def translate(self, x: float, y: float) -> None:
        super().translate(x, y)
        self._record("translate", x, y)

    def rotate(self, radians: float) -> None:
        super().rotate(radians)
        self._record("rotate", radians)

    def scale(self, sx: float, sy: float) -> None:
        super().scale(sx, sy)
        self._record("scale", sx, sy)

    def begin_path(self) -> None:
        self._record("begin_path")
        self._pending = []

    def move_to(self, x: float, y: float) -> None:
        self._pending.append(self._record("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self._pending.append(self._record("line_to", x, y))

    def close_path(self) -> None:
        self._pending.append(self._record("close_path"))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        self._pending.append(self._record("arc", x, y, radius, start_angle, end_angle))

    def fill(self) -> None:
        self._record("fill")
        self._commit("fill", tuple(self._pending))

    def stroke(self) -> None:
        self._record("stroke")
        self._commit("stroke", tuple(self._pending))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        call = self._record("fill_rect", x, y, width, height)
        self._commit("fill_rect", (call,))

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        call = self._record("stroke_rect", x, y, width, height)
        self._commit("stroke_rect", (call,))

    def commits(self) -> list[SurfaceCall]:
        """確定系命令（fill / stroke / fill_rect / stroke_rect）だけを返す。"""

        return [c for c in self.calls if c.name in COMMIT_OPS]

    def world_points(self, path: RecordedPath) -> np.ndarray:
        """path の move_to / line_to 座標を描画面座標へ変換して返す。"""

        pts = np.asarray(path.local_points(), dtype=np.float64).reshape(-1, 2)
        return affine.apply(path.transform, pts)


__all__ = [
    "COMMIT_OPS",
    "PATH_OPS",
    "RecordedPath",
    "RecordingSurface",
    "SurfaceCall",
]
