# どこで: `src/memphis/core/motif_kind.py`。
# 何を: モチーフ種別の閉じた列挙 `MotifKind` を定義する。

from __future__ import annotations

from enum import Enum


class MotifKind(str, Enum):
    """5 種のモチーフ種別。値は config.yaml 上のキー名を兼ねる。"""

    SQUARE = "square"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SQUIZZLE = "squizzle"
    SLATS = "slats"


SIZE_ALIASES: dict[MotifKind, str] = {
    MotifKind.SQUARE: "width",
    MotifKind.CIRCLE: "radius",
    MotifKind.TRIANGLE: "base_width",
    MotifKind.SQUIZZLE: "shift",
    MotifKind.SLATS: "length",
}
"""`MotifConfig.size` が種別ごとに意味する寸法名。"""


__all__ = ["MotifKind", "SIZE_ALIASES"]
