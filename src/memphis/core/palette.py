# どこで: `src/memphis/core/palette.py`。
# 何を: 構図で使う固定 6 色のパレットと、塗り用のランダム色選択を提供する。
# なぜ: 色名 → 16 進表記の対応を 1 か所に固定し、config とモチーフで共有するため。

from __future__ import annotations

import re
from types import MappingProxyType

import numpy as np

from memphis.core.rng import shared_rng

Color = str
"""`#RRGGBB` 形式の色文字列。"""

PALETTE: MappingProxyType[str, Color] = MappingProxyType(
    {
        "black": "#353535",
        "blue": "#1865B5",
        "teal": "#71CCC4",
        "red": "#FA4336",
        "yellow": "#FEFA65",
        "pink": "#E29AC0",
    }
)
"""名前付きパレット（読み取り専用）。"""

OUTLINE_COLOR_NAME = "black"
"""輪郭専用の色名。ランダム塗り色の候補からは除外する。"""

BACKGROUND_COLOR: Color = "#FFFFFF"

_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def fill_color_names() -> tuple[str, ...]:
    """ランダム塗りの候補となる色名（black 以外）を挿入順で返す。"""

    return tuple(name for name in PALETTE if name != OUTLINE_COLOR_NAME)


def random_fill_color(rng: np.random.Generator | None = None) -> Color:
    """black 以外のパレット色を一様ランダムに 1 つ返す。"""

    r = shared_rng() if rng is None else rng
    names = fill_color_names()
    name = names[int(np.floor(r.random() * len(names)))]
    return PALETTE[name]


def resolve_color(value: object, *, key: str) -> Color:
    """パレット名または `#RRGGBB` を色文字列へ正規化して返す。

    Raises
    ------
    ValueError
        未知の色名、または 16 進表記として不正な場合。
    """

    s = str(value).strip()
    if s in PALETTE:
        return PALETTE[s]
    if _HEX_RE.match(s):
        return s.upper()
    raise ValueError(
        f"{key} はパレット名 {sorted(PALETTE)} か #RRGGBB である必要があります: got={value!r}"
    )


__all__ = [
    "BACKGROUND_COLOR",
    "Color",
    "OUTLINE_COLOR_NAME",
    "PALETTE",
    "fill_color_names",
    "random_fill_color",
    "resolve_color",
]
