# どこで: `src/memphis/core/point.py`。
# 何を: 不変な 2D 座標 `Point` と、平行移動・ジッタ付加の操作を提供する。
# なぜ: 格子点とモチーフのローカル原点を、副作用なしに派生できるようにするため。

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from memphis.core.rng import shared_rng

DEFAULT_NOISE = 8.0
"""`tessellate()` の既定ジッタ量。"""


@dataclass(frozen=True, slots=True)
class Point:
    """2D 座標。

    Notes
    -----
    不変。`adjust()` / `tessellate()` は常に新しいインスタンスを返す。
    """

    x: float
    y: float

    def adjust(self, adjust_x: float, adjust_y: float) -> Point:
        """(adjust_x, adjust_y) だけ平行移動した点を返す。"""

        return Point(self.x + adjust_x, self.y + adjust_y)

    def tessellate(
        self,
        magnitude: float = DEFAULT_NOISE,
        *,
        rng: np.random.Generator | None = None,
    ) -> Point:
        """各軸に独立な符号付きジッタを加えた点を返す。

        Parameters
        ----------
        magnitude : float, optional
            ジッタ量 m。各軸の変位は絶対値が [m/2, 2.5m] の整数になる。
        rng : numpy.random.Generator or None, optional
            乱数源。None の場合は共有 Generator を使う。

        Returns
        -------
        Point
            ジッタ付加後の新しい点。
        """

        r = shared_rng() if rng is None else rng
        return Point(
            self.x + self.noise(magnitude, rng=r),
            self.y + self.noise(magnitude, rng=r),
        )

    @staticmethod
    def noise(
        magnitude: float = DEFAULT_NOISE,
        *,
        rng: np.random.Generator | None = None,
    ) -> int:
        """`sign * ceil(u * 2m + m/2)` を 1 回サンプルして返す。"""

        r = shared_rng() if rng is None else rng
        # 符号を先に引く。
        sign = -1 if r.random() > 0.5 else 1
        m = float(magnitude)
        return sign * int(math.ceil(r.random() * 2.0 * m + m / 2.0))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


__all__ = ["DEFAULT_NOISE", "Point"]
