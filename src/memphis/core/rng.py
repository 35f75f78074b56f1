# どこで: `src/memphis/core/rng.py`。
# 何を: プロセス内で共有する numpy の乱数 Generator を提供する。
# なぜ: 格子・モチーフ選択・各モチーフのサンプリングが同じ乱数源を引けるようにするため。

from __future__ import annotations

import numpy as np

# seed は与えない。実行ごとに異なる構図になる。
_SHARED_RNG: np.random.Generator | None = None


def shared_rng() -> np.random.Generator:
    """共有 Generator を返す（初回呼び出しで生成）。"""

    global _SHARED_RNG
    if _SHARED_RNG is None:
        _SHARED_RNG = np.random.default_rng()
    return _SHARED_RNG


__all__ = ["shared_rng"]
