# どこで: `src/memphis/core/motif_registry.py`。
# 何を: MotifKind → モチーフ実装クラスのレジストリと、乱数 1 回によるモチーフ種別の選択を提供する。
# なぜ: 種別集合を列挙型で閉じたまま、描画ドライバが種別ごとの分岐を持たずに済むようにするため。

from __future__ import annotations

from collections.abc import ItemsView
from typing import TYPE_CHECKING, Callable, TypeVar

from memphis.core.motif_kind import MotifKind

if TYPE_CHECKING:
    from memphis.core.motifs.base import Motif

M = TypeVar("M", bound="type[Motif]")

MOTIF_THRESHOLDS: tuple[tuple[float, MotifKind], ...] = (
    (0.7, MotifKind.SQUARE),
    (0.4, MotifKind.CIRCLE),
    (0.1, MotifKind.TRIANGLE),
    (0.05, MotifKind.SQUIZZLE),
)
"""(下限, 種別) を降順に並べた選択帯。どれにも当たらなければ SLATS。"""

FALLBACK_KIND = MotifKind.SLATS


def select_motif_kind(r: float) -> MotifKind:
    """乱数 r ∈ [0, 1) からモチーフ種別を選ぶ。

    Notes
    -----
    各帯は下限を含む（`r >= 下限`）。降順に判定するため、目標頻度は
    square 30% / circle 30% / triangle 30% / squizzle 5% / slats 5%。
    """

    for lower, kind in MOTIF_THRESHOLDS:
        if r >= lower:
            return kind
    return FALLBACK_KIND


class MotifRegistry:
    """MotifKind とモチーフ実装クラスを対応付けるレジストリ。"""

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[MotifKind, type[Motif]] = {}

    def _register(
        self,
        kind: MotifKind,
        cls: type[Motif],
        *,
        overwrite: bool = True,
    ) -> None:
        """モチーフを登録する（内部用）。

        Notes
        -----
        登録は `@motif` デコレータ経由に統一する。
        """
        if not overwrite and kind in self._items:
            raise ValueError(f"motif '{kind.value}' は既に登録されている")
        self._items[kind] = cls

    def get(self, kind: MotifKind) -> type[Motif]:
        """種別に対応する実装クラスを取得する。

        Raises
        ------
        KeyError
            未登録の種別が指定された場合。
        """
        return self._items[kind]

    def __contains__(self, kind: object) -> bool:
        return kind in self._items

    def __getitem__(self, kind: MotifKind) -> type[Motif]:
        return self.get(kind)

    def items(self) -> ItemsView[MotifKind, type[Motif]]:
        return self._items.items()


motif_registry = MotifRegistry()
"""グローバルなモチーフレジストリインスタンス。"""


def motif(kind: MotifKind, *, overwrite: bool = True) -> Callable[[M], M]:
    """モチーフ実装クラスをグローバルレジストリへ登録するデコレータ。

    クラス属性 `kind` を設定してから登録する。

    Examples
    --------
    @motif(MotifKind.SQUARE)
    class Square(Motif):
        ...
    """

    if not isinstance(kind, MotifKind):
        raise TypeError(f"motif の kind は MotifKind である必要があります: {kind!r}")

    def decorator(cls: M) -> M:
        cls.kind = kind
        motif_registry._register(kind, cls, overwrite=overwrite)
        return cls

    return decorator


__all__ = [
    "FALLBACK_KIND",
    "MOTIF_THRESHOLDS",
    "MotifRegistry",
    "motif",
    "motif_registry",
    "select_motif_kind",
]
