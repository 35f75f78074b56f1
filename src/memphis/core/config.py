# どこで: `src/memphis/core/config.py`。
# 何を: モチーフ別パラメータ `MotifConfig` と全体設定 `GlobalConfig`、既定値、mapping からの構築を提供する。
# なぜ: 構図 1 回分の設定を不変データとして固定し、全モチーフから読み取り専用で共有するため。

"""構図設定（`GlobalConfig`）のモデルと構築。

`DEFAULT_CONFIG` をベースに、YAML 由来の mapping で上書きした `GlobalConfig` を作る。

実装メモ
--------
- トップレベルのキー（`grid_size` など）は丸ごと置換する。
- `motifs.<kind>` はキー単位でマージする（指定しなかったキーは既定値のまま）。
- 寸法は汎用の `size` と、種別固有の別名（`width` / `radius` など）のどちらでも指定できる。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from memphis.core.motif_kind import SIZE_ALIASES, MotifKind
from memphis.core.palette import PALETTE, Color, resolve_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MotifConfig:
    """モチーフ種別ごとのパラメータ束。

    Attributes
    ----------
    accent_chance:
        accent 版で描く確率 [0, 1]。
    fill_color:
        種別の既定塗り色。`GlobalConfig.random_fill=False` のときだけ使う。
    stroke_color:
        輪郭の線色。
    line_width:
        輪郭の線幅（> 0）。
    size:
        種別ごとの寸法（> 0）。square は一辺、circle は半径、triangle は底辺幅、
        squizzle はシフト量、slats は長さを表す。
    """

    accent_chance: float
    fill_color: Color
    stroke_color: Color
    line_width: float
    size: float


@dataclass(frozen=True, slots=True)
class GlobalConfig:
    """構図 1 回分の設定。

    Attributes
    ----------
    grid_size:
        格子間隔（> 0）。
    motif_configs:
        種別 → `MotifConfig` の読み取り専用 mapping。5 種すべてを含む。
    random_fill:
        True の場合、塗り色はパレット（black 以外）から毎回ランダムに選ぶ。
        False の場合は各種別の `fill_color` を使う。
    """

    grid_size: float
    motif_configs: Mapping[MotifKind, MotifConfig]
    random_fill: bool = field(default=True)

    def __post_init__(self) -> None:
        missing = [k.value for k in MotifKind if k not in self.motif_configs]
        if missing:
            raise ValueError(f"motif_configs に不足している種別があります: missing={missing}")
        object.__setattr__(
            self, "motif_configs", MappingProxyType(dict(self.motif_configs))
        )

    def motif(self, kind: MotifKind) -> MotifConfig:
        """種別 kind の `MotifConfig` を返す。"""

        return self.motif_configs[kind]


DEFAULT_CONFIG = GlobalConfig(
    grid_size=200.0,
    motif_configs={
        MotifKind.SQUARE: MotifConfig(
            accent_chance=0.15,
            fill_color=PALETTE["red"],
            stroke_color=PALETTE["black"],
            line_width=6.0,
            size=50.0,
        ),
        MotifKind.CIRCLE: MotifConfig(
            accent_chance=0.1,
            fill_color=PALETTE["blue"],
            stroke_color=PALETTE["black"],
            line_width=6.0,
            size=30.0,
        ),
        MotifKind.SLATS: MotifConfig(
            accent_chance=0.25,
            fill_color=PALETTE["teal"],
            stroke_color=PALETTE["black"],
            line_width=6.0,
            size=75.0,
        ),
        MotifKind.SQUIZZLE: MotifConfig(
            accent_chance=0.1,
            fill_color=PALETTE["pink"],
            stroke_color=PALETTE["black"],
            line_width=6.0,
            size=30.0,
        ),
        MotifKind.TRIANGLE: MotifConfig(
            accent_chance=0.125,
            fill_color=PALETTE["yellow"],
            stroke_color=PALETTE["black"],
            line_width=6.0,
            size=60.0,
        ),
    },
)
"""既定の構図設定。"""


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    """任意値を mapping として解釈し、dict に正規化して返す。"""

    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_float(value: Any, *, key: str) -> float:
    """任意値を float として解釈して返す。"""

    if isinstance(value, bool):
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}")
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _as_bool(value: Any, *, key: str) -> bool:
    """任意値を bool として解釈して返す。"""

    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, int) and int(value) in (0, 1):
        return bool(int(value))
    raise RuntimeError(f"{key} は bool である必要があります: got={value!r}")


def _positive(value: float, *, key: str) -> float:
    if value <= 0.0:
        raise ValueError(f"{key} は正の値である必要があります: got={value}")
    return value


def _motif_config_from_mapping(
    kind: MotifKind,
    data: Mapping[str, Any],
    base: MotifConfig,
) -> MotifConfig:
    """base に data をキー単位で重ねた `MotifConfig` を返す。"""

    prefix = f"motifs.{kind.value}"
    alias = SIZE_ALIASES[kind]
    known = {"accent_chance", "fill_color", "stroke_color", "line_width", "size", alias}
    unknown = sorted(set(data) - known)
    if unknown:
        raise RuntimeError(f"{prefix} に未知のキーがあります: {unknown}")
    if "size" in data and alias in data:
        raise RuntimeError(f"{prefix} の size と {alias} は同時に指定できません")

    updates: dict[str, Any] = {}
    if "accent_chance" in data:
        chance = _as_float(data["accent_chance"], key=f"{prefix}.accent_chance")
        if not 0.0 <= chance <= 1.0:
            raise ValueError(
                f"{prefix}.accent_chance は 0..1 である必要があります: got={chance}"
            )
        updates["accent_chance"] = chance
    for color_key in ("fill_color", "stroke_color"):
        if color_key in data:
            updates[color_key] = resolve_color(data[color_key], key=f"{prefix}.{color_key}")
    if "line_width" in data:
        updates["line_width"] = _positive(
            _as_float(data["line_width"], key=f"{prefix}.line_width"),
            key=f"{prefix}.line_width",
        )
    size_key = alias if alias in data else "size"
    if size_key in data:
        updates["size"] = _positive(
            _as_float(data[size_key], key=f"{prefix}.{size_key}"),
            key=f"{prefix}.{size_key}",
        )

    return replace(base, **updates)


def config_from_mapping(
    data: Mapping[str, Any],
    *,
    base: GlobalConfig = DEFAULT_CONFIG,
) -> GlobalConfig:
    """YAML 由来の mapping から `GlobalConfig` を構築する。

    Parameters
    ----------
    data : Mapping[str, Any]
        `grid_size` / `random_fill` / `motifs` を含み得る mapping。
        その他のトップレベルキー（`version`, `render` など）は無視する。
    base : GlobalConfig, optional
        上書きの土台。

    Returns
    -------
    GlobalConfig
        上書き後の不変設定。

    Raises
    ------
    RuntimeError
        型や構造が不正な場合。
    ValueError
        値の範囲が不正な場合。
    """

    grid_size = base.grid_size
    if data.get("grid_size") is not None:
        grid_size = _positive(_as_float(data["grid_size"], key="grid_size"), key="grid_size")

    random_fill = base.random_fill
    if data.get("random_fill") is not None:
        random_fill = _as_bool(data["random_fill"], key="random_fill")

    motifs = _as_mapping(data.get("motifs"), key="motifs")
    known_names = {k.value for k in MotifKind}
    unknown = sorted(str(name) for name in motifs if str(name) not in known_names)
    if unknown:
        raise RuntimeError(f"motifs に未知の種別があります: {unknown}")

    motif_configs: dict[MotifKind, MotifConfig] = {}
    for kind in MotifKind:
        override = _as_mapping(motifs.get(kind.value), key=f"motifs.{kind.value}")
        motif_configs[kind] = _motif_config_from_mapping(kind, override, base.motif(kind))

    cfg = GlobalConfig(
        grid_size=grid_size,
        motif_configs=motif_configs,
        random_fill=random_fill,
    )
    logger.debug("GlobalConfig を構築しました: grid_size=%s random_fill=%s", grid_size, random_fill)
    return cfg


__all__ = [
    "DEFAULT_CONFIG",
    "GlobalConfig",
    "MotifConfig",
    "config_from_mapping",
]
