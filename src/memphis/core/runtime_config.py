# どこで: `src/memphis/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 構図パラメータと CLI の既定出力先を、コードを触らずにユーザーが差し替えられるようにするため。

"""実行時設定（`config.yaml`）の探索・ロード・キャッシュを担当する。

このモジュールは、以下を提供する:

- `DEFAULT_CONFIG` →「探索で見つかった config.yaml」→「明示指定 config.yaml」の順に適用して
  `RuntimeConfig` を構築
- 探索パス（CWD / HOME）と、明示指定（`set_config_path()`）の両方に対応
- 1 回ロードした結果をプロセス内でキャッシュ（設定を切り替える場合は `set_config_path()` で破棄）

入出力 / 副作用
----------------
- 入力: 任意でユーザーの `config.yaml`
- 出力: `RuntimeConfig`（不変データ）
- 副作用: ファイル読み取り、YAML パース、モジュールグローバルへのキャッシュ保存

実装メモ
--------
- ファイル同士の適用は `dict.update()`（トップレベルの浅い上書き）で行う。
  `motifs` の各種別は `config_from_mapping()` 側でキー単位にマージされる。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from memphis.core.config import DEFAULT_CONFIG, GlobalConfig, _as_float, config_from_mapping

logger = logging.getLogger(__name__)

_RENDER_WIDTH_DEFAULT = 800.0
_RENDER_HEIGHT_DEFAULT = 800.0
_RENDER_DEVICE_SCALE_DEFAULT = 1.0
_RENDER_OUTPUT_DIR_DEFAULT = "data/output"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """ホスト（CLI）向けの描画既定値（`config.yaml` の `render`）。"""

    width: float
    height: float
    device_scale: float
    output_dir: Path


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """memphis の実行時設定。

    Attributes
    ----------
    config_path:
        実際に採用されたユーザー設定ファイルのパス。
        ユーザー設定が無い場合は None（`DEFAULT_CONFIG` のみで動作）。
    composition:
        構図設定。
    render:
        CLI の既定キャンバス寸法・スケール・出力先。
    """

    config_path: Path | None
    composition: GlobalConfig
    render: RenderConfig


# `set_config_path()` で指定される「明示 config」のパス。
_EXPLICIT_CONFIG_PATH: Path | None = None
# `runtime_config()` のプロセス内キャッシュ。設定を切り替える場合は破棄する。
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    - `path` を None にすると明示指定を解除し、既定の探索に戻る。
    - 設定が変わるため、`runtime_config()` のキャッシュを破棄する。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    _EXPLICIT_CONFIG_PATH = None if path is None else Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    """既定の `config.yaml` 探索候補を返す。

    探索順（先勝ち）:
    - `./.memphis/config.yaml`
    - `~/.config/memphis/config.yaml`
    """

    return (
        Path.cwd() / ".memphis" / "config.yaml",
        Path.home() / ".config" / "memphis" / "config.yaml",
    )


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    """YAML テキストを読み、トップレベル mapping を dict として返す。"""

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return dict(data)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """UTF-8 の YAML ファイルを読み、dict を返す。"""

    p = Path(path)
    return _load_yaml_text(p.read_text(encoding="utf-8"), source=str(p))


def _render_config_from_mapping(value: Any) -> RenderConfig:
    if value is None:
        value = {}
    if not isinstance(value, dict):
        raise RuntimeError(f"render は mapping である必要があります: got={value!r}")

    def _positive_float(key: str, default: float) -> float:
        raw = value.get(key)
        if raw is None:
            return float(default)
        v = _as_float(raw, key=f"render.{key}")
        if v <= 0.0:
            raise ValueError(f"render.{key} は正の値である必要があります: got={v}")
        return v

    output_dir_raw = value.get("output_dir")
    output_dir_text = (
        _RENDER_OUTPUT_DIR_DEFAULT
        if output_dir_raw is None or not str(output_dir_raw).strip()
        else str(output_dir_raw).strip()
    )
    return RenderConfig(
        width=_positive_float("width", _RENDER_WIDTH_DEFAULT),
        height=_positive_float("height", _RENDER_HEIGHT_DEFAULT),
        device_scale=_positive_float("device_scale", _RENDER_DEVICE_SCALE_DEFAULT),
        output_dir=Path(os.path.expandvars(os.path.expanduser(output_dir_text))),
    )


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    読み込み元の優先順位（後勝ち）:
    1) `DEFAULT_CONFIG`
    2) 探索で見つかった `config.yaml`（任意）
    3) `set_config_path()` で明示指定された `config.yaml`（任意）
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    # 既定の探索は「CWD → HOME」の順。最初に見つかった 1 つのみを採用する。
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload: dict[str, Any] = {}
    if discovered_path is not None:
        payload.update(load_config_file(discovered_path))
    if explicit_path is not None:
        payload.update(load_config_file(explicit_path))

    version = payload.get("version", 1)
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    config_path = explicit_path or discovered_path
    if config_path is not None:
        logger.info("config.yaml を読み込みました: %s", config_path)

    cfg = RuntimeConfig(
        config_path=config_path,
        composition=config_from_mapping(payload, base=DEFAULT_CONFIG),
        render=_render_config_from_mapping(payload.get("render")),
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = [
    "RenderConfig",
    "RuntimeConfig",
    "load_config_file",
    "runtime_config",
    "set_config_path",
]
