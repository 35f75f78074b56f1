"""core.runtime_config の探索・ロード・キャッシュをテスト。"""

from __future__ import annotations

from pathlib import Path

import pytest

from memphis.core.config import DEFAULT_CONFIG
from memphis.core.motif_kind import MotifKind
from memphis.core.runtime_config import runtime_config, set_config_path


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


def test_runtime_config_without_files_uses_defaults(isolated_cwd: Path) -> None:
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.composition == DEFAULT_CONFIG
    assert cfg.render.width == 800.0
    assert cfg.render.device_scale == 1.0
    assert cfg.render.output_dir == Path("data/output")


def test_runtime_config_discovers_cwd_config(isolated_cwd: Path) -> None:
    path = isolated_cwd / ".memphis" / "config.yaml"
    path.parent.mkdir()
    path.write_text(
        "version: 1\n"
        "grid_size: 150\n"
        "motifs:\n"
        "  slats:\n"
        "    length: 90\n"
        "render:\n"
        "  width: 1200\n"
        "  device_scale: 2\n",
        encoding="utf-8",
    )

    cfg = runtime_config()
    assert cfg.config_path == path
    assert cfg.composition.grid_size == 150.0
    assert cfg.composition.motif(MotifKind.SLATS).size == 90.0
    assert cfg.render.width == 1200.0
    assert cfg.render.height == 800.0
    assert cfg.render.device_scale == 2.0


def test_explicit_config_wins_and_cache_is_reset(isolated_cwd: Path) -> None:
    first = runtime_config()
    assert runtime_config() is first

    explicit = isolated_cwd / "custom.yaml"
    explicit.write_text("grid_size: 90\n", encoding="utf-8")
    set_config_path(explicit)

    cfg = runtime_config()
    assert cfg is not first
    assert cfg.config_path == explicit
    assert cfg.composition.grid_size == 90.0


def test_missing_explicit_config_raises(isolated_cwd: Path) -> None:
    set_config_path(isolated_cwd / "nope.yaml")
    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "version: 2\n",
        "grid_size: [1, 2\n",
        "render: 3\n",
    ],
)
def test_invalid_config_files_raise(isolated_cwd: Path, text: str) -> None:
    path = isolated_cwd / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    set_config_path(path)
    with pytest.raises(RuntimeError):
        runtime_config()


def test_non_positive_render_scale_is_rejected(isolated_cwd: Path) -> None:
    path = isolated_cwd / "bad.yaml"
    path.write_text("render:\n  device_scale: 0\n", encoding="utf-8")
    set_config_path(path)
    with pytest.raises(ValueError):
        runtime_config()


@pytest.mark.parametrize("text", ["render:\n  width: true\n", "render:\n  device_scale: no\n"])
def test_boolean_render_values_are_rejected(isolated_cwd: Path, text: str) -> None:
    """YAML の bool は数値として扱わない（true が 1.0 にならない）。"""

    path = isolated_cwd / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    set_config_path(path)
    with pytest.raises(RuntimeError, match="render\\."):
        runtime_config()
