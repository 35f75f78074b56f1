"""`python -m memphis` の CLI をテスト。"""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from memphis.__main__ import main


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


def test_render_writes_png_of_device_size(isolated_cwd: Path, capsys) -> None:
    out = isolated_cwd / "out.png"
    code = main(["render", "--size", "200x100", "--scale", "2", "--out", str(out)])

    assert code == 0
    assert capsys.readouterr().out.strip() == str(out)
    with Image.open(out) as img:
        assert img.size == (400, 200)


def test_render_default_path_uses_config(isolated_cwd: Path) -> None:
    cfg = isolated_cwd / "cfg.yaml"
    cfg.write_text(
        "render:\n  width: 120\n  height: 80\n  output_dir: rendered\n",
        encoding="utf-8",
    )
    code = main(["render", "--config", str(cfg), "--run-id", "a"])

    assert code == 0
    out = isolated_cwd / "rendered" / "png" / "memphis_120x80_a.png"
    with Image.open(out) as img:
        assert img.size == (120, 80)


def test_preview_writes_png(isolated_cwd: Path) -> None:
    out = isolated_cwd / "preview.png"
    assert main(["preview", "--size", "100x100", "--out", str(out)]) == 0
    assert out.is_file()


@pytest.mark.parametrize("size", ["100", "axb", "0x10"])
def test_invalid_size_exits_with_usage_error(isolated_cwd: Path, size: str) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["render", "--size", size])
    assert exc.value.code == 2
