# どこで: `src/memphis/__main__.py`。
# 何を: `python -m memphis ...` の CLI エントリポイントを提供する。
# なぜ: 描画面の確保と PNG 保存（ホスト側の責務）を短い導線で実行できるようにするため。

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from memphis.core.composition import MemphisApp
from memphis.core.output_paths import output_path_for_render
from memphis.core.runtime_config import runtime_config, set_config_path
from memphis.surfaces.image import ImageSurface

logger = logging.getLogger("memphis")


def _parse_size(text: str) -> tuple[float, float]:
    """`800x600` 形式の寸法を (w, h) に変換する。"""

    parts = str(text).lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"--size は WxH 形式で指定してください: {text!r}")
    try:
        w = float(parts[0])
        h = float(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"--size は数値で指定してください: {text!r}") from exc
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"--size は正の値である必要があります: {text!r}")
    return (w, h)


def _positive_float(text: str) -> float:
    try:
        v = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"数値で指定してください: {text!r}") from exc
    if v <= 0:
        raise argparse.ArgumentTypeError(f"正の値である必要があります: {text!r}")
    return v


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--size", type=_parse_size, default=None, help="論理寸法 WxH")
    p.add_argument("--scale", type=_positive_float, default=None, help="device scale")
    p.add_argument("--config", type=Path, default=None, help="config.yaml のパス")
    p.add_argument("--out", type=Path, default=None, help="出力 PNG のパス")
    p.add_argument("--run-id", default=None, help="出力ファイル名の接尾辞")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG ログを出す")


def _run(args: argparse.Namespace) -> int:
    if args.config is not None:
        set_config_path(args.config)
    cfg = runtime_config()

    width, height = args.size if args.size is not None else (cfg.render.width, cfg.render.height)
    scale = float(args.scale) if args.scale is not None else cfg.render.device_scale

    surface = ImageSurface.for_canvas(width, height, device_scale=scale)
    app = MemphisApp(surface, scale, width, height, cfg.composition)
    if args.cmd == "preview":
        app.preview_grid()
    else:
        app.generate()

    out = args.out
    if out is None:
        out = output_path_for_render(
            kind="png",
            ext="png",
            canvas_size=(width, height),
            run_id=args.run_id,
            output_dir=cfg.render.output_dir,
        )
    out.parent.mkdir(parents=True, exist_ok=True)
    surface.image.save(out)
    logger.info("保存しました: %s (%dx%d px)", out, *surface.size)
    print(out)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="python -m memphis")
    sub = p.add_subparsers(dest="cmd", required=True)
    _add_common_args(sub.add_parser("render", help="構図を生成して PNG に保存する"))
    _add_common_args(sub.add_parser("preview", help="格子点だけを描いて PNG に保存する"))

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd in {"render", "preview"}:
        return _run(args)

    raise AssertionError(f"unknown cmd: {args.cmd!r}")


if __name__ == "__main__":
    raise SystemExit(main())
