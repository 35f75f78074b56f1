"""5 種のモチーフに共通する生成時サンプリングと fill/stroke 手順をテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from memphis.core.config import config_from_mapping
from memphis.core.motifs import Circle, Motif, Slats, Square, Squizzle, Triangle
from memphis.core.palette import PALETTE
from memphis.core.point import Point

ALL_KINDS = (Square, Circle, Triangle, Squizzle, Slats)


@pytest.mark.parametrize(
    ("cls", "expected"),
    [
        (Square, Point(-25.0, -25.0)),
        (Circle, Point(0.0, 0.0)),
        (Triangle, Point(-30.0, 30.0)),
        (Squizzle, Point(-30.0, -30.0)),
        (Slats, Point(-37.5, -37.5)),
    ],
)
def test_fill_origin_is_deterministic(make_app, cls: type[Motif], expected: Point) -> None:
    for seed in range(20):
        app = make_app(seed=seed)
        assert cls(app, Point(123.0, 45.0)).fill_origin == expected


@pytest.mark.parametrize("cls", ALL_KINDS)
def test_stroke_origin_is_jittered_fill_origin(make_app, cls: type[Motif]) -> None:
    app = make_app(seed=9)
    for _ in range(50):
        m = cls(app, Point(0.0, 0.0))
        assert 4 <= abs(m.stroke_origin.x - m.fill_origin.x) <= 20
        assert 4 <= abs(m.stroke_origin.y - m.fill_origin.y) <= 20


@pytest.mark.parametrize(
    ("cls", "upper"),
    [(Square, 2.0 * math.pi), (Triangle, math.pi), (Squizzle, math.pi), (Slats, math.pi)],
)
def test_rotation_ranges(make_app, cls: type[Motif], upper: float) -> None:
    app = make_app(seed=4)
    rotations = [cls(app, Point(0.0, 0.0)).rotation for _ in range(500)]
    assert all(0.0 <= r < upper for r in rotations)
    # 範囲の後半にも届いている。
    assert max(rotations) > upper * 0.75


def test_circle_rotation_is_always_zero(make_app) -> None:
    app = make_app(seed=4)
    assert {Circle(app, Point(0.0, 0.0)).rotation for _ in range(50)} == {0.0}


@pytest.mark.parametrize(("chance", "expected"), [(0.0, False), (1.0, True)])
@pytest.mark.parametrize("cls", ALL_KINDS)
def test_accent_flag_follows_accent_chance(
    make_app, cls: type[Motif], chance: float, expected: bool
) -> None:
    cfg = config_from_mapping({"motifs": {cls.kind.value: {"accent_chance": chance}}})
    app = make_app(config=cfg)
    assert all(cls(app, Point(0.0, 0.0)).accented is expected for _ in range(20))


@pytest.mark.parametrize("cls", ALL_KINDS)
def test_fill_then_stroke_restore_base_frame(make_app, cls: type[Motif]) -> None:
    app = make_app(dpr=2.0)
    surface = app.surface
    m = cls(app, Point(50.0, 60.0))

    start = len(surface.calls)
    m.fill().stroke()
    calls = surface.calls[start:]

    names = [c.name for c in calls]
    # fill も stroke も「平行移動 → 回転 → 描画 → 基準座標系へ戻す」の順になる。
    assert names[:2] == ["translate", "rotate"]
    assert calls[0].args == (50.0, 60.0)
    assert calls[1].args == (m.rotation,)
    assert names.count("set_transform") == 2
    assert names[-2:] == ["set_transform", "scale"]
    np.testing.assert_allclose(surface.matrix, np.diag([2.0, 2.0, 1.0]))


@pytest.mark.parametrize("cls", ALL_KINDS)
def test_fill_uses_non_black_palette_color_and_stroke_uses_config(
    make_app, cls: type[Motif]
) -> None:
    app = make_app(seed=21)
    m = cls(app, Point(0.0, 0.0))
    m.fill()
    fill_path = app.surface.paths[-1]
    m.stroke()
    stroke_path = app.surface.paths[-1]

    assert fill_path.color in set(PALETTE.values()) - {PALETTE["black"]}
    assert stroke_path.color == PALETTE["black"]
    assert stroke_path.line_width == 6.0
    assert stroke_path.op in {"stroke", "stroke_rect"}


@pytest.mark.parametrize("cls", ALL_KINDS)
def test_random_fill_disabled_uses_configured_fill_color(make_app, cls: type[Motif]) -> None:
    app = make_app(config=config_from_mapping({"random_fill": False}))
    m = cls(app, Point(0.0, 0.0))
    m.fill()
    assert app.surface.paths[-1].color == app.config.motif(cls.kind).fill_color


def test_repeated_fill_and_stroke_draw_identically(make_app) -> None:
    app = make_app(seed=13)
    m = Square(app, Point(10.0, 10.0))

    m.fill().stroke()
    first = [(p.op, p.color, [c.args for c in p.segments]) for p in app.surface.paths[-2:]]
    m.fill().stroke()
    second = [(p.op, p.color, [c.args for c in p.segments]) for p in app.surface.paths[-2:]]

    assert first == second


def test_unregistered_motif_class_cannot_be_instantiated(make_app) -> None:
    app = make_app()

    class Blob(Motif):
        pass

    for cls in (Motif, Blob):
        with pytest.raises(TypeError, match="@motif"):
            cls(app, Point(0.0, 0.0))
