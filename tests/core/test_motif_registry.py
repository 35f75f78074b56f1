"""core.motif_registry の選択とレジストリをテスト。"""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from memphis.core.builtins import ensure_builtin_motifs_registered
from memphis.core.motif_kind import MotifKind
from memphis.core.motif_registry import MotifRegistry, motif, motif_registry, select_motif_kind
from memphis.core.motifs import Circle, Slats, Square, Squizzle, Triangle


@pytest.mark.parametrize(
    ("r", "kind"),
    [
        (0.0, MotifKind.SLATS),
        (0.049999, MotifKind.SLATS),
        (0.05, MotifKind.SQUIZZLE),
        (0.099999, MotifKind.SQUIZZLE),
        (0.1, MotifKind.TRIANGLE),
        (0.399999, MotifKind.TRIANGLE),
        (0.4, MotifKind.CIRCLE),
        (0.699999, MotifKind.CIRCLE),
        (0.7, MotifKind.SQUARE),
        (0.999999, MotifKind.SQUARE),
    ],
)
def test_band_boundaries_are_inclusive_on_lower_bound(r: float, kind: MotifKind) -> None:
    assert select_motif_kind(r) is kind


def test_selection_frequencies_converge() -> None:
    rng = np.random.default_rng(12345)
    n = 100_000
    counts = Counter(select_motif_kind(float(r)) for r in rng.random(n))
    expected = {
        MotifKind.SQUARE: 0.30,
        MotifKind.CIRCLE: 0.30,
        MotifKind.TRIANGLE: 0.30,
        MotifKind.SQUIZZLE: 0.05,
        MotifKind.SLATS: 0.05,
    }
    for kind, freq in expected.items():
        assert abs(counts[kind] / n - freq) < 0.01


def test_builtin_registry_is_complete() -> None:
    ensure_builtin_motifs_registered()
    assert dict(motif_registry.items()) == {
        MotifKind.SQUARE: Square,
        MotifKind.CIRCLE: Circle,
        MotifKind.TRIANGLE: Triangle,
        MotifKind.SQUIZZLE: Squizzle,
        MotifKind.SLATS: Slats,
    }
    assert Square.kind is MotifKind.SQUARE


def test_registry_rejects_duplicate_without_overwrite() -> None:
    registry = MotifRegistry()
    registry._register(MotifKind.SQUARE, Square)
    with pytest.raises(ValueError):
        registry._register(MotifKind.SQUARE, Circle, overwrite=False)
    with pytest.raises(KeyError):
        registry.get(MotifKind.CIRCLE)


def test_registry_replaces_by_default() -> None:
    """overwrite の既定は True（後から登録したクラスが勝つ）。"""
    registry = MotifRegistry()
    registry._register(MotifKind.SQUARE, Square)
    registry._register(MotifKind.SQUARE, Circle)
    assert registry.get(MotifKind.SQUARE) is Circle


def test_motif_decorator_requires_enum_kind() -> None:
    with pytest.raises(TypeError):
        motif("square")  # type: ignore[arg-type]
