"""core.config の GlobalConfig 構築をテスト。"""

from __future__ import annotations

import pytest

from memphis.core.config import DEFAULT_CONFIG, GlobalConfig, config_from_mapping
from memphis.core.motif_kind import MotifKind
from memphis.core.palette import PALETTE


def test_default_config_matches_reference_values() -> None:
    assert DEFAULT_CONFIG.grid_size == 200.0
    assert DEFAULT_CONFIG.random_fill is True

    expected = {
        MotifKind.SQUARE: (0.15, "red", 50.0),
        MotifKind.CIRCLE: (0.1, "blue", 30.0),
        MotifKind.SLATS: (0.25, "teal", 75.0),
        MotifKind.SQUIZZLE: (0.1, "pink", 30.0),
        MotifKind.TRIANGLE: (0.125, "yellow", 60.0),
    }
    for kind, (chance, color, size) in expected.items():
        cfg = DEFAULT_CONFIG.motif(kind)
        assert cfg.accent_chance == chance
        assert cfg.fill_color == PALETTE[color]
        assert cfg.stroke_color == PALETTE["black"]
        assert cfg.line_width == 6.0
        assert cfg.size == size


def test_motif_configs_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_CONFIG.motif_configs[MotifKind.SQUARE] = DEFAULT_CONFIG.motif(  # type: ignore[index]
            MotifKind.CIRCLE
        )


def test_global_config_requires_all_kinds() -> None:
    with pytest.raises(ValueError, match="不足"):
        GlobalConfig(
            grid_size=100.0,
            motif_configs={MotifKind.SQUARE: DEFAULT_CONFIG.motif(MotifKind.SQUARE)},
        )


def test_config_from_empty_mapping_equals_default() -> None:
    assert config_from_mapping({}) == DEFAULT_CONFIG


def test_motif_override_is_merged_per_key() -> None:
    cfg = config_from_mapping(
        {
            "grid_size": 120,
            "motifs": {"square": {"width": 40, "fill_color": "teal"}},
        }
    )
    square = cfg.motif(MotifKind.SQUARE)
    assert cfg.grid_size == 120.0
    assert square.size == 40.0
    assert square.fill_color == PALETTE["teal"]
    # 指定しなかったキーは既定値のまま。
    assert square.accent_chance == 0.15
    assert cfg.motif(MotifKind.CIRCLE) == DEFAULT_CONFIG.motif(MotifKind.CIRCLE)


def test_generic_size_key_is_accepted() -> None:
    cfg = config_from_mapping({"motifs": {"triangle": {"size": 80}}})
    assert cfg.motif(MotifKind.TRIANGLE).size == 80.0


def test_size_and_alias_together_is_rejected() -> None:
    with pytest.raises(RuntimeError, match="同時"):
        config_from_mapping({"motifs": {"circle": {"size": 10, "radius": 20}}})


@pytest.mark.parametrize(
    ("data", "exc"),
    [
        ({"grid_size": 0}, ValueError),
        ({"grid_size": "wide"}, RuntimeError),
        ({"motifs": {"square": {"accent_chance": 1.5}}}, ValueError),
        ({"motifs": {"square": {"line_width": -1}}}, ValueError),
        ({"motifs": {"hexagon": {}}}, RuntimeError),
        ({"motifs": {"slats": {"colour": "red"}}}, RuntimeError),
        ({"motifs": {"slats": {"stroke_color": "mauve"}}}, ValueError),
        ({"motifs": ["square"]}, RuntimeError),
        ({"random_fill": "yes"}, RuntimeError),
    ],
)
def test_invalid_values_are_rejected(data: dict, exc: type[Exception]) -> None:
    with pytest.raises(exc):
        config_from_mapping(data)


def test_random_fill_can_be_disabled() -> None:
    assert config_from_mapping({"random_fill": False}).random_fill is False
