from __future__ import annotations

from collections.abc import Callable, Iterator

import numpy as np
import pytest

from memphis.core.composition import MemphisApp
from memphis.core.config import DEFAULT_CONFIG, GlobalConfig
from memphis.core.runtime_config import set_config_path
from memphis.surfaces.recording import RecordingSurface

AppFactory = Callable[..., MemphisApp]


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> Iterator[None]:
    set_config_path(None)
    yield
    set_config_path(None)


@pytest.fixture
def make_app() -> AppFactory:
    """RecordingSurface 上の MemphisApp を作るファクトリ。"""

    def _make(
        *,
        width: float = 400.0,
        height: float = 400.0,
        dpr: float = 1.0,
        config: GlobalConfig = DEFAULT_CONFIG,
        seed: int = 0,
    ) -> MemphisApp:
        surface = RecordingSurface(width * dpr, height * dpr)
        return MemphisApp(
            surface, dpr, width, height, config, rng=np.random.default_rng(seed)
        )

    return _make
