"""memphis: ジッタ付き格子に幾何モチーフを並べる Memphis スタイル構図の生成。"""

from memphis.core.composition import MemphisApp
from memphis.core.config import DEFAULT_CONFIG, GlobalConfig, MotifConfig
from memphis.core.lattice import Grid
from memphis.core.motif_kind import MotifKind
from memphis.core.palette import PALETTE
from memphis.core.point import Point

__all__ = [
    "DEFAULT_CONFIG",
    "GlobalConfig",
    "Grid",
    "MemphisApp",
    "MotifConfig",
    "MotifKind",
    "PALETTE",
    "Point",
]
