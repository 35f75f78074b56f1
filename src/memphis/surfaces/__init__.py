"""`memphis.core.surface.Surface` を満たす描画バックエンド。"""

from memphis.surfaces.image import ImageSurface
from memphis.surfaces.recording import RecordingSurface

__all__ = ["ImageSurface", "RecordingSurface"]
