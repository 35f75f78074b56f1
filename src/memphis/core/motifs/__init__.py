"""組み込みモチーフ（square / circle / triangle / squizzle / slats）。"""

from memphis.core.motifs.base import Motif
from memphis.core.motifs.circle import Circle
from memphis.core.motifs.slats import Slats
from memphis.core.motifs.square import Square
from memphis.core.motifs.squizzle import Squizzle
from memphis.core.motifs.triangle import Triangle

__all__ = ["Circle", "Motif", "Slats", "Square", "Squizzle", "Triangle"]
