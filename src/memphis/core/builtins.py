"""
どこで: `src/memphis/core/builtins.py`。
何を: 組み込みモチーフの登録（registry 初期化）を単一入口へ集約する。
なぜ: import 副作用の分散をなくし、5 種すべてが登録済みであることを 1 か所で保証するため。
"""

from __future__ import annotations

import importlib

from memphis.core.motif_kind import MotifKind
from memphis.core.motif_registry import motif_registry

_BUILTIN_MOTIF_MODULES: tuple[str, ...] = (
    "memphis.core.motifs.square",
    "memphis.core.motifs.circle",
    "memphis.core.motifs.triangle",
    "memphis.core.motifs.squizzle",
    "memphis.core.motifs.slats",
)

_BUILTIN_MOTIFS_REGISTERED = False


def ensure_builtin_motifs_registered() -> None:
    """組み込みモチーフを registry に登録する（idempotent）。"""

    global _BUILTIN_MOTIFS_REGISTERED
    if _BUILTIN_MOTIFS_REGISTERED:
        return
    for module in _BUILTIN_MOTIF_MODULES:
        importlib.import_module(module)
    missing = [k.value for k in MotifKind if k not in motif_registry]
    if missing:
        raise RuntimeError(f"組み込みモチーフが未登録です: missing={missing}")
    _BUILTIN_MOTIFS_REGISTERED = True


__all__ = ["ensure_builtin_motifs_registered"]
