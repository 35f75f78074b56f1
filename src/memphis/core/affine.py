"""2D アフィン変換（3x3 同次行列）の小さなヘルパ群。"""

from __future__ import annotations

import math

import numpy as np


def identity() -> np.ndarray:
    return np.eye(3, dtype=np.float64)


def translation(tx: float, ty: float) -> np.ndarray:
    m = identity()
    m[0, 2] = float(tx)
    m[1, 2] = float(ty)
    return m


def rotation(radians: float) -> np.ndarray:
    """原点まわりの回転行列を返す（y 下向き座標系で時計回りが正）。"""
    c = math.cos(float(radians))
    s = math.sin(float(radians))
    m = identity()
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def scaling(sx: float, sy: float | None = None) -> np.ndarray:
    m = identity()
    m[0, 0] = float(sx)
    m[1, 1] = float(sx if sy is None else sy)
    return m


def from_canvas(a: float, b: float, c: float, d: float, e: float, f: float) -> np.ndarray:
    """canvas 形式 `(a, b, c, d, e, f)` の 6 要素から行列を作る。"""
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)


def apply(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """shape (N, 2) の点列へ行列を適用して返す。"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return pts @ matrix[:2, :2].T + matrix[:2, 2]


def linear_scale(matrix: np.ndarray) -> float:
    """行列の等方スケール相当量 sqrt(|det|) を返す（線幅の換算に使う）。"""
    return float(math.sqrt(abs(float(np.linalg.det(matrix[:2, :2])))))


__all__ = [
    "apply",
    "from_canvas",
    "identity",
    "linear_scale",
    "rotation",
    "scaling",
    "translation",
]
