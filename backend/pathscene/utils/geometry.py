"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


def matrix_from_values(
    a: float, b: float, c: float, d: float, e: float, f: float
) -> NDArray[np.float64]:
    """Build a 3x3 affine matrix from the six SVG matrix components."""
    return np.array(
        [
            [a, c, e],
            [b, d, f],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def matrix_values(m: NDArray[np.float64]) -> tuple[float, float, float, float, float, float]:
    """Inverse of matrix_from_values: (a, b, c, d, e, f)."""
    return (
        float(m[0, 0]),
        float(m[1, 0]),
        float(m[0, 1]),
        float(m[1, 1]),
        float(m[0, 2]),
        float(m[1, 2]),
    )


def identity_matrix() -> NDArray[np.float64]:
    return np.eye(3, dtype=np.float64)


def scale_matrix(sx: float, sy: float) -> NDArray[np.float64]:
    return matrix_from_values(sx, 0.0, 0.0, sy, 0.0, 0.0)


def translate_matrix(tx: float, ty: float) -> NDArray[np.float64]:
    return matrix_from_values(1.0, 0.0, 0.0, 1.0, tx, ty)


def rotate_matrix(degrees: float) -> NDArray[np.float64]:
    rad = np.radians(degrees)
    cos, sin = float(np.cos(rad)), float(np.sin(rad))
    return matrix_from_values(cos, sin, -sin, cos, 0.0, 0.0)


def skew_x_matrix(degrees: float) -> NDArray[np.float64]:
    return matrix_from_values(1.0, 0.0, float(np.tan(np.radians(degrees))), 1.0, 0.0, 0.0)


def skew_y_matrix(degrees: float) -> NDArray[np.float64]:
    return matrix_from_values(1.0, float(np.tan(np.radians(degrees))), 0.0, 1.0, 0.0, 0.0)


def invert_matrix(m: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.linalg.inv(m)


def transform_point(m: NDArray[np.float64], x: float, y: float) -> tuple[float, float]:
    """Apply an affine matrix to a single point."""
    return (
        float(m[0, 0] * x + m[0, 1] * y + m[0, 2]),
        float(m[1, 0] * x + m[1, 1] * y + m[1, 2]),
    )


def transform_points(m: NDArray[np.float64], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply an affine matrix to an Nx2 array of points."""
    if len(points) == 0:
        return np.empty((0, 2), dtype=np.float64)
    return points @ m[:2, :2].T + m[:2, 2]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in scene coordinates."""

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


class BoundsAccumulator:
    """Running min/max corner accumulator.

    With ``seed_origin`` the corners start at (0, 0), so every box includes the
    origin. Otherwise the corners start empty and a box that never received a
    point collapses to the origin point.
    """

    def __init__(self, seed_origin: bool = False) -> None:
        if seed_origin:
            self._min = np.zeros(2, dtype=np.float64)
            self._max = np.zeros(2, dtype=np.float64)
        else:
            self._min = np.full(2, np.inf, dtype=np.float64)
            self._max = np.full(2, -np.inf, dtype=np.float64)

    @property
    def is_empty(self) -> bool:
        return bool(self._min[0] > self._max[0])

    def add_point(self, x: float, y: float) -> None:
        self._min[0] = min(self._min[0], x)
        self._min[1] = min(self._min[1], y)
        self._max[0] = max(self._max[0], x)
        self._max[1] = max(self._max[1], y)

    def add_points(self, points: NDArray[np.float64]) -> None:
        if len(points) == 0:
            return
        np.minimum(self._min, points.min(axis=0), out=self._min)
        np.maximum(self._max, points.max(axis=0), out=self._max)

    def merge(self, other: BoundsAccumulator) -> None:
        """Fold another accumulator's corners into this one (no-op if it is empty)."""
        if other.is_empty:
            return
        np.minimum(self._min, other._min, out=self._min)
        np.maximum(self._max, other._max, out=self._max)

    def box(self) -> BoundingBox:
        if self.is_empty:
            return BoundingBox()
        return BoundingBox(
            float(self._min[0]),
            float(self._min[1]),
            float(self._max[0]),
            float(self._max[1]),
        )


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t
