"""Geometry transform — node segments into Y-up, scaled scene space.

The effective matrix is ``ctm · flip(1, -1) · scale(s, s)``: points are
scaled and flipped in the node's local space, then mapped by the node's
current transformation matrix.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pathscene.svg.segments import PathSegment
from pathscene.utils.geometry import (
    BoundsAccumulator,
    matrix_from_values,
    scale_matrix,
    transform_points,
)

_FLIP_Y = scale_matrix(1.0, -1.0)


def effective_matrix(ctm: tuple[float, float, float, float, float, float], scale: float) -> NDArray[np.float64]:
    return matrix_from_values(*ctm) @ _FLIP_Y @ scale_matrix(scale, scale)


def transform_segments(
    segments: list[PathSegment],
    matrix: NDArray[np.float64],
    bounds: BoundsAccumulator,
) -> list[PathSegment]:
    """Transform every coordinate pair, keeping segment types; fold points into ``bounds``."""
    out: list[PathSegment] = []
    for seg in segments:
        if len(seg.values) < 2:
            out.append(PathSegment(seg.type, seg.values))
            continue
        pts = np.asarray(seg.values[: len(seg.values) // 2 * 2], dtype=np.float64).reshape(-1, 2)
        moved = transform_points(matrix, pts)
        bounds.add_points(moved)
        out.append(PathSegment(seg.type, tuple(float(v) for v in moved.ravel())))
    return out
