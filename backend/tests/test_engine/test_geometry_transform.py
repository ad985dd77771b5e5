"""Tests for the scene-space geometry transform."""

from __future__ import annotations

import pytest

from pathscene.engine.geometry_transform import effective_matrix, transform_segments
from pathscene.svg.segments import PathSegment
from pathscene.utils.geometry import BoundingBox, BoundsAccumulator, invert_matrix, transform_point


def test_effective_matrix_scales_flips_then_applies_ctm():
    m = effective_matrix((1.0, 0.0, 0.0, 1.0, 10.0, 20.0), 2.0)
    assert transform_point(m, 1.0, 1.0) == pytest.approx((12.0, 18.0))


def test_transform_keeps_types_and_close():
    acc = BoundsAccumulator()
    segs = [
        PathSegment("M", (0.0, 0.0)),
        PathSegment("C", (1.0, 1.0, 2.0, 2.0, 3.0, 3.0)),
        PathSegment("Z"),
    ]
    out = transform_segments(segs, effective_matrix((1.0, 0.0, 0.0, 1.0, 0.0, 0.0), 1.0), acc)
    assert [s.type for s in out] == ["M", "C", "Z"]
    assert out[1].values == pytest.approx((1.0, -1.0, 2.0, -2.0, 3.0, -3.0))
    assert out[2].values == ()
    assert acc.box() == BoundingBox(0.0, -3.0, 3.0, 0.0)


def test_inverse_round_trip():
    m = effective_matrix((2.0, 0.5, -0.5, 2.0, 7.0, -3.0), 1.5)
    segs = [PathSegment("M", (4.0, 5.0)), PathSegment("L", (-2.0, 8.0))]
    moved = transform_segments(segs, m, BoundsAccumulator())
    back = transform_segments(moved, invert_matrix(m), BoundsAccumulator())
    for original, restored in zip(segs, back):
        assert restored.values == pytest.approx(original.values)


def test_empty_accumulator_box():
    assert BoundsAccumulator().box() == BoundingBox()
    assert BoundsAccumulator().is_empty


def test_seeded_accumulator_includes_origin():
    acc = BoundsAccumulator(seed_origin=True)
    acc.add_point(5.0, 5.0)
    assert acc.box() == BoundingBox(0.0, 0.0, 5.0, 5.0)


def test_merge_skips_empty():
    acc = BoundsAccumulator()
    acc.add_point(1.0, 2.0)
    acc.merge(BoundsAccumulator())
    assert acc.box() == BoundingBox(1.0, 2.0, 1.0, 2.0)
