"""SVG ``transform`` attribute parsing → 3x3 affine matrices."""

from __future__ import annotations

import logging
import re

import numpy as np
from numpy.typing import NDArray

from pathscene.utils.geometry import (
    identity_matrix,
    matrix_from_values,
    rotate_matrix,
    scale_matrix,
    skew_x_matrix,
    skew_y_matrix,
    translate_matrix,
)

logger = logging.getLogger(__name__)

_OP_RE = re.compile(r"\s*(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)\s*,?")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

# Accepted argument counts per operation
_ARITY: dict[str, tuple[int, ...]] = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}


class TransformSyntaxError(ValueError):
    pass


def _op_matrix(name: str, args: list[float]) -> NDArray[np.float64]:
    if name == "matrix":
        return matrix_from_values(*args)
    if name == "translate":
        tx = args[0]
        ty = args[1] if len(args) > 1 else 0.0
        return translate_matrix(tx, ty)
    if name == "scale":
        sx = args[0]
        sy = args[1] if len(args) > 1 else sx
        return scale_matrix(sx, sy)
    if name == "rotate":
        m = rotate_matrix(args[0])
        if len(args) == 3:
            cx, cy = args[1], args[2]
            m = translate_matrix(cx, cy) @ m @ translate_matrix(-cx, -cy)
        return m
    if name == "skewX":
        return skew_x_matrix(args[0])
    return skew_y_matrix(args[0])


def parse_transform_list(value: str) -> NDArray[np.float64]:
    """Parse a transform list, composing left to right.

    Raises TransformSyntaxError for anything that is not a well-formed list.
    """
    result = identity_matrix()
    pos = 0
    value = value.strip()
    while pos < len(value):
        m = _OP_RE.match(value, pos)
        if m is None:
            raise TransformSyntaxError(f"Bad transform list near {value[pos:]!r}")
        name = m.group(1)
        args = [float(n) for n in _NUMBER_RE.findall(m.group(2))]
        if len(args) not in _ARITY[name]:
            raise TransformSyntaxError(f"{name}() takes {_ARITY[name]} arguments, got {len(args)}")
        result = result @ _op_matrix(name, args)
        pos = m.end()
    return result


def transform_or_identity(value: str | None) -> NDArray[np.float64]:
    """Like parse_transform_list, but malformed lists fall back to identity."""
    if not value or not value.strip():
        return identity_matrix()
    try:
        return parse_transform_list(value)
    except TransformSyntaxError as e:
        logger.warning("Ignoring transform %r: %s", value, e)
        return identity_matrix()
