"""Path data normalization — facade over svgpathtools.

Produces the normalized segment form the engine consumes: absolute ``M``,
``L``, ``C`` and ``Z`` only. svgpathtools resolves relative, shorthand and
smooth commands during ``parse_path``; quadratics are raised to cubics here
and elliptical arcs are approximated by cubics (at most 90° per piece).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier, parse_path
from svgpathtools.svg_to_paths import ellipse2pathd, polygon2pathd, polyline2pathd, rect2pathd

logger = logging.getLogger(__name__)

_CLOSE_EPS = 1e-9


@dataclass(frozen=True)
class PathSegment:
    """One normalized segment: a type tag plus flat coordinate pairs."""

    type: str
    values: tuple[float, ...] = ()

    def to_dict(self) -> dict:
        return {"type": self.type, "values": list(self.values)}


def _xy(*points: complex) -> tuple[float, ...]:
    out: list[float] = []
    for p in points:
        out.extend((float(p.real), float(p.imag)))
    return tuple(out)


def _arc_to_cubics(arc: Arc) -> list[PathSegment]:
    """Fit cubics to an svgpathtools Arc, splitting its sweep into ≤90° pieces.

    Controls use alpha = 4/3 * tan(step / 4) along the arc's tangent;
    ``Arc.derivative`` is taken w.r.t. t, so it is divided by the sweep in radians.
    """
    sweep = math.radians(arc.delta)
    if sweep == 0.0:
        return [PathSegment("L", _xy(arc.end))]
    pieces = max(1, math.ceil(abs(sweep) / (math.pi / 2) - 1e-9))
    k = 4.0 / 3.0 * math.tan(sweep / pieces / 4.0) / sweep

    out: list[PathSegment] = []
    for i in range(pieces):
        ta, tb = i / pieces, (i + 1) / pieces
        pa, pb = arc.point(ta), arc.point(tb)
        c1 = pa + k * arc.derivative(ta)
        c2 = pb - k * arc.derivative(tb)
        end = arc.end if i == pieces - 1 else pb
        out.append(PathSegment("C", _xy(c1, c2, end)))
    return out


def _segment(seg) -> list[PathSegment]:
    if isinstance(seg, Line):
        return [PathSegment("L", _xy(seg.end))]
    if isinstance(seg, CubicBezier):
        return [PathSegment("C", _xy(seg.control1, seg.control2, seg.end))]
    if isinstance(seg, QuadraticBezier):
        c1 = seg.start + 2.0 / 3.0 * (seg.control - seg.start)
        c2 = seg.end + 2.0 / 3.0 * (seg.control - seg.end)
        return [PathSegment("C", _xy(c1, c2, seg.end))]
    if isinstance(seg, Arc):
        return _arc_to_cubics(seg)
    raise TypeError(f"Unsupported segment {type(seg).__name__}")


def _is_closed(path: Path) -> bool:
    return abs(path.end - path.start) < _CLOSE_EPS


def normalize_path_data(d: str) -> list[PathSegment]:
    """Parse an SVG ``d`` string into normalized absolute segments.

    Each continuous subpath starts with ``M`` and ends with ``Z`` when it
    returns to its start. Malformed data yields no segments.
    """
    if not d or not d.strip():
        return []
    if d.lstrip()[0] not in "Mm":
        logger.warning("Path data must begin with a moveto: %r", d[:40])
        return []

    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return []
    if len(path) == 0:
        return []

    out: list[PathSegment] = []
    for sub in path.continuous_subpaths():
        if len(sub) == 0:
            continue
        out.append(PathSegment("M", _xy(sub.start)))
        for seg in sub:
            out.extend(_segment(seg))
        if _is_closed(sub):
            out.append(PathSegment("Z"))
    return out


# --- Basic shapes → path data ---


def _length(attrs: dict[str, str], name: str, default: float = 0.0) -> float:
    raw = attrs.get(name)
    if raw is None or not raw.strip():
        return default
    raw = raw.strip()
    if raw.endswith("px"):
        raw = raw[:-2]
    return float(raw)


def _rect_d(attrs: dict[str, str]) -> str:
    w, h = _length(attrs, "width"), _length(attrs, "height")
    if w <= 0 or h <= 0:
        return ""
    rect = {"x": _length(attrs, "x"), "y": _length(attrs, "y"), "width": w, "height": h}
    rx = _length(attrs, "rx") if attrs.get("rx") else None
    ry = _length(attrs, "ry") if attrs.get("ry") else None
    if rx is None:
        rx = ry
    if ry is None:
        ry = rx
    if rx and ry and rx > 0 and ry > 0:
        rect["rx"], rect["ry"] = min(rx, w / 2), min(ry, h / 2)
    return rect2pathd(rect)


def _ellipse_d(cx: float, cy: float, rx: float, ry: float) -> str:
    if rx <= 0 or ry <= 0:
        return ""
    return ellipse2pathd({"cx": cx, "cy": cy, "rx": rx, "ry": ry})


def shape_to_path_data(tag: str, attrs: dict[str, str]) -> str:
    """Convert a basic shape element's attributes into an equivalent ``d`` string."""
    try:
        if tag == "path":
            return attrs.get("d", "")
        if tag == "rect":
            return _rect_d(attrs)
        if tag == "circle":
            r = _length(attrs, "r")
            return _ellipse_d(_length(attrs, "cx"), _length(attrs, "cy"), r, r)
        if tag == "ellipse":
            return _ellipse_d(
                _length(attrs, "cx"), _length(attrs, "cy"), _length(attrs, "rx"), _length(attrs, "ry")
            )
        if tag == "line":
            return (
                f"M{_length(attrs, 'x1')},{_length(attrs, 'y1')} "
                f"L{_length(attrs, 'x2')},{_length(attrs, 'y2')}"
            )
        if tag in ("polyline", "polygon"):
            points = attrs.get("points", "")
            if len(points.replace(",", " ").split()) < 4:
                return ""
            if tag == "polygon":
                return polygon2pathd(points)
            return polyline2pathd(points)
    except ValueError as e:
        logger.warning("Bad <%s> geometry attributes: %s", tag, e)
        return ""
    return ""
