"""Path instances — one fill or stroke occurrence of a drawable node."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from pathscene.svg.colors import RGBA, parse_color
from pathscene.svg.document import DocumentNode
from pathscene.utils.geometry import lerp

_STROKE_WIDTH_RE = re.compile(r"^(\d+\.?\d*|\.\d+)(.*)$")

# Absolute CSS units → px
_PX_PER_UNIT: dict[str, float] = {
    "": 1.0,
    "px": 1.0,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
}


class FillRule(str, enum.Enum):
    EVEN_ODD = "EvenOdd"
    WINDING = "Winding"

    @classmethod
    def from_css(cls, value: str | None) -> FillRule:
        return cls.EVEN_ODD if (value or "").strip().lower() == "evenodd" else cls.WINDING


def resolve_paint(node: DocumentNode, prop: str) -> RGBA | None:
    """Resolved fill/stroke color of a node, or None when nothing is painted."""
    return parse_color(node.style(prop), current_color=node.style("color"))


def parse_stroke_width(value: str | None, ctm: tuple[float, ...]) -> float:
    """Stroke width in scene units.

    px (or unitless) and absolute units scale by the mean of the matrix's
    a and d components. Other units keep their number as-is. Unparseable
    strings give 0.0.
    """
    if value is None:
        return 0.0
    m = _STROKE_WIDTH_RE.match(value.strip())
    if m is None:
        return 0.0
    width = float(m.group(1))
    unit = m.group(2).strip().lower()
    if unit in _PX_PER_UNIT:
        a, d = ctm[0], ctm[3]
        width *= _PX_PER_UNIT[unit] * lerp(a, d, 0.5)
    return width


@dataclass
class PathInstance:
    node: DocumentNode
    color: RGBA

    def kind(self) -> dict:
        raise NotImplementedError


@dataclass
class FillPath(PathInstance):
    fill_rule: FillRule = FillRule.WINDING

    @classmethod
    def from_node(cls, node: DocumentNode, color: RGBA) -> FillPath:
        return cls(node=node, color=color, fill_rule=FillRule.from_css(node.style("fill-rule")))

    def kind(self) -> dict:
        return {"Fill": self.fill_rule.value}


@dataclass
class StrokePath(PathInstance):
    width: float = 0.0

    @classmethod
    def from_node(cls, node: DocumentNode, color: RGBA) -> StrokePath:
        return cls(node=node, color=color, width=parse_stroke_width(node.style("stroke-width"), node.ctm()))

    def kind(self) -> dict:
        return {"Stroke": self.width}
