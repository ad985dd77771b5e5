"""Document model — facade over lxml.

Turns raw SVG bytes into a tree of SvgNode objects exposing what the scene
engine needs from a host document: ordered children, attributes, computed
style lookup, the current transformation matrix and normalized path data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Protocol

import numpy as np
from lxml import etree
from numpy.typing import NDArray

from pathscene.svg.segments import PathSegment, normalize_path_data, shape_to_path_data
from pathscene.svg.style import (
    INHERIT,
    INHERITED_PROPERTIES,
    INITIAL_VALUES,
    parse_style_attribute,
    specified_value,
)
from pathscene.svg.transforms import transform_or_identity
from pathscene.utils.geometry import matrix_values

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

SHAPE_TAGS = frozenset({"path", "rect", "circle", "ellipse", "line", "polyline", "polygon"})


class DocumentParseError(Exception):
    """Raw bytes could not be parsed as an XML document."""


class DocumentNode(Protocol):
    """What the scene engine needs from a document tree node."""

    @property
    def tag(self) -> str: ...

    @property
    def id(self) -> str | None: ...

    @property
    def children(self) -> list["DocumentNode"]: ...

    def style(self, name: str) -> str: ...

    def ctm(self) -> tuple[float, float, float, float, float, float]: ...

    def path_data(self) -> list[PathSegment]: ...


def _local_name(tag: str) -> str:
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


class SvgNode:
    """One element of a parsed SVG document."""

    def __init__(self, element: etree._Element, parent: SvgNode | None = None) -> None:
        self.element = element
        self.parent = parent
        self.tag = _local_name(element.tag)
        self.attributes: dict[str, str] = {str(k): str(v) for k, v in element.attrib.items()}
        self._declarations = parse_style_attribute(self.attributes.get("style"))
        self._computed: dict[str, str] = {}
        self._matrix: NDArray[np.float64] | None = None
        self._segments: list[PathSegment] | None = None
        self.children: list[SvgNode] = [
            SvgNode(child, self) for child in element if isinstance(child.tag, str)
        ]

    def __repr__(self) -> str:
        return f"<SvgNode {self.tag} id={self.id!r}>"

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    def iter(self) -> Iterator[SvgNode]:
        """Depth-first, document order, self included."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_by_id(self, element_id: str) -> SvgNode | None:
        for node in self.iter():
            if node.id == element_id:
                return node
        return None

    def style(self, name: str) -> str:
        """Computed value of a style property."""
        if name in self._computed:
            return self._computed[name]
        value = specified_value(self.attributes, self._declarations, name)
        inherits = value == INHERIT or (value is None and name in INHERITED_PROPERTIES)
        if inherits and self.parent is not None:
            value = self.parent.style(name)
        elif value is None or value == INHERIT:
            value = INITIAL_VALUES.get(name, "")
        self._computed[name] = value
        return value

    def matrix(self) -> NDArray[np.float64]:
        """Cumulative local-to-root matrix as a 3x3 array."""
        if self._matrix is None:
            local = transform_or_identity(self.attributes.get("transform"))
            if self.parent is None:
                self._matrix = local
            else:
                self._matrix = self.parent.matrix() @ local
        return self._matrix

    def ctm(self) -> tuple[float, float, float, float, float, float]:
        return matrix_values(self.matrix())

    def path_data(self) -> list[PathSegment]:
        if self._segments is None:
            if self.tag in SHAPE_TAGS:
                self._segments = normalize_path_data(shape_to_path_data(self.tag, self.attributes))
            else:
                self._segments = []
        return self._segments


class SvgDocument:
    """A parsed SVG document."""

    def __init__(self, root: SvgNode) -> None:
        self.root = root

    @property
    def node_count(self) -> int:
        return sum(1 for _ in self.root.iter())


def parse_document(raw: bytes | str) -> SvgDocument:
    """Parse raw SVG bytes into an SvgDocument.

    Raises DocumentParseError when the input is not well-formed XML.
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    parser = etree.XMLParser(remove_comments=True, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(raw, parser=parser)
    except etree.XMLSyntaxError as e:
        raise DocumentParseError(str(e)) from e

    doc = SvgDocument(SvgNode(root))
    logger.debug("Parsed document: %d nodes, root <%s>", doc.node_count, doc.root.tag)
    return doc
