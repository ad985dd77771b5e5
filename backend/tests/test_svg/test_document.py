"""Tests for the lxml-backed document model."""

from __future__ import annotations

import pytest

from pathscene.svg.document import DocumentParseError, parse_document
from pathscene.svg.style import clip_path_id, parse_style_attribute

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


def _doc(body: str):
    return parse_document(f"<svg {SVG_NS}>{body}</svg>")


def test_children_in_document_order():
    doc = _doc('<path id="a"/><!-- skipped --><g id="b"><rect id="c"/></g>')
    assert [c.id for c in doc.root.children] == ["a", "b"]
    assert [n.tag for n in doc.root.iter()] == ["svg", "path", "g", "rect"]
    assert doc.root.find_by_id("c").parent.id == "b"


def test_fill_is_inherited():
    doc = _doc('<g fill="red"><path id="p" d="M0 0"/></g>')
    assert doc.root.find_by_id("p").style("fill") == "red"


def test_initial_values():
    doc = _doc('<path id="p" d="M0 0"/>')
    p = doc.root.find_by_id("p")
    assert p.style("fill") == "black"
    assert p.style("stroke") == "none"
    assert p.style("fill-rule") == "nonzero"
    assert p.style("stroke-width") == "1"


def test_style_attribute_overrides_presentation_attribute():
    doc = _doc('<path id="p" fill="red" style="fill: blue; stroke:green"/>')
    p = doc.root.find_by_id("p")
    assert p.style("fill") == "blue"
    assert p.style("stroke") == "green"


def test_inherit_keyword_defers_to_parent():
    doc = _doc('<g stroke="red"><path id="p" stroke="inherit"/></g>')
    assert doc.root.find_by_id("p").style("stroke") == "red"


def test_clip_path_is_not_inherited():
    doc = _doc('<g clip-path="url(#c)"><path id="p"/></g>')
    assert doc.root.children[0].style("clip-path") == "url(#c)"
    assert doc.root.find_by_id("p").style("clip-path") == "none"


def test_inherit_keyword_on_non_inherited_property():
    doc = _doc('<g clip-path="url(#c)"><path id="p" clip-path="inherit"/></g>')
    assert doc.root.find_by_id("p").style("clip-path") == "url(#c)"


def test_inherit_on_root_uses_initial_value():
    doc = parse_document(f'<svg {SVG_NS} clip-path="inherit" fill="inherit"/>')
    assert doc.root.style("clip-path") == "none"
    assert doc.root.style("fill") == "black"


def test_ctm_composes_ancestor_transforms():
    doc = _doc('<g transform="translate(10,20)"><g transform="scale(2)"><path id="p"/></g></g>')
    assert doc.root.find_by_id("p").ctm() == pytest.approx((2.0, 0.0, 0.0, 2.0, 10.0, 20.0))


def test_ctm_rotate_and_transform_list():
    doc = _doc('<path id="p" transform="rotate(90) translate(5)"/>')
    a, b, c, d, e, f = doc.root.find_by_id("p").ctm()
    assert (a, b, c, d) == pytest.approx((0.0, 1.0, -1.0, 0.0), abs=1e-12)
    # translate(5) is applied in the rotated frame
    assert (e, f) == pytest.approx((0.0, 5.0), abs=1e-12)


def test_malformed_transform_is_identity():
    doc = _doc('<path id="p" transform="translate(10"/>')
    assert doc.root.find_by_id("p").ctm() == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def test_path_data_for_shapes_only():
    doc = _doc('<g id="g"><rect id="r" width="10" height="5"/></g>')
    assert doc.root.find_by_id("g").path_data() == []
    types = [s.type for s in doc.root.find_by_id("r").path_data()]
    assert types == ["M", "L", "L", "L", "L", "Z"]


def test_parse_error():
    with pytest.raises(DocumentParseError):
        parse_document(b"<svg")


def test_accepts_str_and_bytes():
    raw = f'<svg {SVG_NS}><path id="p"/></svg>'
    assert parse_document(raw).root.find_by_id("p") is not None
    assert parse_document(raw.encode()).root.find_by_id("p") is not None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("url(#c)", "c"),
        ('url("#c")', "c"),
        ("url('#clip-1')", "clip-1"),
        ("url( #c )", "c"),
        ("url(c)", None),
        ("url(other.svg#c)", None),
        ("none", None),
        (None, None),
    ],
)
def test_clip_path_id(value, expected):
    assert clip_path_id(value) == expected


def test_parse_style_attribute_skips_garbage():
    assert parse_style_attribute("fill: red; bogus; stroke : blue !important;") == {
        "fill": "red",
        "stroke": "blue",
    }
