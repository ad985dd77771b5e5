"""Tests for stroke width resolution and fill rules."""

from __future__ import annotations

import pytest

from pathscene.engine.instances import FillRule, parse_stroke_width

IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def test_unitless_width():
    assert parse_stroke_width("2", IDENTITY) == 2.0


def test_px_width_scales_by_mean_of_a_and_d():
    assert parse_stroke_width("2px", (2.0, 0.0, 0.0, 4.0, 0.0, 0.0)) == pytest.approx(6.0)


def test_absolute_units_convert_to_px():
    assert parse_stroke_width("1in", IDENTITY) == pytest.approx(96.0)
    assert parse_stroke_width("72pt", (2.0, 0.0, 0.0, 2.0, 0.0, 0.0)) == pytest.approx(192.0)


def test_relative_units_keep_number():
    assert parse_stroke_width("50%", (3.0, 0.0, 0.0, 3.0, 0.0, 0.0)) == 50.0
    assert parse_stroke_width("1.5em", (3.0, 0.0, 0.0, 3.0, 0.0, 0.0)) == 1.5


def test_leading_dot():
    assert parse_stroke_width(".5", IDENTITY) == 0.5


def test_unparseable_width_is_zero():
    assert parse_stroke_width("abc", IDENTITY) == 0.0
    assert parse_stroke_width("-1", IDENTITY) == 0.0
    assert parse_stroke_width(None, IDENTITY) == 0.0


def test_fill_rule_from_css():
    assert FillRule.from_css("evenodd") is FillRule.EVEN_ODD
    assert FillRule.from_css("nonzero") is FillRule.WINDING
    assert FillRule.from_css(None) is FillRule.WINDING
