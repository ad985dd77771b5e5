"""Shared test fixtures."""

from __future__ import annotations

import pytest


SINGLE_FILL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M0 0 L10 0 L10 10 Z" fill="red"/>
</svg>'''

CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <clipPath id="c">
    <path d="M0 0 L5 0 L5 5 Z"/>
  </clipPath>
  <path d="M0 0 L10 0 L10 10 Z" fill="blue" style="clip-path: url(#c)"/>
</svg>'''

MISSING_CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M0 0 L10 0 L10 10 Z" fill="red" clip-path="url(#missing)"/>
</svg>'''

SCALED_STROKE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <g transform="scale(3)">
    <path d="M0 0 L1 1" fill="none" stroke="black" stroke-width="2px"/>
  </g>
</svg>'''

# Unclipped path, clip defined in <defs>, clipped group, trailing unclipped path
NESTED_CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M0 0 L10 0 L10 10 Z" fill="red"/>
  <defs>
    <clipPath id="a">
      <rect x="0" y="0" width="50" height="50"/>
    </clipPath>
  </defs>
  <g clip-path="url(#a)">
    <path d="M0 0 L20 0 L20 20 Z" fill="green"/>
    <path d="M5 5 L30 5 L30 30 Z" fill="green" stroke="black"/>
  </g>
  <path d="M60 60 L90 60 L90 90 Z" fill="blue"/>
</svg>'''

# No clip-path anywhere; nested groups and shapes
GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <title>groups</title>
  <g fill="orange">
    <rect x="10" y="10" width="20" height="20"/>
    <g transform="translate(40, 0)">
      <circle cx="10" cy="10" r="5" stroke="#333" stroke-width="2"/>
      <path d="M0 40 L10 40" fill="none" stroke="black"/>
    </g>
  </g>
  <ellipse cx="50" cy="80" rx="10" ry="5" fill="rgba(0, 0, 255, 0.5)"/>
  <polygon points="0,90 10,90 5,99" fill="none" stroke="none"/>
</svg>'''

EMPTY_CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <clipPath id="e"/>
  <path d="M0 0 L10 0 L10 10 Z" fill="red" clip-path="url(#e)"/>
</svg>'''

# Clip path whose content references the clip itself
SELF_CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <clipPath id="c">
    <path d="M0 0 L5 0 L5 5 Z" clip-path="url(#c)"/>
  </clipPath>
  <path d="M0 0 L10 0 L10 10 Z" fill="red" clip-path="url(#c)"/>
</svg>'''

EMPTY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"/>'''


@pytest.fixture
def single_fill_svg() -> str:
    return SINGLE_FILL_SVG


@pytest.fixture
def clip_svg() -> str:
    return CLIP_SVG


@pytest.fixture
def nested_clip_svg() -> str:
    return NESTED_CLIP_SVG


@pytest.fixture
def groups_svg() -> str:
    return GROUPS_SVG
