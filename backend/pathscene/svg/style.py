"""Computed style lookup for the handful of properties the engine reads.

Sources, lowest to highest precedence: initial value, inherited value (for
inherited properties), presentation attribute, inline ``style`` declaration.
``<style>`` sheets are not applied.
"""

from __future__ import annotations

import re

INHERITED_PROPERTIES = frozenset({"fill", "stroke", "fill-rule", "stroke-width", "color"})

INITIAL_VALUES: dict[str, str] = {
    "fill": "black",
    "stroke": "none",
    "fill-rule": "nonzero",
    "stroke-width": "1",
    "clip-path": "none",
    "color": "black",
}

INHERIT = "inherit"

_CLIP_URL_RE = re.compile(r"""^url\(\s*(["']?)#([^"')\s]+)\1\s*\)$""")


def parse_style_attribute(line: str | None) -> dict[str, str]:
    """Parse ``a: b; c: d`` declarations. Malformed declarations are skipped."""
    if not line:
        return {}
    out: dict[str, str] = {}
    for decl in line.split(";"):
        if ":" not in decl:
            continue
        key, value = decl.split(":", 1)
        key, value = key.strip().lower(), value.strip()
        if value.endswith("!important"):
            value = value[: -len("!important")].strip()
        if key and value:
            out[key] = value
    return out


def specified_value(attributes: dict[str, str], declarations: dict[str, str], name: str) -> str | None:
    """Value set directly on an element, ``INHERIT``, or None when unset."""
    value = declarations.get(name)
    if value is None:
        value = attributes.get(name)
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return value


def clip_path_id(value: str | None) -> str | None:
    """Extract ``id`` from ``url(#id)`` / ``url("#id")``. None if not a local reference."""
    if not value:
        return None
    m = _CLIP_URL_RE.match(value.strip())
    if m is None:
        return None
    return m.group(2)
