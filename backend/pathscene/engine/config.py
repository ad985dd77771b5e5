"""Scene configuration — controls output space and bounds behavior."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SceneConfig:
    """Knobs for one scene build."""

    # Uniform output scale applied after the Y-up flip
    scale: float = 1.0

    # Seed bounding boxes at the origin (legacy behavior) instead of empty
    bounds_seed_origin: bool = False
