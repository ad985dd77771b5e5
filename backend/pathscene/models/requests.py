"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SceneRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    scale: float | None = Field(default=None, description="Uniform output scale (defaults to settings)")


class PartitionPathsRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    scale: float | None = Field(default=None, description="Uniform output scale (defaults to settings)")
    path_index: int | None = Field(
        default=None,
        description="Partition only the path at this position in the flattened list",
    )
