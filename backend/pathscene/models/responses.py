"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class BoundsModel(BaseModel):
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0


class SegmentModel(BaseModel):
    type: str
    values: list[float] = Field(default_factory=list)


class PathRecordModel(BaseModel):
    kind: dict[str, Any]
    segments: list[SegmentModel] = Field(default_factory=list)


class RenderTaskModel(BaseModel):
    type: str
    instance_indices: tuple[int, int]
    clip_task_index: int | None = None


class SceneResponse(BaseModel):
    render_tasks: list[RenderTaskModel] = Field(default_factory=list)
    paths: list[PathRecordModel] = Field(default_factory=list)
    path_bounds: list[BoundsModel] = Field(default_factory=list)
    bounds: BoundsModel = Field(default_factory=BoundsModel)
    processing_time_ms: float = 0.0
