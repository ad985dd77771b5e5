"""POST /api/scene and POST /api/partition — build a scene, optionally partition it."""

from __future__ import annotations

import logging
import time

import httpx
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from pathscene.dependencies import get_partition_client
from pathscene.engine.assembler import Scene
from pathscene.loader import SvgLoader
from pathscene.models.requests import PartitionPathsRequest, SceneRequest
from pathscene.models.responses import (
    BoundsModel,
    PathRecordModel,
    RenderTaskModel,
    SceneResponse,
    SegmentModel,
)
from pathscene.partition.client import PartitionClient, PartitionServiceError
from pathscene.partition.timing import SERVER_TIMING_HEADER
from pathscene.svg.document import DocumentParseError
from pathscene.utils.geometry import BoundingBox

logger = logging.getLogger(__name__)

router = APIRouter()


def _bounds(box: BoundingBox) -> BoundsModel:
    return BoundsModel(min_x=box.min_x, min_y=box.min_y, max_x=box.max_x, max_y=box.max_y)


def _scene_response(scene: Scene, elapsed_ms: float) -> SceneResponse:
    return SceneResponse(
        render_tasks=[
            RenderTaskModel(
                type=task.type.value,
                instance_indices=(task.instance_indices.start, task.instance_indices.end),
                clip_task_index=(
                    task.compositing_operation.clip_task_index
                    if task.compositing_operation is not None
                    else None
                ),
            )
            for task in scene.render_tasks
        ],
        paths=[
            PathRecordModel(
                kind=record.kind,
                segments=[SegmentModel(type=s.type, values=list(s.values)) for s in record.segments],
            )
            for record in scene.paths
        ],
        path_bounds=[_bounds(b) for b in scene.path_bounds],
        bounds=_bounds(scene.bounds),
        processing_time_ms=round(elapsed_ms, 1),
    )


def _load(loader: SvgLoader, svg: str) -> Scene:
    try:
        return loader.load(svg)
    except DocumentParseError as e:
        raise HTTPException(status_code=400, detail=f"Invalid SVG: {e}") from e


@router.post("/scene", response_model=SceneResponse)
async def scene(req: SceneRequest) -> SceneResponse:
    start = time.perf_counter()
    loader = SvgLoader(scale=req.scale)
    built = _load(loader, req.svg)
    elapsed = (time.perf_counter() - start) * 1000
    return _scene_response(built, elapsed)


@router.post("/partition")
async def partition(
    req: PartitionPathsRequest,
    client: PartitionClient = Depends(get_partition_client),
) -> Response:
    loader = SvgLoader(client, scale=req.scale)
    _load(loader, req.svg)

    try:
        pending = loader.partition(req.path_index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    try:
        result = await pending
    except PartitionServiceError as e:
        logger.warning("Partition service failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e)) from e
    except httpx.HTTPError as e:
        logger.warning("Partition service unreachable: %s", e)
        raise HTTPException(status_code=502, detail=f"Partition service unreachable: {e}") from e

    return Response(
        content=result.buffer,
        media_type="application/octet-stream",
        headers={SERVER_TIMING_HEADER: f"partition;dur={result.server_time_ms}"},
    )
