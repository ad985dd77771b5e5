"""Scene assembler — traversal, geometry extraction and partition payloads.

The synchronous phase (``assemble``) produces an immutable Scene. The
asynchronous phase (``submit``) only ever sees a PartitionRequest built from
that Scene, so a pending round trip cannot observe a later load.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathscene.engine.builder import RenderTaskSequenceBuilder
from pathscene.engine.config import SceneConfig
from pathscene.engine.geometry_transform import effective_matrix, transform_segments
from pathscene.engine.instances import PathInstance
from pathscene.engine.tasks import RenderTask
from pathscene.svg.document import DocumentNode
from pathscene.svg.segments import PathSegment
from pathscene.utils.geometry import BoundingBox, BoundsAccumulator

if TYPE_CHECKING:
    from pathscene.partition.client import PartitionClient, PartitionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathRecord:
    """Geometry plus kind for one retained path instance, in scene space."""

    kind: dict
    segments: tuple[PathSegment, ...] = ()

    def to_dict(self) -> dict:
        return {"kind": self.kind, "segments": [s.to_dict() for s in self.segments]}


@dataclass(frozen=True)
class PartitionRequest:
    """Payload for the partition service. Bounds are never sent."""

    paths: tuple[PathRecord, ...] = ()

    def to_dict(self) -> dict:
        return {"paths": [p.to_dict() for p in self.paths]}


@dataclass(frozen=True)
class Scene:
    """Everything one load produces."""

    render_tasks: tuple[RenderTask, ...] = ()
    path_instances: tuple[PathInstance, ...] = ()
    paths: tuple[PathRecord, ...] = ()
    path_bounds: tuple[BoundingBox, ...] = ()
    bounds: BoundingBox = field(default_factory=BoundingBox)

    @property
    def num_paths(self) -> int:
        return len(self.paths)

    def build_request(self, path_index: int | None = None) -> PartitionRequest:
        """All records, or only the one at ``path_index``. Raises IndexError if out of range."""
        if path_index is None:
            return PartitionRequest(self.paths)
        if not 0 <= path_index < len(self.paths):
            raise IndexError(f"Path index {path_index} out of range (0..{len(self.paths) - 1})")
        return PartitionRequest((self.paths[path_index],))


class SceneAssembler:
    """Orchestrates traversal and geometry extraction for one document."""

    def __init__(self, config: SceneConfig | None = None) -> None:
        self.config = config or SceneConfig()

    def assemble(self, root: DocumentNode) -> Scene:
        start = time.perf_counter()

        tasks, instances = RenderTaskSequenceBuilder().build(root)

        records: list[PathRecord] = []
        path_bounds: list[BoundingBox] = []
        scene_bounds = BoundsAccumulator(seed_origin=self.config.bounds_seed_origin)

        for instance in instances:
            matrix = effective_matrix(instance.node.ctm(), self.config.scale)
            acc = BoundsAccumulator(seed_origin=self.config.bounds_seed_origin)
            segments = transform_segments(instance.node.path_data(), matrix, acc)
            scene_bounds.merge(acc)
            records.append(PathRecord(kind=instance.kind(), segments=tuple(segments)))
            path_bounds.append(acc.box())

        scene = Scene(
            render_tasks=tuple(tasks),
            path_instances=tuple(instances),
            paths=tuple(records),
            path_bounds=tuple(path_bounds),
            bounds=scene_bounds.box(),
        )
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Scene assembled: %d paths, %d render tasks, bounds %s in %.1fms",
            scene.num_paths,
            len(scene.render_tasks),
            scene.bounds.as_tuple(),
            elapsed,
        )
        return scene

    @staticmethod
    async def submit(client: PartitionClient, request: PartitionRequest) -> PartitionResult:
        """Send a payload to the partition service. Failures propagate unmodified."""
        return await client.partition(request)
