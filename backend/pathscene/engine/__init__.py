"""PathScene render task and geometry engine."""

from pathscene.engine.assembler import PartitionRequest, PathRecord, Scene, SceneAssembler
from pathscene.engine.builder import NodeRole, RenderTaskSequenceBuilder, build_render_tasks
from pathscene.engine.config import SceneConfig
from pathscene.engine.instances import FillPath, FillRule, PathInstance, StrokePath
from pathscene.engine.tasks import (
    AlphaMaskCompositingOperation,
    ClipTable,
    IndexRange,
    RenderTask,
    RenderTaskType,
)

__all__ = [
    "PartitionRequest",
    "PathRecord",
    "Scene",
    "SceneAssembler",
    "NodeRole",
    "RenderTaskSequenceBuilder",
    "build_render_tasks",
    "SceneConfig",
    "FillPath",
    "FillRule",
    "PathInstance",
    "StrokePath",
    "AlphaMaskCompositingOperation",
    "ClipTable",
    "IndexRange",
    "RenderTask",
    "RenderTaskType",
]
