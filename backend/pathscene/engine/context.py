"""TraversalContext — the state one document traversal mutates.

Built fresh per load and discarded once the render task and instance lists
have been produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pathscene.engine.instances import PathInstance
from pathscene.engine.tasks import (
    AlphaMaskCompositingOperation,
    ClipTable,
    IndexRange,
    RenderTask,
    RenderTaskType,
)

logger = logging.getLogger(__name__)


@dataclass
class TraversalContext:
    """Task arena, open-task cursor, flattened instances and clip table."""

    # Append-only during traversal; empty tasks are trimmed by finish()
    tasks: list[RenderTask] = field(default_factory=list)
    # Index into ``tasks`` of the currently open task
    cursor: int = -1
    instances: list[PathInstance] = field(default_factory=list)
    clip_table: ClipTable = field(default_factory=ClipTable)

    @property
    def current_task(self) -> RenderTask:
        return self.tasks[self.cursor]

    def open_task(self, task_type: RenderTaskType) -> int:
        """Append a task starting at the next instance and move the cursor to it.

        Instances added afterwards extend the new task; the previous task keeps
        its range. Returns the new cursor.
        """
        position = len(self.instances)
        self.tasks.append(RenderTask(task_type, IndexRange(position, position)))
        self.cursor = len(self.tasks) - 1
        return self.cursor

    def add_instance(self, instance: PathInstance) -> int:
        """Append an instance and extend the open task's range over it."""
        self.instances.append(instance)
        position = len(self.instances) - 1
        indices = self.current_task.instance_indices
        indices.end = max(indices.end, position + 1)
        return position

    def set_clip(self, clip_task_index: int) -> None:
        self.current_task.compositing_operation = AlphaMaskCompositingOperation(clip_task_index)

    def finish(self) -> list[RenderTask]:
        """Drop empty tasks and remap alpha-mask references to the trimmed indices.

        A reference that does not land on an earlier kept Clip task (the clip
        was empty, or a clip path references itself) loses its compositing
        operation, exactly like an unresolved clip-path reference.
        """
        remap: dict[int, int] = {}
        kept: list[RenderTask] = []
        for index, task in enumerate(self.tasks):
            if task.is_empty:
                continue
            remap[index] = len(kept)
            kept.append(task)

        for index, task in enumerate(kept):
            op = task.compositing_operation
            if op is None:
                continue
            new_index = remap.get(op.clip_task_index)
            if new_index is None:
                logger.debug("Dropping alpha mask: clip task %d is empty", op.clip_task_index)
                task.compositing_operation = None
            elif new_index >= index or kept[new_index].type is not RenderTaskType.CLIP:
                logger.debug("Dropping alpha mask: task %d cannot mask task %d", new_index, index)
                task.compositing_operation = None
            else:
                task.compositing_operation = AlphaMaskCompositingOperation(new_index)

        logger.debug("Render tasks: %d opened, %d kept", len(self.tasks), len(kept))
        return kept
