"""Render task sequence builder — the single-pass document traversal.

Walks the tree depth-first in document order and, in one pass:

  1. resolves clip-path references against clip definitions seen so far,
  2. opens a new render task at every clip boundary,
  3. appends one path instance per painted fill/stroke to the open task.

Each clip definition is fully materialized as its own Clip task before any
node referencing it is drawn, so nesting is expressed with a flat list.
"""

from __future__ import annotations

import enum
import logging

from pathscene.engine.context import TraversalContext
from pathscene.engine.instances import FillPath, PathInstance, StrokePath, resolve_paint
from pathscene.engine.tasks import RenderTask, RenderTaskType
from pathscene.svg.document import SHAPE_TAGS, DocumentNode
from pathscene.svg.style import clip_path_id

logger = logging.getLogger(__name__)

# Elements that never contribute geometry and are not descended into
_IGNORED_TAGS = frozenset({"style", "script", "title", "desc", "metadata"})


class NodeRole(enum.Enum):
    DRAWABLE = "drawable"
    CLIP_DEFINITION = "clip_definition"
    GROUP = "group"
    IGNORED = "ignored"


def classify(node: DocumentNode) -> NodeRole:
    """Decide a node's role once, from its tag."""
    if node.tag in SHAPE_TAGS:
        return NodeRole.DRAWABLE
    if node.tag == "clipPath":
        return NodeRole.CLIP_DEFINITION
    if node.tag in _IGNORED_TAGS:
        return NodeRole.IGNORED
    return NodeRole.GROUP


class RenderTaskSequenceBuilder:
    """Builds the render task list and flattened path instances for one document."""

    def __init__(self) -> None:
        self.ctx = TraversalContext()

    def build(self, root: DocumentNode) -> tuple[list[RenderTask], list[PathInstance]]:
        self.ctx = TraversalContext()
        self.ctx.open_task(RenderTaskType.COLOR)
        self._scan(root)
        tasks = self.ctx.finish()
        logger.info(
            "Traversal complete: %d path instances in %d render tasks (%d clip paths)",
            len(self.ctx.instances),
            len(tasks),
            len(self.ctx.clip_table),
        )
        return tasks, self.ctx.instances

    def _scan(self, node: DocumentNode) -> None:
        role = classify(node)
        if role is NodeRole.IGNORED:
            return

        clip_active = self._apply_clip(node)

        if role is NodeRole.DRAWABLE:
            fill = resolve_paint(node, "fill")
            if fill is not None:
                self.ctx.add_instance(FillPath.from_node(node, fill))
            stroke = resolve_paint(node, "stroke")
            if stroke is not None:
                self.ctx.add_instance(StrokePath.from_node(node, stroke))

        if role is NodeRole.CLIP_DEFINITION:
            index = self.ctx.open_task(RenderTaskType.CLIP)
            if node.id:
                self.ctx.clip_table.register(node.id, index)

        for child in node.children:
            self._scan(child)

        if clip_active or role is NodeRole.CLIP_DEFINITION:
            self.ctx.open_task(RenderTaskType.COLOR)

    def _apply_clip(self, node: DocumentNode) -> bool:
        """Point the open task at the node's clip mask. False if unresolved."""
        value = node.style("clip-path")
        if not value or value == "none":
            return False
        clip_id = clip_path_id(value)
        index = self.ctx.clip_table.lookup(clip_id)
        if index is None:
            logger.debug("Unresolved clip-path %r on <%s>, drawing unclipped", value, node.tag)
            return False
        self.ctx.set_clip(index)
        return True


def build_render_tasks(root: DocumentNode) -> tuple[list[RenderTask], list[PathInstance]]:
    return RenderTaskSequenceBuilder().build(root)
