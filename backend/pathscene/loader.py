"""SvgLoader — the caller-facing load / partition surface.

Usage:
    loader = SvgLoader(client)
    loader.scale = 2.0
    loader.load(svg_bytes)
    result = await loader.partition()      # all paths
    single = await loader.partition(3)     # just the fourth path
"""

from __future__ import annotations

import logging
from collections.abc import Coroutine
from typing import Any

from pathscene.config import settings
from pathscene.engine.assembler import PathRecord, Scene, SceneAssembler
from pathscene.engine.config import SceneConfig
from pathscene.engine.instances import PathInstance
from pathscene.engine.tasks import RenderTask
from pathscene.partition.client import PartitionClient, PartitionResult
from pathscene.svg.document import DocumentNode, parse_document
from pathscene.utils.geometry import BoundingBox

logger = logging.getLogger(__name__)


class SceneNotLoadedError(RuntimeError):
    pass


class SvgLoader:
    """Holds the current scene. Every load replaces it wholesale."""

    def __init__(
        self,
        client: PartitionClient | None = None,
        scale: float | None = None,
        bounds_seed_origin: bool | None = None,
    ) -> None:
        self.client = client
        self.scale = settings.default_scale if scale is None else scale
        self.bounds_seed_origin = (
            settings.bounds_seed_origin if bounds_seed_origin is None else bounds_seed_origin
        )
        self._scene: Scene | None = None

    @property
    def scene(self) -> Scene:
        if self._scene is None:
            raise SceneNotLoadedError("No document loaded")
        return self._scene

    @property
    def is_loaded(self) -> bool:
        return self._scene is not None

    @property
    def render_tasks(self) -> tuple[RenderTask, ...]:
        return self.scene.render_tasks

    @property
    def path_instances(self) -> tuple[PathInstance, ...]:
        return self.scene.path_instances

    @property
    def paths(self) -> tuple[PathRecord, ...]:
        return self.scene.paths

    @property
    def path_bounds(self) -> tuple[BoundingBox, ...]:
        return self.scene.path_bounds

    @property
    def svg_bounds(self) -> BoundingBox:
        return self.scene.bounds

    def load(self, raw: bytes | str) -> Scene:
        """Parse a document and rebuild all scene state from it."""
        doc = parse_document(raw)
        return self.attach(doc.root)

    def attach(self, root: DocumentNode) -> Scene:
        config = SceneConfig(scale=self.scale, bounds_seed_origin=self.bounds_seed_origin)
        logger.debug("Attaching <%s> at scale %.3f", root.tag, self.scale)
        self._scene = SceneAssembler(config).assemble(root)
        return self._scene

    def partition(self, path_index: int | None = None) -> Coroutine[Any, Any, PartitionResult]:
        """Partition every path, or just the one at ``path_index``.

        The payload is built immediately; the returned coroutine only performs
        the round trip, so loading another document meanwhile does not affect it.
        """
        if self.client is None:
            raise RuntimeError("SvgLoader has no partition client")
        request = self.scene.build_request(path_index)
        return SceneAssembler.submit(self.client, request)
