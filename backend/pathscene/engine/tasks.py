"""Render tasks — compositing passes in draw order — and the clip table."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class RenderTaskType(str, enum.Enum):
    COLOR = "color"
    CLIP = "clip"


@dataclass
class IndexRange:
    """Half-open range [start, end) into the flattened path instance list."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def __contains__(self, index: int) -> bool:
        return self.start <= index < self.end


@dataclass(frozen=True)
class AlphaMaskCompositingOperation:
    """Draw the owning task through the alpha mask produced by a Clip task."""

    clip_task_index: int


@dataclass
class RenderTask:
    type: RenderTaskType
    instance_indices: IndexRange
    compositing_operation: AlphaMaskCompositingOperation | None = None

    @property
    def is_empty(self) -> bool:
        return self.instance_indices.is_empty


@dataclass
class ClipTable:
    """clip-path id → index of the Clip render task holding its mask contents."""

    _entries: dict[str, int] = field(default_factory=dict)

    def register(self, clip_id: str, task_index: int) -> None:
        self._entries[clip_id] = task_index

    def lookup(self, clip_id: str | None) -> int | None:
        if clip_id is None:
            return None
        return self._entries.get(clip_id)

    def __len__(self) -> int:
        return len(self._entries)
