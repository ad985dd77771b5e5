"""Mesh data handed back by the partition service.

Decoding the binary mesh format belongs to the renderer; the default decoder
only wraps the buffer so callers can plug in a real one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

MeshDecoder = Callable[[bytes], Any]


@dataclass(frozen=True)
class MeshData:
    buffer: bytes

    def __len__(self) -> int:
        return len(self.buffer)


def passthrough_decoder(buffer: bytes) -> MeshData:
    return MeshData(buffer)
