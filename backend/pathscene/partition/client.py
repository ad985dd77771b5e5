"""Async client for the partition service (httpx).

One POST per call, no retries, no timeout. Callers needing either wrap the
coroutine themselves (``asyncio.wait_for``, task cancellation).
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from pathscene.partition.meshes import MeshDecoder, passthrough_decoder
from pathscene.partition.timing import parse_server_timing

if TYPE_CHECKING:
    from pathscene.engine.assembler import PartitionRequest

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "/partition-svg-paths"


class PartitionServiceError(Exception):
    """The partition service answered with a non-success status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        detail = f": {message}" if message else ""
        super().__init__(f"Partition service returned {status_code}{detail}")
        self.status_code = status_code
        self.message = message


@dataclass(frozen=True)
class PartitionResult:
    meshes: Any
    # Server-reported partitioning time in milliseconds (0.0 if not reported)
    server_time_ms: float = 0.0
    # Raw response body, as received
    buffer: bytes = b""


class PartitionClient:
    """Submits path payloads and decodes the returned mesh data."""

    def __init__(
        self,
        base_url: str,
        endpoint: str = DEFAULT_ENDPOINT,
        decoder: MeshDecoder | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.decoder = decoder or passthrough_decoder
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(base_url=base_url, timeout=None)

    async def __aenter__(self) -> PartitionClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def partition(self, request: PartitionRequest) -> PartitionResult:
        body = json.dumps(request.to_dict())
        start = time.perf_counter()

        response = await self._client.post(
            self.endpoint,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        if not response.is_success:
            raise PartitionServiceError(response.status_code, response.text)

        server_time = parse_server_timing(response.headers)
        buffer = response.content
        meshes = self.decoder(buffer)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Partitioned %d paths: %d bytes, server %.1fms, round trip %.1fms",
            len(request.paths),
            len(buffer),
            server_time,
            elapsed,
        )
        return PartitionResult(meshes=meshes, server_time_ms=server_time, buffer=buffer)
