"""FastAPI dependency injection."""

from __future__ import annotations

from collections.abc import AsyncIterator

from pathscene.config import settings
from pathscene.partition.client import PartitionClient


async def get_partition_client() -> AsyncIterator[PartitionClient]:
    async with PartitionClient(
        settings.partition_service_url,
        endpoint=settings.partition_endpoint,
    ) as client:
        yield client
