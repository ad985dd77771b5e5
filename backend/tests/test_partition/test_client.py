"""Tests for the partition service client (httpx MockTransport, no network)."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from pathscene.engine.assembler import SceneAssembler
from pathscene.partition.client import PartitionClient, PartitionServiceError
from pathscene.partition.meshes import MeshData
from pathscene.svg.document import parse_document
from tests.conftest import SINGLE_FILL_SVG

BASE_URL = "http://partition.test"


def _request():
    scene = SceneAssembler().assemble(parse_document(SINGLE_FILL_SVG).root)
    return scene.build_request()


def _run(handler, request, **kwargs):
    async def go():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as http:
            client = PartitionClient(BASE_URL, http_client=http, **kwargs)
            return await client.partition(request)

    return asyncio.run(go())


def test_successful_partition():
    request = _request()
    seen = {}

    def handler(http_request):
        seen["path"] = http_request.url.path
        seen["content_type"] = http_request.headers["content-type"]
        seen["body"] = json.loads(http_request.content)
        return httpx.Response(200, content=b"\x01\x02\x03", headers={"Server-Timing": "partition;dur=12.5"})

    result = _run(handler, request)
    assert seen["path"] == "/partition-svg-paths"
    assert seen["content_type"] == "application/json"
    assert seen["body"] == request.to_dict()
    assert result.meshes == MeshData(b"\x01\x02\x03")
    assert len(result.meshes) == 3
    assert result.server_time_ms == 12.5
    assert result.buffer == b"\x01\x02\x03"


def test_custom_endpoint_and_decoder():
    def handler(http_request):
        assert http_request.url.path == "/v2/partition"
        return httpx.Response(200, content=b"abcd")

    result = _run(handler, _request(), endpoint="/v2/partition", decoder=len)
    assert result.meshes == 4
    assert result.server_time_ms == 0.0


def test_error_status_raises():
    def handler(http_request):
        return httpx.Response(500, text="boom")

    with pytest.raises(PartitionServiceError) as excinfo:
        _run(handler, _request())
    assert excinfo.value.status_code == 500
    assert "boom" in str(excinfo.value)


def test_transport_failure_propagates():
    def handler(http_request):
        raise httpx.ConnectError("connection refused", request=http_request)

    with pytest.raises(httpx.ConnectError):
        _run(handler, _request())


def test_decoder_failure_propagates():
    def handler(http_request):
        return httpx.Response(200, content=b"\x00")

    def bad_decoder(buffer):
        raise ValueError("truncated mesh")

    with pytest.raises(ValueError, match="truncated mesh"):
        _run(handler, _request(), decoder=bad_decoder)


def test_owned_client_closes():
    async def go():
        client = PartitionClient(BASE_URL)
        async with client:
            pass
        return client._client.is_closed

    assert asyncio.run(go())
