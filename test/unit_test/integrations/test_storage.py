"""Unit tests for the object storage client."""

from typing import List

import httpx
import pytest

from unthink.core.errors import ExternalServiceError
from unthink.integrations import StorageClient

BASE_URL = "http://mock-storage"


def _client(handler) -> StorageClient:
    return StorageClient(
        BASE_URL + "/",
        service_key="service-key",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestStorageClientUpload:
    async def test_upload_posts_bytes_with_headers(self):
        seen: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"Key": "images/a.png"})

        client = _client(handler)
        try:
            path = await client.upload("images", "a.png", b"\x89PNG", content_type="image/png")
        finally:
            await client.aclose()

        assert path == "a.png"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/storage/v1/object/images/a.png"
        assert request.content == b"\x89PNG"
        assert request.headers["Content-Type"] == "image/png"
        assert request.headers["x-upsert"] == "false"
        assert request.headers["Authorization"] == "Bearer service-key"
        assert request.headers["apikey"] == "service-key"

    async def test_upsert_flag(self):
        seen: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = _client(handler)
        try:
            await client.upload("profiles", "u1/avatar.png", b"x", content_type="image/png", upsert=True)
        finally:
            await client.aclose()

        assert seen[0].headers["x-upsert"] == "true"

    async def test_http_error_becomes_external_service_error(self):
        client = _client(lambda request: httpx.Response(400, json={"error": "Bucket not found"}))
        try:
            with pytest.raises(ExternalServiceError) as excinfo:
                await client.upload("images", "a.png", b"x", content_type="image/png")
        finally:
            await client.aclose()

        assert excinfo.value.status_code == 400
        assert "Bucket not found" in excinfo.value.details

    async def test_transport_error_becomes_external_service_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)
        try:
            with pytest.raises(ExternalServiceError) as excinfo:
                await client.upload("images", "a.png", b"x", content_type="image/png")
        finally:
            await client.aclose()

        assert excinfo.value.status_code is None


def test_public_url_strips_trailing_slash():
    client = StorageClient(BASE_URL + "/")

    assert client.public_url("audio", "clip.mp3") == f"{BASE_URL}/storage/v1/object/public/audio/clip.mp3"


def test_no_auth_headers_without_service_key():
    client = StorageClient(BASE_URL)

    headers = client._headers("image/png", upsert=False)

    assert "Authorization" not in headers
    assert headers["Cache-Control"] == "max-age=3600"
