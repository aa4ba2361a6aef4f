"""
Unit tests for media upload and text-to-speech endpoints.
"""

import base64

import pytest
from httpx import AsyncClient

from unthink.server.core.config import settings

pytestmark = pytest.mark.asyncio


class TestMediaUpload:
    async def test_upload_image(self, client: AsyncClient, auth, storage_stub):
        response = await client.post(
            "/api/v1/media/images",
            files={"file": ("cover.png", b"x" * 2048, "image/png")},
            headers=auth("alice"),
        )
        assert response.status_code == 201
        result = response.json()
        assert result["bucket"] == "images"
        assert result["formatted_size"] == "2 KB"
        assert result["url"].endswith(result["path"])
        assert len(storage_stub.requests) == 1

    async def test_unknown_bucket(self, client: AsyncClient, auth):
        response = await client.post(
            "/api/v1/media/documents",
            files={"file": ("cv.pdf", b"%PDF", "application/pdf")},
            headers=auth("alice"),
        )
        assert response.status_code == 422

    async def test_wrong_type(self, client: AsyncClient, auth):
        response = await client.post(
            "/api/v1/media/audio",
            files={"file": ("cover.png", b"x", "image/png")},
            headers=auth("alice"),
        )
        assert response.status_code == 415

    async def test_too_large(self, client: AsyncClient, auth, storage_stub):
        response = await client.post(
            "/api/v1/media/images",
            files={"file": ("huge.png", b"x" * (5 * 1024 * 1024 + 1), "image/png")},
            headers=auth("alice"),
        )
        assert response.status_code == 413
        assert "the limit is 5 MB" in response.json()["detail"]
        assert storage_stub.requests == []

    async def test_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/v1/media/images", files={"file": ("a.png", b"x", "image/png")})
        assert response.status_code == 401


class TestSpeech:
    async def test_voices(self, client: AsyncClient):
        voices = (await client.get("/api/v1/tts/voices")).json()
        assert [voice["id"] for voice in voices] == ["alloy", "echo", "fable", "onyx", "nova", "shimmer"]

    async def test_generate(self, client: AsyncClient, auth, functions_stub, storage_stub):
        functions_stub.responses[settings.functions.text_to_speech] = (
            200,
            {"audioContent": base64.b64encode(b"ID3").decode()},
        )

        response = await client.post(
            "/api/v1/tts", json={"text": "Hello there", "voice": "echo"}, headers=auth("alice")
        )

        assert response.status_code == 200
        assert response.json()["voice"] == "echo"
        assert "/public/audio/generated-audio-" in response.json()["url"]
        assert storage_stub.requests[0].content == b"ID3"

    async def test_function_failure(self, client: AsyncClient, auth, functions_stub):
        functions_stub.responses[settings.functions.text_to_speech] = (500, {"error": "quota exceeded"})

        response = await client.post("/api/v1/tts", json={"text": "Hello there"}, headers=auth("alice"))

        assert response.status_code == 502

    async def test_text_limit(self, client: AsyncClient, auth):
        response = await client.post("/api/v1/tts", json={"text": "x" * 4001}, headers=auth("alice"))
        assert response.status_code == 422
