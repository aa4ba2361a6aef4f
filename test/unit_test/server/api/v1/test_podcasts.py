"""
Unit tests for podcast and episode endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _podcast(client: AsyncClient, headers, **overrides) -> dict:
    payload = {"title": "Changing Minds", "category": "Society & Culture"}
    payload.update(overrides)
    response = await client.post("/api/v1/podcasts", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_categories_and_languages(client: AsyncClient):
    categories = (await client.get("/api/v1/podcasts/categories")).json()
    languages = (await client.get("/api/v1/podcasts/languages")).json()

    assert "Society & Culture" in categories
    assert "True Crime" in categories
    assert languages[0] == "en"


async def test_invalid_category(client: AsyncClient, auth):
    response = await client.post(
        "/api/v1/podcasts", json={"title": "Show", "category": "Gardening"}, headers=auth("alice")
    )
    assert response.status_code == 422


async def test_podcast_lifecycle(client: AsyncClient, auth):
    podcast = await _podcast(client, auth("alice"), language="de")
    assert podcast["language"] == "de"

    mine = (await client.get("/api/v1/podcasts", headers=auth("alice"))).json()
    assert [item["id"] for item in mine] == [podcast["id"]]

    updated = await client.patch(
        f"/api/v1/podcasts/{podcast['id']}", json={"title": "Minds, Changed"}, headers=auth("alice")
    )
    assert updated.json()["title"] == "Minds, Changed"

    forbidden = await client.patch(f"/api/v1/podcasts/{podcast['id']}", json={"title": "Mine"}, headers=auth("bob"))
    assert forbidden.status_code == 403

    assert (await client.delete(f"/api/v1/podcasts/{podcast['id']}", headers=auth("alice"))).status_code == 204
    assert (await client.get(f"/api/v1/podcasts/{podcast['id']}")).status_code == 404


async def test_episodes(client: AsyncClient, auth):
    podcast = await _podcast(client, auth("alice"))

    response = await client.post(
        "/api/v1/episodes",
        json={
            "podcast_id": podcast["id"],
            "title": "Pilot",
            "audio_method": "url",
            "external_audio_url": "https://cdn.example.com/pilot.mp3",
            "duration": "45:30",
        },
        headers=auth("alice"),
    )
    assert response.status_code == 201
    episode = response.json()
    assert episode["duration"] == 2730
    assert episode["formatted_duration"] == "45:30"
    assert episode["audio_url"] is None

    listed = (await client.get(f"/api/v1/podcasts/{podcast['id']}/episodes")).json()
    assert [item["id"] for item in listed] == [episode["id"]]
    assert (await client.get(f"/api/v1/podcasts/{podcast['id']}")).json()["episode_count"] == 1

    recent = (await client.get("/api/v1/episodes/recent", headers=auth("alice"))).json()
    assert recent[0]["podcast_title"] == "Changing Minds"

    assert (await client.delete(f"/api/v1/episodes/{episode['id']}", headers=auth("bob"))).status_code == 403
    assert (await client.delete(f"/api/v1/episodes/{episode['id']}", headers=auth("alice"))).status_code == 204


async def test_episode_with_bad_duration(client: AsyncClient, auth):
    podcast = await _podcast(client, auth("alice"))

    response = await client.post(
        "/api/v1/episodes",
        json={"podcast_id": podcast["id"], "title": "Pilot", "duration": "1:2:3:4"},
        headers=auth("alice"),
    )
    assert response.status_code == 422
