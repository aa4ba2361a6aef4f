"""
Unit tests for the essay, hot take and belief card endpoints.

Requests go through the full application with an in-memory database, so
validation, authentication and error mapping are exercised together.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BODY = "A considered paragraph about changing one's mind. " * 3


async def _create_essay(client: AsyncClient, headers, **overrides) -> dict:
    payload = {"title": "On changing my mind", "content": BODY, "published": True, "tags": ["Philosophy"]}
    payload.update(overrides)
    response = await client.post("/api/v1/essays", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestEssays:
    async def test_create_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/v1/essays", json={"title": "t", "content": BODY})
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_invalid_token(self, client: AsyncClient):
        response = await client.get("/api/v1/essays", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    async def test_create_and_read(self, client: AsyncClient, auth):
        essay = await _create_essay(client, auth("alice"))
        assert essay["user_id"] == "alice"
        assert essay["status"] == "published"
        assert essay["excerpt"] == BODY.strip()

        response = await client.get(f"/api/v1/essays/{essay['id']}")
        assert response.status_code == 200
        article = response.json()
        assert article["author"] == {"id": "alice", "display_name": "Anonymous", "avatar_url": None}
        assert article["hearts_count"] == 0
        assert article["is_hearted"] is False

    async def test_short_essay_rejected(self, client: AsyncClient, auth):
        response = await client.post(
            "/api/v1/essays", json={"title": "Too short", "content": "Not enough"}, headers=auth("alice")
        )
        assert response.status_code == 422

    async def test_short_spark_accepted(self, client: AsyncClient, auth):
        spark = await _create_essay(client, auth("alice"), content="Quick thought", post_type="text")
        assert spark["post_type"] == "text"

    async def test_drafts_are_private(self, client: AsyncClient, auth):
        draft = await _create_essay(client, auth("alice"), published=False)

        assert (await client.get(f"/api/v1/essays/{draft['id']}")).status_code == 404
        assert (await client.get(f"/api/v1/essays/{draft['id']}", headers=auth("bob"))).status_code == 404
        own = await client.get(f"/api/v1/essays/{draft['id']}", headers=auth("alice"))
        assert own.status_code == 200
        assert own.json()["status"] == "draft"

        drafts = await client.get("/api/v1/essays/drafts", headers=auth("alice"))
        assert [item["id"] for item in drafts.json()] == [draft["id"]]
        assert (await client.get("/api/v1/essays")).json() == []

    async def test_list_filters(self, client: AsyncClient, auth):
        art = await _create_essay(client, auth("alice"), tags=["Art"])
        await _create_essay(client, auth("bob"), tags=["Art"])
        await _create_essay(client, auth("alice"), tags=["Career"])

        response = await client.get("/api/v1/essays", params={"author_id": "alice", "tag": "Art"})
        assert [item["id"] for item in response.json()] == [art["id"]]
        assert len((await client.get("/api/v1/essays", params={"limit": 2})).json()) == 2

    async def test_update(self, client: AsyncClient, auth):
        essay = await _create_essay(client, auth("alice"))

        response = await client.patch(
            f"/api/v1/essays/{essay['id']}", json={"title": "Revised"}, headers=auth("alice")
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Revised"

        forbidden = await client.patch(f"/api/v1/essays/{essay['id']}", json={"title": "Mine"}, headers=auth("bob"))
        assert forbidden.status_code == 403
        assert forbidden.json() == {"detail": "You can only modify your own essays"}

        invalid = await client.patch(
            f"/api/v1/essays/{essay['id']}", json={"content": "short"}, headers=auth("alice")
        )
        assert invalid.status_code == 422

    async def test_delete(self, client: AsyncClient, auth):
        essay = await _create_essay(client, auth("alice"))

        assert (await client.delete(f"/api/v1/essays/{essay['id']}", headers=auth("bob"))).status_code == 403
        assert (await client.delete(f"/api/v1/essays/{essay['id']}", headers=auth("alice"))).status_code == 204
        assert (await client.get(f"/api/v1/essays/{essay['id']}")).status_code == 404


class TestHotTakes:
    async def test_lifecycle(self, client: AsyncClient, auth):
        response = await client.post(
            "/api/v1/hot-takes", json={"statement": "  Most meetings should be documents  "}, headers=auth("alice")
        )
        assert response.status_code == 201
        hot_take = response.json()
        assert hot_take["statement"] == "Most meetings should be documents"

        detail = await client.get(f"/api/v1/hot-takes/{hot_take['id']}")
        assert detail.json()["comments_count"] == 0

        listed = await client.get("/api/v1/hot-takes", params={"author_id": "alice"})
        assert [item["id"] for item in listed.json()] == [hot_take["id"]]

        assert (await client.delete(f"/api/v1/hot-takes/{hot_take['id']}", headers=auth("alice"))).status_code == 204
        assert (await client.get(f"/api/v1/hot-takes/{hot_take['id']}")).status_code == 404

    async def test_statement_length(self, client: AsyncClient, auth):
        too_short = await client.post("/api/v1/hot-takes", json={"statement": "Too short"}, headers=auth("alice"))
        too_long = await client.post("/api/v1/hot-takes", json={"statement": "x" * 501}, headers=auth("alice"))
        assert too_short.status_code == 422
        assert too_long.status_code == 422


class TestBeliefCards:
    async def test_lifecycle(self, client: AsyncClient, auth):
        payload = {
            "previous_belief": "Remote work kills collaboration.",
            "current_belief": "Remote work changes how collaboration happens.",
            "explanation": "Two years of working remotely.",
            "date_changed": "2025-03-01",
            "tags": ["Work"],
        }
        response = await client.post("/api/v1/belief-cards", json=payload, headers=auth("alice"))
        assert response.status_code == 201
        card = response.json()
        assert card["date_changed"] == "2025-03-01"

        detail = await client.get(f"/api/v1/belief-cards/{card['id']}", headers=auth("bob"))
        assert detail.json()["author"]["id"] == "alice"

        listed = await client.get("/api/v1/belief-cards", params={"tag": "Work"})
        assert len(listed.json()) == 1

        assert (await client.delete(f"/api/v1/belief-cards/{card['id']}", headers=auth("bob"))).status_code == 403

    async def test_beliefs_need_ten_characters(self, client: AsyncClient, auth):
        response = await client.post(
            "/api/v1/belief-cards",
            json={"previous_belief": "short", "current_belief": "Long enough belief"},
            headers=auth("alice"),
        )
        assert response.status_code == 422
