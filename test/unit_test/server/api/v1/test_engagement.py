"""
Unit tests for hearts, comments, reposts, follows and the reading list endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BODY = "A considered paragraph about changing one's mind. " * 3


@pytest.fixture
async def essay_id(client: AsyncClient, auth) -> str:
    response = await client.post(
        "/api/v1/essays",
        json={"title": "On changing my mind", "content": BODY, "published": True},
        headers=auth("alice"),
    )
    return response.json()["id"]


class TestHearts:
    async def test_toggle(self, client: AsyncClient, auth, essay_id):
        payload = {"target_kind": "essay", "target_id": essay_id}

        first = await client.post("/api/v1/hearts/toggle", json=payload, headers=auth("bob"))
        second = await client.post("/api/v1/hearts/toggle", json=payload, headers=auth("bob"))

        assert first.json() == {"hearted": True, "hearts_count": 1}
        assert second.json() == {"hearted": False, "hearts_count": 0}

    async def test_unknown_target(self, client: AsyncClient, auth):
        response = await client.post(
            "/api/v1/hearts/toggle", json={"target_kind": "comment", "target_id": "missing"}, headers=auth("bob")
        )
        assert response.status_code == 404

    async def test_invalid_kind(self, client: AsyncClient, auth):
        response = await client.post(
            "/api/v1/hearts/toggle", json={"target_kind": "podcast", "target_id": "x"}, headers=auth("bob")
        )
        assert response.status_code == 422


class TestComments:
    async def test_thread(self, client: AsyncClient, auth, essay_id):
        root = await client.post(
            "/api/v1/comments",
            json={"target_kind": "essay", "target_id": essay_id, "content": "Great read"},
            headers=auth("bob"),
        )
        assert root.status_code == 201
        root_id = root.json()["id"]
        assert root.json()["thread_id"] == root_id

        reply = await client.post(
            f"/api/v1/comments/{root_id}/replies", json={"content": "Thank you"}, headers=auth("alice")
        )
        assert reply.status_code == 201
        assert reply.json()["depth"] == 1

        tree = (await client.get(f"/api/v1/comments/essay/{essay_id}")).json()
        assert [node["id"] for node in tree] == [root_id]
        assert tree[0]["replies"][0]["content"] == "Thank you"

        article = (await client.get(f"/api/v1/essays/{essay_id}")).json()
        assert article["comments_count"] == 2

    async def test_delete(self, client: AsyncClient, auth, essay_id):
        root = await client.post(
            "/api/v1/comments",
            json={"target_kind": "essay", "target_id": essay_id, "content": "Great read"},
            headers=auth("bob"),
        )
        root_id = root.json()["id"]

        assert (await client.delete(f"/api/v1/comments/{root_id}", headers=auth("alice"))).status_code == 403
        assert (await client.delete(f"/api/v1/comments/{root_id}", headers=auth("bob"))).status_code == 204
        assert (await client.get(f"/api/v1/comments/essay/{essay_id}")).json() == []

    async def test_blank_comment(self, client: AsyncClient, auth, essay_id):
        response = await client.post(
            "/api/v1/comments",
            json={"target_kind": "essay", "target_id": essay_id, "content": "   "},
            headers=auth("bob"),
        )
        assert response.status_code == 422


class TestReposts:
    async def test_create_and_delete(self, client: AsyncClient, auth, essay_id):
        response = await client.post(
            "/api/v1/reposts",
            json={"target_kind": "essay", "target_id": essay_id, "comment_text": "Worth it"},
            headers=auth("bob"),
        )
        assert response.status_code == 201
        repost = response.json()
        assert repost["essay_id"] == essay_id
        assert repost["comment_text"] == "Worth it"

        assert (await client.delete(f"/api/v1/reposts/{repost['id']}", headers=auth("carol"))).status_code == 403
        assert (await client.delete(f"/api/v1/reposts/{repost['id']}", headers=auth("bob"))).status_code == 204


class TestFollows:
    async def test_follow_flow(self, client: AsyncClient, auth):
        response = await client.post("/api/v1/follows/alice", headers=auth("bob"))
        assert response.status_code == 201
        assert response.json()["following_id"] == "alice"

        duplicate = await client.post("/api/v1/follows/alice", headers=auth("bob"))
        assert duplicate.status_code == 409

        followers = (await client.get("/api/v1/follows/alice/followers")).json()
        following = (await client.get("/api/v1/follows/bob/following")).json()
        assert [author["id"] for author in followers] == ["bob"]
        assert [author["id"] for author in following] == ["alice"]

        assert (await client.delete("/api/v1/follows/alice", headers=auth("bob"))).status_code == 204
        assert (await client.delete("/api/v1/follows/alice", headers=auth("bob"))).status_code == 404

    async def test_cannot_follow_self(self, client: AsyncClient, auth):
        response = await client.post("/api/v1/follows/alice", headers=auth("alice"))
        assert response.status_code == 422
        assert response.json() == {"detail": "You cannot follow yourself"}


class TestReadingList:
    async def test_save_list_remove(self, client: AsyncClient, auth, essay_id):
        saved = await client.post(f"/api/v1/reading-list/{essay_id}", headers=auth("bob"))
        assert saved.status_code == 201
        assert saved.json()["essay_id"] == essay_id
        assert set(saved.json()) == {"id", "essay_id", "saved_at"}

        assert (await client.post(f"/api/v1/reading-list/{essay_id}", headers=auth("bob"))).status_code == 409

        items = (await client.get("/api/v1/reading-list", headers=auth("bob"))).json()
        assert [item["essay"]["id"] for item in items] == [essay_id]

        assert (await client.delete(f"/api/v1/reading-list/{essay_id}", headers=auth("bob"))).status_code == 204
        assert (await client.get("/api/v1/reading-list", headers=auth("bob"))).json() == []

    async def test_requires_auth(self, client: AsyncClient):
        assert (await client.get("/api/v1/reading-list")).status_code == 401
