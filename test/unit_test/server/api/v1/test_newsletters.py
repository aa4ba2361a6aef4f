"""
Unit tests for newsletter and payment settings endpoints.
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from unthink.server.core.config import settings

pytestmark = pytest.mark.asyncio

BODY = "A considered paragraph about changing one's mind. " * 3


async def _essay(client: AsyncClient, headers, published: bool = True) -> str:
    response = await client.post(
        "/api/v1/essays",
        json={"title": "On changing my mind", "content": BODY, "published": published},
        headers=headers,
    )
    return response.json()["id"]


class TestNewsletters:
    async def test_preview(self, client: AsyncClient, auth):
        essay_id = await _essay(client, auth("alice"))
        await client.post("/api/v1/follows/alice", headers=auth("bob"))

        response = await client.get(f"/api/v1/newsletters/{essay_id}/preview", headers=auth("alice"))

        assert response.status_code == 200
        assert response.json()["audience_sizes"] == {"free": 1, "paid": 0, "all": 1}

    async def test_send(self, client: AsyncClient, auth, functions_stub):
        essay_id = await _essay(client, auth("alice"))

        response = await client.post(
            f"/api/v1/newsletters/{essay_id}/send", json={"audience": "paid"}, headers=auth("alice")
        )

        assert response.status_code == 200
        assert response.json() == {"status": "sent", "audience": "paid", "scheduled_at": None}
        assert functions_stub.calls[0][0] == settings.functions.send_newsletter

    async def test_schedule(self, client: AsyncClient, auth):
        essay_id = await _essay(client, auth("alice"))
        when = (datetime.now(timezone.utc) + timedelta(hours=3)).isoformat()

        response = await client.post(
            f"/api/v1/newsletters/{essay_id}/send",
            json={"send_type": "scheduled", "scheduled_at": when},
            headers=auth("alice"),
        )

        assert response.json()["status"] == "scheduled"

    async def test_schedule_needs_time(self, client: AsyncClient, auth):
        essay_id = await _essay(client, auth("alice"))

        response = await client.post(
            f"/api/v1/newsletters/{essay_id}/send", json={"send_type": "scheduled"}, headers=auth("alice")
        )

        assert response.status_code == 422

    async def test_draft_cannot_be_sent(self, client: AsyncClient, auth, functions_stub):
        essay_id = await _essay(client, auth("alice"), published=False)

        response = await client.post(f"/api/v1/newsletters/{essay_id}/send", json={}, headers=auth("alice"))

        assert response.status_code == 422
        assert functions_stub.calls == []

    async def test_only_author_can_send(self, client: AsyncClient, auth):
        essay_id = await _essay(client, auth("alice"))

        response = await client.post(f"/api/v1/newsletters/{essay_id}/send", json={}, headers=auth("bob"))

        assert response.status_code == 403

    async def test_test_email(self, client: AsyncClient, auth, functions_stub):
        essay_id = await _essay(client, auth("alice"), published=False)

        response = await client.post(f"/api/v1/newsletters/{essay_id}/test", headers=auth("alice"))

        assert response.json()["status"] == "test_sent"
        assert functions_stub.calls[0][1]["to"] == "alice@example.com"


class TestPayments:
    async def test_defaults_then_update(self, client: AsyncClient, auth):
        defaults = (await client.get("/api/v1/payments/settings", headers=auth("alice"))).json()
        assert defaults["monthly_price"] == 5.0
        assert defaults["stripe_connected"] is False

        response = await client.put(
            "/api/v1/payments/settings",
            json={"monthly_price": 7.5, "yearly_price": 75, "free_trial_days": 14},
            headers=auth("alice"),
        )
        assert response.status_code == 200
        assert response.json()["free_trial_days"] == 14

        connected = (await client.post("/api/v1/payments/stripe/connect", headers=auth("alice"))).json()
        assert connected["stripe_connected"] is True
        assert connected["monthly_price"] == 7.5

    async def test_validation(self, client: AsyncClient, auth):
        too_expensive = await client.put(
            "/api/v1/payments/settings", json={"monthly_price": 5, "yearly_price": 70}, headers=auth("alice")
        )
        long_trial = await client.put("/api/v1/payments/settings", json={"free_trial_days": 31}, headers=auth("alice"))

        assert too_expensive.status_code == 422
        assert long_trial.status_code == 422
