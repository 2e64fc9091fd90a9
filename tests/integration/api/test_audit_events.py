"""
Integration tests for the tenant audit trail.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_audit_trail_records_token_lifecycle(client: AsyncClient, tenant_admin, private_event):
    event_id = private_event["event"]["id"]
    token_id = private_event["tokens"][1]["id"]
    await client.post(f"/events/{event_id}/tokens/{token_id}/revoke", headers=tenant_admin["headers"])

    response = await client.get("/audit/events", headers=tenant_admin["headers"])

    assert response.status_code == 200
    events = response.json()["events"]
    actions = [e["action"] for e in events]
    assert actions.count("event_created") == 1
    assert actions.count("token_issued") == 2
    assert actions.count("token_revoked") == 1
    assert actions[0] == "token_revoked"

    revoked = events[0]
    assert revoked["user_id"] == str(tenant_admin["admin_id"])
    assert revoked["metadata"]["token_id"] == token_id
    assert revoked["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_revoke_twice_writes_one_audit_event(client: AsyncClient, tenant_admin, private_event):
    url = f"/events/{private_event['event']['id']}/tokens/{private_event['tokens'][0]['id']}/revoke"
    await client.post(url, headers=tenant_admin["headers"])
    await client.post(url, headers=tenant_admin["headers"])

    response = await client.get("/audit/events", headers=tenant_admin["headers"])

    actions = [e["action"] for e in response.json()["events"]]
    assert actions.count("token_revoked") == 1


@pytest.mark.asyncio
async def test_audit_pagination(client: AsyncClient, tenant_admin, private_event):
    first_page = await client.get("/audit/events", params={"limit": 2}, headers=tenant_admin["headers"])

    assert len(first_page.json()["events"]) == 2
    cursor = first_page.json()["next_cursor"]
    assert cursor is not None

    second_page = await client.get(
        "/audit/events", params={"limit": 2, "cursor": cursor}, headers=tenant_admin["headers"]
    )
    assert len(second_page.json()["events"]) == 1
    assert second_page.json()["next_cursor"] is None


@pytest.mark.asyncio
async def test_audit_trail_is_tenant_scoped(client: AsyncClient, other_tenant_admin, private_event):
    response = await client.get("/audit/events", headers=other_tenant_admin["headers"])

    assert response.status_code == 200
    assert response.json() == {"events": [], "next_cursor": None}
