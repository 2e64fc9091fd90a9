"""
Integration tests for token deep links and QR codes.
"""

import io

import pytest
from datetime import timedelta
from httpx import AsyncClient
from PIL import Image
from sqlmodel import update
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID, uuid4

from src.domain.clock import utcnow
from src.domain.entities import AccessToken


@pytest.mark.asyncio
async def test_copy_url(client: AsyncClient, tenant_admin, private_event):
    event_id = private_event["event"]["id"]
    participant = private_event["tokens"][1]

    response = await client.get(
        f"/events/{event_id}/tokens/{participant['id']}/copy-url", headers=tenant_admin["headers"]
    )

    assert response.status_code == 200
    url = f"http://localhost:3000/events/summer-gala?token={participant['token']}"
    assert response.json() == {
        "token_id": participant["id"],
        "token": participant["token"],
        "url": url,
        "short_url": url,
    }


@pytest.mark.asyncio
async def test_qr_code_png(client: AsyncClient, tenant_admin, private_event):
    event_id = private_event["event"]["id"]
    participant = private_event["tokens"][1]

    response = await client.get(
        f"/events/{event_id}/tokens/{participant['id']}/qr",
        params={"size": 400},
        headers=tenant_admin["headers"],
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert (
        response.headers["content-disposition"]
        == f'attachment; filename="participant-token-{participant["id"]}.png"'
    )
    assert Image.open(io.BytesIO(response.content)).size == (400, 400)


@pytest.mark.asyncio
async def test_qr_code_svg(client: AsyncClient, tenant_admin, private_event):
    event_id = private_event["event"]["id"]
    participant = private_event["tokens"][1]

    response = await client.get(
        f"/events/{event_id}/tokens/{participant['id']}/qr",
        params={"format": "svg"},
        headers=tenant_admin["headers"],
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert b"<svg" in response.content


@pytest.mark.asyncio
async def test_qr_code_size_out_of_range(client: AsyncClient, tenant_admin, private_event):
    event_id = private_event["event"]["id"]
    participant = private_event["tokens"][1]

    response = await client.get(
        f"/events/{event_id}/tokens/{participant['id']}/qr",
        params={"size": 50},
        headers=tenant_admin["headers"],
    )

    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "size"


@pytest.mark.asyncio
async def test_qr_code_organizer_token_forbidden(client: AsyncClient, tenant_admin, private_event):
    event_id = private_event["event"]["id"]
    organizer = private_event["tokens"][0]

    response = await client.get(
        f"/events/{event_id}/tokens/{organizer['id']}/qr", headers=tenant_admin["headers"]
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "QR_PARTICIPANT_ONLY"


@pytest.mark.asyncio
async def test_artifacts_gone_for_revoked_token(client: AsyncClient, tenant_admin, private_event):
    event_id = private_event["event"]["id"]
    participant = private_event["tokens"][1]
    await client.post(
        f"/events/{event_id}/tokens/{participant['id']}/revoke", headers=tenant_admin["headers"]
    )

    qr = await client.get(
        f"/events/{event_id}/tokens/{participant['id']}/qr", headers=tenant_admin["headers"]
    )
    link = await client.get(
        f"/events/{event_id}/tokens/{participant['id']}/copy-url", headers=tenant_admin["headers"]
    )

    for response in (qr, link):
        assert response.status_code == 410
        assert response.json()["error"] == {
            "code": "TOKEN_REVOKED",
            "message": "Token is no longer active",
            "status": "revoked",
        }


@pytest.mark.asyncio
async def test_artifacts_gone_for_expired_token(
    client: AsyncClient, db_session: AsyncSession, tenant_admin, private_event
):
    event_id = private_event["event"]["id"]
    participant = private_event["tokens"][1]
    await db_session.execute(
        update(AccessToken)
        .where(AccessToken.id == UUID(participant["id"]))
        .values(expires_at=utcnow() - timedelta(minutes=1))
    )
    await db_session.commit()

    response = await client.get(
        f"/events/{event_id}/tokens/{participant['id']}/copy-url", headers=tenant_admin["headers"]
    )

    assert response.status_code == 410
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"
    assert response.json()["error"]["status"] == "expired"


@pytest.mark.asyncio
async def test_artifacts_unknown_token(client: AsyncClient, tenant_admin, private_event):
    response = await client.get(
        f"/events/{private_event['event']['id']}/tokens/{uuid4()}/qr",
        headers=tenant_admin["headers"],
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TOKEN_NOT_FOUND"
