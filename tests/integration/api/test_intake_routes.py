import pytest
from httpx import AsyncClient

from tests.fixtures.factories import make_cycle, make_member

FIELDS = {
    "recommendation": "Parable of the Sower",
    "reasons": "Prescient",
    "message": "Keep a notebook handy",
}


@pytest.mark.asyncio
async def test_unknown_sender(client: AsyncClient, admin_headers, seed):
    await seed(make_cycle(202001))

    response = await client.post(
        "/intake/submissions",
        json={"sender_email": "stranger@acme.com", "submission": FIELDS},
        headers=admin_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_submission_without_open_cycle(client: AsyncClient, admin_headers, seed):
    await seed(make_member("alice@acme.com"))

    response = await client.post(
        "/intake/submissions",
        json={"sender_email": "alice@acme.com", "submission": FIELDS},
        headers=admin_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "NO_ACTIVE_WINDOW"


@pytest.mark.asyncio
async def test_second_submission_is_rejected(
    client: AsyncClient, admin_headers, seed, notifier
):
    """AC: exactly one submission per member per cycle"""
    await seed(make_member("alice@acme.com"), make_cycle(202001))
    body = {"sender_email": "alice@acme.com", "submission": FIELDS}

    first = await client.post("/intake/submissions", json=body, headers=admin_headers)
    second = await client.post("/intake/submissions", json=body, headers=admin_headers)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "DUPLICATE_SUBMISSION"
    notifier.send_submission_ack.assert_awaited_once()


@pytest.mark.asyncio
async def test_blank_field_is_rejected(client: AsyncClient, admin_headers, seed):
    await seed(make_member("alice@acme.com"), make_cycle(202001))

    response = await client.post(
        "/intake/submissions",
        json={"sender_email": "alice@acme.com", "submission": {**FIELDS, "reasons": "   "}},
        headers=admin_headers,
    )

    assert response.status_code == 422
