"""Newsletters API — public subscribe/unsubscribe, token-protected listing."""

from tests.api.payloads import MISSING_ID


async def _subscribe(client, email="ana@trisog.com"):
    return await client.post("/api/v1/newsletters", json={"email": email})


async def test_subscribe_without_token(client):
    res = await _subscribe(client)
    assert res.status_code == 201
    assert res.json()["email"] == "ana@trisog.com"


async def test_duplicate_email_rejected(client):
    await _subscribe(client)
    res = await _subscribe(client, "ANA@trisog.com")
    assert res.status_code == 400
    assert res.json() == {"msg": "This email is already subscribed to the newsletter"}


async def test_invalid_email(client):
    res = await _subscribe(client, "nope")
    assert res.status_code == 400
    assert res.json() == {"msg": "Invalid email"}


async def test_listing_requires_token(client, headers):
    await _subscribe(client)
    assert (await client.get("/api/v1/newsletters")).status_code == 401

    res = await client.get("/api/v1/newsletters", headers=headers)
    assert [n["email"] for n in res.json()] == ["ana@trisog.com"]


async def test_get_and_unsubscribe(client, headers):
    newsletter = (await _subscribe(client)).json()
    res = await client.get(
        f"/api/v1/newsletters/{newsletter['id']}", headers=headers,
    )
    assert res.json() == newsletter

    res = await client.delete(f"/api/v1/newsletters/{newsletter['id']}")
    assert res.status_code == 200
    assert res.json() == {"msg": "Successfully deleted"}


async def test_unsubscribe_unknown(client):
    res = await client.delete(f"/api/v1/newsletters/{MISSING_ID}")
    assert res.status_code == 404
