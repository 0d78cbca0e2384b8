"""Bookings API — verifies server-side pricing and per-user ownership.

Invariants:
    - total_price = default_price × (adults + kids + children / 2)
    - Bookings belong to the token's user; other users get 403
    - Listing embeds the booked experience, or null once it is gone
"""

from tests.api.payloads import (
    MISSING_ID, OTHER_USER_ID, auth, booking_payload,
)


async def _book(client, headers, experience_id, **overrides):
    res = await client.post(
        "/api/v1/bookings",
        json=booking_payload(experience_id, **overrides),
        headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_prices_booking(client, headers, seed_experience):
    booking = await _book(client, headers, seed_experience["id"])
    assert booking["total_price"] == 400
    assert booking["user_id"] == "Yx4mPqR7sT2uV9wZ0aB3cD5eF8gH"
    assert booking["date"] == "2024-07-14T00:00:00"


async def test_client_price_ignored(client, headers, seed_experience):
    booking = await _book(
        client, headers, seed_experience["id"], total_price=1,
        ticket={"adults": 1, "kids": 0, "children": 0},
    )
    assert booking["total_price"] == 100


async def test_list_embeds_experience(client, headers, seed_experience):
    await _book(client, headers, seed_experience["id"])
    await _book(client, auth(OTHER_USER_ID), seed_experience["id"])

    res = await client.get("/api/v1/bookings", headers=headers)
    assert res.status_code == 200
    [booking] = res.json()
    assert booking["experience"]["id"] == seed_experience["id"]
    assert booking["experience"]["title"] == "Seine river cruise"


async def test_list_after_experience_deleted(client, headers, seed_experience):
    await _book(client, headers, seed_experience["id"])
    await client.delete(
        f"/api/v1/experiences/{seed_experience['id']}", headers=headers,
    )
    [booking] = (await client.get("/api/v1/bookings", headers=headers)).json()
    assert booking["experience"] is None


async def test_count_all_bookings(client, headers, seed_experience):
    await _book(client, headers, seed_experience["id"])
    await _book(client, auth(OTHER_USER_ID), seed_experience["id"])
    res = await client.get("/api/v1/bookings/stats/count", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"count": 2}


async def test_owner_reads_booking(client, headers, seed_experience):
    booking = await _book(client, headers, seed_experience["id"])
    res = await client.get(f"/api/v1/bookings/{booking['id']}", headers=headers)
    assert res.status_code == 200
    assert res.json()["id"] == booking["id"]


async def test_other_user_forbidden(client, headers, seed_experience):
    booking = await _book(client, headers, seed_experience["id"])
    other = auth(OTHER_USER_ID)

    res = await client.get(f"/api/v1/bookings/{booking['id']}", headers=other)
    assert res.status_code == 403
    assert res.json() == {
        "msg": "You can only view bookings associated with your own account",
    }

    res = await client.put(
        f"/api/v1/bookings/{booking['id']}",
        json=booking_payload(seed_experience["id"]), headers=other,
    )
    assert res.status_code == 403

    res = await client.delete(f"/api/v1/bookings/{booking['id']}", headers=other)
    assert res.status_code == 403
    assert res.json() == {
        "msg": "You can only delete bookings associated with your own account",
    }


async def test_update_reprices(client, headers, seed_experience):
    booking = await _book(client, headers, seed_experience["id"])
    res = await client.put(
        f"/api/v1/bookings/{booking['id']}",
        json=booking_payload(
            seed_experience["id"], time="10:00",
            ticket={"adults": 1, "kids": 0, "children": 1},
        ),
        headers=headers,
    )
    assert res.status_code == 200
    assert res.json()["total_price"] == 150
    assert res.json()["time"] == "10:00"


async def test_delete_booking(client, headers, seed_experience):
    booking = await _book(client, headers, seed_experience["id"])
    res = await client.delete(f"/api/v1/bookings/{booking['id']}", headers=headers)
    assert res.json() == {"msg": "Successfully deleted"}
    res = await client.get(f"/api/v1/bookings/{booking['id']}", headers=headers)
    assert res.status_code == 404


async def test_unknown_experience(client, headers):
    res = await client.post(
        "/api/v1/bookings", json=booking_payload(MISSING_ID), headers=headers,
    )
    assert res.status_code == 400
    assert res.json() == {
        "msg": "The specified experience does not exist, please choose a valid experience",
    }

    res = await client.post(
        "/api/v1/bookings", json=booking_payload("bad"), headers=headers,
    )
    assert res.json() == {"msg": "Invalid experience ID"}


async def test_ticket_counts_validated(client, headers, seed_experience):
    res = await client.post(
        "/api/v1/bookings",
        json=booking_payload(
            seed_experience["id"], ticket={"adults": -1, "kids": 0, "children": 0},
        ),
        headers=headers,
    )
    assert res.status_code == 400
    assert res.json() == {"msg": "The adults must be greater than or equal to 0"}


async def test_bookings_require_token(client):
    assert (await client.get("/api/v1/bookings")).status_code == 401
    assert (await client.get("/api/v1/bookings/stats/count")).status_code == 401
