"""Reviews API — verifies rating aggregation and per-email review counts.

Invariants:
    - An experience's ratings are the per-field mean of its reviews
    - rating is the mean of those fields; review_count the number of reviews
    - user_review_count counts every review written with the same email
"""

import pytest

from tests.api.payloads import (
    MISSING_ID, experience_payload, ratings, review_payload,
)


async def _review(client, headers, experience_id, **overrides):
    res = await client.post(
        "/api/v1/reviews", json=review_payload(experience_id, **overrides),
        headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


async def _experience(client, experience_id):
    return (await client.get(f"/api/v1/experiences/{experience_id}")).json()


async def test_create_review_aggregates(client, headers, seed_experience):
    review = await _review(client, headers, seed_experience["id"])
    assert review["user_review_count"] == 1
    assert review["ratings"]["food"] == 4
    assert review["created_at"]

    experience = await _experience(client, seed_experience["id"])
    assert experience["review_count"] == 1
    assert experience["rating"] == pytest.approx(4)
    assert experience["ratings"] == pytest.approx(ratings(4))


async def test_ratings_are_mean_of_reviews(client, headers, seed_experience):
    await _review(client, headers, seed_experience["id"], ratings=ratings(5))
    await _review(
        client, headers, seed_experience["id"],
        email="leo@trisog.com", ratings=ratings(2),
    )
    experience = await _experience(client, seed_experience["id"])
    assert experience["review_count"] == 2
    assert experience["ratings"] == pytest.approx(ratings(3.5))
    assert experience["rating"] == pytest.approx(3.5)


async def test_user_review_count_by_email(client, headers, seed_experience):
    await _review(client, headers, seed_experience["id"])
    await _review(client, headers, seed_experience["id"], comment="Again!")
    await _review(client, headers, seed_experience["id"], email="leo@trisog.com")

    res = await client.get("/api/v1/reviews")
    counts = {(r["email"], r["comment"]): r["user_review_count"] for r in res.json()}
    assert counts == {
        ("ana@trisog.com", "Wonderful evening"): 2,
        ("ana@trisog.com", "Again!"): 2,
        ("leo@trisog.com", "Wonderful evening"): 1,
    }


async def test_list_by_experience(client, headers, seed_experience):
    res = await client.get(f"/api/v1/reviews/experience/{seed_experience['id']}")
    assert res.status_code == 404
    assert res.json() == {"msg": "No data found"}

    review = await _review(client, headers, seed_experience["id"])
    res = await client.get(f"/api/v1/reviews/experience/{seed_experience['id']}")
    assert [r["id"] for r in res.json()] == [review["id"]]


async def test_list_by_unknown_experience(client):
    res = await client.get(f"/api/v1/reviews/experience/{MISSING_ID}")
    assert res.status_code == 400


async def test_update_review_reaggregates(client, headers, seed_experience):
    review = await _review(client, headers, seed_experience["id"])
    res = await client.put(
        f"/api/v1/reviews/{review['id']}",
        json=review_payload(seed_experience["id"], ratings=ratings(1)),
        headers=headers,
    )
    assert res.status_code == 200
    experience = await _experience(client, seed_experience["id"])
    assert experience["review_count"] == 1
    assert experience["rating"] == pytest.approx(1)


async def test_moving_review_reaggregates_both_experiences(
    client, headers, seed_experience, seed_destination,
):
    res = await client.post(
        "/api/v1/experiences",
        json=experience_payload(seed_destination["id"], title="Louvre night"),
        headers=headers,
    )
    louvre_id = res.json()["id"]
    review = await _review(client, headers, seed_experience["id"])

    res = await client.put(
        f"/api/v1/reviews/{review['id']}",
        json=review_payload(louvre_id),
        headers=headers,
    )
    assert res.status_code == 200
    assert (await _experience(client, seed_experience["id"]))["review_count"] == 0
    assert (await _experience(client, louvre_id))["review_count"] == 1


async def test_delete_last_review_resets_ratings(client, headers, seed_experience):
    review = await _review(client, headers, seed_experience["id"])
    res = await client.delete(f"/api/v1/reviews/{review['id']}", headers=headers)
    assert res.json() == {"msg": "Successfully deleted"}

    experience = await _experience(client, seed_experience["id"])
    assert experience["review_count"] == 0
    assert experience["rating"] == 0
    assert set(experience["ratings"].values()) == {0}


async def test_review_for_unknown_experience(client, headers):
    res = await client.post(
        "/api/v1/reviews", json=review_payload(MISSING_ID), headers=headers,
    )
    assert res.status_code == 400
    assert res.json() == {
        "msg": "The specified experience does not exist, please choose a valid experience",
    }


async def test_review_payload_checks(client, headers, seed_experience):
    res = await client.post(
        "/api/v1/reviews",
        json=review_payload(seed_experience["id"], email="ana-at-trisog"),
        headers=headers,
    )
    assert res.status_code == 400
    assert res.json() == {"msg": "Invalid email"}


async def test_get_review(client, headers, seed_experience):
    review = await _review(client, headers, seed_experience["id"])
    res = await client.get(f"/api/v1/reviews/{review['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Ana"

    res = await client.get("/api/v1/reviews/not-an-id")
    assert res.json() == {"msg": "Invalid review ID"}


async def test_writes_require_token(client, seed_experience):
    res = await client.post("/api/v1/reviews", json=review_payload(seed_experience["id"]))
    assert res.status_code == 401
