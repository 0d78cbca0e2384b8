"""Bearer Authentication — verifies token handling on protected routes.

Invariants:
    - Missing token → 401 "No token provided"
    - Bad signature, expired token, missing sub → 401 "Invalid token"
    - A token whose subject is not a well-formed user id → 400 "Invalid user ID"
    - Public reads need no token
"""

from datetime import timedelta

from tests.api.payloads import category_payload, make_token


async def test_missing_token_rejected(client):
    res = await client.post("/api/v1/categories", json=category_payload())
    assert res.status_code == 401
    assert res.json() == {"msg": "No token provided"}


async def test_non_bearer_scheme_treated_as_missing(client):
    res = await client.post(
        "/api/v1/categories", json=category_payload(),
        headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )
    assert res.status_code == 401
    assert res.json() == {"msg": "No token provided"}


async def test_wrong_signature_rejected(client):
    token = make_token(secret="someone-elses-secret")
    res = await client.post(
        "/api/v1/categories", json=category_payload(),
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401
    assert res.json() == {"msg": "Invalid token"}


async def test_expired_token_rejected(client):
    token = make_token(expires_in=timedelta(minutes=-5))
    res = await client.post(
        "/api/v1/categories", json=category_payload(),
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401
    assert res.json() == {"msg": "Invalid token"}


async def test_token_without_subject_rejected(client):
    token = make_token(sub=None)
    res = await client.post(
        "/api/v1/categories", json=category_payload(),
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401
    assert res.json() == {"msg": "Invalid token"}


async def test_garbage_token_rejected(client):
    res = await client.post(
        "/api/v1/categories", json=category_payload(),
        headers={"Authorization": "Bearer not.a.jwt"},
    )
    assert res.status_code == 401
    assert res.json() == {"msg": "Invalid token"}


async def test_malformed_user_id_rejected(client):
    token = make_token(sub="short-uid")
    res = await client.post(
        "/api/v1/categories", json=category_payload(),
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 400
    assert res.json() == {"msg": "Invalid user ID"}


async def test_public_reads_need_no_token(client):
    for path in (
        "/api/v1/destinations", "/api/v1/categories", "/api/v1/plans",
        "/api/v1/testimonials", "/api/v1/reviews", "/api/v1/experiences",
    ):
        res = await client.get(path)
        assert res.status_code == 200, path


async def test_unknown_route_uses_error_envelope(client):
    res = await client.get("/api/v1/nowhere")
    assert res.status_code == 404
    assert res.json() == {"msg": "Not Found"}
