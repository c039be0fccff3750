"""Session routes — creation, lookup, host updates and admin login.

Invariants:
    - Creating a tasting signs the host in (token in body and cookie)
    - Join-code collisions are retried, then surfaced as 409
    - Admin routes accept only a token issued for the same session
"""

import logging

from blindbeer.config import get_settings


async def test_create_session_returns_code_and_token(client):
    res = await client.post(
        "/api/v1/sessions", json={"name": "Friday Flight", "admin_password": "secret"},
    )
    assert res.status_code == 201
    body = res.json()
    assert len(body["code"]) == 6
    assert body["beer_count"] == 13
    assert body["is_active"] is True
    assert body["access_token"]
    assert "admin_password_hash" not in body
    assert get_settings().admin_cookie_name in res.cookies


async def test_create_session_rejects_beer_count_over_limit(client):
    res = await client.post(
        "/api/v1/sessions", json={"beer_count": 100, "admin_password": "secret"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_session_by_code_is_case_insensitive(client, tasting):
    res = await client.get(f"/api/v1/sessions/{tasting['code'].lower()}")
    assert res.status_code == 200
    assert res.json()["name"] == "Friday Flight"


async def test_unknown_session_returns_404(client):
    res = await client.get("/api/v1/sessions/ZZZZZZ")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_code_collision_is_retried(client, monkeypatch):
    codes = iter(["AAAAAA", "AAAAAA", "BBBBBB"])
    monkeypatch.setattr(
        "blindbeer.services.handle_sessions.generate_session_code",
        lambda length, rng=None: next(codes),
    )
    first = await client.post("/api/v1/sessions", json={"admin_password": "secret"})
    second = await client.post("/api/v1/sessions", json={"admin_password": "secret"})
    assert first.json()["code"] == "AAAAAA"
    assert second.status_code == 201
    assert second.json()["code"] == "BBBBBB"


async def test_code_collision_exhausted_returns_409(client, monkeypatch):
    monkeypatch.setattr(
        "blindbeer.services.handle_sessions.generate_session_code",
        lambda length, rng=None: "AAAAAA",
    )
    monkeypatch.setattr(get_settings(), "session_code_max_attempts", 3)
    await client.post("/api/v1/sessions", json={"admin_password": "secret"})
    res = await client.post("/api/v1/sessions", json={"admin_password": "secret"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "SESSION_CODE_EXHAUSTED"


async def test_admin_login_with_correct_password(client, tasting):
    res = await client.post(
        f"/api/v1/sessions/{tasting['code']}/admin/login",
        json={"password": "hops-and-barley"},
    )
    assert res.status_code == 200
    assert res.json()["token_type"] == "bearer"
    assert get_settings().admin_cookie_name in res.cookies


async def test_admin_login_with_wrong_password(client, tasting):
    res = await client.post(
        f"/api/v1/sessions/{tasting['code']}/admin/login",
        json={"password": "lager"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "ADMIN_AUTH_FAILED"


async def test_update_requires_admin(client, tasting):
    res = await client.patch(
        f"/api/v1/sessions/{tasting['code']}", json={"name": "Renamed"},
    )
    assert res.status_code == 401


async def test_update_with_bearer_token(client, tasting, admin_headers):
    res = await client.patch(
        f"/api/v1/sessions/{tasting['code']}",
        json={"name": "Renamed", "is_active": False},
        headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Renamed"
    assert res.json()["is_active"] is False


async def test_admin_cookie_is_accepted(client, tasting):
    await client.post(
        f"/api/v1/sessions/{tasting['code']}/admin/login",
        json={"password": "hops-and-barley"},
    )
    res = await client.patch(
        f"/api/v1/sessions/{tasting['code']}", json={"name": "Via Cookie"},
    )
    assert res.status_code == 200


async def test_token_for_other_session_is_rejected(client, tasting):
    other = await client.post(
        "/api/v1/sessions", json={"name": "Other", "admin_password": "secret"},
    )
    client.cookies.clear()
    res = await client.patch(
        f"/api/v1/sessions/{tasting['code']}",
        json={"name": "Hijacked"},
        headers={"Authorization": f"Bearer {other.json()['access_token']}"},
    )
    assert res.status_code == 401


async def test_logout_clears_cookie(client, tasting):
    res = await client.post(f"/api/v1/sessions/{tasting['code']}/admin/logout")
    assert res.status_code == 204
    assert "max-age=0" in res.headers["set-cookie"].lower()


async def test_password_over_72_bytes_is_rejected(client):
    res = await client.post(
        "/api/v1/sessions", json={"admin_password": "é" * 36 + "X"},
    )
    assert res.status_code == 400


async def test_multibyte_password_must_match_exactly(client):
    created = await client.post(
        "/api/v1/sessions", json={"admin_password": "é" * 35 + "X"},
    )
    assert created.status_code == 201
    code = created.json()["code"]
    client.cookies.clear()

    wrong = await client.post(
        f"/api/v1/sessions/{code}/admin/login", json={"password": "é" * 35 + "Y"},
    )
    right = await client.post(
        f"/api/v1/sessions/{code}/admin/login", json={"password": "é" * 35 + "X"},
    )
    assert wrong.status_code == 401
    assert right.status_code == 200


async def test_admin_login_and_logout_are_logged(client, tasting, caplog):
    caplog.set_level(logging.INFO, logger="blindbeer.api.routes.sessions")
    code = tasting["code"]
    await client.post(
        f"/api/v1/sessions/{code}/admin/login", json={"password": "hops-and-barley"},
    )
    await client.post(f"/api/v1/sessions/{code}/admin/logout")

    messages = [r.getMessage() for r in caplog.records if r.name.endswith("sessions")]
    assert "Admin signed in" in messages
    assert "Admin signed out" in messages
