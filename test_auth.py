"""
Admin authentication: register, login, refresh rotation, logout and the access guard.
"""
from datetime import timedelta

from app.models.admin import Admin
from app.utils.jwt_handler import token_issuer
from conftest import ADMIN, bearer


def test_register_then_login(client):
    """Register and login with the same credentials; the access token works"""
    response = client.post("/auth/register", json={"email": "a@b.com", "password": "Aa123456!", "name": "A"})
    assert response.status_code == 201
    body = response.json()
    assert body["accessToken"] and body["refreshToken"]

    response = client.post("/auth/login", json={"email": "a@b.com", "password": "Aa123456!"})
    assert response.status_code == 200
    access_token = response.json()["accessToken"]

    me = client.get("/auth/me", headers=bearer(access_token))
    assert me.status_code == 200
    assert me.json()["email"] == "a@b.com"
    assert me.json()["name"] == "A"
    assert me.json()["role"] == "staff"
    assert "passwordHash" not in me.json()
    assert "refreshTokenHash" not in me.json()


def test_full_session_scenario(client):
    """Register, bad login, refresh, then replay of the original refresh token"""
    registered = client.post("/auth/register", json={"email": "a@b.com", "password": "Aa123456!", "name": "A"})
    assert registered.status_code == 201
    original_refresh = registered.json()["refreshToken"]

    bad_login = client.post("/auth/login", json={"email": "a@b.com", "password": "wrong"})
    assert bad_login.status_code == 401

    refreshed = client.post("/auth/refresh", headers=bearer(original_refresh))
    assert refreshed.status_code == 200
    assert refreshed.json()["refreshToken"] != original_refresh

    replay = client.post("/auth/refresh", headers=bearer(original_refresh))
    assert replay.status_code == 401


def test_rotated_token_keeps_working(client, tokens):
    first = client.post("/auth/refresh", headers=bearer(tokens["refreshToken"]))
    second = client.post("/auth/refresh", headers=bearer(first.json()["refreshToken"]))

    assert second.status_code == 200
    assert client.get("/auth/me", headers=bearer(second.json()["accessToken"])).status_code == 200


def test_login_failure_does_not_reveal_email(client, tokens):
    wrong_password = client.post("/auth/login", json={"email": ADMIN["email"], "password": "nope-nope"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@salon.com", "password": "nope-nope"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_login_email_is_case_insensitive(client, tokens):
    response = client.post("/auth/login", json={"email": "OWNER@Salon.com", "password": ADMIN["password"]})
    assert response.status_code == 200


def test_register_duplicate_email_conflicts(client, tokens):
    response = client.post("/auth/register", json=ADMIN)
    assert response.status_code == 409


def test_register_validation(client):
    short_password = client.post("/auth/register", json={"email": "x@salon.com", "password": "short", "name": "X"})
    bad_email = client.post("/auth/register", json={"email": "not-an-email", "password": "Aa123456!", "name": "X"})
    missing_name = client.post("/auth/register", json={"email": "x@salon.com", "password": "Aa123456!"})
    extra_field = client.post(
        "/auth/register",
        json={"email": "x@salon.com", "password": "Aa123456!", "name": "X", "role": "admin"}
    )

    assert short_password.status_code == 400
    assert bad_email.status_code == 400
    assert missing_name.status_code == 400
    assert extra_field.status_code == 400


def test_password_and_refresh_token_stored_hashed(client, db, tokens):
    admin = db.query(Admin).filter(Admin.email == ADMIN["email"]).one()

    assert admin.password_hash != ADMIN["password"]
    assert admin.password_hash.startswith("$argon2")
    assert admin.refresh_token_hash is not None
    assert admin.refresh_token_hash != tokens["refreshToken"]
    assert admin.refresh_token_hash.startswith("$argon2")


def test_login_replaces_previous_session(client, tokens):
    client.post("/auth/login", json={"email": ADMIN["email"], "password": ADMIN["password"]})

    response = client.post("/auth/refresh", headers=bearer(tokens["refreshToken"]))
    assert response.status_code == 401


def test_logout_revokes_refresh_token(client, db, tokens, auth_headers):
    response = client.post("/auth/logout", headers=auth_headers)
    assert response.status_code == 200

    admin = db.query(Admin).filter(Admin.email == ADMIN["email"]).one()
    assert admin.refresh_token_hash is None

    response = client.post("/auth/refresh", headers=bearer(tokens["refreshToken"]))
    assert response.status_code == 401


def test_logout_is_idempotent(client, auth_headers):
    assert client.post("/auth/logout", headers=auth_headers).status_code == 200
    assert client.post("/auth/logout", headers=auth_headers).status_code == 200


def test_logout_requires_access_token(client, tokens):
    assert client.post("/auth/logout").status_code == 401
    # A refresh token is not an access token
    assert client.post("/auth/logout", headers=bearer(tokens["refreshToken"])).status_code == 401


def test_refresh_requires_refresh_token(client, tokens):
    assert client.post("/auth/refresh").status_code == 401
    assert client.post("/auth/refresh", headers=bearer(tokens["accessToken"])).status_code == 401
    assert client.post("/auth/refresh", headers=bearer("garbage")).status_code == 401


def test_inactive_admin_rejected(client, db, tokens):
    admin = db.query(Admin).filter(Admin.email == ADMIN["email"]).one()
    admin.is_active = False
    db.commit()

    login = client.post("/auth/login", json={"email": ADMIN["email"], "password": ADMIN["password"]})
    refresh = client.post("/auth/refresh", headers=bearer(tokens["refreshToken"]))

    assert login.status_code == 401
    assert refresh.status_code == 401


def test_expired_access_token_rejected(client, db, tokens):
    admin = db.query(Admin).filter(Admin.email == ADMIN["email"]).one()
    expired = token_issuer.create_access_token(admin.id, expires_delta=timedelta(seconds=-1))

    response = client.get("/auth/me", headers=bearer(expired))
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_protected_route_without_token(client):
    response = client.post("/services", json={})
    assert response.status_code == 401
