from datetime import timedelta
from uuid import uuid4

import pytest

from src.adapter.services.jose_token_service import JoseTokenService
from src.depends import get_reset_url_base, get_token_service
from tests.fixtures.factories import RESET_URL_BASE, TEST_SECRET


async def request_reset_token(client, user: dict) -> str:
    response = await client.post("/api/auth/forget-password", json={"email": user["email"]})
    assert response.status_code == 200
    link = response.json()["resetPasswordLink"]
    return link.rsplit("/", 1)[1]


@pytest.mark.asyncio
async def test_welcome(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Welcome to Finance Tracker API"}


# Login

@pytest.mark.asyncio
async def test_login_success(client, alice, token_service):
    response = await client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["user"]["id"] == alice["id"]
    assert body["user"]["email"] == "a@x.com"
    assert "password" not in body["user"]
    assert "passwordHash" not in body["user"]
    assert token_service.verify(body["token"]).subject_id == alice["id"]


@pytest.mark.asyncio
async def test_login_wrong_password(client, alice):
    response = await client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "code": "INVALID_CREDENTIALS",
        "message": "Invalid email or password",
    }


@pytest.mark.asyncio
async def test_login_unknown_email_matches_wrong_password(client, alice):
    wrong_password = await client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "wrong"}
    )
    unknown_email = await client.post(
        "/api/auth/login", json={"email": "nobody@x.com", "password": "secret1"}
    )

    assert unknown_email.status_code == wrong_password.status_code == 401
    assert unknown_email.json() == wrong_password.json()


@pytest.mark.asyncio
async def test_login_missing_fields(client):
    response = await client.post("/api/auth/login", json={"email": "a@x.com"})

    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_FIELDS"
    assert response.json()["message"] == "Email and password are required"


@pytest.mark.asyncio
async def test_login_malformed_body(client):
    response = await client.post(
        "/api/auth/login",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "INVALID_REQUEST"
    assert body["errors"]


@pytest.mark.asyncio
async def test_login_without_secret(app, client, alice):
    app.dependency_overrides[get_token_service] = lambda: JoseTokenService("")

    response = await client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
    )

    assert response.status_code == 500
    assert response.json()["code"] == "SERVER_CONFIG_ERROR"
    assert response.json()["message"] == "Server configuration error"


# Forget password

@pytest.mark.asyncio
async def test_forget_password_returns_link(client, alice, token_service):
    response = await client.post("/api/auth/forget-password", json={"email": "a@x.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    prefix = f"{RESET_URL_BASE}/{alice['id']}/"
    assert body["resetPasswordLink"].startswith(prefix)

    token = body["resetPasswordLink"][len(prefix):]
    assert token_service.verify(token).subject_id == alice["id"]


@pytest.mark.asyncio
async def test_forget_password_unknown_email(client):
    response = await client.post("/api/auth/forget-password", json={"email": "ghost@x.com"})

    assert response.status_code == 404
    assert response.json()["message"] == "User not found with this email ghost@x.com"


@pytest.mark.asyncio
async def test_forget_password_missing_email(client):
    response = await client.post("/api/auth/forget-password", json={})

    assert response.status_code == 400
    assert response.json()["message"] == "Email is required"


@pytest.mark.asyncio
async def test_forget_password_without_reset_url(app, client, alice):
    app.dependency_overrides[get_reset_url_base] = lambda: ""

    response = await client.post("/api/auth/forget-password", json={"email": "a@x.com"})

    assert response.status_code == 500
    assert response.json()["code"] == "SERVER_CONFIG_ERROR"


# Reset password

@pytest.mark.asyncio
async def test_reset_password_flow(client, alice):
    token = await request_reset_token(client, alice)

    response = await client.post(
        f"/api/auth/reset-password/{alice['id']}/{token}",
        json={"password": "brand-new", "confirmPassword": "brand-new"},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Password updated successfully"}

    old_login = await client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
    )
    new_login = await client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "brand-new"}
    )
    assert old_login.status_code == 401
    assert new_login.status_code == 200


@pytest.mark.asyncio
async def test_reset_token_stays_usable_until_expiry(client, alice):
    token = await request_reset_token(client, alice)
    url = f"/api/auth/reset-password/{alice['id']}/{token}"

    first = await client.post(url, json={"password": "one", "confirmPassword": "one"})
    second = await client.post(url, json={"password": "two", "confirmPassword": "two"})

    assert first.status_code == second.status_code == 200
    login = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "two"})
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_reset_password_mismatch_keeps_old_password(client, alice):
    token = await request_reset_token(client, alice)

    response = await client.post(
        f"/api/auth/reset-password/{alice['id']}/{token}",
        json={"password": "new1", "confirmPassword": "new2"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Passwords do not match"

    login = await client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
    )
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_reset_password_with_other_users_token(client, alice, bob):
    bob_token = await request_reset_token(client, bob)

    response = await client.post(
        f"/api/auth/reset-password/{alice['id']}/{bob_token}",
        json={"password": "new", "confirmPassword": "new"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "TOKEN_USER_MISMATCH"
    assert response.json()["message"] == "Invalid token for this user"


@pytest.mark.asyncio
async def test_reset_password_with_garbage_token(client, alice):
    response = await client.post(
        f"/api/auth/reset-password/{alice['id']}/garbage",
        json={"password": "new", "confirmPassword": "new"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_TOKEN"
    assert response.json()["message"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_reset_password_with_expired_token_fails_repeatedly(client, alice):
    expired = JoseTokenService(TEST_SECRET, ttl=timedelta(minutes=-1)).issue(alice["id"])
    url = f"/api/auth/reset-password/{alice['id']}/{expired}"
    payload = {"password": "new", "confirmPassword": "new"}

    first = await client.post(url, json=payload)
    second = await client.post(url, json=payload)

    assert first.status_code == second.status_code == 400
    assert first.json() == second.json()
    assert first.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_reset_password_unknown_user(client, token_service):
    user_id = str(uuid4())

    response = await client.post(
        f"/api/auth/reset-password/{user_id}/{token_service.issue(user_id)}",
        json={"password": "new", "confirmPassword": "new"},
    )

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


@pytest.mark.asyncio
async def test_reset_password_missing_fields(client, alice, token_service):
    response = await client.post(
        f"/api/auth/reset-password/{alice['id']}/{token_service.issue(alice['id'])}",
        json={"password": "new"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_FIELDS"
