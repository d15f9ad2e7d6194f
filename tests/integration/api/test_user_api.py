import pytest

from tests.fixtures.factories import bearer


# Register

@pytest.mark.asyncio
async def test_register_user(client, test_data, token_service):
    payload = test_data.user("alice")

    response = await client.post("/api/user/register", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"
    assert body["user"]["email"] == payload["email"]
    assert "password" not in body["user"]
    assert token_service.verify(body["token"]).subject_id == body["user"]["id"]


@pytest.mark.asyncio
async def test_register_duplicate_email(client, alice, test_data):
    response = await client.post(
        "/api/user/register", json=test_data.user("alice")
    )

    assert response.status_code == 400
    assert response.json()["message"] == "User already exists"


@pytest.mark.asyncio
async def test_register_missing_fields(client):
    response = await client.post("/api/user/register", json={"email": "c@x.com"})

    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_FIELDS"


# Profile

@pytest.mark.asyncio
async def test_get_profile(client, alice):
    response = await client.get(f"/api/user/profile/{alice['id']}", headers=bearer(alice))

    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Alice"


@pytest.mark.asyncio
async def test_get_profile_requires_token(client, alice):
    response = await client.get(f"/api/user/profile/{alice['id']}")

    assert response.status_code == 401
    assert response.json()["message"] == "Authorization token is required"


@pytest.mark.asyncio
async def test_get_profile_with_invalid_token(client, alice):
    response = await client.get(
        f"/api/user/profile/{alice['id']}", headers={"Authorization": "Bearer nope"}
    )

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_get_profile_of_another_user(client, alice, bob):
    response = await client.get(f"/api/user/profile/{bob['id']}", headers=bearer(alice))

    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"


# Update

@pytest.mark.asyncio
async def test_update_name(client, alice):
    response = await client.patch(
        f"/api/user/update/{alice['id']}", json={"name": "Alicia"}, headers=bearer(alice)
    )

    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Alicia"
    assert response.json()["user"]["updatedAt"] is not None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload,message",
    [
        ({"password": "x"}, "Password cannot be updated via this route"),
        ({"email": "new@x.com"}, "Email cannot be updated via this route"),
        ({}, "No fields provided to update"),
    ],
)
async def test_update_rejected(client, alice, payload, message):
    response = await client.patch(
        f"/api/user/update/{alice['id']}", json=payload, headers=bearer(alice)
    )

    assert response.status_code == 400
    assert response.json()["message"] == message


# Delete

@pytest.mark.asyncio
async def test_delete_user_removes_account_and_transactions(client, alice, test_data):
    transaction = test_data.transactions()[0]
    created = await client.post(
        "/api/transactions/create", json=transaction, headers=bearer(alice)
    )
    assert created.status_code == 201

    response = await client.delete(f"/api/user/delete/{alice['id']}", headers=bearer(alice))

    assert response.status_code == 200
    assert response.json()["user"]["id"] == alice["id"]

    profile = await client.get(f"/api/user/profile/{alice['id']}", headers=bearer(alice))
    assert profile.status_code == 404

    transaction_id = created.json()["transaction"]["id"]
    lookup = await client.get(
        f"/api/transactions/get/{transaction_id}", headers=bearer(alice)
    )
    assert lookup.status_code == 404


# Listing

@pytest.mark.asyncio
async def test_list_users_newest_first(client, alice, bob):
    response = await client.get("/api/user/list", headers=bearer(alice))

    assert response.status_code == 200
    emails = [u["email"] for u in response.json()["users"]]
    assert emails == ["b@x.com", "a@x.com"]


@pytest.mark.asyncio
async def test_filter_by_period(client, alice):
    response = await client.get(
        "/api/user/filter-by-period", params={"filter": "day"}, headers=bearer(alice)
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Users created since day retrieved"
    assert [u["id"] for u in body["users"]] == [alice["id"]]


@pytest.mark.asyncio
async def test_filter_by_invalid_period(client, alice):
    response = await client.get(
        "/api/user/filter-by-period", params={"filter": "decade"}, headers=bearer(alice)
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid filter parameter"
