"""
Test authentication endpoints
"""
import pytest


REGISTER_BODY = {
    "email": "new@example.com",
    "password": "secret123",
    "firstName": "New",
    "lastName": "Roommate"
}


@pytest.mark.asyncio
async def test_register(client):
    response = await client.post("/api/auth/register", json=REGISTER_BODY)

    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["email"] == "new@example.com"
    assert data["user"]["firstName"] == "New"
    assert "passwordHash" not in data["user"]


@pytest.mark.asyncio
async def test_register_duplicate_email(client, alice):
    body = dict(REGISTER_BODY, email=alice.email)

    response = await client.post("/api/auth/register", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "User already exists"


@pytest.mark.asyncio
async def test_register_invalid_body(client):
    response = await client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "123"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request data"}


@pytest.mark.asyncio
async def test_login(client, alice):
    response = await client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "secret123"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == alice.id

    me = await client.get(
        "/api/auth/me",
        headers={"Authorization": f"Bearer {data['token']}"}
    )
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "alice@example.com"


@pytest.mark.asyncio
async def test_login_wrong_password(client, alice):
    response = await client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "wrongpass"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_unknown_email(client):
    response = await client.post(
        "/api/auth/login",
        json={"email": "ghost@example.com", "password": "secret123"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_requires_token(client):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error"] == "Access token required"


@pytest.mark.asyncio
async def test_me_rejects_bad_token(client):
    response = await client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 403
    assert response.json()["error"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_me_accepts_cookie(client, alice, headers_for):
    token = headers_for(alice)["Authorization"].split(" ", 1)[1]
    response = await client.get("/api/auth/me", headers={"Cookie": f"access_token={token}"})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == alice.id


@pytest.mark.asyncio
async def test_logout(client):
    response = await client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json()["message"] == "Logout successful"


@pytest.mark.asyncio
async def test_list_roommates_excludes_self(client, alice, bob, headers_for):
    response = await client.get("/api/users", headers=headers_for(alice))

    assert response.status_code == 200
    ids = [u["id"] for u in response.json()["users"]]
    assert ids == [bob.id]
