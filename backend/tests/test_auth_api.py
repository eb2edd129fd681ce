def test_register_returns_tokens(client):
    response = client.post("/api/v1/auth/register", json={
        "email": "new@pantry.io",
        "password": "password123",
    })
    assert response.status_code == 201
    body = response.json()
    assert body["access_token"]
    assert body["refresh_token"]
    assert body["token_type"] == "bearer"


def test_register_duplicate_email(client, tokens):
    response = client.post("/api/v1/auth/register", json={
        "email": "owner@pantry.io",
        "password": "another-password",
    })
    assert response.status_code == 400


def test_register_rejects_short_password(client):
    response = client.post("/api/v1/auth/register", json={
        "email": "short@pantry.io",
        "password": "short",
    })
    assert response.status_code == 422


def test_login(client, tokens):
    response = client.post("/api/v1/auth/login", json={
        "email": "owner@pantry.io",
        "password": "password123",
    })
    assert response.status_code == 200
    assert response.json()["access_token"]


def test_login_wrong_password(client, tokens):
    response = client.post("/api/v1/auth/login", json={
        "email": "owner@pantry.io",
        "password": "wrong-password",
    })
    assert response.status_code == 401


def test_me(client, auth_headers):
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "owner@pantry.io"
    assert body["full_name"] == "Pantry Tester"
    assert "password_hash" not in body


def test_me_requires_token(client):
    assert client.get("/api/v1/auth/me").status_code in (401, 403)


def test_me_rejects_garbage_token(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_refresh(client, tokens):
    response = client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 200
    assert response.json()["access_token"]


def test_refresh_rejects_access_token(client, tokens):
    response = client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["access_token"]})
    assert response.status_code == 401


def test_access_endpoint_rejects_refresh_token(client, tokens):
    headers = {"Authorization": f"Bearer {tokens['refresh_token']}"}
    assert client.get("/api/v1/auth/me", headers=headers).status_code == 401
