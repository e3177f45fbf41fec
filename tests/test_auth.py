"""Sign-up, sign-in and profile endpoints."""
from tests.conftest import sign_up


def test_sign_up_returns_token_and_profile_fields(client):
    response = client.post(
        "/auth/sign-up",
        json={"username": "delegate", "email": "delegate@example.com", "password": "secret123", "name": "Ana"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["username"] == "delegate"
    assert body["email"] == "delegate@example.com"
    assert isinstance(body["userId"], int)


def test_sign_in_with_correct_and_wrong_password(client, alice):
    ok = client.post("/auth/sign-in", json={"email": "alice@example.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["username"] == "alice"

    bad = client.post("/auth/sign-in", json={"email": "alice@example.com", "password": "wrong-password"})
    assert bad.status_code == 401
    assert bad.json() == {"message": "Invalid email or password"}


def test_duplicate_username_and_email_rejected(client, alice):
    dup_name = client.post(
        "/auth/sign-up",
        json={"username": "alice", "email": "other@example.com", "password": "secret123"},
    )
    assert dup_name.status_code == 400

    dup_email = client.post(
        "/auth/sign-up",
        json={"username": "alice2", "email": "alice@example.com", "password": "secret123"},
    )
    assert dup_email.status_code == 400


def test_short_password_is_a_400_with_message(client):
    response = client.post(
        "/auth/sign-up",
        json={"username": "x", "email": "x@example.com", "password": "123"},
    )
    assert response.status_code == 400
    assert "message" in response.json()


def test_missing_or_invalid_token_is_401(client):
    assert client.get("/api/speeches").status_code == 401
    response = client.get("/api/speeches", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid token"}


def test_profile_never_exposes_password(client, alice):
    response = client.get("/api/user", headers=alice)
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "alice"
    assert "password" not in body
    assert body["createdAt"]


def test_profile_update(client, alice, bob):
    response = client.patch("/api/user", json={"name": "Alice Delegate"}, headers=alice)
    assert response.status_code == 200
    assert response.json()["name"] == "Alice Delegate"

    clash = client.patch("/api/user", json={"email": "bob@example.com"}, headers=alice)
    assert clash.status_code == 400


def test_token_from_one_app_is_rejected_with_other_secret(client, settings):
    headers = sign_up(client, "carol")
    settings.auth_secret = "rotated"
    assert client.get("/api/user", headers=headers).status_code == 401
