from __future__ import annotations

import pytest

from app.core.permissions import Identity
from app.core.security import create_access_token, decode_access_token

pytestmark = pytest.mark.integration


def test_login_returns_token_with_claims(client) -> None:
    response = client.post("/token", data={"username": "admin", "password": "adminpass"})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert decode_access_token(body["access_token"]) == Identity(username="admin", is_admin=True)


@pytest.mark.parametrize(
    "username, password",
    [("u1", "wrong"), ("nope", "password1")],
)
def test_login_rejects_bad_credentials(client, username, password) -> None:
    response = client.post("/token", data={"username": username, "password": password})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


def test_signup_creates_standard_user(client) -> None:
    payload = {
        "username": "new",
        "password": "password",
        "first_name": "First",
        "last_name": "Last",
        "email": "new@email.com",
    }

    response = client.post("/users/signup", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["user"] == {
        "username": "new",
        "first_name": "First",
        "last_name": "Last",
        "email": "new@email.com",
        "is_admin": False,
    }
    assert decode_access_token(body["token"]) == Identity(username="new", is_admin=False)

    # 보유 기술이 없어도 요구 기술이 없는 공고는 매칭됨
    headers = {"Authorization": f"Bearer {body['token']}"}
    matched = client.get("/users/new/matched-jobs", headers=headers).json()["matched_jobs"]
    assert [job["title"] for job in matched] == ["Job3", "Job4"]


def test_signup_rejects_admin_flag(client) -> None:
    payload = {
        "username": "new",
        "password": "password",
        "first_name": "First",
        "last_name": "Last",
        "email": "new@email.com",
        "is_admin": True,
    }

    assert client.post("/users/signup", json=payload).status_code == 422


def test_signup_duplicate_username(client) -> None:
    payload = {
        "username": "u1",
        "password": "password",
        "first_name": "First",
        "last_name": "Last",
        "email": "new@email.com",
    }

    assert client.post("/users/signup", json=payload).status_code == 400


def test_decode_rejects_invalid_tokens() -> None:
    assert decode_access_token("garbage") is None
    assert decode_access_token(create_access_token({"is_admin": True})) is None


def test_expired_token_is_treated_as_anonymous(client) -> None:
    from datetime import timedelta

    token = create_access_token({"sub": "admin", "is_admin": True}, expires_delta=timedelta(seconds=-1))

    response = client.get("/users/", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.parametrize("username", ["me", "ME"])
def test_signup_rejects_reserved_username(client, username) -> None:
    payload = {
        "username": username,
        "password": "password",
        "first_name": "First",
        "last_name": "Last",
        "email": "new@email.com",
    }

    assert client.post("/users/signup", json=payload).status_code == 422
