"""Tests for authentication endpoints."""
import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import AsyncClient, ASGITransport

from edusync.core.security import create_access_token
from edusync.db.session import get_session
from edusync.main import app


# ─── Fixtures ─────────────────────────────────────────────────────────────────

class FakeUser:
    """Minimal user stub returned by DB mock."""

    def __init__(self, is_active: bool = True):
        self.id = uuid.UUID("f96955d0-752f-4e0c-b1dc-d26d8dd1460e")
        self.username = "ENR-001"
        self.email = "jane.doe@greenfield.edu"
        self.role_name = "ROLE_STUDENT"
        self.is_active = is_active
        self.password_hash = "$2b$12$placeholder"  # verify_password is mocked


def session_returning(user):
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = user

    mock_session = AsyncMock()
    mock_session.execute = AsyncMock(return_value=mock_result)

    async def override_get_session():
        yield mock_session

    return override_get_session


async def post_login(username: str, password: str):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.post(
            "/api/v1/auth/login",
            data={"username": username, "password": password},
        )


# ─── Login Tests ──────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_login_with_enrollment_number_returns_jwt():
    """Imported students sign in with their enrollment number and the default password."""
    app.dependency_overrides[get_session] = session_returning(FakeUser())
    try:
        with patch("edusync.api.v1.auth.verify_password", return_value=True):
            response = await post_login("ENR-001", "Welcome@123")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert data["token_type"] == "bearer"


@pytest.mark.asyncio
async def test_login_invalid_credentials_returns_401():
    """Unknown user should return 401."""
    app.dependency_overrides[get_session] = session_returning(None)
    try:
        response = await post_login("nobody@greenfield.edu", "badpass")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_disabled_account_returns_403():
    app.dependency_overrides[get_session] = session_returning(FakeUser(is_active=False))
    try:
        with patch("edusync.api.v1.auth.verify_password", return_value=True):
            response = await post_login("ENR-001", "Welcome@123")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 403


# ─── /me Tests ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_me_with_valid_token_returns_user_without_password():
    """GET /api/v1/auth/me returns the user and never the password hash."""
    fake_user = FakeUser()
    token = create_access_token(subject=str(fake_user.id), role=fake_user.role_name)

    app.dependency_overrides[get_session] = session_returning(fake_user)
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get(
                "/api/v1/auth/me",
                headers={"Authorization": f"Bearer {token}"},
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "ENR-001"
    assert data["role_name"] == "ROLE_STUDENT"
    assert "password_hash" not in data


@pytest.mark.asyncio
async def test_me_without_token_returns_401():
    """GET /api/v1/auth/me without Authorization header should return 401."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/api/v1/auth/me")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_with_garbage_subject_returns_401():
    token = create_access_token(subject="not-a-uuid", role="ROLE_ADMIN")

    app.dependency_overrides[get_session] = session_returning(FakeUser())
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get(
                "/api/v1/auth/me",
                headers={"Authorization": f"Bearer {token}"},
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 401
