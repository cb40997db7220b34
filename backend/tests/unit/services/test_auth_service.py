# tests/unit/services/test_auth_service.py
from __future__ import annotations

import pytest

from products_api.core.config import AuthUser, JwtSettings
from products_api.services._shared.errors import AuthenticationError
from products_api.services._shared.ports.token_provider import StubTokenProvider
from products_api.services.auth.dto import LoginIn, TokenOut
from products_api.services.auth.service import AuthService


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def service() -> AuthService:
    """Build an AuthService wired to the in-memory token double."""
    return AuthService(
        token_provider=StubTokenProvider(),
        auth_user=AuthUser(username="admin", password="admin123"),
        settings=JwtSettings(
            secret="x" * 32,
            issuer="ProductsApi",
            audience="ProductsApiClients",
            expiration_minutes=30,
        ),
    )


# -------------------------------- Tests ----------------------------------- #
def test_login_issues_token_with_role_and_name(service):
    """Matching credentials yield a bearer token carrying the fixed claims."""
    out = service.login(LoginIn(username="admin", password="admin123"))

    assert isinstance(out, TokenOut)
    assert out.token_type == "Bearer"
    assert out.expires_in == 30 * 60

    claims = service.tokens.issued[out.token]
    assert claims["sub"] == "admin"
    assert claims["name"] == "admin"
    assert claims["role"] == "User"
    assert claims["exp"] - claims["iat"] == 30 * 60


@pytest.mark.parametrize(
    ("username", "password"),
    [
        ("admin", "wrong-password"),
        ("someone", "admin123"),
        ("Admin", "admin123"),
        ("someone", "nothing"),
    ],
)
def test_login_rejects_any_mismatch(service, username, password):
    """Either field differing yields the same authentication error."""
    with pytest.raises(AuthenticationError, match="Invalid username or password"):
        service.login(LoginIn(username=username, password=password))


def test_login_logs_attempt_and_outcome(service, caplog):
    caplog.set_level("INFO", logger="products_api.services.auth.service")

    with pytest.raises(AuthenticationError):
        service.login(LoginIn(username="admin", password="nope"))
    service.login(LoginIn(username="admin", password="admin123"))

    records = [r for r in caplog.records if r.name == "products_api.services.auth.service"]
    messages = [r.getMessage() for r in records]
    assert messages.count("Login attempt") == 2
    assert "Authentication failed" in messages
    assert "User authenticated" in messages
    assert all(getattr(r, "username", None) == "admin" for r in records)
    assert all("admin123" not in m for m in messages)


def test_login_input_repr_hides_password():
    assert "admin123" not in repr(LoginIn(username="admin", password="admin123"))
