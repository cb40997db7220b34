"""Unit tests for configuration selection and the frozen auth settings."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from products_api.core.config import (
    AuthUser,
    DevelopmentConfig,
    JwtSettings,
    ProductionConfig,
    TestingConfig,
    env_bool,
    env_int,
    get_config,
)


class TestEnvHelpers:
    def test_env_bool_truthy_and_default(self, monkeypatch):
        monkeypatch.setenv("FLAG_X", "Yes")
        assert env_bool("FLAG_X") is True
        monkeypatch.setenv("FLAG_X", "off")
        assert env_bool("FLAG_X", True) is False
        monkeypatch.delenv("FLAG_X")
        assert env_bool("FLAG_X", True) is True

    def test_env_int_blank_falls_back(self, monkeypatch):
        monkeypatch.setenv("NUM_X", "  ")
        assert env_int("NUM_X", 7) == 7
        monkeypatch.setenv("NUM_X", "15")
        assert env_int("NUM_X", 7) == 15


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("production", ProductionConfig),
        ("Testing", TestingConfig),
        ("development", DevelopmentConfig),
        ("unknown", DevelopmentConfig),
    ],
)
def test_get_config_follows_app_env(monkeypatch, value, expected):
    monkeypatch.setenv("APP_ENV", value)
    assert get_config() is expected


class TestJwtSettings:
    def _settings(self, **overrides) -> JwtSettings:
        params = {
            "secret": "s" * 40,
            "issuer": "ProductsApi",
            "audience": "ProductsApiClients",
            "expiration_minutes": 60,
        }
        params.update(overrides)
        return JwtSettings(**params)

    def test_from_mapping_reads_flask_keys(self):
        settings = JwtSettings.from_mapping(
            {
                "JWT_SECRET": "k" * 32,
                "JWT_ISSUER": "iss",
                "JWT_AUDIENCE": "aud",
                "JWT_EXPIRATION_MINUTES": "15",
            }
        )
        assert settings.expiration_minutes == 15
        assert settings.expires_in_seconds == 900
        assert settings.expires_delta == timedelta(minutes=15)

    @pytest.mark.parametrize("field", ["secret", "issuer", "audience"])
    def test_validate_rejects_empty_values(self, field):
        with pytest.raises(ValueError, match="Missing JWT settings"):
            self._settings(**{field: ""}).validate()

    def test_validate_rejects_non_positive_expiry(self):
        with pytest.raises(ValueError, match="greater than 0"):
            self._settings(expiration_minutes=0).validate()

    def test_is_immutable(self):
        settings = self._settings()
        with pytest.raises(FrozenInstanceError):
            settings.secret = "other"  # type: ignore[misc]

    def test_flask_jwt_config_pins_verification(self):
        config = self._settings().flask_jwt_config()
        assert config["JWT_ALGORITHM"] == "HS256"
        assert config["JWT_DECODE_ALGORITHMS"] == ["HS256"]
        assert config["JWT_ENCODE_ISSUER"] == config["JWT_DECODE_ISSUER"] == "ProductsApi"
        assert config["JWT_ENCODE_AUDIENCE"] == config["JWT_DECODE_AUDIENCE"] == "ProductsApiClients"
        assert config["JWT_DECODE_LEEWAY"] == 0
        assert config["JWT_TOKEN_LOCATION"] == ["headers"]
        assert config["JWT_ACCESS_TOKEN_EXPIRES"] == timedelta(minutes=60)


def test_auth_user_repr_masks_password():
    user = AuthUser.from_mapping({"AUTH_USERNAME": "admin", "AUTH_PASSWORD": "admin123"})
    assert user.password == "admin123"
    assert "admin123" not in repr(user)


def test_app_freezes_settings_in_extensions(app):
    settings = app.extensions["jwt_settings"]
    assert isinstance(settings, JwtSettings)
    assert app.config["JWT_SECRET_KEY"] == settings.secret
    assert app.extensions["auth_user"].username == "admin"
