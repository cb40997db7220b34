"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Loads .env in development (no-op when missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    APP_ENV: str
        Environment name (``development``, ``testing`` or ``production``).
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret used for session signing.
    JWT_SECRET: str
        Symmetric key used to sign and verify bearer tokens (HS256).
    JWT_ISSUER: str
        Value written to and required in the ``iss`` claim.
    JWT_AUDIENCE: str
        Value written to and required in the ``aud`` claim.
    JWT_EXPIRATION_MINUTES: int
        Lifetime of issued tokens.
    AUTH_USERNAME: str
        The single username accepted by the login endpoint.
    AUTH_PASSWORD: str
        Password paired with ``AUTH_USERNAME``.
    SQLALCHEMY_DATABASE_URI: str
        Database connection string; in-memory SQLite by default so data
        resets on restart.
    SEED_ON_STARTUP: bool
        Create tables and insert the sample products when the app starts.
    ERROR_INCLUDE_DETAIL: bool
        Expose exception messages in 500 responses (development only).
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    """

    APP_ENV = "development"
    API_BASE_PREFIX = "/api"

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    # Token signing
    JWT_SECRET = os.getenv("JWT_SECRET", "CHANGE_ME_TO_A_LONG_RANDOM_SECRET_VALUE_32B")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "ProductsApi")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "ProductsApiClients")
    JWT_EXPIRATION_MINUTES = env_int("JWT_EXPIRATION_MINUTES", 60)

    # Single configured account
    AUTH_USERNAME = os.getenv("AUTH_USERNAME", "admin")
    AUTH_PASSWORD = os.getenv("AUTH_PASSWORD", "admin123")

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    SEED_ON_STARTUP = env_bool("SEED_ON_STARTUP", True)

    # Flask & JSON
    PROPAGATE_EXCEPTIONS = False
    ERROR_INCLUDE_DETAIL = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and exposes exception messages in the
    generic 500 body.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    ERROR_INCLUDE_DETAIL = env_bool("ERROR_INCLUDE_DETAIL", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and an in-memory SQLite database.
    - Uses fixed credentials and token settings so tests do not depend on the
      environment.
    """

    APP_ENV = "testing"
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET = "testing-secret-key-with-at-least-32-bytes!"
    JWT_ISSUER = "ProductsApi"
    JWT_AUDIENCE = "ProductsApiClients"
    JWT_EXPIRATION_MINUTES = 60
    AUTH_USERNAME = "admin"
    AUTH_PASSWORD = "admin123"
    SEED_ON_STARTUP = True
    ERROR_INCLUDE_DETAIL = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    APP_ENV = "production"
    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False
    ERROR_INCLUDE_DETAIL = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


# --------------------------------------------------------------------------- #
# Immutable runtime settings
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class JwtSettings:
    """
    Token signing parameters, frozen once the application starts.

    :param secret: Symmetric HS256 key.
    :param issuer: Expected ``iss`` claim.
    :param audience: Expected ``aud`` claim.
    :param expiration_minutes: Token lifetime in minutes.
    """

    secret: str
    issuer: str
    audience: str
    expiration_minutes: int = 60

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> JwtSettings:
        """Build settings from a Flask config mapping."""
        return cls(
            secret=str(config.get("JWT_SECRET", "")),
            issuer=str(config.get("JWT_ISSUER", "")),
            audience=str(config.get("JWT_AUDIENCE", "")),
            expiration_minutes=int(config.get("JWT_EXPIRATION_MINUTES", 60)),
        )

    @property
    def expires_delta(self) -> timedelta:
        return timedelta(minutes=self.expiration_minutes)

    @property
    def expires_in_seconds(self) -> int:
        return self.expiration_minutes * 60

    def validate(self) -> None:
        """
        Reject settings that would make token issuance or verification fail.

        :raises ValueError: On an empty secret/issuer/audience or a
            non-positive expiration.
        """
        missing = [
            name
            for name, value in (
                ("JWT_SECRET", self.secret),
                ("JWT_ISSUER", self.issuer),
                ("JWT_AUDIENCE", self.audience),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"Missing JWT settings: {', '.join(missing)}")
        if self.expiration_minutes <= 0:
            raise ValueError("JWT_EXPIRATION_MINUTES must be greater than 0")

    def flask_jwt_config(self) -> dict[str, Any]:
        """
        Translate settings into ``flask-jwt-extended`` configuration keys.

        Verification uses zero leeway and reads tokens from the
        ``Authorization: Bearer`` header only.
        """
        return {
            "JWT_SECRET_KEY": self.secret,
            "JWT_ALGORITHM": "HS256",
            "JWT_DECODE_ALGORITHMS": ["HS256"],
            "JWT_TOKEN_LOCATION": ["headers"],
            "JWT_HEADER_NAME": "Authorization",
            "JWT_HEADER_TYPE": "Bearer",
            "JWT_ENCODE_ISSUER": self.issuer,
            "JWT_DECODE_ISSUER": self.issuer,
            "JWT_ENCODE_AUDIENCE": self.audience,
            "JWT_DECODE_AUDIENCE": self.audience,
            "JWT_ACCESS_TOKEN_EXPIRES": self.expires_delta,
            "JWT_DECODE_LEEWAY": 0,
            "JWT_ENCODE_NBF": True,
        }


@dataclass(frozen=True, slots=True)
class AuthUser:
    """
    The single account allowed to log in.

    :param username: Configured user name.
    :param password: Configured plaintext password.
    """

    username: str
    password: str

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> AuthUser:
        """Build the credential record from a Flask config mapping."""
        return cls(
            username=str(config.get("AUTH_USERNAME", "")),
            password=str(config.get("AUTH_PASSWORD", "")),
        )

    def __repr__(self) -> str:
        return f"AuthUser(username={self.username!r}, password='***')"
