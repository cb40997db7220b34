"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from products_api.core.config import AuthUser, JwtSettings

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
jwt = JWTManager()

JWT_SETTINGS_KEY = "jwt_settings"
AUTH_USER_KEY = "auth_user"


def init_app(app: Flask) -> None:
    """Freeze the auth settings, then initialize SQLAlchemy and JWT extensions.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. The immutable
        :class:`JwtSettings` and :class:`AuthUser` records are built here once
        and stored in ``app.extensions``; the ``flask-jwt-extended`` keys are
        derived from them before :class:`JWTManager` is bound.

    Raises
    ------
    ValueError
        If the JWT settings are incomplete.
    """
    settings = JwtSettings.from_mapping(app.config)
    settings.validate()
    app.config.update(settings.flask_jwt_config())
    app.extensions[JWT_SETTINGS_KEY] = settings
    app.extensions[AUTH_USER_KEY] = AuthUser.from_mapping(app.config)

    db.init_app(app)

    # Ensure models are imported so metadata is complete before create_all()
    from products_api import models as _models  # noqa: F401

    jwt.init_app(app)

    from products_api.core import security

    security.register_callbacks(jwt)


def get_jwt_settings(app: Flask) -> JwtSettings:
    """Return the frozen JWT settings registered by :func:`init_app`."""
    try:
        return app.extensions[JWT_SETTINGS_KEY]
    except KeyError as exc:
        raise RuntimeError("JWT settings are not initialized. Call init_app() first.") from exc


def get_auth_user(app: Flask) -> AuthUser:
    """Return the configured credential record registered by :func:`init_app`."""
    try:
        return app.extensions[AUTH_USER_KEY]
    except KeyError as exc:
        raise RuntimeError("Auth user is not initialized. Call init_app() first.") from exc
