"""Pytest fixtures for the Products API.

Every test gets its own application and therefore its own in-memory SQLite
database, created and seeded with the three sample products at startup.
Integration tests talk to the app through the Flask test client without an
outer app context, so each request runs in a context of its own.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest
from flask import Flask

from products_api.core.config import TestingConfig
from products_api.core.extensions import db as _db
from products_api.factory import create_app
from tests.helpers.auth import expired_token, issue_token


@pytest.fixture()
def app_config() -> type[TestingConfig]:
    """Configuration class used by :func:`app`; override per module if needed."""
    return TestingConfig


@pytest.fixture()
def app(app_config: type[TestingConfig]) -> Flask:
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with a freshly seeded in-memory database.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    application = create_app(app_config)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture()
def app_ctx(app: Flask) -> Generator[Flask, None, None]:
    """Push an application context for tests that use services or repositories."""
    with app.app_context():
        yield app


@pytest.fixture()
def db(app_ctx: Flask) -> Generator[Any, None, None]:
    """Return the database extension bound to the current test app."""
    yield _db
    _db.session.remove()


@pytest.fixture()
def session(db: Any) -> Any:
    """Provide the Flask-scoped session and wire Factory Boy to it."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(db.session)
    return db.session


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def username(app: Flask) -> str:
    """The configured account name."""
    return str(app.config["AUTH_USERNAME"])


@pytest.fixture()
def auth_token(app: Flask, username: str) -> str:
    """Generate a valid JWT for the configured account."""
    with app.app_context():
        return issue_token(username)


@pytest.fixture()
def auth_header(auth_token: str) -> dict[str, str]:
    """Authorization header for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture()
def expired_auth_token(app: Flask, username: str) -> str:
    """Return an already expired JWT for the configured account."""
    with app.app_context():
        return expired_token(username)


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
