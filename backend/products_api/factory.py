"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

import logging

from flask import Flask

from products_api.core.config import BaseConfig, get_config
from products_api.core.logger import configure_logging, init_app as init_logging

log = logging.getLogger(__name__)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    The JWT and credential settings are frozen during extension setup; when
    ``SEED_ON_STARTUP`` is enabled the schema is created and the sample
    products are inserted before the app is returned.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from products_api.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from products_api.api import init_app as init_api

    init_api(app)

    from products_api.core import errors

    errors.init_app(app)

    from products_api import cli as app_cli

    app_cli.init_app(app)

    if app.config.get("SEED_ON_STARTUP", False):
        _bootstrap_database(app)

    return app


def _bootstrap_database(app: Flask) -> None:
    """Create the schema and load the sample products."""
    from products_api.core.extensions import db
    from products_api.seeds import seed_data

    with app.app_context():
        db.create_all()
        summary = seed_data.run_all(db)
        db.session.remove()
    log.info("Database ready: %s", summary)
