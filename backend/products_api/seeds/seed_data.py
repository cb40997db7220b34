"""Idempotent database seed helpers for the sample product catalogue."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from products_api.models.product import Product

LOGGER = logging.getLogger(__name__)

PRODUCT_FIXTURES: list[dict[str, Any]] = [
    {"name": "Product 1", "value": Decimal("100.00")},
    {"name": "Product 2", "value": Decimal("200.00")},
    {"name": "Product 3", "value": Decimal("300.00")},
]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool, count: int = 1) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += count
    else:
        entry["existing"] += count


def seed_products(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Insert the sample products when the ``products`` table is empty.

    A table that already holds rows is left untouched, whatever it contains.
    """
    if verbose:
        LOGGER.info("Seeding products...")
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}

    with session.begin():
        existing = session.execute(select(func.count()).select_from(Product)).scalar_one()
        if existing:
            _touch(summary, "products", False, existing)
            return summary
        for fixture in PRODUCT_FIXTURES:
            session.add(Product(name=fixture["name"], value=fixture["value"]))
            _touch(summary, "products", True)
        session.flush()
        if verbose:
            LOGGER.debug("Inserted %d sample products", len(PRODUCT_FIXTURES))

    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run all seeders."""
    if verbose:
        LOGGER.info("Running full seed pipeline...")
    combined: dict[str, dict[str, int]] = {}
    for seeder in (seed_products,):
        result = seeder(database, verbose=verbose)
        for table, counters in result.items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    return combined


__all__ = ["PRODUCT_FIXTURES", "seed_products", "run_all"]
