"""Product repository exposing persistence-focused helpers.

The :class:`ProductRepository` extends
:class:`~products_api.repositories.base.BaseRepository` with a full-record
replace that detects a vanished row at write time instead of reading first.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import update

from products_api.models.product import Product
from products_api.repositories.base import BaseRepository
from products_api.services._shared.errors import ConcurrencyError


class ProductRepository(BaseRepository[Product]):
    """Persist :class:`Product` rows."""

    model = Product

    def replace(self, product_id: int, *, name: str, value: Decimal) -> None:
        """Overwrite every mutable column of the row identified by ``product_id``.

        :param product_id: Primary key of the row to replace.
        :param name: New product name.
        :param value: New product value.
        :raises ConcurrencyError: When the ``UPDATE`` matched no row.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == product_id)
            .values(name=name, value=value)
            .execution_options(synchronize_session="evaluate")
        )
        result = self.session.execute(stmt)
        if result.rowcount != 1:
            raise ConcurrencyError(
                "Product",
                product_id,
                f"expected to update 1 row, {result.rowcount} were matched",
            )
