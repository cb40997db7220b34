# products_api/services/products/service.py
from __future__ import annotations

import logging

from products_api.models.product import Product
from products_api.repositories.product import ProductRepository
from products_api.services._shared.base import BaseService
from products_api.services._shared.errors import ConcurrencyError, NotFoundError
from products_api.services.products.dto import ProductIn, ProductOut, ProductReplaceIn

log = logging.getLogger(__name__)


class ProductService(BaseService):
    """
    Application service coordinating the product lifecycle.

    Responsibilities
    ----------------
    - List, read, create, fully replace and delete products.
    - Resolve a replace that matched no row into :class:`NotFoundError` when
      the row is gone; any other conflict propagates unchanged.

    Notes
    -----
    - Inputs arrive already validated by the API schemas.
    - This service is framework-agnostic; no Flask/HTTP types leak here.
    """

    # ------------------------------------------------------------------ #
    # Read
    # ------------------------------------------------------------------ #

    def list_products(self) -> list[ProductOut]:
        """Return every product in store order."""
        log.info("Getting all products")
        with self.ro_uow() as uow:
            repo: ProductRepository = uow.products
            return [self._to_out(row) for row in repo.list_all()]

    def get_product(self, product_id: int) -> ProductOut:
        """
        Retrieve a single product by id.

        :param product_id: Primary key.
        :returns: Product projection.
        :raises NotFoundError: When the id does not exist.
        """
        log.info("Getting product", extra={"product_id": product_id})
        with self.ro_uow() as uow:
            repo: ProductRepository = uow.products
            row = repo.get(product_id)
            if row is None:
                log.warning("Product not found", extra={"product_id": product_id})
                raise NotFoundError("Product", product_id)
            return self._to_out(row)

    # ------------------------------------------------------------------ #
    # Write
    # ------------------------------------------------------------------ #

    def create_product(self, dto: ProductIn) -> ProductOut:
        """
        Persist a new product; the store assigns the id.

        :param dto: Validated fields.
        :returns: Stored product including its id.
        """
        with self.rw_uow() as uow:
            repo: ProductRepository = uow.products
            row = repo.add(Product(name=dto.name, value=dto.value))
            out = self._to_out(row)
        log.info("Created product", extra={"product_id": out.id})
        return out

    def replace_product(self, dto: ProductReplaceIn) -> None:
        """
        Overwrite every field of an existing product.

        The write is attempted without reading the row first. When it matches
        nothing, existence is re-checked: a missing row becomes
        :class:`NotFoundError`, anything else is re-raised.

        :param dto: Target id and new fields.
        :raises NotFoundError: When the id does not exist at write time.
        :raises ConcurrencyError: When the row exists but the write still failed.
        """
        log.info("Updating product", extra={"product_id": dto.id})
        try:
            with self.rw_uow() as uow:
                repo: ProductRepository = uow.products
                repo.replace(dto.id, name=dto.fields.name, value=dto.fields.value)
        except ConcurrencyError:
            with self.ro_uow() as uow:
                still_there = uow.products.exists(id=dto.id)
            if not still_there:
                log.warning("Product not found for update", extra={"product_id": dto.id})
                raise NotFoundError("Product", dto.id) from None
            log.error("Concurrency error updating product", extra={"product_id": dto.id})
            raise
        log.info("Updated product", extra={"product_id": dto.id})

    def delete_product(self, product_id: int) -> None:
        """
        Remove a product.

        :param product_id: Primary key.
        :raises NotFoundError: When the id does not exist.
        """
        log.info("Deleting product", extra={"product_id": product_id})
        with self.rw_uow() as uow:
            repo: ProductRepository = uow.products
            row = repo.get(product_id)
            if row is None:
                log.warning("Product not found for deletion", extra={"product_id": product_id})
                raise NotFoundError("Product", product_id)
            repo.delete(row)
        log.info("Deleted product", extra={"product_id": product_id})

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _to_out(row: Product) -> ProductOut:
        return ProductOut(id=row.id, name=row.name, value=row.value)
