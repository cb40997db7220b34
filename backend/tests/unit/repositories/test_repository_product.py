"""Unit tests for ``ProductRepository`` persistence helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from products_api.repositories.product import ProductRepository
from products_api.services._shared.errors import ConcurrencyError
from tests.factories.product import ProductFactory


class TestProductRepository:
    """Confirm listing, lookups and the write-time replace check."""

    @pytest.fixture()
    def repo(self, session) -> ProductRepository:
        return ProductRepository(session=session)

    def test_add_assigns_primary_key(self, repo):
        product = ProductFactory.build(name="Desk", value=Decimal("120.00"))
        repo.add(product)
        assert product.id is not None
        assert repo.get(product.id) is product

    def test_list_all_is_ordered_by_id(self, repo):
        created = ProductFactory.create_batch(2)
        ids = [p.id for p in repo.list_all()]
        assert ids == sorted(ids)
        assert ids[-2:] == [p.id for p in created]

    def test_exists_and_count(self, repo):
        assert repo.count() == 3
        assert repo.exists(id=1) is True
        assert repo.exists(id=1234) is False

    def test_replace_overwrites_loaded_instance(self, repo):
        product = repo.get(1)
        repo.replace(1, name="Chair", value=Decimal("45.10"))
        assert (product.name, product.value) == ("Chair", Decimal("45.10"))

    def test_replace_unknown_id_raises_concurrency_error(self, repo):
        with pytest.raises(ConcurrencyError) as exc_info:
            repo.replace(5000, name="Nobody", value=Decimal("1.00"))
        assert exc_info.value.key == 5000

    def test_delete_removes_row(self, repo):
        product = ProductFactory()
        repo.delete(product)
        assert repo.exists(id=product.id) is False
