"""Unit tests for the Product repositories.

Covers:
- ProductDjangoRepository: CRUD against the test database, malformed IDs.
- ProductInMemoryRepository: ID assignment, filters, delete.
- Both satisfy IProductRepository.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from modules.products.constants import ProductStatus
from modules.products.models import Product
from modules.products.repositories import (
    IProductRepository,
    ProductDjangoRepository,
    ProductInMemoryRepository,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    defaults = {
        "title": "Mega Drive",
        "rating": 8,
        "quantity_in_stock": 4,
        "price": Decimal("199.90"),
        "status": ProductStatus.IN_STOCK,
        "date_added": timezone.now() - timedelta(days=1),
    }
    defaults.update(overrides)
    return Product(**defaults)


@pytest.fixture(params=["django", "memory"])
def repo(request) -> IProductRepository:
    if request.param == "django":
        return ProductDjangoRepository()
    return ProductInMemoryRepository()


# ===========================================================================
# Contract (both implementations)
# ===========================================================================


class TestRepositoryContract:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)

    def test_save_assigns_id_and_returns_entity(self, repo):
        product = _make_product()

        saved = repo.save(product)

        assert saved is product
        assert saved.id is not None

    def test_get_by_id_returns_saved_product(self, repo):
        saved = repo.save(_make_product())

        found = repo.get_by_id(saved.id)

        assert found is not None
        assert found.id == saved.id
        assert found.title == "Mega Drive"

    def test_get_by_id_returns_none_when_missing(self, repo):
        assert repo.get_by_id(999_999) is None

    def test_save_updates_existing(self, repo):
        saved = repo.save(_make_product())
        saved.quantity_in_stock = 0
        saved.status = ProductStatus.OUT_OF_STOCK

        repo.save(saved)
        found = repo.get_by_id(saved.id)

        assert found.quantity_in_stock == 0
        assert found.status == ProductStatus.OUT_OF_STOCK

    def test_list_all_in_id_order(self, repo):
        first = repo.save(_make_product(title="First"))
        second = repo.save(_make_product(title="Second"))

        result = repo.list()

        assert [p.id for p in result] == [first.id, second.id]

    def test_list_with_filters(self, repo):
        repo.save(_make_product(title="Available"))
        repo.save(_make_product(title="Coming", status=ProductStatus.PREORDER))

        result = repo.list({"status": ProductStatus.PREORDER})

        assert [p.title for p in result] == ["Coming"]

    def test_delete_existing(self, repo):
        saved = repo.save(_make_product())

        assert repo.delete(saved.id) is True
        assert repo.get_by_id(saved.id) is None

    def test_delete_missing_returns_false(self, repo):
        assert repo.delete(999_999) is False


# ===========================================================================
# Django specifics
# ===========================================================================


class TestDjangoRepository:
    def test_round_trips_all_fields(self):
        repo = ProductDjangoRepository()
        added = timezone.now() - timedelta(days=2)
        modified = added + timedelta(hours=1)
        saved = repo.save(
            _make_product(
                keywords="retro, sega",
                description="d" * 60,
                dimensions="30x20x8 cm",
                weight=Decimal("1.500"),
                date_added=added,
                date_modified=modified,
            )
        )

        found = Product.objects.get(id=saved.id)

        assert found.keywords == "retro, sega"
        assert found.description == "d" * 60
        assert found.dimensions == "30x20x8 cm"
        assert found.price == Decimal("199.90")
        assert found.weight == Decimal("1.500")
        assert found.date_added == added
        assert found.date_modified == modified

    def test_keeps_sub_cent_precision(self):
        repo = ProductDjangoRepository()
        saved = repo.save(_make_product(price=Decimal("1.0000001"), weight=0.01))

        found = Product.objects.get(id=saved.id)

        assert found.price == Decimal("1.0000001")
        assert found.weight == Decimal("0.01")

    def test_get_by_id_returns_none_for_malformed_id(self):
        repo = ProductDjangoRepository()
        assert repo.get_by_id("not-a-number") is None


# ===========================================================================
# In-memory specifics
# ===========================================================================


class TestInMemoryRepository:
    def test_keeps_explicit_id(self):
        repo = ProductInMemoryRepository()

        saved = repo.save(_make_product(id=10))

        assert saved.id == 10
        assert repo.get_by_id(10) is saved

    def test_next_id_follows_highest_existing(self):
        repo = ProductInMemoryRepository()
        repo.save(_make_product(id=10))

        saved = repo.save(_make_product())

        assert saved.id == 11

    def test_instances_do_not_share_state(self):
        first = ProductInMemoryRepository()
        second = ProductInMemoryRepository()
        first.save(_make_product())

        assert second.list() == []
