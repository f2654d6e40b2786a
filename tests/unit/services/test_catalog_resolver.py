"""Tests for CatalogResolver."""

from decimal import Decimal

import pytest

from src.core.entities import BottleType, PlanningItem, SimpleProduct
from src.core.exceptions import MissingCapacityError
from src.core.services.catalog_resolver import CatalogResolver
from src.core.services.plan_normalizer import ValidatedItem


def _validated(product, quantity=10, variation_id=None, index=0):
    return ValidatedItem(
        index=index,
        item=PlanningItem(
            sellable_product_id=product.id, variation_id=variation_id, quantity=quantity
        ),
        product=product,
    )


class TestCatalogResolver:
    def test_simple_product(self, catalog):
        resolved = CatalogResolver().resolve(_validated(catalog["P1"], quantity=20))

        assert resolved.bottle_type_id == "B1000"
        assert resolved.capacity_ml == Decimal("1000")
        assert resolved.base_product_id == "BP1"
        assert resolved.sellable_product_name == "Green Tea 1L"
        assert resolved.quantity == 20

    def test_variation_product_uses_variation_bottle(self, catalog):
        resolved = CatalogResolver().resolve(_validated(catalog["P2"], variation_id="V250"))

        assert resolved.bottle_type_id == "B250"
        assert resolved.bottle_size == "250 ml"
        assert resolved.capacity_ml == Decimal("250")
        assert resolved.product_key == ("P2", "V250")

    def test_simple_product_variation_row_merges_with_plain_lines(self):
        product = SimpleProduct(
            id="P5",
            bottle_type=BottleType(id="B500", capacity_ml=500),
            variation_ids=["V5"],
        )

        resolved = CatalogResolver().resolve(_validated(product, variation_id="V5"))

        assert resolved.product_key == ("P5", None)
        assert resolved.bottle_type_id == "B500"

    def test_missing_capacity_names_item(self, catalog):
        with pytest.raises(MissingCapacityError) as exc_info:
            CatalogResolver().resolve(_validated(catalog["P4"], index=3))

        assert exc_info.value.details["index"] == 3
        assert exc_info.value.details["bottle_type_id"] == "B_BROKEN"

    def test_zero_capacity_rejected(self):
        product = SimpleProduct(id="P0", bottle_type=BottleType(id="B0", capacity_ml=0))
        with pytest.raises(MissingCapacityError):
            CatalogResolver().resolve(_validated(product))

    def test_missing_bottle_rejected(self):
        product = SimpleProduct(id="P0", bottle_type=None)
        with pytest.raises(MissingCapacityError) as exc_info:
            CatalogResolver().resolve(_validated(product))

        assert exc_info.value.details["bottle_type_id"] is None
