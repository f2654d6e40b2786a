"""Tests for catalog entities."""

import pytest
from pydantic import ValidationError

from src.core.entities import (
    BottleType,
    ProductType,
    ProductVariation,
    SimpleProduct,
    VariationProduct,
    sellable_product_adapter,
)


class TestSellableProductUnion:
    def test_simple_product_from_dict(self):
        product = sellable_product_adapter.validate_python(
            {
                "id": "P1",
                "product_type": "simple",
                "base_product_id": "BP1",
                "bottle_type": {"id": "B1000", "capacity_ml": 1000},
            }
        )
        assert isinstance(product, SimpleProduct)
        assert product.product_type == ProductType.SIMPLE
        assert product.bottle_type.capacity_ml == 1000

    def test_variation_product_from_dict(self):
        product = sellable_product_adapter.validate_python(
            {
                "id": "P2",
                "product_type": "variation",
                "variations": [{"id": "V250", "bottle_type": {"id": "B250", "capacity_ml": 250}}],
            }
        )
        assert isinstance(product, VariationProduct)
        assert product.variations[0].bottle_type.id == "B250"

    def test_unknown_product_type_rejected(self):
        with pytest.raises(ValidationError):
            sellable_product_adapter.validate_python({"id": "P9", "product_type": "bundle"})

    def test_defaults(self):
        product = SimpleProduct(id="P1")
        assert product.code == ""
        assert product.base_product_id is None
        assert product.bottle_type is None


class TestVariationProduct:
    def test_get_variation(self):
        product = VariationProduct(
            id="P2",
            variations=[
                ProductVariation(id="V250", bottle_type=BottleType(id="B250", capacity_ml=250)),
                ProductVariation(id="V500"),
            ],
        )
        assert product.get_variation("V250").bottle_type.id == "B250"
        assert product.get_variation("V500").bottle_type is None
        assert product.get_variation("V999") is None
