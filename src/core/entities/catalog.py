"""
Catalog domain entities.

A sellable product is either a simple product (one bottle type) or a
variation product (one bottle type per size variation). The two shapes are
a discriminated union on ``product_type`` so callers never inspect raw rows.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter


class ProductType(str, Enum):
    """Shape of a sellable product."""

    SIMPLE = "simple"
    VARIATION = "variation"


class BottleType(BaseModel):
    """Packaging a sellable product is filled into."""

    id: str
    size: str = "-"  # display label, e.g. "250 ml"
    capacity_ml: float | None = None


class ProductVariation(BaseModel):
    """One size variant of a variation product."""

    id: str
    bottle_type: BottleType | None = None


class _SellableProductBase(BaseModel):
    id: str
    code: str = ""
    name: str = ""
    base_product_id: str | None = None  # FK → products.id (the recipe owner)


class SimpleProduct(_SellableProductBase):
    """Sellable product with a single bottle type."""

    product_type: Literal[ProductType.SIMPLE] = ProductType.SIMPLE
    bottle_type: BottleType | None = None
    variation_ids: list[str] = Field(default_factory=list)  # order items reference these rows


class VariationProduct(_SellableProductBase):
    """Sellable product split into size variations."""

    product_type: Literal[ProductType.VARIATION] = ProductType.VARIATION
    variations: list[ProductVariation] = Field(default_factory=list)

    def get_variation(self, variation_id: str) -> ProductVariation | None:
        """Find a variation of this product by ID."""
        for variation in self.variations:
            if variation.id == variation_id:
                return variation
        return None


SellableProduct = Annotated[
    SimpleProduct | VariationProduct,
    Field(discriminator="product_type"),
]

sellable_product_adapter: TypeAdapter[SimpleProduct | VariationProduct] = TypeAdapter(
    SellableProduct
)
