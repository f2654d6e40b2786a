"""Inventory snapshot entities read at calculation time."""

from pydantic import BaseModel


class IngredientStock(BaseModel):
    """On-hand quantity and weighted average cost of a raw ingredient."""

    ingredient_id: str
    name: str = ""
    unit: str = ""
    current_stock: float = 0.0
    average_unit_price: float = 0.0


class BottleStock(BaseModel):
    """On-hand quantity and unit price of a bottle type."""

    bottle_type_id: str
    size: str = "-"
    capacity_ml: float | None = None
    current_stock: float = 0.0
    unit_price: float = 0.0
