"""Recipe domain entities."""

from pydantic import BaseModel, Field


class RecipeLine(BaseModel):
    """Quantity of one ingredient needed per liter of a base product."""

    base_product_id: str
    ingredient_id: str  # FK → raw_materials.id
    quantity_per_liter: float = Field(ge=0)
    unit: str = ""
