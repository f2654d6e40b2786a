"""
Production planning domain entities.

Requests (PlanningItem), resolved items, and the computed requirement and
cost lines that make up a PlanReport. Computed amounts are Decimal; the
report assembler is the only place that rounds them.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

ZERO = Decimal("0")


class OrderReference(BaseModel):
    """Customer order that contributed quantity to a plan line."""

    order_id: str
    order_number: str
    customer_name: str = "Unknown"
    delivery_date: date
    quantity: int


class PlanningItem(BaseModel):
    """One line of a production request."""

    sellable_product_id: str
    variation_id: str | None = None
    quantity: int
    order: OrderReference | None = None


class ResolvedItem(BaseModel):
    """Planning item enriched with catalog facts."""

    index: int  # position in the original request
    sellable_product_id: str
    sellable_product_code: str = ""
    sellable_product_name: str = ""
    variation_id: str | None = None
    base_product_id: str | None = None
    bottle_type_id: str
    bottle_size: str = "-"
    capacity_ml: Decimal
    quantity: int
    order: OrderReference | None = None

    @property
    def product_key(self) -> tuple[str, str | None]:
        return (self.sellable_product_id, self.variation_id)


class NoteKind(str, Enum):
    """Degraded-but-computed conditions surfaced to the operator."""

    MISSING_RECIPE = "missing_recipe"
    MISSING_STOCK = "missing_stock"
    LOOKUP_FAILURE = "lookup_failure"


class ItemIssue(BaseModel):
    """A planning item that was rejected, and why."""

    index: int
    sellable_product_id: str
    variation_id: str | None = None
    error_code: str
    message: str


class PlanNote(BaseModel):
    """Informational note about data the calculation had to work around."""

    kind: NoteKind
    key: str
    message: str


class MaterialRequirement(BaseModel):
    """Aggregated need for one ingredient."""

    ingredient_id: str
    name: str = ""
    unit: str = ""
    total_quantity: Decimal = ZERO
    average_price: Decimal = ZERO
    total_cost: Decimal = ZERO
    current_stock: Decimal = ZERO
    is_sufficient: bool = False
    shortage: Decimal = ZERO


class BottleRequirement(BaseModel):
    """Aggregated need for one bottle type."""

    bottle_type_id: str
    size: str = "-"
    capacity_ml: Decimal = ZERO
    total_quantity: int = 0
    unit_price: Decimal = ZERO
    total_cost: Decimal = ZERO
    current_stock: Decimal = ZERO
    is_sufficient: bool = False
    shortage: Decimal = ZERO


class ProductCostLine(BaseModel):
    """Cost breakdown for one (sellable product, variation) pair."""

    sellable_product_id: str
    sellable_product_code: str = ""
    sellable_product_name: str = ""
    variation_id: str | None = None
    bottle_type_id: str = ""
    bottle_size: str = "-"
    capacity_ml: Decimal = ZERO
    total_quantity: int = 0
    volume_liters: Decimal = ZERO
    material_cost_per_bottle: Decimal = ZERO
    bottle_cost_per_bottle: Decimal = ZERO
    total_cost_per_bottle: Decimal = ZERO
    total_material_cost: Decimal = ZERO
    total_bottle_cost: Decimal = ZERO
    total_cost: Decimal = ZERO
    orders: list[OrderReference] = Field(default_factory=list)


class PlanTotals(BaseModel):
    """Grand totals of a plan."""

    total_bottles: int = 0
    total_volume_liters: Decimal = ZERO
    total_material_cost: Decimal = ZERO
    total_bottle_cost: Decimal = ZERO
    total_cost: Decimal = ZERO


class DailyPlan(BaseModel):
    """Product lines due on one delivery date."""

    delivery_date: date
    products: list[ProductCostLine] = Field(default_factory=list)
    total_bottles: int = 0
    total_volume_liters: Decimal = ZERO
    total_cost: Decimal = ZERO


class PlanReport(BaseModel):
    """Final result of a production plan calculation. Never persisted."""

    product_lines: list[ProductCostLine] = Field(default_factory=list)
    materials: list[MaterialRequirement] = Field(default_factory=list)
    bottles: list[BottleRequirement] = Field(default_factory=list)
    totals: PlanTotals = Field(default_factory=PlanTotals)
    issues: list[ItemIssue] = Field(default_factory=list)
    notes: list[PlanNote] = Field(default_factory=list)

    # Order-based plans only
    start_date: date | None = None
    end_date: date | None = None
    by_date: list[DailyPlan] = Field(default_factory=list)

    @property
    def has_shortage(self) -> bool:
        return any(not m.is_sufficient for m in self.materials) or any(
            not b.is_sufficient for b in self.bottles
        )
