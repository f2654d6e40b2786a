"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Item-level rules (positive quantity, variation fit) are checked by the
planner so that one bad item is reported without failing the batch.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.core.entities.planning import PlanningItem


class PlanItemRequest(BaseModel):
    """One product to plan for."""

    sellable_product_id: str = Field(
        ...,
        min_length=1,
        description="Sellable product ID",
        examples=["sp_green_tea"],
    )
    variation_id: str | None = Field(
        default=None,
        description="Size variation ID (required for variation products)",
        examples=["var_250ml"],
    )
    quantity: int = Field(
        ...,
        description="Number of bottles to produce",
        examples=[20],
    )

    def to_planning_item(self) -> PlanningItem:
        return PlanningItem(
            sellable_product_id=self.sellable_product_id,
            variation_id=self.variation_id or None,
            quantity=self.quantity,
        )


class CalculatePlanRequest(BaseModel):
    """Request for an ad-hoc production plan."""

    items: list[PlanItemRequest] = Field(
        default_factory=list,
        description="Products and quantities to plan for",
    )


class OrdersPlanRequest(BaseModel):
    """Request for a production plan built from customer orders."""

    start_date: date = Field(..., description="First delivery date (inclusive)")
    end_date: date = Field(..., description="Last delivery date (inclusive)")
