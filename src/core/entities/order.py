"""Order entities used as a source of planning items."""

from datetime import date
from enum import Enum

from pydantic import BaseModel

from src.core.entities.planning import OrderReference, PlanningItem


class OrderStatus(str, Enum):
    """Lifecycle of a customer order."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PRODUCTION = "in_production"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderLine(BaseModel):
    """One order item joined with its order header."""

    order_id: str
    order_number: str
    customer_name: str = "Unknown"
    delivery_date: date
    order_status: OrderStatus = OrderStatus.PENDING
    sellable_product_id: str
    variation_id: str | None = None
    quantity: int

    def to_planning_item(self) -> PlanningItem:
        """Convert to a planning item that remembers which order it came from."""
        return PlanningItem(
            sellable_product_id=self.sellable_product_id,
            variation_id=self.variation_id,
            quantity=self.quantity,
            order=OrderReference(
                order_id=self.order_id,
                order_number=self.order_number,
                customer_name=self.customer_name,
                delivery_date=self.delivery_date,
                quantity=self.quantity,
            ),
        )
