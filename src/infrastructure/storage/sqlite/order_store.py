"""SQLite implementation of order line storage."""

from datetime import date

from src.config import get_logger
from src.core.entities.order import OrderLine, OrderStatus
from src.core.interfaces.order_store import IOrderStore
from src.infrastructure.storage.sqlite.connection import fetch_all

logger = get_logger(__name__)


class SQLiteOrderStore(IOrderStore):
    """Reads order items joined with their order header and customer."""

    async def list_order_lines(
        self, start_date: date, end_date: date
    ) -> list[OrderLine]:
        """List non-cancelled order lines due in [start_date, end_date]."""
        rows = await fetch_all(
            """
            SELECT o.id AS order_id, o.order_number, o.delivery_date, o.order_status,
                   COALESCE(c.name, 'Unknown') AS customer_name,
                   oi.sellable_product_id, oi.variation_id, oi.quantity
            FROM orders o
            JOIN order_items oi ON oi.order_id = o.id
            LEFT JOIN customers c ON c.id = o.customer_id
            WHERE o.delivery_date >= ? AND o.delivery_date <= ?
              AND o.order_status != ?
            ORDER BY o.delivery_date, o.order_number, oi.id
            """,
            (start_date.isoformat(), end_date.isoformat(), OrderStatus.CANCELLED.value),
            operation="list_order_lines",
        )

        lines = [
            OrderLine(
                order_id=row["order_id"],
                order_number=row["order_number"],
                customer_name=row["customer_name"],
                delivery_date=date.fromisoformat(row["delivery_date"]),
                order_status=OrderStatus(row["order_status"]),
                sellable_product_id=row["sellable_product_id"],
                variation_id=row["variation_id"],
                quantity=row["quantity"],
            )
            for row in rows
        ]
        logger.debug(
            "order_lines_listed",
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
            count=len(lines),
        )
        return lines
