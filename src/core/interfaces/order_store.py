"""Abstract interface for customer orders used as planning input."""

from abc import ABC, abstractmethod
from datetime import date

from src.core.entities.order import OrderLine


class IOrderStore(ABC):
    """Interface for reading order lines due in a delivery window."""

    @abstractmethod
    async def list_order_lines(
        self, start_date: date, end_date: date
    ) -> list[OrderLine]:
        """List non-cancelled order lines with delivery_date in [start_date, end_date]."""
        pass
