"""Abstract interface for on-hand stock and unit prices."""

from abc import ABC, abstractmethod

from src.core.entities.stock import BottleStock, IngredientStock


class IStockStore(ABC):
    """Read-only view of ingredient and bottle inventory."""

    @abstractmethod
    async def get_ingredient_stock(self, ingredient_id: str) -> IngredientStock | None:
        """Get stock and weighted average price of an ingredient."""
        pass

    @abstractmethod
    async def get_bottle_stock(self, bottle_type_id: str) -> BottleStock | None:
        """Get stock and unit price of a bottle type."""
        pass
