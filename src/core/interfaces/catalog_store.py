"""Abstract interface for the product catalog."""

from abc import ABC, abstractmethod

from src.core.entities.catalog import SimpleProduct, VariationProduct


class ICatalogStore(ABC):
    """Interface for resolving sellable products to their catalog facts."""

    @abstractmethod
    async def get_sellable_product(
        self, sellable_product_id: str
    ) -> SimpleProduct | VariationProduct | None:
        """Get a sellable product with its bottle type(s), or None if unknown."""
        pass
