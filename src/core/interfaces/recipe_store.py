"""Abstract interface for base product recipes."""

from abc import ABC, abstractmethod

from src.core.entities.recipe import RecipeLine


class IRecipeStore(ABC):
    """Interface for reading ingredient quantities per liter of a base product."""

    @abstractmethod
    async def get_recipe(self, base_product_id: str) -> list[RecipeLine]:
        """Get recipe lines for a base product. Empty list when it has none."""
        pass
