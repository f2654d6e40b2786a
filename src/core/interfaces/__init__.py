"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.catalog_store import ICatalogStore
from src.core.interfaces.order_store import IOrderStore
from src.core.interfaces.recipe_store import IRecipeStore
from src.core.interfaces.stock_store import IStockStore

__all__ = [
    "ICatalogStore",
    "IRecipeStore",
    "IStockStore",
    "IOrderStore",
]
