"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.catalog_store import SQLiteCatalogStore
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    fetch_all,
    fetch_one,
    get_connection,
    get_pool,
)
from src.infrastructure.storage.sqlite.order_store import SQLiteOrderStore
from src.infrastructure.storage.sqlite.recipe_store import SQLiteRecipeStore
from src.infrastructure.storage.sqlite.stock_store import SQLiteStockStore

# Singleton instances
_catalog_store: SQLiteCatalogStore | None = None
_recipe_store: SQLiteRecipeStore | None = None
_stock_store: SQLiteStockStore | None = None
_order_store: SQLiteOrderStore | None = None


async def get_catalog_store() -> SQLiteCatalogStore:
    """Get singleton catalog store instance."""
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = SQLiteCatalogStore()
    return _catalog_store


async def get_recipe_store() -> SQLiteRecipeStore:
    """Get singleton recipe store instance."""
    global _recipe_store
    if _recipe_store is None:
        _recipe_store = SQLiteRecipeStore()
    return _recipe_store


async def get_stock_store() -> SQLiteStockStore:
    """Get singleton stock store instance."""
    global _stock_store
    if _stock_store is None:
        _stock_store = SQLiteStockStore()
    return _stock_store


async def get_order_store() -> SQLiteOrderStore:
    """Get singleton order store instance."""
    global _order_store
    if _order_store is None:
        _order_store = SQLiteOrderStore()
    return _order_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "fetch_one",
    "fetch_all",
    # Store classes
    "SQLiteCatalogStore",
    "SQLiteRecipeStore",
    "SQLiteStockStore",
    "SQLiteOrderStore",
    # Factory functions
    "get_catalog_store",
    "get_recipe_store",
    "get_stock_store",
    "get_order_store",
]
