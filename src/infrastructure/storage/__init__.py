"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteCatalogStore,
    SQLiteOrderStore,
    SQLiteRecipeStore,
    SQLiteStockStore,
    close_pool,
    get_connection,
    get_pool,
)

__all__ = [
    # SQLite stores
    "SQLiteCatalogStore",
    "SQLiteRecipeStore",
    "SQLiteStockStore",
    "SQLiteOrderStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
]
