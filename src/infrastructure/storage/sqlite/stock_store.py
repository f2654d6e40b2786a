"""SQLite implementation of ingredient and bottle stock lookups."""

from src.core.entities.stock import BottleStock, IngredientStock
from src.core.interfaces.stock_store import IStockStore
from src.infrastructure.storage.sqlite.connection import fetch_one


class SQLiteStockStore(IStockStore):
    """Reads on-hand stock and average prices from raw_materials and bottle_types."""

    async def get_ingredient_stock(self, ingredient_id: str) -> IngredientStock | None:
        """Get stock and weighted average price of a raw material."""
        row = await fetch_one(
            """
            SELECT id, name, unit, current_stock, average_price
            FROM raw_materials WHERE id = ?
            """,
            (ingredient_id,),
            operation="get_ingredient_stock",
        )
        if row is None:
            return None
        return IngredientStock(
            ingredient_id=row["id"],
            name=row["name"] or "",
            unit=row["unit"] or "",
            current_stock=row["current_stock"] or 0,
            average_unit_price=row["average_price"] or 0,
        )

    async def get_bottle_stock(self, bottle_type_id: str) -> BottleStock | None:
        """Get stock and average price of a bottle type."""
        row = await fetch_one(
            """
            SELECT id, size, capacity_ml, current_stock, average_price
            FROM bottle_types WHERE id = ?
            """,
            (bottle_type_id,),
            operation="get_bottle_stock",
        )
        if row is None:
            return None
        return BottleStock(
            bottle_type_id=row["id"],
            size=row["size"] or "-",
            capacity_ml=row["capacity_ml"],
            current_stock=row["current_stock"] or 0,
            unit_price=row["average_price"] or 0,
        )
