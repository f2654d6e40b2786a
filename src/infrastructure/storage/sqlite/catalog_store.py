"""SQLite implementation of the sellable product catalog."""

import aiosqlite

from src.config import get_logger
from src.core.entities.catalog import (
    BottleType,
    ProductType,
    SimpleProduct,
    VariationProduct,
    sellable_product_adapter,
)
from src.core.interfaces.catalog_store import ICatalogStore
from src.infrastructure.storage.sqlite.connection import fetch_all, fetch_one

logger = get_logger(__name__)


def _row_to_bottle(row: aiosqlite.Row) -> BottleType | None:
    if row["bottle_type_id"] is None:
        return None
    return BottleType(
        id=row["bottle_type_id"],
        size=row["bottle_size"] or "-",
        capacity_ml=row["capacity_ml"],
    )


class SQLiteCatalogStore(ICatalogStore):
    """Reads sellable products, their variations and bottle types."""

    async def get_sellable_product(
        self, sellable_product_id: str
    ) -> SimpleProduct | VariationProduct | None:
        """
        Get a sellable product by ID.

        A simple product uses its first variation's bottle when it has
        variation rows, otherwise its own bottle_type_id. Its variation row
        IDs are kept because order items reference them.
        """
        row = await fetch_one(
            """
            SELECT sp.id, sp.code, sp.name, sp.product_id, sp.product_type,
                   sp.bottle_type_id, bt.size AS bottle_size, bt.capacity_ml
            FROM sellable_products sp
            LEFT JOIN bottle_types bt ON bt.id = sp.bottle_type_id
            WHERE sp.id = ?
            """,
            (sellable_product_id,),
            operation="get_sellable_product",
        )
        if row is None:
            logger.debug("sellable_product_not_found", sellable_product_id=sellable_product_id)
            return None

        variation_rows = await fetch_all(
            """
            SELECT v.id, v.bottle_type_id, bt.size AS bottle_size, bt.capacity_ml
            FROM sellable_product_variations v
            LEFT JOIN bottle_types bt ON bt.id = v.bottle_type_id
            WHERE v.sellable_product_id = ?
            ORDER BY v.created_at, v.id
            """,
            (sellable_product_id,),
            operation="get_product_variations",
        )

        data = {
            "id": row["id"],
            "code": row["code"] or "",
            "name": row["name"] or "",
            "base_product_id": row["product_id"],
            "product_type": row["product_type"],
        }

        if row["product_type"] == ProductType.VARIATION.value:
            data["variations"] = [
                {"id": v["id"], "bottle_type": _row_to_bottle(v)} for v in variation_rows
            ]
        else:
            data["variation_ids"] = [v["id"] for v in variation_rows]
            data["bottle_type"] = (
                _row_to_bottle(variation_rows[0]) if variation_rows else _row_to_bottle(row)
            )

        return sellable_product_adapter.validate_python(data)
