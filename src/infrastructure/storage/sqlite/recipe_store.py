"""SQLite implementation of recipe storage."""

from src.core.entities.recipe import RecipeLine
from src.core.interfaces.recipe_store import IRecipeStore
from src.infrastructure.storage.sqlite.connection import fetch_all


class SQLiteRecipeStore(IRecipeStore):
    """Reads product_recipes joined with raw material units."""

    async def get_recipe(self, base_product_id: str) -> list[RecipeLine]:
        rows = await fetch_all(
            """
            SELECT pr.product_id, pr.raw_material_id, pr.quantity_per_unit,
                   COALESCE(rm.unit, '') AS unit
            FROM product_recipes pr
            LEFT JOIN raw_materials rm ON rm.id = pr.raw_material_id
            WHERE pr.product_id = ?
            ORDER BY pr.raw_material_id
            """,
            (base_product_id,),
            operation="get_recipe",
        )
        return [
            RecipeLine(
                base_product_id=row["product_id"],
                ingredient_id=row["raw_material_id"],
                quantity_per_liter=row["quantity_per_unit"],
                unit=row["unit"],
            )
            for row in rows
        ]
