"""Tests for the SQLite catalog, recipe, stock and order stores."""

from datetime import date
from decimal import Decimal

import aiosqlite
import pytest

from src.core.entities import OrderStatus, PlanningItem, SimpleProduct, VariationProduct
from src.core.exceptions import DatabaseError
from src.core.services import PlanReportAssembler, ProductionPlannerService
from src.infrastructure.storage.sqlite.catalog_store import SQLiteCatalogStore
from src.infrastructure.storage.sqlite.order_store import SQLiteOrderStore
from src.infrastructure.storage.sqlite.recipe_store import SQLiteRecipeStore
from src.infrastructure.storage.sqlite.stock_store import SQLiteStockStore


class TestSQLiteCatalogStore:
    async def test_simple_product(self, seeded_pool):
        product = await SQLiteCatalogStore().get_sellable_product("P1")

        assert isinstance(product, SimpleProduct)
        assert product.name == "Green Tea 1L"
        assert product.base_product_id == "BP1"
        assert product.bottle_type.id == "B1000"
        assert product.bottle_type.capacity_ml == 1000

    async def test_variation_product_lists_variations_in_creation_order(self, seeded_pool):
        product = await SQLiteCatalogStore().get_sellable_product("P2")

        assert isinstance(product, VariationProduct)
        assert [v.id for v in product.variations] == ["V250", "V500"]
        assert product.get_variation("V500").bottle_type.size == "500 ml"

    async def test_simple_product_with_variation_row_uses_its_bottle(self, seeded_pool):
        product = await SQLiteCatalogStore().get_sellable_product("P5")

        assert isinstance(product, SimpleProduct)
        assert product.bottle_type.id == "B500"
        assert product.variation_ids == ["V5"]

    async def test_bottle_without_capacity(self, seeded_pool):
        product = await SQLiteCatalogStore().get_sellable_product("P4")

        assert product.bottle_type.id == "B_BROKEN"
        assert product.bottle_type.capacity_ml is None

    async def test_unknown_product(self, seeded_pool):
        assert await SQLiteCatalogStore().get_sellable_product("NOPE") is None


class TestSQLiteRecipeStore:
    async def test_recipe_lines_with_units(self, seeded_pool):
        lines = await SQLiteRecipeStore().get_recipe("BP1")

        assert [(line.ingredient_id, line.quantity_per_liter, line.unit) for line in lines] == [
            ("I1", 0.1, "kg"),
            ("I2", 0.5, "L"),
        ]

    async def test_no_recipe(self, seeded_pool):
        assert await SQLiteRecipeStore().get_recipe("BP2") == []


class TestSQLiteStockStore:
    async def test_ingredient_stock(self, seeded_pool):
        stock = await SQLiteStockStore().get_ingredient_stock("I1")

        assert stock.name == "Tea Leaves"
        assert stock.current_stock == 1.5
        assert stock.average_unit_price == 100

    async def test_bottle_stock(self, seeded_pool):
        stock = await SQLiteStockStore().get_bottle_stock("B250")

        assert stock.size == "250 ml"
        assert stock.current_stock == 10
        assert stock.unit_price == 2

    async def test_missing_records(self, seeded_pool):
        store = SQLiteStockStore()

        assert await store.get_ingredient_stock("I9") is None
        assert await store.get_bottle_stock("B9") is None


class TestSQLiteOrderStore:
    async def test_lines_in_range_without_cancelled(self, seeded_pool):
        lines = await SQLiteOrderStore().list_order_lines(date(2026, 3, 1), date(2026, 3, 7))

        assert [(line.order_number, line.sellable_product_id, line.quantity) for line in lines] == [
            ("ORD-002", "P2", 5),
            ("ORD-001", "P1", 10),
            ("ORD-001", "P2", 3),
        ]
        assert all(line.order_status != OrderStatus.CANCELLED for line in lines)

    async def test_line_fields(self, seeded_pool):
        lines = await SQLiteOrderStore().list_order_lines(date(2026, 3, 1), date(2026, 3, 1))

        [line] = lines
        assert line.customer_name == "Unknown"
        assert line.delivery_date == date(2026, 3, 1)
        assert line.variation_id == "V250"
        assert line.order_status == OrderStatus.PENDING

    async def test_range_bounds_are_inclusive(self, seeded_pool):
        lines = await SQLiteOrderStore().list_order_lines(date(2026, 3, 2), date(2026, 3, 9))

        assert {line.order_number for line in lines} == {"ORD-001", "ORD-003"}

    async def test_empty_range(self, seeded_pool):
        assert await SQLiteOrderStore().list_order_lines(date(2027, 1, 1), date(2027, 1, 31)) == []


class TestStoreErrors:
    async def test_driver_errors_become_database_error(self, seeded_pool):
        async with seeded_pool.acquire() as conn:
            await conn.execute("DROP TABLE order_items")
            await conn.commit()

        with pytest.raises(DatabaseError) as exc_info:
            await SQLiteOrderStore().list_order_lines(date(2026, 3, 1), date(2026, 3, 7))

        assert exc_info.value.details["operation"] == "list_order_lines"
        assert isinstance(exc_info.value.__cause__, aiosqlite.Error)


class TestPlanningOverSQLite:
    async def test_simple_product_line_with_its_variation_row(self, seeded_pool):
        planner = ProductionPlannerService(
            catalog_store=SQLiteCatalogStore(),
            recipe_store=SQLiteRecipeStore(),
            stock_store=SQLiteStockStore(),
            lookup_timeout=5.0,
            max_concurrent_lookups=4,
            assembler=PlanReportAssembler(),
        )

        report = await planner.calculate(
            [
                PlanningItem(sellable_product_id="P5", variation_id="V5", quantity=10),
                PlanningItem(sellable_product_id="P1", quantity=1),
            ]
        )

        assert report.issues == []
        assert [(p.sellable_product_id, p.variation_id) for p in report.product_lines] == [
            ("P5", None),
            ("P1", None),
        ]
        assert {m.ingredient_id: m.total_quantity for m in report.materials} == {
            "I1": Decimal("0.6"),
            "I2": Decimal("3"),
        }
        assert {b.bottle_type_id: b.total_quantity for b in report.bottles} == {
            "B1000": 1,
            "B500": 10,
        }
