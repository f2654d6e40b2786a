"""Pytest configuration and shared planning fixtures.

The catalog below is used across service, use case and API tests:

- B1000 / B500 / B250: bottle types of 1000, 500 and 250 ml
- BP1: base product needing 0.1 I1 and 0.5 I2 per liter
- P1: simple product, BP1 in B1000
- P2: variation product, BP1 in V250 (B250) and V500 (B500)
- P3: simple product whose base product has no recipe
- P4: simple product whose bottle type has no capacity
"""

from collections.abc import AsyncGenerator
from datetime import date
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.core.entities import (
    BottleStock,
    BottleType,
    IngredientStock,
    OrderLine,
    OrderStatus,
    ProductVariation,
    RecipeLine,
    SimpleProduct,
    VariationProduct,
)
from src.core.services import PlanReportAssembler, ProductionPlannerService

B1000 = BottleType(id="B1000", size="1 L", capacity_ml=1000)
B500 = BottleType(id="B500", size="500 ml", capacity_ml=500)
B250 = BottleType(id="B250", size="250 ml", capacity_ml=250)
B_NO_CAPACITY = BottleType(id="B_BROKEN", size="?", capacity_ml=None)


@pytest.fixture
def catalog() -> dict:
    """Sellable products by ID."""
    return {
        "P1": SimpleProduct(
            id="P1", code="GT-1L", name="Green Tea 1L", base_product_id="BP1", bottle_type=B1000
        ),
        "P2": VariationProduct(
            id="P2",
            code="GT",
            name="Green Tea",
            base_product_id="BP1",
            variations=[
                ProductVariation(id="V250", bottle_type=B250),
                ProductVariation(id="V500", bottle_type=B500),
            ],
        ),
        "P3": SimpleProduct(
            id="P3", code="LEM", name="Lemonade", base_product_id="BP2", bottle_type=B500
        ),
        "P4": SimpleProduct(
            id="P4", code="BRK", name="Broken", base_product_id="BP1", bottle_type=B_NO_CAPACITY
        ),
    }


@pytest.fixture
def recipes() -> dict:
    """Recipe lines by base product ID."""
    return {
        "BP1": [
            RecipeLine(base_product_id="BP1", ingredient_id="I1", quantity_per_liter=0.1, unit="kg"),
            RecipeLine(base_product_id="BP1", ingredient_id="I2", quantity_per_liter=0.5, unit="L"),
        ],
    }


@pytest.fixture
def ingredient_stock() -> dict:
    """Ingredient stock by ingredient ID."""
    return {
        "I1": IngredientStock(
            ingredient_id="I1", name="Tea Leaves", unit="kg", current_stock=1.5, average_unit_price=100
        ),
        "I2": IngredientStock(
            ingredient_id="I2", name="Syrup", unit="L", current_stock=50, average_unit_price=10
        ),
    }


@pytest.fixture
def bottle_stock() -> dict:
    """Bottle stock by bottle type ID."""
    return {
        "B1000": BottleStock(
            bottle_type_id="B1000", size="1 L", capacity_ml=1000, current_stock=100, unit_price=5
        ),
        "B500": BottleStock(
            bottle_type_id="B500", size="500 ml", capacity_ml=500, current_stock=50, unit_price=3
        ),
        "B250": BottleStock(
            bottle_type_id="B250", size="250 ml", capacity_ml=250, current_stock=10, unit_price=2
        ),
    }


@pytest.fixture
def mock_catalog_store(catalog):
    store = AsyncMock()
    store.get_sellable_product.side_effect = lambda product_id: catalog.get(product_id)
    return store


@pytest.fixture
def mock_recipe_store(recipes):
    store = AsyncMock()
    store.get_recipe.side_effect = lambda base_id: recipes.get(base_id, [])
    return store


@pytest.fixture
def mock_stock_store(ingredient_stock, bottle_stock):
    store = AsyncMock()
    store.get_ingredient_stock.side_effect = lambda key: ingredient_stock.get(key)
    store.get_bottle_stock.side_effect = lambda key: bottle_stock.get(key)
    return store


@pytest.fixture
def planner(mock_catalog_store, mock_recipe_store, mock_stock_store) -> ProductionPlannerService:
    return ProductionPlannerService(
        catalog_store=mock_catalog_store,
        recipe_store=mock_recipe_store,
        stock_store=mock_stock_store,
        lookup_timeout=1.0,
        max_concurrent_lookups=4,
        assembler=PlanReportAssembler(),
    )


@pytest.fixture
def order_lines() -> list[OrderLine]:
    """Two delivery dates; the cancelled order must never be planned."""
    return [
        OrderLine(
            order_id="O1",
            order_number="ORD-001",
            customer_name="Cafe A",
            delivery_date=date(2026, 3, 2),
            order_status=OrderStatus.CONFIRMED,
            sellable_product_id="P1",
            quantity=10,
        ),
        OrderLine(
            order_id="O2",
            order_number="ORD-002",
            customer_name="Cafe B",
            delivery_date=date(2026, 3, 1),
            order_status=OrderStatus.PENDING,
            sellable_product_id="P2",
            variation_id="V250",
            quantity=5,
        ),
        OrderLine(
            order_id="O3",
            order_number="ORD-003",
            customer_name="Cafe C",
            delivery_date=date(2026, 3, 2),
            order_status=OrderStatus.PENDING,
            sellable_product_id="P1",
            quantity=4,
        ),
        OrderLine(
            order_id="O4",
            order_number="ORD-004",
            customer_name="Cafe D",
            delivery_date=date(2026, 3, 1),
            order_status=OrderStatus.CANCELLED,
            sellable_product_id="P1",
            quantity=99,
        ),
    ]


@pytest.fixture
def mock_order_store(order_lines):
    store = AsyncMock()
    store.list_order_lines.return_value = order_lines
    return store


@pytest.fixture
async def plan_client(planner, mock_order_store) -> AsyncGenerator[AsyncClient, None]:
    """API client wired to the mocked planner and order store."""
    from src.api.dependencies import get_ord_store, get_planner
    from src.api.main import app

    app.dependency_overrides[get_planner] = lambda: planner
    app.dependency_overrides[get_ord_store] = lambda: mock_order_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_planner, None)
    app.dependency_overrides.pop(get_ord_store, None)
