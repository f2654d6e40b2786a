"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import aiosqlite
import pytest

from src.infrastructure.storage.sqlite.migrations.migrator import MIGRATIONS_DIR

SEED_SQL = """
INSERT INTO products (id, code, name) VALUES
    ('BP1', 'GT', 'Green Tea'),
    ('BP2', 'LEM', 'Lemonade');

INSERT INTO raw_materials (id, name, unit, current_stock, average_price) VALUES
    ('I1', 'Tea Leaves', 'kg', 1.5, 100),
    ('I2', 'Syrup', 'L', 50, 10);

INSERT INTO product_recipes (product_id, raw_material_id, quantity_per_unit) VALUES
    ('BP1', 'I2', 0.5),
    ('BP1', 'I1', 0.1);

INSERT INTO bottle_types (id, size, capacity_ml, current_stock, average_price) VALUES
    ('B1000', '1 L', 1000, 100, 5),
    ('B500', '500 ml', 500, 50, 3),
    ('B250', '250 ml', 250, 10, 2),
    ('B_BROKEN', '?', NULL, 0, 0);

INSERT INTO sellable_products (id, code, name, product_id, product_type, bottle_type_id) VALUES
    ('P1', 'GT-1L', 'Green Tea 1L', 'BP1', 'simple', 'B1000'),
    ('P2', 'GT', 'Green Tea', 'BP1', 'variation', NULL),
    ('P3', 'LEM', 'Lemonade', 'BP2', 'simple', 'B500'),
    ('P4', 'BRK', 'Broken', 'BP1', 'simple', 'B_BROKEN'),
    ('P5', 'GT-V', 'Green Tea (legacy)', 'BP1', 'simple', NULL);

INSERT INTO sellable_product_variations (id, sellable_product_id, bottle_type_id, created_at) VALUES
    ('V500', 'P2', 'B500', '2026-01-02 00:00:00'),
    ('V250', 'P2', 'B250', '2026-01-01 00:00:00'),
    ('V5', 'P5', 'B500', '2026-01-01 00:00:00');

INSERT INTO customers (id, customer_code, name) VALUES
    ('C1', 'CAFE-A', 'Cafe A');

INSERT INTO orders (id, order_number, customer_id, delivery_date, order_status) VALUES
    ('O1', 'ORD-001', 'C1', '2026-03-02', 'confirmed'),
    ('O2', 'ORD-002', NULL, '2026-03-01', 'pending'),
    ('O3', 'ORD-003', 'C1', '2026-03-09', 'pending'),
    ('O4', 'ORD-004', 'C1', '2026-03-01', 'cancelled');

INSERT INTO order_items (order_id, sellable_product_id, variation_id, quantity) VALUES
    ('O1', 'P1', NULL, 10),
    ('O1', 'P2', 'V250', 3),
    ('O2', 'P2', 'V250', 5),
    ('O3', 'P1', NULL, 4),
    ('O4', 'P1', NULL, 99);
"""


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> AsyncGenerator[Path, None]:
    """Temporary database with the production planning schema and no rows."""
    schema = (MIGRATIONS_DIR / "v001_production_planning.sql").read_text(encoding="utf-8")
    async with aiosqlite.connect(temp_db_path) as conn:
        await conn.execute("PRAGMA journal_mode=WAL")
        await conn.execute("PRAGMA foreign_keys=ON")
        await conn.executescript(schema)
        await conn.commit()

    yield temp_db_path


@pytest.fixture
async def seeded_db(initialized_db: Path) -> Path:
    """Schema plus a small catalog, recipes, stock and orders."""
    async with aiosqlite.connect(initialized_db) as conn:
        await conn.executescript(SEED_SQL)
        await conn.commit()
    return initialized_db


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def seeded_pool(seeded_db: Path, mock_settings):
    """Point the global connection pool at the seeded database."""
    import src.infrastructure.storage.sqlite.connection as conn_module

    conn_module._pool = None
    mock_settings.storage.db_path = seeded_db

    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield await conn_module.get_pool()
        finally:
            await conn_module.close_pool()
