"""Tests for application service wiring."""

import pytest

from src.application.services import get_production_planner_service, reset_services
from src.infrastructure.storage.sqlite import SQLiteCatalogStore


@pytest.fixture(autouse=True)
def _reset():
    reset_services()
    yield
    reset_services()


async def test_planner_is_shared_without_overrides():
    first = await get_production_planner_service()
    second = await get_production_planner_service()

    assert first is second
    assert isinstance(first.catalog_store, SQLiteCatalogStore)


async def test_overrides_build_a_private_planner(mock_catalog_store):
    shared = await get_production_planner_service()
    custom = await get_production_planner_service(catalog_store=mock_catalog_store)

    assert custom is not shared
    assert custom.catalog_store is mock_catalog_store
    assert await get_production_planner_service() is shared
