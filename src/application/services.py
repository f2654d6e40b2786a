"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.config import get_settings
from src.core.services import PlanReportAssembler, ProductionPlannerService

if TYPE_CHECKING:
    from src.core.interfaces import ICatalogStore, IRecipeStore, IStockStore


# Singleton service instances
_production_planner_service: ProductionPlannerService | None = None


async def get_production_planner_service(
    catalog_store: "ICatalogStore | None" = None,
    recipe_store: "IRecipeStore | None" = None,
    stock_store: "IStockStore | None" = None,
) -> ProductionPlannerService:
    """
    Get or create ProductionPlannerService instance.

    Creates infrastructure dependencies if not provided. The planner
    holds no per-request state, so one instance is shared.

    Args:
        catalog_store: Optional catalog store override
        recipe_store: Optional recipe store override
        stock_store: Optional stock store override

    Returns:
        Configured ProductionPlannerService
    """
    global _production_planner_service

    overridden = any(s is not None for s in (catalog_store, recipe_store, stock_store))
    if _production_planner_service is not None and not overridden:
        return _production_planner_service

    # Lazy import infrastructure to avoid circular imports
    from src.infrastructure.storage.sqlite import (
        get_catalog_store,
        get_recipe_store,
        get_stock_store,
    )

    planning = get_settings().planning
    service = ProductionPlannerService(
        catalog_store=catalog_store or await get_catalog_store(),
        recipe_store=recipe_store or await get_recipe_store(),
        stock_store=stock_store or await get_stock_store(),
        lookup_timeout=planning.lookup_timeout,
        max_concurrent_lookups=planning.max_concurrent_lookups,
        assembler=PlanReportAssembler(
            currency_places=planning.currency_places,
            quantity_places=planning.quantity_places,
            volume_places=planning.volume_places,
        ),
    )

    if not overridden:
        _production_planner_service = service

    return service


def reset_services() -> None:
    """Reset all singleton services. Useful for testing."""
    global _production_planner_service
    _production_planner_service = None
