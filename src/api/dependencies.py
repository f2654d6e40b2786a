"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from fastapi import Depends

from src.application.services import get_production_planner_service
from src.application.use_cases import (
    CalculateProductionPlanUseCase,
    PlanFromOrdersUseCase,
)
from src.config import Settings, get_settings
from src.core.services import ProductionPlannerService
from src.infrastructure.storage.sqlite import SQLiteOrderStore, get_order_store


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
async def get_planner() -> ProductionPlannerService:
    """Get production planner service."""
    return await get_production_planner_service()


# Store dependencies
async def get_ord_store() -> SQLiteOrderStore:
    """Get order store."""
    return await get_order_store()


# Use case dependencies
def get_calculate_plan_use_case(
    planner: ProductionPlannerService = Depends(get_planner),
) -> CalculateProductionPlanUseCase:
    """Get calculate production plan use case."""
    return CalculateProductionPlanUseCase(planner=planner)


def get_plan_from_orders_use_case(
    order_store: SQLiteOrderStore = Depends(get_ord_store),
    planner: ProductionPlannerService = Depends(get_planner),
) -> PlanFromOrdersUseCase:
    """Get order-based production plan use case."""
    return PlanFromOrdersUseCase(order_store=order_store, planner=planner)
