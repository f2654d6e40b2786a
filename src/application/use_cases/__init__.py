"""Application use cases."""

from src.application.use_cases.calculate_production_plan import (
    CalculateProductionPlanUseCase,
)
from src.application.use_cases.plan_from_orders import PlanFromOrdersUseCase

__all__ = [
    "CalculateProductionPlanUseCase",
    "PlanFromOrdersUseCase",
]
