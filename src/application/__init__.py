"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.dto.requests import (
    CalculatePlanRequest,
    OrdersPlanRequest,
    PlanItemRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    PlanReportEnvelope,
    PlanReportResponse,
)
from src.application.services import get_production_planner_service, reset_services
from src.application.use_cases import (
    CalculateProductionPlanUseCase,
    PlanFromOrdersUseCase,
)

__all__ = [
    # Request DTOs
    "PlanItemRequest",
    "CalculatePlanRequest",
    "OrdersPlanRequest",
    # Response DTOs
    "PlanReportEnvelope",
    "PlanReportResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "CalculateProductionPlanUseCase",
    "PlanFromOrdersUseCase",
    # Service factories
    "get_production_planner_service",
    "reset_services",
]
