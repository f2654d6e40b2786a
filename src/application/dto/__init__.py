"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    CalculatePlanRequest,
    OrdersPlanRequest,
    PlanItemRequest,
)
from src.application.dto.responses import (
    BottleSummaryResponse,
    ComponentHealthResponse,
    DailyPlanResponse,
    ErrorResponse,
    HealthResponse,
    ItemIssueResponse,
    MaterialSummaryResponse,
    PlanNoteResponse,
    PlanReportEnvelope,
    PlanReportResponse,
    PlanTotalsResponse,
    ProductLineResponse,
)

__all__ = [
    # Requests
    "PlanItemRequest",
    "CalculatePlanRequest",
    "OrdersPlanRequest",
    # Responses
    "PlanReportEnvelope",
    "PlanReportResponse",
    "ProductLineResponse",
    "MaterialSummaryResponse",
    "BottleSummaryResponse",
    "PlanTotalsResponse",
    "DailyPlanResponse",
    "ItemIssueResponse",
    "PlanNoteResponse",
    "HealthResponse",
    "ComponentHealthResponse",
    "ErrorResponse",
]
