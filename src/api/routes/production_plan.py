"""Production plan endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_calculate_plan_use_case, get_plan_from_orders_use_case
from src.application.dto.requests import CalculatePlanRequest, OrdersPlanRequest
from src.application.dto.responses import ErrorResponse, PlanReportEnvelope
from src.application.use_cases import (
    CalculateProductionPlanUseCase,
    PlanFromOrdersUseCase,
)

router = APIRouter(prefix="/api/production-plan", tags=["production-plan"])


@router.post(
    "/calculate",
    response_model=PlanReportEnvelope,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def calculate_production_plan(
    request: CalculatePlanRequest,
    use_case: CalculateProductionPlanUseCase = Depends(get_calculate_plan_use_case),
) -> PlanReportEnvelope:
    """
    Calculate material, bottle and cost requirements for a list of products.

    Rejected items are listed in report.issues; the call fails only when
    no item is valid.
    """
    report = await use_case.execute(request)
    return use_case.to_response(report)


@router.get(
    "",
    response_model=PlanReportEnvelope,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def plan_from_orders(
    start_date: date = Query(..., description="First delivery date (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last delivery date (YYYY-MM-DD)"),
    use_case: PlanFromOrdersUseCase = Depends(get_plan_from_orders_use_case),
) -> PlanReportEnvelope:
    """Production plan for non-cancelled orders due in the date range, grouped by date."""
    report = await use_case.execute(
        OrdersPlanRequest(start_date=start_date, end_date=end_date)
    )
    return use_case.to_response(report)
