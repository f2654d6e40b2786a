"""Calculate Production Plan Use Case: ad-hoc list of products and quantities."""

from src.application.dto.requests import CalculatePlanRequest
from src.application.dto.responses import PlanReportEnvelope, PlanReportResponse
from src.config import get_logger
from src.core.entities.planning import PlanReport
from src.core.services import LookupCache, ProductionPlannerService

logger = get_logger(__name__)


class CalculateProductionPlanUseCase:
    """Compute material, bottle and cost requirements for requested items."""

    def __init__(self, planner: ProductionPlannerService | None = None):
        self._planner = planner

    async def _get_planner(self) -> ProductionPlannerService:
        if self._planner is None:
            from src.application.services import get_production_planner_service

            self._planner = await get_production_planner_service()
        return self._planner

    async def execute(self, request: CalculatePlanRequest) -> PlanReport:
        """Execute the calculation."""
        logger.info("calculate_production_plan_started", items=len(request.items))

        planner = await self._get_planner()
        items = [item.to_planning_item() for item in request.items]
        report = await planner.calculate(items, cache=LookupCache())

        logger.info(
            "calculate_production_plan_complete",
            product_lines=len(report.product_lines),
            total_cost=str(report.totals.total_cost),
            issues=len(report.issues),
        )
        return report

    def to_response(self, report: PlanReport) -> PlanReportEnvelope:
        """Convert report to API response."""
        return PlanReportEnvelope(report=PlanReportResponse.from_report(report))
