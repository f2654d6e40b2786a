"""Plan From Orders Use Case: production plan for orders due in a date range."""

from src.application.dto.requests import OrdersPlanRequest
from src.application.dto.responses import PlanReportEnvelope, PlanReportResponse
from src.config import get_logger
from src.core.entities.order import OrderStatus
from src.core.entities.planning import PlanReport
from src.core.exceptions import ValidationError
from src.core.interfaces.order_store import IOrderStore
from src.core.services import LookupCache, ProductionPlannerService

logger = get_logger(__name__)


class PlanFromOrdersUseCase:
    """
    Build a production plan from customer orders.

    Every non-cancelled order item due in [start_date, end_date] becomes a
    planning item that remembers its order, so the report can list the
    orders behind each product line and group lines by delivery date.
    """

    def __init__(
        self,
        order_store: IOrderStore | None = None,
        planner: ProductionPlannerService | None = None,
    ):
        self._order_store = order_store
        self._planner = planner

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from src.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_planner(self) -> ProductionPlannerService:
        if self._planner is None:
            from src.application.services import get_production_planner_service

            self._planner = await get_production_planner_service()
        return self._planner

    async def execute(self, request: OrdersPlanRequest) -> PlanReport:
        """
        Execute the order-based plan.

        Raises:
            ValidationError: If start_date is after end_date
            EmptyPlanError: If orders exist but none of their items is valid
        """
        if request.start_date > request.end_date:
            raise ValidationError(
                "start_date",
                "start_date must not be after end_date",
                value=f"{request.start_date} > {request.end_date}",
            )

        logger.info(
            "plan_from_orders_started",
            start_date=request.start_date.isoformat(),
            end_date=request.end_date.isoformat(),
        )

        order_store = await self._get_order_store()
        planner = await self._get_planner()

        lines = await order_store.list_order_lines(request.start_date, request.end_date)
        lines = [line for line in lines if line.order_status != OrderStatus.CANCELLED]

        if not lines:
            logger.info("plan_from_orders_no_orders")
            return planner.assembler.assemble(
                [],
                [],
                [],
                start_date=request.start_date,
                end_date=request.end_date,
            )

        report = await planner.calculate(
            [line.to_planning_item() for line in lines],
            cache=LookupCache(),
            start_date=request.start_date,
            end_date=request.end_date,
        )

        logger.info(
            "plan_from_orders_complete",
            order_lines=len(lines),
            orders=len({line.order_id for line in lines}),
            delivery_dates=len(report.by_date),
            total_cost=str(report.totals.total_cost),
        )
        return report

    def to_response(self, report: PlanReport) -> PlanReportEnvelope:
        """Convert report to API response."""
        return PlanReportEnvelope(report=PlanReportResponse.from_report(report))
