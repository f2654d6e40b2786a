"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.

Plan reports are serialized in camelCase. Amounts are already rounded
by the report assembler and are emitted as JSON numbers.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.core.entities.planning import (
    BottleRequirement,
    DailyPlan,
    ItemIssue,
    MaterialRequirement,
    OrderReference,
    PlanNote,
    PlanReport,
    PlanTotals,
    ProductCostLine,
)


class CamelModel(BaseModel):
    """Base for camelCase JSON payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderReferenceResponse(CamelModel):
    """Order that contributed to a product line."""

    order_id: str
    order_number: str
    customer_name: str
    delivery_date: date
    quantity: int

    @classmethod
    def from_entity(cls, order: OrderReference) -> "OrderReferenceResponse":
        return cls(**order.model_dump())


class ProductLineResponse(CamelModel):
    """Cost breakdown for one (sellable product, variation) pair."""

    sellable_product_id: str
    sellable_product_code: str
    sellable_product_name: str
    variation_id: str | None = None
    bottle_type_id: str
    bottle_size: str
    capacity_ml: float
    total_quantity: int
    volume_liters: float
    material_cost_per_bottle: float
    bottle_cost_per_bottle: float
    total_cost_per_bottle: float
    total_material_cost: float
    total_bottle_cost: float
    total_cost: float
    orders: list[OrderReferenceResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, line: ProductCostLine) -> "ProductLineResponse":
        return cls(
            sellable_product_id=line.sellable_product_id,
            sellable_product_code=line.sellable_product_code,
            sellable_product_name=line.sellable_product_name,
            variation_id=line.variation_id,
            bottle_type_id=line.bottle_type_id,
            bottle_size=line.bottle_size,
            capacity_ml=float(line.capacity_ml),
            total_quantity=line.total_quantity,
            volume_liters=float(line.volume_liters),
            material_cost_per_bottle=float(line.material_cost_per_bottle),
            bottle_cost_per_bottle=float(line.bottle_cost_per_bottle),
            total_cost_per_bottle=float(line.total_cost_per_bottle),
            total_material_cost=float(line.total_material_cost),
            total_bottle_cost=float(line.total_bottle_cost),
            total_cost=float(line.total_cost),
            orders=[OrderReferenceResponse.from_entity(o) for o in line.orders],
        )


class MaterialSummaryResponse(CamelModel):
    """Aggregated requirement for one raw material."""

    material_id: str
    material_name: str
    unit: str
    total_quantity: float
    average_price: float
    total_cost: float
    current_stock: float
    is_sufficient: bool
    shortage: float

    @classmethod
    def from_entity(cls, material: MaterialRequirement) -> "MaterialSummaryResponse":
        return cls(
            material_id=material.ingredient_id,
            material_name=material.name,
            unit=material.unit,
            total_quantity=float(material.total_quantity),
            average_price=float(material.average_price),
            total_cost=float(material.total_cost),
            current_stock=float(material.current_stock),
            is_sufficient=material.is_sufficient,
            shortage=float(material.shortage),
        )


class BottleSummaryResponse(CamelModel):
    """Aggregated requirement for one bottle type."""

    bottle_type_id: str
    bottle_size: str
    capacity_ml: float
    total_quantity: int
    price: float
    total_cost: float
    current_stock: float
    is_sufficient: bool
    shortage: float

    @classmethod
    def from_entity(cls, bottle: BottleRequirement) -> "BottleSummaryResponse":
        return cls(
            bottle_type_id=bottle.bottle_type_id,
            bottle_size=bottle.size,
            capacity_ml=float(bottle.capacity_ml),
            total_quantity=bottle.total_quantity,
            price=float(bottle.unit_price),
            total_cost=float(bottle.total_cost),
            current_stock=float(bottle.current_stock),
            is_sufficient=bottle.is_sufficient,
            shortage=float(bottle.shortage),
        )


class PlanTotalsResponse(CamelModel):
    """Grand totals of a plan."""

    total_bottles: int = 0
    total_volume_liters: float = 0.0
    total_material_cost: float = 0.0
    total_bottle_cost: float = 0.0
    total_cost: float = 0.0

    @classmethod
    def from_entity(cls, totals: PlanTotals) -> "PlanTotalsResponse":
        return cls(
            total_bottles=totals.total_bottles,
            total_volume_liters=float(totals.total_volume_liters),
            total_material_cost=float(totals.total_material_cost),
            total_bottle_cost=float(totals.total_bottle_cost),
            total_cost=float(totals.total_cost),
        )


class DateTotalsResponse(CamelModel):
    """Totals for one delivery date."""

    total_bottles: int = 0
    total_volume_liters: float = 0.0
    total_cost: float = 0.0


class DailyPlanResponse(CamelModel):
    """Product lines due on one delivery date."""

    delivery_date: date = Field(..., alias="date")
    products: list[ProductLineResponse] = Field(default_factory=list)
    date_totals: DateTotalsResponse

    @classmethod
    def from_entity(cls, day: DailyPlan) -> "DailyPlanResponse":
        return cls(
            delivery_date=day.delivery_date,
            products=[ProductLineResponse.from_entity(p) for p in day.products],
            date_totals=DateTotalsResponse(
                total_bottles=day.total_bottles,
                total_volume_liters=float(day.total_volume_liters),
                total_cost=float(day.total_cost),
            ),
        )


class ItemIssueResponse(CamelModel):
    """Planning item that was rejected."""

    index: int
    sellable_product_id: str
    variation_id: str | None = None
    error_code: str
    message: str

    @classmethod
    def from_entity(cls, issue: ItemIssue) -> "ItemIssueResponse":
        return cls(**issue.model_dump())


class PlanNoteResponse(CamelModel):
    """Data the calculation had to work around."""

    kind: str
    key: str
    message: str

    @classmethod
    def from_entity(cls, note: PlanNote) -> "PlanNoteResponse":
        return cls(kind=note.kind.value, key=note.key, message=note.message)


class PlanReportResponse(CamelModel):
    """Production plan report."""

    summary: list[ProductLineResponse] = Field(default_factory=list)
    materials_summary: list[MaterialSummaryResponse] = Field(default_factory=list)
    bottle_summary: list[BottleSummaryResponse] = Field(default_factory=list)
    totals: PlanTotalsResponse = Field(default_factory=PlanTotalsResponse)
    issues: list[ItemIssueResponse] = Field(default_factory=list)
    notes: list[PlanNoteResponse] = Field(default_factory=list)
    start_date: date | None = None
    end_date: date | None = None
    by_date: list[DailyPlanResponse] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: PlanReport) -> "PlanReportResponse":
        return cls(
            summary=[ProductLineResponse.from_entity(p) for p in report.product_lines],
            materials_summary=[MaterialSummaryResponse.from_entity(m) for m in report.materials],
            bottle_summary=[BottleSummaryResponse.from_entity(b) for b in report.bottles],
            totals=PlanTotalsResponse.from_entity(report.totals),
            issues=[ItemIssueResponse.from_entity(i) for i in report.issues],
            notes=[PlanNoteResponse.from_entity(n) for n in report.notes],
            start_date=report.start_date,
            end_date=report.end_date,
            by_date=[DailyPlanResponse.from_entity(d) for d in report.by_date],
        )


class PlanReportEnvelope(CamelModel):
    """Top-level body of production plan responses."""

    report: PlanReportResponse


class ComponentHealthResponse(BaseModel):
    """Health of one backing component."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ComponentHealthResponse | None = None
    schema_version: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. EMPTY_PLAN)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
