"""
Report assembly.

The only place where amounts are rounded. Lines are quantized first and
totals are summed from the quantized lines, so each presented total
equals the sum of the presented lines.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal

from src.core.entities.planning import (
    BottleRequirement,
    DailyPlan,
    ItemIssue,
    MaterialRequirement,
    PlanNote,
    PlanReport,
    PlanTotals,
    ProductCostLine,
)
from src.core.services.quantities import ZERO, quantize


def _product_sort_key(line: ProductCostLine) -> tuple:
    return (-line.total_quantity, line.sellable_product_id, line.variation_id or "")


def _material_sort_key(material: MaterialRequirement) -> tuple:
    return (-material.total_cost, material.ingredient_id)


def _bottle_sort_key(bottle: BottleRequirement) -> tuple:
    return (bottle.capacity_ml, bottle.bottle_type_id)


class PlanReportAssembler:
    """Rounds, orders and totals the computed plan lines."""

    def __init__(
        self,
        currency_places: int = 2,
        quantity_places: int = 4,
        volume_places: int = 3,
    ):
        self.currency_places = currency_places
        self.quantity_places = quantity_places
        self.volume_places = volume_places

    def _money(self, value: Decimal) -> Decimal:
        return quantize(value, self.currency_places)

    def _qty(self, value: Decimal) -> Decimal:
        return quantize(value, self.quantity_places)

    def _volume(self, value: Decimal) -> Decimal:
        return quantize(value, self.volume_places)

    def round_product_line(self, line: ProductCostLine) -> ProductCostLine:
        return line.model_copy(
            update={
                "volume_liters": self._volume(line.volume_liters),
                "material_cost_per_bottle": self._money(line.material_cost_per_bottle),
                "bottle_cost_per_bottle": self._money(line.bottle_cost_per_bottle),
                "total_cost_per_bottle": self._money(line.total_cost_per_bottle),
                "total_material_cost": self._money(line.total_material_cost),
                "total_bottle_cost": self._money(line.total_bottle_cost),
                "total_cost": self._money(line.total_cost),
            }
        )

    def round_material(self, material: MaterialRequirement) -> MaterialRequirement:
        return material.model_copy(
            update={
                "total_quantity": self._qty(material.total_quantity),
                "average_price": self._money(material.average_price),
                "total_cost": self._money(material.total_cost),
                "current_stock": self._qty(material.current_stock),
                "shortage": self._qty(material.shortage),
            }
        )

    def round_bottle(self, bottle: BottleRequirement) -> BottleRequirement:
        return bottle.model_copy(
            update={
                "unit_price": self._money(bottle.unit_price),
                "total_cost": self._money(bottle.total_cost),
                "current_stock": self._qty(bottle.current_stock),
                "shortage": self._qty(bottle.shortage),
            }
        )

    def product_lines(self, lines: Iterable[ProductCostLine]) -> list[ProductCostLine]:
        """Round and order product lines."""
        return sorted((self.round_product_line(line) for line in lines), key=_product_sort_key)

    def daily_plans(
        self, by_date: Mapping[date, Sequence[ProductCostLine]]
    ) -> list[DailyPlan]:
        """One DailyPlan per delivery date, dates ascending."""
        plans = []
        for delivery_date in sorted(by_date):
            products = self.product_lines(by_date[delivery_date])
            plans.append(
                DailyPlan(
                    delivery_date=delivery_date,
                    products=products,
                    total_bottles=sum(p.total_quantity for p in products),
                    total_volume_liters=sum((p.volume_liters for p in products), ZERO),
                    total_cost=sum((p.total_cost for p in products), ZERO),
                )
            )
        return plans

    def assemble(
        self,
        product_lines: Iterable[ProductCostLine],
        materials: Iterable[MaterialRequirement],
        bottles: Iterable[BottleRequirement],
        issues: Sequence[ItemIssue] = (),
        notes: Sequence[PlanNote] = (),
        by_date: Mapping[date, Sequence[ProductCostLine]] | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> PlanReport:
        """
        Build the final report.

        Args:
            product_lines: Unrounded cost lines, one per product key.
            materials: Unrounded material requirements.
            bottles: Unrounded bottle requirements.
            issues: Rejected items, reported in request order.
            notes: Degraded lookups, reported in key order.
            by_date: Product lines grouped by delivery date (order plans).
            start_date: Range start (order plans).
            end_date: Range end (order plans).
        """
        lines = self.product_lines(product_lines)
        rounded_materials = sorted(
            (self.round_material(m) for m in materials), key=_material_sort_key
        )
        rounded_bottles = sorted(
            (self.round_bottle(b) for b in bottles), key=_bottle_sort_key
        )

        material_cost = sum((m.total_cost for m in rounded_materials), ZERO)
        bottle_cost = sum((b.total_cost for b in rounded_bottles), ZERO)
        totals = PlanTotals(
            total_bottles=sum(line.total_quantity for line in lines),
            total_volume_liters=sum((line.volume_liters for line in lines), ZERO),
            total_material_cost=material_cost,
            total_bottle_cost=bottle_cost,
            total_cost=material_cost + bottle_cost,
        )

        return PlanReport(
            product_lines=lines,
            materials=rounded_materials,
            bottles=rounded_bottles,
            totals=totals,
            issues=sorted(issues, key=lambda issue: issue.index),
            notes=sorted(notes, key=lambda note: (note.kind.value, note.key)),
            start_date=start_date,
            end_date=end_date,
            by_date=self.daily_plans(by_date or {}),
        )
