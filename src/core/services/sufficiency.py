"""
Stock sufficiency evaluation.

Compares aggregated requirements with the stock snapshot. A key without
a stock record is treated as zero stock at zero price.
"""

from collections.abc import Mapping
from decimal import Decimal

from src.core.entities.planning import BottleRequirement, MaterialRequirement
from src.core.entities.stock import BottleStock, IngredientStock
from src.core.services.aggregator import BottleTally, MaterialTally
from src.core.services.quantities import ZERO, to_decimal


def is_sufficient(required: Decimal, on_hand: Decimal) -> bool:
    """Enough stock when the requirement does not exceed what is on hand."""
    return required <= on_hand


def shortage(required: Decimal, on_hand: Decimal) -> Decimal:
    return max(ZERO, required - on_hand)


class SufficiencyEvaluator:
    """Builds priced, stock-checked requirements from tallies."""

    def evaluate_materials(
        self,
        tallies: Mapping[str, MaterialTally],
        stock: Mapping[str, IngredientStock | None],
    ) -> list[MaterialRequirement]:
        requirements = []
        for ingredient_id, tally in tallies.items():
            record = stock.get(ingredient_id)
            on_hand = to_decimal(record.current_stock) if record else ZERO
            price = to_decimal(record.average_unit_price) if record else ZERO

            requirements.append(
                MaterialRequirement(
                    ingredient_id=ingredient_id,
                    name=(record.name if record and record.name else ingredient_id),
                    unit=(record.unit if record and record.unit else tally.unit),
                    total_quantity=tally.total_quantity,
                    average_price=price,
                    total_cost=tally.total_quantity * price,
                    current_stock=on_hand,
                    is_sufficient=record is not None
                    and is_sufficient(tally.total_quantity, on_hand),
                    shortage=shortage(tally.total_quantity, on_hand),
                )
            )
        return requirements

    def evaluate_bottles(
        self,
        tallies: Mapping[str, BottleTally],
        stock: Mapping[str, BottleStock | None],
    ) -> list[BottleRequirement]:
        requirements = []
        for bottle_type_id, tally in tallies.items():
            record = stock.get(bottle_type_id)
            on_hand = to_decimal(record.current_stock) if record else ZERO
            price = to_decimal(record.unit_price) if record else ZERO
            required = Decimal(tally.total_quantity)

            requirements.append(
                BottleRequirement(
                    bottle_type_id=bottle_type_id,
                    size=tally.size,
                    capacity_ml=tally.capacity_ml,
                    total_quantity=tally.total_quantity,
                    unit_price=price,
                    total_cost=required * price,
                    current_stock=on_hand,
                    is_sufficient=record is not None and is_sufficient(required, on_hand),
                    shortage=shortage(required, on_hand),
                )
            )
        return requirements
