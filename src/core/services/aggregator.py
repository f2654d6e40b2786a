"""
Requirement aggregation.

Merges exploded items by ingredient and bottle type, and keeps one cost
line per (sellable product, variation). Totals are running Decimal sums
seeded at zero, so the result does not depend on input order.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.core.entities.planning import OrderReference, ProductCostLine, ResolvedItem
from src.core.entities.recipe import RecipeLine
from src.core.services.bom_explosion import ExplodedItem
from src.core.services.quantities import ML_PER_LITER, ZERO, to_decimal

ProductKey = tuple[str, str | None]


@dataclass
class MaterialTally:
    """Running total for one ingredient."""

    ingredient_id: str
    total_quantity: Decimal = ZERO
    units: set[str] = field(default_factory=set)

    @property
    def unit(self) -> str:
        return min(self.units) if self.units else ""


@dataclass
class BottleTally:
    """Running total for one bottle type."""

    bottle_type_id: str
    size: str = "-"
    capacity_ml: Decimal = ZERO
    total_quantity: int = 0


@dataclass
class ProductTally:
    """Running total for one (sellable product, variation) pair."""

    item: ResolvedItem  # first item seen; catalog facts are identical per key
    recipe: list[RecipeLine] = field(default_factory=list)
    total_quantity: int = 0
    volume_liters: Decimal = ZERO
    orders: list[OrderReference] = field(default_factory=list)


@dataclass
class Aggregation:
    """All tallies produced from one set of exploded items."""

    materials: dict[str, MaterialTally] = field(default_factory=dict)
    bottles: dict[str, BottleTally] = field(default_factory=dict)
    products: dict[ProductKey, ProductTally] = field(default_factory=dict)
    by_date: dict[date, dict[ProductKey, ProductTally]] = field(default_factory=dict)


def _add_to_product(
    products: dict[ProductKey, ProductTally], exploded: ExplodedItem
) -> None:
    item = exploded.item
    tally = products.get(item.product_key)
    if tally is None:
        tally = ProductTally(item=item, recipe=exploded.recipe)
        products[item.product_key] = tally
    tally.total_quantity += item.quantity
    tally.volume_liters += exploded.volume_liters
    if item.order is not None:
        tally.orders.append(item.order)


class RequirementAggregator:
    """Merges per-item fragments into per-key requirements."""

    def aggregate(self, exploded_items: Iterable[ExplodedItem]) -> Aggregation:
        """Sum ingredient, bottle and product fragments by key."""
        result = Aggregation()

        for exploded in exploded_items:
            for fragment in exploded.ingredients:
                material = result.materials.get(fragment.ingredient_id)
                if material is None:
                    material = MaterialTally(ingredient_id=fragment.ingredient_id)
                    result.materials[fragment.ingredient_id] = material
                material.total_quantity += fragment.quantity
                if fragment.unit:
                    material.units.add(fragment.unit)

            item = exploded.item
            bottle = result.bottles.get(exploded.bottle.bottle_type_id)
            if bottle is None:
                bottle = BottleTally(
                    bottle_type_id=exploded.bottle.bottle_type_id,
                    size=item.bottle_size,
                    capacity_ml=item.capacity_ml,
                )
                result.bottles[exploded.bottle.bottle_type_id] = bottle
            bottle.total_quantity += exploded.bottle.quantity

            _add_to_product(result.products, exploded)
            if item.order is not None:
                day = result.by_date.setdefault(item.order.delivery_date, {})
                _add_to_product(day, exploded)

        return result

    def cost_product_lines(
        self,
        products: Mapping[ProductKey, ProductTally],
        ingredient_prices: Mapping[str, Decimal],
        bottle_prices: Mapping[str, Decimal],
    ) -> list[ProductCostLine]:
        """
        Price each product tally.

        Material cost per bottle is the recipe's cost per liter scaled by
        the bottle capacity. Unknown prices count as zero.
        """
        lines: list[ProductCostLine] = []

        for tally in products.values():
            item = tally.item
            cost_per_liter = sum(
                (
                    to_decimal(line.quantity_per_liter)
                    * ingredient_prices.get(line.ingredient_id, ZERO)
                    for line in tally.recipe
                ),
                ZERO,
            )
            material_per_bottle = cost_per_liter * item.capacity_ml / ML_PER_LITER
            bottle_per_bottle = bottle_prices.get(item.bottle_type_id, ZERO)
            total_material = material_per_bottle * tally.total_quantity
            total_bottle = bottle_per_bottle * tally.total_quantity

            lines.append(
                ProductCostLine(
                    sellable_product_id=item.sellable_product_id,
                    sellable_product_code=item.sellable_product_code,
                    sellable_product_name=item.sellable_product_name,
                    variation_id=item.variation_id,
                    bottle_type_id=item.bottle_type_id,
                    bottle_size=item.bottle_size,
                    capacity_ml=item.capacity_ml,
                    total_quantity=tally.total_quantity,
                    volume_liters=tally.volume_liters,
                    material_cost_per_bottle=material_per_bottle,
                    bottle_cost_per_bottle=bottle_per_bottle,
                    total_cost_per_bottle=material_per_bottle + bottle_per_bottle,
                    total_material_cost=total_material,
                    total_bottle_cost=total_bottle,
                    total_cost=total_material + total_bottle,
                    orders=sorted(
                        tally.orders,
                        key=lambda o: (o.delivery_date, o.order_number, o.order_id),
                    ),
                )
            )

        return lines
