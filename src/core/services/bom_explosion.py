"""
Bill-of-materials explosion.

Converts one resolved item into its liquid volume, the raw ingredient
quantities that volume needs, and the bottles it fills.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from src.core.entities.planning import ResolvedItem
from src.core.entities.recipe import RecipeLine
from src.core.services.quantities import ML_PER_LITER, to_decimal


@dataclass(frozen=True)
class IngredientFragment:
    """Ingredient quantity contributed by one item."""

    ingredient_id: str
    quantity: Decimal
    unit: str = ""


@dataclass(frozen=True)
class BottleFragment:
    """Bottles of one type contributed by one item."""

    bottle_type_id: str
    quantity: int


@dataclass
class ExplodedItem:
    """A resolved item with its material and packaging fragments."""

    item: ResolvedItem
    volume_liters: Decimal
    bottle: BottleFragment
    ingredients: list[IngredientFragment] = field(default_factory=list)
    recipe: list[RecipeLine] = field(default_factory=list)

    @property
    def has_recipe(self) -> bool:
        return bool(self.recipe)


class BomExplosionEngine:
    """Single-level BOM explosion: item → volume → ingredients, item → bottles."""

    @staticmethod
    def volume_liters(capacity_ml: Decimal, quantity: int) -> Decimal:
        """Liquid volume of `quantity` bottles of `capacity_ml` each."""
        return capacity_ml / ML_PER_LITER * quantity

    def explode(self, item: ResolvedItem, recipe: Sequence[RecipeLine]) -> ExplodedItem:
        """
        Explode one resolved item.

        An empty recipe still yields the bottle fragment; the item then
        carries zero material cost.
        """
        volume = self.volume_liters(item.capacity_ml, item.quantity)

        ingredients = [
            IngredientFragment(
                ingredient_id=line.ingredient_id,
                quantity=to_decimal(line.quantity_per_liter) * volume,
                unit=line.unit,
            )
            for line in recipe
        ]

        return ExplodedItem(
            item=item,
            volume_liters=volume,
            bottle=BottleFragment(bottle_type_id=item.bottle_type_id, quantity=item.quantity),
            ingredients=ingredients,
            recipe=list(recipe),
        )
