"""Turns a validated planning item into one ResolvedItem shape."""

from src.core.entities.catalog import BottleType, SimpleProduct, VariationProduct
from src.core.entities.planning import ResolvedItem
from src.core.exceptions import MissingCapacityError
from src.core.services.plan_normalizer import ValidatedItem
from src.core.services.quantities import ZERO, to_decimal


class CatalogResolver:
    """Resolves simple and variation products to bottle type and capacity."""

    def resolve(self, validated: ValidatedItem) -> ResolvedItem:
        """
        Resolve a validated item.

        Raises:
            MissingCapacityError: If the bottle type is missing or has no
                positive capacity.
        """
        item = validated.item
        product = validated.product
        bottle = self._bottle_for(product, item.variation_id)

        capacity = to_decimal(bottle.capacity_ml) if bottle else ZERO
        if bottle is None or capacity <= ZERO:
            raise MissingCapacityError(
                sellable_product_id=item.sellable_product_id,
                variation_id=item.variation_id,
                bottle_type_id=bottle.id if bottle else None,
                index=validated.index,
            )

        return ResolvedItem(
            index=validated.index,
            sellable_product_id=product.id,
            sellable_product_code=product.code,
            sellable_product_name=product.name,
            variation_id=item.variation_id if isinstance(product, VariationProduct) else None,
            base_product_id=product.base_product_id,
            bottle_type_id=bottle.id,
            bottle_size=bottle.size,
            capacity_ml=capacity,
            quantity=item.quantity,
            order=item.order,
        )

    @staticmethod
    def _bottle_for(
        product: SimpleProduct | VariationProduct,
        variation_id: str | None,
    ) -> BottleType | None:
        if isinstance(product, VariationProduct):
            variation = product.get_variation(variation_id) if variation_id else None
            return variation.bottle_type if variation else None
        return product.bottle_type
